"""
Error Taxonomy.

Every failure raised by the library is an ``OpzioniError``. Callers tell
"no such format", "bad file/content" and "no destination" apart by the
exception class alone; the optional ``detail`` string is kept for
diagnostics only.
"""

from __future__ import annotations

from typing import Optional


class OpzioniError(Exception):
    """
    Base class for all configuration errors.

    Attributes:
        detail: Optional human-readable description of the failure.
    """

    def __init__(self, detail: Optional[str] = None) -> None:
        super().__init__(detail)
        self.detail = detail

    @property
    def kind(self) -> str:
        """Name of the error kind, used as the message prefix."""
        return type(self).__name__

    @property
    def origin_missing(self) -> bool:
        """True when the error means a handle has no file to save to."""
        return False

    def __str__(self) -> str:
        if self.detail is None:
            return self.kind
        return f"{self.kind}: {self.detail}"

    def __repr__(self) -> str:
        return f"{self.kind}({self.detail!r})"


class ConfigLoadError(OpzioniError):
    """Raised when a configuration could not be loaded."""

    pass


class MissingOriginError(ConfigLoadError):
    """
    Raised when saving a handle that was created without an origin path.

    Subclasses ConfigLoadError so existing ``except ConfigLoadError``
    handlers keep matching.
    """

    @property
    def origin_missing(self) -> bool:
        return True


class UnknownFileExtension(OpzioniError):
    """
    Raised when a path's extension does not map to an enabled format.

    ``detail`` holds the raw extension, or None if the path had none.
    """

    pass


class SerializationError(OpzioniError):
    """Raised on I/O failures and on parse, emit or validation failures."""

    pass
