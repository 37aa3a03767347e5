"""
Codec Base.

A codec turns configuration text into a payload value and back for one
file format. Subclasses only deal with builtins (``_parse``/``_render``);
this base class routes values through the payload adapter and translates
the format library's exceptions into ``SerializationError``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, Tuple, Type, TypeVar

from opzioni import payload
from opzioni.errors import SerializationError

T = TypeVar("T")


class Format(Enum):
    """Closed set of supported file formats."""

    JSON = "json"
    TOML = "toml"
    YAML = "yaml"


class Codec(ABC):
    """
    Abstract encode/decode pair for a single file format.

    Codecs never touch the filesystem.

    Attributes:
        format: The format this codec implements.
        parse_errors: Exceptions the format library raises on malformed text.
        render_errors: Exceptions the format library raises when emitting.
    """

    format: Format
    parse_errors: Tuple[Type[BaseException], ...] = (ValueError, RecursionError)
    render_errors: Tuple[Type[BaseException], ...] = (TypeError, ValueError, RecursionError)

    def decode(self, text: str, payload_type: Type[T]) -> T:
        """
        Decode configuration text into a payload value.

        Args:
            text: Raw file content.
            payload_type: Type to validate the parsed data into.

        Returns:
            The decoded payload value.

        Raises:
            SerializationError: On malformed text or data that does not
                match the payload type.
        """
        try:
            data = self._parse(text)
        except self.parse_errors as e:
            raise SerializationError(str(e)) from e
        return payload.from_builtins(data, payload_type)

    def encode(self, value: Any, payload_type: Any) -> str:
        """
        Encode a payload value into human-readable configuration text.

        Raises:
            SerializationError: If the value cannot be represented in this format.
        """
        data = payload.to_builtins(value, payload_type)
        try:
            return self._render(data)
        except self.render_errors as e:
            raise SerializationError(str(e)) from e

    @abstractmethod
    def _parse(self, text: str) -> Any:
        """Parse text into builtins."""

    @abstractmethod
    def _render(self, data: Any) -> str:
        """Render builtins into text."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}(format={self.format.value})"
