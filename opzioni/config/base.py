"""
Config Handle and Builder Base.

``BaseConfig`` holds a payload value behind a read/write lock together with
the path it was loaded from (its origin). The concrete handles differ only
in the lock they use and in whether ``save()`` is a coroutine:

- ``opzioni.config.sync.Config``: blocking ``RWLock``.
- ``opzioni.config.aio.AsyncConfig``: cooperative ``AsyncRWLock``.

``ConfigBuilder`` loads a file into either kind of handle, optionally
falling back to the payload type's default value when loading fails.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, ClassVar, Generic, Optional, Type, TypeVar

from loguru import logger

from opzioni import payload
from opzioni.config.loader import load_file
from opzioni.errors import MissingOriginError, OpzioniError

T = TypeVar("T")
C = TypeVar("C", bound="BaseConfig")


class BaseConfig(Generic[T]):
    """
    Typed configuration value plus its optional origin path.

    Attributes:
        lock_type: Lock class wrapping the value (set by subclasses).
    """

    lock_type: ClassVar[Type[Any]]

    def __init__(
        self,
        payload_type: Type[T],
        value: Optional[T] = None,
        path: Optional[str | Path] = None,
    ) -> None:
        """
        Create a handle.

        Args:
            payload_type: The configuration schema type.
            value: Initial value. None means ``payload_type()``.
            path: Origin path used by ``save()``. None means the handle
                cannot be saved.

        Raises:
            TypeError: If the payload type is unusable, or value is None and
                the type has no default.
        """
        payload.check_payload_type(payload_type)
        if value is None:
            value = payload.default_value(payload_type)

        self._payload_type = payload_type
        self._lock = self.lock_type(value)
        self._path = Path(path) if path is not None else None

        logger.trace(
            f"{type(self).__name__} created for {getattr(payload_type, '__name__', payload_type)} "
            f"(path={self._path})"
        )

    @classmethod
    def empty(cls: Type[C], payload_type: Type[T]) -> C:
        """
        Create a handle holding the default value and no origin path.

        Saving such a handle raises ``MissingOriginError``; prefer
        ``configure()`` when the config should be persisted.
        """
        return cls(payload_type)

    new_default = empty

    @classmethod
    def new(
        cls: Type[C],
        value: T,
        path: str | Path,
        payload_type: Optional[Type[T]] = None,
    ) -> C:
        """
        Create a handle from an explicit value and origin path.

        The payload type defaults to ``type(value)``.
        """
        return cls(payload_type or type(value), value, path)

    @classmethod
    def configure(cls: Type[C], payload_type: Type[T]) -> "ConfigBuilder[C]":
        """Return a builder that loads files into handles of this class."""
        return ConfigBuilder(cls, payload_type)

    def get(self) -> Any:
        """Return the lock guarding the value, for reading and mutating it."""
        return self._lock

    access = get

    @property
    def path(self) -> Optional[Path]:
        """Origin path, or None for handles created without one."""
        return self._path

    @property
    def payload_type(self) -> Type[T]:
        """The configuration schema type."""
        return self._payload_type

    def _origin(self) -> Path:
        if self._path is None:
            raise MissingOriginError()
        return self._path

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(payload_type={self._payload_type!r}, "
            f"path={self._path!r})"
        )


class ConfigBuilder(Generic[C]):
    """
    Loads a configuration file into a handle.

    Usage::

        config = Config.configure(Settings).use_default_on_error().load("app.toml")
    """

    def __init__(self, config_type: Type[C], payload_type: Type[Any]) -> None:
        payload.check_payload_type(payload_type)
        self._config_type = config_type
        self._payload_type = payload_type
        self._use_default_on_error = False

    def use_default_on_error(self) -> "ConfigBuilder[C]":
        """
        Recover from load failures with the payload type's default value.

        The recovered handle keeps the requested path, so a later ``save()``
        writes the default configuration there.
        """
        self._use_default_on_error = True
        return self

    with_default_on_error = use_default_on_error

    @property
    def default_on_error(self) -> bool:
        """Whether load failures fall back to the default value."""
        return self._use_default_on_error

    def load(self, path: str | Path) -> C:
        """
        Load a configuration file into a new handle.

        The file extension selects the format (json, toml, yaml/yml).

        Args:
            path: Configuration file path; also the handle's origin path.

        Returns:
            A handle holding the decoded value, or the default value if
            loading failed and ``use_default_on_error()`` was set.

        Raises:
            UnknownFileExtension: If the format cannot be determined.
            SerializationError: If the file cannot be read or decoded.
        """
        try:
            value = load_file(path, self._payload_type)
        except OpzioniError as e:
            if not self._use_default_on_error:
                raise
            logger.warning(f"Using default configuration for {path}: {e}")
            return self._config_type(self._payload_type, None, path)

        return self._config_type(self._payload_type, value, path)
