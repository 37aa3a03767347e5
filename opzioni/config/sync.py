"""
Blocking Config Handle.

``Config`` guards its value with a thread-blocking ``RWLock`` and saves on
the calling thread.

Usage::

    config = Config.configure(Settings).load("settings.json")

    with config.get().write() as guard:
        guard.value.name = "John"

    config.save()
"""

from __future__ import annotations

from typing import TypeVar

from opzioni.config.base import BaseConfig
from opzioni.config.loader import save_file
from opzioni.locks import RWLock

T = TypeVar("T")


class Config(BaseConfig[T]):
    """Configuration handle for threaded code."""

    lock_type = RWLock

    def get(self) -> RWLock[T]:
        """Return the lock guarding the value."""
        return self._lock

    access = get

    def save(self) -> None:
        """
        Write the current value to the origin path.

        The value is snapshotted under the read lock; the file write happens
        after the lock is released. The file extension selects the format
        and existing content is overwritten.

        Raises:
            MissingOriginError: If the handle has no origin path.
            UnknownFileExtension: If the origin's format cannot be determined.
            SerializationError: If encoding or writing fails.
        """
        path = self._origin()
        snapshot = self._lock.snapshot()
        save_file(path, snapshot, self._payload_type)
