"""
Cooperative Config Handle.

``AsyncConfig`` guards its value with an asyncio ``AsyncRWLock``. Lock
acquisition in ``save()`` suspends the task; the file write that follows
is an ordinary blocking call and will hold up the event loop while the
file is written.
"""

from __future__ import annotations

from typing import TypeVar

from opzioni.config.base import BaseConfig
from opzioni.config.loader import save_file
from opzioni.locks import AsyncRWLock

T = TypeVar("T")


class AsyncConfig(BaseConfig[T]):
    """Configuration handle for asyncio code."""

    lock_type = AsyncRWLock

    def get(self) -> AsyncRWLock[T]:
        """Return the lock guarding the value."""
        return self._lock

    access = get

    async def save(self) -> None:
        """
        Write the current value to the origin path.

        Raises:
            MissingOriginError: If the handle has no origin path.
            UnknownFileExtension: If the origin's format cannot be determined.
            SerializationError: If encoding or writing fails.
        """
        path = self._origin()
        snapshot = await self._lock.snapshot()
        save_file(path, snapshot, self._payload_type)
