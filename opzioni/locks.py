"""
Read/Write Locks.

Multiple-readers / single-writer locks that own the value they protect.
``RWLock`` blocks the calling thread on contention; ``AsyncRWLock`` suspends
the calling task instead. Both prefer writers: once a writer is waiting,
new readers queue behind it. Neither lock is reentrant.

Usage::

    lock = RWLock(settings)

    with lock.read() as value:
        print(value.name)

    with lock.write() as guard:
        guard.value.name = "John"   # mutate in place
        guard.value = Settings()    # or replace entirely
"""

from __future__ import annotations

import asyncio
import copy
import threading
from contextlib import asynccontextmanager, contextmanager
from typing import AsyncIterator, Generic, Iterator, TypeVar

T = TypeVar("T")


class WriteGuard(Generic[T]):
    """
    Exclusive access to a locked value for the duration of a write block.

    The guard's ``value`` is committed back to the lock when the block exits.
    """

    __slots__ = ("value",)

    def __init__(self, value: T) -> None:
        self.value = value

    def __repr__(self) -> str:
        return f"WriteGuard({self.value!r})"


class RWLock(Generic[T]):
    """
    Blocking read/write lock around a value.

    Thread Safety:
        Any number of threads may hold ``read()`` at once; ``write()`` is
        exclusive of all readers and other writers.
    """

    def __init__(self, value: T) -> None:
        self._value = value
        self._cond = threading.Condition(threading.Lock())
        self._readers = 0
        self._writer = False
        self._waiting_writers = 0

    @contextmanager
    def read(self) -> Iterator[T]:
        """Hold a shared lock and yield the current value."""
        with self._cond:
            while self._writer or self._waiting_writers:
                self._cond.wait()
            self._readers += 1
        try:
            yield self._value
        finally:
            with self._cond:
                self._readers -= 1
                if self._readers == 0:
                    self._cond.notify_all()

    @contextmanager
    def write(self) -> Iterator[WriteGuard[T]]:
        """Hold an exclusive lock and yield a guard over the value."""
        with self._cond:
            self._waiting_writers += 1
            try:
                while self._writer or self._readers:
                    self._cond.wait()
            except BaseException:
                self._waiting_writers -= 1
                self._cond.notify_all()
                raise
            self._waiting_writers -= 1
            self._writer = True
        guard = WriteGuard(self._value)
        try:
            yield guard
        finally:
            with self._cond:
                self._value = guard.value
                self._writer = False
                self._cond.notify_all()

    def snapshot(self) -> T:
        """Return a deep copy of the value taken under the read lock."""
        with self.read() as value:
            return copy.deepcopy(value)

    def replace(self, value: T) -> None:
        """Swap in a new value under the write lock."""
        with self.write() as guard:
            guard.value = value

    def __repr__(self) -> str:
        return (
            f"RWLock(readers={self._readers}, writer={self._writer}, "
            f"waiting_writers={self._waiting_writers})"
        )


class AsyncRWLock(Generic[T]):
    """
    Cooperative read/write lock around a value, for use with asyncio.

    Contention suspends the task, not the thread. The lock binds to the
    event loop it is first contended on and must stay on that loop.
    """

    def __init__(self, value: T) -> None:
        self._value = value
        self._cond = asyncio.Condition()
        self._readers = 0
        self._writer = False
        self._waiting_writers = 0

    @asynccontextmanager
    async def read(self) -> AsyncIterator[T]:
        """Hold a shared lock and yield the current value."""
        async with self._cond:
            await self._cond.wait_for(
                lambda: not self._writer and not self._waiting_writers
            )
            self._readers += 1
        try:
            yield self._value
        finally:
            async with self._cond:
                self._readers -= 1
                if self._readers == 0:
                    self._cond.notify_all()

    @asynccontextmanager
    async def write(self) -> AsyncIterator[WriteGuard[T]]:
        """Hold an exclusive lock and yield a guard over the value."""
        async with self._cond:
            self._waiting_writers += 1
            try:
                await self._cond.wait_for(lambda: not self._writer and not self._readers)
            except BaseException:
                self._waiting_writers -= 1
                self._cond.notify_all()
                raise
            self._waiting_writers -= 1
            self._writer = True
        guard = WriteGuard(self._value)
        try:
            yield guard
        finally:
            async with self._cond:
                self._value = guard.value
                self._writer = False
                self._cond.notify_all()

    async def snapshot(self) -> T:
        """Return a deep copy of the value taken under the read lock."""
        async with self.read() as value:
            return copy.deepcopy(value)

    async def replace(self, value: T) -> None:
        """Swap in a new value under the write lock."""
        async with self.write() as guard:
            guard.value = value

    def __repr__(self) -> str:
        return (
            f"AsyncRWLock(readers={self._readers}, writer={self._writer}, "
            f"waiting_writers={self._waiting_writers})"
        )
