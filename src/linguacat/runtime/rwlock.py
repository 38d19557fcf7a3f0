"""Readers-writer lock guarding the translator's fallback configuration.

Translation is read-mostly: every translate() call reads the configured
fallback locale, while set_fallback_locale() rarely writes it. The lock lets
any number of translating threads proceed together and gives a reconfiguring
thread exclusive access.

Semantics:
- Shared reads, exclusive writes
- Writer preference: once a writer waits, new readers queue behind it
- Reads are reentrant per thread
- Read-to-write upgrades and write reentrancy raise RuntimeError

Python 3.13+.
"""

from __future__ import annotations

import threading
from contextlib import contextmanager
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Generator

__all__ = ["RWLock"]


class RWLock:
    """Readers-writer lock with writer preference.

    Example:
        >>> lock = RWLock()
        >>> with lock.read():
        ...     with lock.read():  # reentrant
        ...         pass
        >>> with lock.write():
        ...     pass
    """

    __slots__ = ("_condition", "_read_depth", "_waiting_writers", "_writer")

    def __init__(self) -> None:
        self._condition = threading.Condition(threading.Lock())
        # Thread id -> nesting depth of its read acquisitions
        self._read_depth: dict[int, int] = {}
        self._waiting_writers: int = 0
        self._writer: int | None = None

    @contextmanager
    def read(self) -> Generator[None]:
        """Hold the lock in shared mode for the duration of the block.

        Raises:
            RuntimeError: The calling thread holds the write lock.
        """
        self._acquire_read()
        try:
            yield
        finally:
            self._release_read()

    @contextmanager
    def write(self) -> Generator[None]:
        """Hold the lock exclusively for the duration of the block.

        Raises:
            RuntimeError: The calling thread already holds the lock in any mode.
        """
        self._acquire_write()
        try:
            yield
        finally:
            self._release_write()

    def _acquire_read(self) -> None:
        me = threading.get_ident()
        with self._condition:
            depth = self._read_depth.get(me, 0)
            if depth:
                # Reentrant reads skip the writer-preference wait; blocking
                # here would deadlock against a writer waiting on this thread.
                self._read_depth[me] = depth + 1
                return
            if self._writer == me:
                msg = "Cannot acquire read lock while holding write lock"
                raise RuntimeError(msg)
            while self._writer is not None or self._waiting_writers:
                self._condition.wait()
            self._read_depth[me] = 1

    def _release_read(self) -> None:
        me = threading.get_ident()
        with self._condition:
            depth = self._read_depth.get(me)
            if depth is None:
                msg = "Thread does not hold read lock"
                raise RuntimeError(msg)
            if depth > 1:
                self._read_depth[me] = depth - 1
                return
            del self._read_depth[me]
            if not self._read_depth:
                self._condition.notify_all()

    def _acquire_write(self) -> None:
        me = threading.get_ident()
        with self._condition:
            if me in self._read_depth:
                msg = "Cannot upgrade read lock to write lock"
                raise RuntimeError(msg)
            if self._writer == me:
                msg = "Write lock is not reentrant"
                raise RuntimeError(msg)
            self._waiting_writers += 1
            try:
                while self._writer is not None or self._read_depth:
                    self._condition.wait()
                self._writer = me
            finally:
                # Readers parked on the waiting-writer count must re-check it
                self._waiting_writers -= 1
                self._condition.notify_all()

    def _release_write(self) -> None:
        with self._condition:
            if self._writer != threading.get_ident():
                msg = "Thread does not hold write lock"
                raise RuntimeError(msg)
            self._writer = None
            self._condition.notify_all()

    @property
    def reader_count(self) -> int:
        """Number of distinct threads currently holding the read lock."""
        with self._condition:
            return len(self._read_depth)

    @property
    def writer_active(self) -> bool:
        """True while some thread holds the write lock."""
        with self._condition:
            return self._writer is not None
