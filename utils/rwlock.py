"""
utils/rwlock.py
---------------

Readers-writer lock used to guard mutable engine state.

- Multiple readers may hold the lock simultaneously.
- Writers get exclusive access.
- Fair: once a writer is waiting, new readers queue behind it, so a steady
  stream of readers cannot starve configuration changes.

The lock is not reentrant. Code holding it must not call back into another
method that acquires the same lock.

Usage:

    lock = RWLock()

    with lock.read_locked():
        value = shared_map.get(key)

    with lock.write_locked():
        shared_map[key] = value
"""

from __future__ import annotations

import threading
from contextlib import contextmanager
from typing import Iterator


class RWLock:
    """Fair (writer-preferring) readers-writer lock."""

    def __init__(self) -> None:
        self._cond = threading.Condition(threading.Lock())
        self._readers = 0
        self._writer_active = False
        self._writers_waiting = 0

    def acquire_read(self) -> None:
        with self._cond:
            while self._writer_active or self._writers_waiting:
                self._cond.wait()
            self._readers += 1

    def release_read(self) -> None:
        with self._cond:
            self._readers -= 1
            if self._readers == 0:
                self._cond.notify_all()

    def acquire_write(self) -> None:
        with self._cond:
            self._writers_waiting += 1
            try:
                while self._writer_active or self._readers:
                    self._cond.wait()
            finally:
                self._writers_waiting -= 1
            self._writer_active = True

    def release_write(self) -> None:
        with self._cond:
            self._writer_active = False
            self._cond.notify_all()

    @contextmanager
    def read_locked(self) -> Iterator[None]:
        self.acquire_read()
        try:
            yield
        finally:
            self.release_read()

    @contextmanager
    def write_locked(self) -> Iterator[None]:
        self.acquire_write()
        try:
            yield
        finally:
            self.release_write()


__all__ = ["RWLock"]
