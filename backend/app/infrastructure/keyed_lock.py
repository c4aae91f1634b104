"""Keyed Lock — per-key asyncio mutual exclusion for read-modify-write sequences.

Invariants:
    - Two holders of the same key never run concurrently
    - Different keys never block each other
    - A key's lock is dropped once its last holder or waiter leaves

Design Decisions:
    - In-process only: cross-process exclusion comes from the row lock
      (SELECT ... FOR UPDATE) taken inside the critical section
"""

import asyncio
from contextlib import asynccontextmanager
from typing import AsyncIterator


class KeyedLock:
    """Registry of asyncio.Lock objects, one per active key."""

    def __init__(self) -> None:
        self._locks: dict[str, asyncio.Lock] = {}
        self._holders: dict[str, int] = {}

    @asynccontextmanager
    async def hold(self, key: str) -> AsyncIterator[None]:
        lock = self._locks.setdefault(key, asyncio.Lock())
        self._holders[key] = self._holders.get(key, 0) + 1
        try:
            async with lock:
                yield
        finally:
            self._holders[key] -= 1
            if self._holders[key] == 0:
                del self._holders[key]
                del self._locks[key]

    def active_keys(self) -> set[str]:
        return set(self._locks)
