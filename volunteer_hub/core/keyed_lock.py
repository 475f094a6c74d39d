"""Per-key asyncio locks.

Serializes critical sections that share a key (an event id, a user id)
while letting unrelated keys proceed in parallel. Locks are created on first
use and dropped once no task holds or waits on them, so the registry does
not grow with the number of keys ever seen.

Scope:
    In-process only. Correct for a single-node deployment; a multi-node
    deployment must pair it with a store-level guard (row lock, conditional
    write).

Usage:
    locks = KeyedLock()

    async with locks.hold(event_id):
        count = await registrations.count_approved_by_event(event_id)
        ...
"""

import asyncio
from collections.abc import AsyncIterator, Hashable
from contextlib import asynccontextmanager


class KeyedLock:
    """Registry of reference-counted ``asyncio.Lock`` objects keyed by value."""

    def __init__(self) -> None:
        self._locks: dict[Hashable, asyncio.Lock] = {}
        self._users: dict[Hashable, int] = {}

    @asynccontextmanager
    async def hold(self, key: Hashable) -> AsyncIterator[None]:
        """Hold the lock for ``key`` for the duration of the block."""
        lock = self._locks.get(key)
        if lock is None:
            lock = asyncio.Lock()
            self._locks[key] = lock
        self._users[key] = self._users.get(key, 0) + 1
        try:
            async with lock:
                yield
        finally:
            self._users[key] -= 1
            if self._users[key] == 0:
                del self._users[key]
                del self._locks[key]

    def is_held(self, key: Hashable) -> bool:
        """Return True while some task holds the lock for ``key``."""
        lock = self._locks.get(key)
        return lock is not None and lock.locked()

    def __len__(self) -> int:
        return len(self._locks)
