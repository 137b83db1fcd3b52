"""Per-key asyncio locks serializing token refreshes.

Two concurrent logins for the same email both run "delete old token, create
new token". Without serialization both deletes can run before both creates,
leaving two live tokens. Token stores take the lock for the record key
around the whole replace step.

The registry is process-wide (one instance per app, see the container).
A key's lock is dropped once nobody holds or waits for it, so the registry
only holds keys with a refresh in flight.
"""

import asyncio
from collections import Counter
from collections.abc import AsyncIterator, Hashable
from contextlib import asynccontextmanager


class IdentifierLocks:
    """Registry of asyncio locks keyed by record key.

    Example:
        >>> locks = IdentifierLocks()
        >>> async with locks.hold(("two_factor", "a@x.com")):
        ...     await store.delete_then_create(...)
    """

    def __init__(self) -> None:
        self._locks: dict[Hashable, asyncio.Lock] = {}
        # Holder plus waiters per key
        self._users: Counter[Hashable] = Counter()

    @asynccontextmanager
    async def hold(self, key: Hashable) -> AsyncIterator[None]:
        """Hold the lock for `key` for the duration of the block."""
        lock = self._locks.get(key)
        if lock is None:
            lock = self._locks[key] = asyncio.Lock()
        self._users[key] += 1
        try:
            async with lock:
                yield
        finally:
            self._users[key] -= 1
            if not self._users[key]:
                del self._users[key]
                del self._locks[key]

    def __len__(self) -> int:
        return len(self._locks)
