"""Cache abstraction used by services for read-through list queries.

Services never touch a backend directly. They ask a `CacheManager` to
`get_or_create` a value under a `CacheKey` and invalidate the key's prefix
after every write, so the next read repopulates from the repository.
"""

from __future__ import annotations

import asyncio
import logging
import time
from abc import ABC, abstractmethod
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Any, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class CacheKey:
    """A cache key template plus the prefix used to invalidate it.

    `key` may contain `str.format` placeholders (`"...all-{0}"`); call
    `create()` with the parameters to get a concrete key.
    """

    key: str
    prefix: str

    def create(self, *params: Any) -> CacheKey:
        if not params:
            return self
        return CacheKey(self.key.format(*params), self.prefix)


class CacheManager(ABC):
    """Interface for the process-wide cache store."""

    @abstractmethod
    async def get(self, key: CacheKey) -> Any | None: ...

    @abstractmethod
    async def set(self, key: CacheKey, value: Any) -> None: ...

    @abstractmethod
    async def remove(self, key: CacheKey) -> None: ...

    @abstractmethod
    async def remove_by_prefix(self, prefix: str) -> int:
        """Drop every entry whose key starts with `prefix`; return how many."""

    @abstractmethod
    async def clear(self) -> None: ...

    @abstractmethod
    async def get_or_create(self, key: CacheKey, producer: Callable[[], Awaitable[T]]) -> T:
        """Return the cached value for `key`, computing and storing it on a miss."""


class MemoryCacheManager(CacheManager):
    """In-process cache backed by a dict.

    Entries never expire unless `default_ttl` (seconds) is given. Population
    is serialised by a single lock so concurrent misses on the same key run
    the producer once. A value computed across an invalidation is returned
    to its caller but not stored.
    """

    def __init__(self, default_ttl: int | None = None):
        self._default_ttl = default_ttl
        self._entries: dict[str, tuple[Any, float | None]] = {}
        self._generation = 0
        self._lock = asyncio.Lock()

    def __contains__(self, key: CacheKey) -> bool:
        return self._lookup(key.key) is not None

    def __len__(self) -> int:
        return len(self._entries)

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _lookup(self, key: str) -> tuple[Any, float | None] | None:
        entry = self._entries.get(key)
        if entry is None:
            return None
        _, expires_at = entry
        if expires_at is not None and expires_at <= time.monotonic():
            del self._entries[key]
            return None
        return entry

    def _store(self, key: str, value: Any) -> None:
        expires_at = None
        if self._default_ttl is not None:
            expires_at = time.monotonic() + self._default_ttl
        self._entries[key] = (value, expires_at)

    # ------------------------------------------------------------------
    # CacheManager
    # ------------------------------------------------------------------

    async def get(self, key: CacheKey) -> Any | None:
        entry = self._lookup(key.key)
        return entry[0] if entry is not None else None

    async def set(self, key: CacheKey, value: Any) -> None:
        self._store(key.key, value)

    async def remove(self, key: CacheKey) -> None:
        self._generation += 1
        self._entries.pop(key.key, None)

    async def remove_by_prefix(self, prefix: str) -> int:
        self._generation += 1
        stale = [k for k in self._entries if k.startswith(prefix)]
        for k in stale:
            del self._entries[k]
        logger.debug("Cache invalidated %d key(s) with prefix %s", len(stale), prefix)
        return len(stale)

    async def clear(self) -> None:
        self._generation += 1
        self._entries.clear()

    async def get_or_create(self, key: CacheKey, producer: Callable[[], Awaitable[T]]) -> T:
        entry = self._lookup(key.key)
        if entry is not None:
            logger.debug("Cache hit: %s", key.key)
            return entry[0]

        async with self._lock:
            # Another task may have populated the key while we waited.
            entry = self._lookup(key.key)
            if entry is not None:
                return entry[0]

            logger.debug("Cache miss: %s", key.key)
            generation = self._generation
            value = await producer()
            if generation == self._generation:
                self._store(key.key, value)
            return value
