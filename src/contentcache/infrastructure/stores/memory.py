"""In-memory cache-aside store implementation."""

import asyncio
import logging
import math
from datetime import timedelta
from typing import Any

from cachetools import Cache, LRUCache, TTLCache  # type: ignore[import-untyped]

from contentcache.core.entities.cache_entry import CacheEntry, EntryState
from contentcache.core.entities.content_config import ContentConfig
from contentcache.core.interfaces.cache_store import Loader

logger = logging.getLogger(__name__)


class InMemoryCacheStore:
    """In-memory cache-aside store with in-flight load coalescing.

    Resolved values live in a cachetools container: unbounded by
    default, LRU when ``maxsize`` is set, TTL-expiring when ``ttl``
    is set. In-flight loads live in a separate dict that is never
    evicted, so a bounded store still runs at most one load per key.

    All bookkeeping happens on the event loop thread. The
    check-or-create step in ``get_or_load`` has no ``await`` in it,
    which makes it atomic with respect to other coroutines; the
    loader itself runs in its own task.
    """

    def __init__(
        self,
        maxsize: int | None = None,
        ttl: timedelta | None = None,
    ) -> None:
        """Initialize the store.

        Args:
            maxsize: Maximum number of resolved entries. None for unbounded.
            ttl: Lifetime of resolved entries. None for no expiry.
        """
        self._maxsize = maxsize
        self._ttl = ttl

        capacity = maxsize if maxsize is not None else math.inf
        self._entries: Cache[str, CacheEntry]
        if ttl is not None:
            self._entries = TTLCache(maxsize=capacity, ttl=ttl.total_seconds())
        elif maxsize is not None:
            self._entries = LRUCache(maxsize=capacity)
        else:
            self._entries = Cache(maxsize=capacity)

        self._inflight: dict[str, asyncio.Future[Any]] = {}

        # Statistics
        self._hits = 0
        self._misses = 0
        self._coalesced = 0
        self._failures = 0

    @classmethod
    def from_config(cls, config: ContentConfig) -> "InMemoryCacheStore":
        """Create a store sized by the given configuration."""
        return cls(maxsize=config.max_size, ttl=config.ttl)

    @property
    def stats(self) -> dict[str, int]:
        """Get store statistics.

        Returns:
            Dictionary with hits, misses, coalesced waits, failed
            loads and total lookups.
        """
        return {
            "hits": self._hits,
            "misses": self._misses,
            "coalesced": self._coalesced,
            "failures": self._failures,
            "total": self._hits + self._misses + self._coalesced,
        }

    @property
    def maxsize(self) -> int | None:
        """Return the maximum number of resolved entries, or None."""
        return self._maxsize

    async def get_or_load(self, key: str, loader: Loader) -> Any:
        """Return the stored value for key, loading it on a miss.

        Args:
            key: Opaque cache key.
            loader: Zero-argument callable returning an awaitable of
                the value.

        Returns:
            The stored or freshly loaded value. Every caller attached
            to the same load receives the same object.

        Raises:
            Exception: Whatever the loader raised, unchanged. Nothing
                is stored for the key in that case.
        """
        entry = self._entries.get(key)
        if entry is not None:
            if not entry.is_expired:
                self._hits += 1
                logger.debug("Cache hit for %s", key)
                return entry.value
            self._entries.pop(key, None)

        task = self._inflight.get(key)
        if task is None:
            self._misses += 1
            logger.debug("Cache miss for %s, loading", key)
            task = asyncio.create_task(self._load(key, loader))
            task.add_done_callback(_mark_retrieved)
            self._inflight[key] = task
        else:
            self._coalesced += 1
            logger.debug("Joining in-flight load for %s", key)

        # A cancelled caller must not cancel the load for the others.
        return await asyncio.shield(task)

    async def _load(self, key: str, loader: Loader) -> Any:
        """Run one loader and settle the key's state before waiters resume."""
        try:
            value = await loader()
        except Exception as e:
            self._failures += 1
            logger.warning("Load for %s failed: %s", key, type(e).__name__)
            raise
        else:
            self._entries[key] = CacheEntry.create(key=key, value=value, ttl=self._ttl)
            logger.debug("Stored value for %s", key)
            return value
        finally:
            self._inflight.pop(key, None)

    def state(self, key: str) -> EntryState:
        """Report whether key is absent, loading or resolved."""
        if key in self._inflight:
            return EntryState.LOADING
        if key in self:
            return EntryState.RESOLVED
        return EntryState.ABSENT

    def peek(self, key: str) -> CacheEntry | None:
        """Return the resolved entry for key without counting a hit."""
        entry = self._entries.get(key)
        if entry is None or entry.is_expired:
            return None
        return entry

    async def clear(self) -> None:
        """Clear all resolved entries and reset statistics.

        Loads already in flight keep running and store their
        result when they finish.
        """
        self._entries.clear()
        self._hits = 0
        self._misses = 0
        self._coalesced = 0
        self._failures = 0

    def __contains__(self, key: object) -> bool:
        """Check whether a resolved value is stored for key."""
        return isinstance(key, str) and self.peek(key) is not None

    def __len__(self) -> int:
        """Return the number of resolved entries."""
        return len(self._entries)


def _mark_retrieved(task: asyncio.Future[Any]) -> None:
    # Every waiter may have been cancelled; the failure is already logged.
    if not task.cancelled():
        task.exception()
