"""
TTLCache -- bounded key/value cache with expiry and stale-while-revalidate.

An entry is fresh until its stale point (80% of its TTL unless configured),
stale but still served until its TTL, and a miss after that. At capacity the
entry with the oldest insertion timestamp is evicted.

get_or_fetch():
  - fresh hit   -> value returned immediately
  - stale hit   -> value returned immediately, one background refresh per key;
                   refresh failures are logged and dropped
  - cold miss   -> fetch awaited once per key (concurrent callers share it);
                   failures propagate to every waiting caller

Entry state is guarded by a threading.Lock. In-flight bookkeeping belongs to
the running event loop.
"""

import asyncio
import logging
import threading
import time
from dataclasses import dataclass
from typing import Awaitable, Callable, Generic, TypeVar

logger = logging.getLogger(__name__)

V = TypeVar("V")

DEFAULT_STALE_RATIO = 0.8


@dataclass
class CacheEntry(Generic[V]):
    value: V
    timestamp: float
    ttl: float
    stale_time: float

    def age(self, now: float) -> float:
        return now - self.timestamp

    def is_expired(self, now: float) -> bool:
        return self.age(now) > self.ttl

    def is_stale(self, now: float) -> bool:
        return self.age(now) > self.stale_time


@dataclass
class CacheStats:
    total: int
    valid: int
    stale: int
    hit_count: int
    miss_count: int
    hit_rate: float

    def __str__(self) -> str:
        return (
            f"entries: {self.total} (valid: {self.valid}, stale: {self.stale}), "
            f"hit rate: {self.hit_rate * 100:.1f}%"
        )


class TTLCache(Generic[V]):
    """Time-bounded cache with hit/miss accounting.

    Usage:
        cache: TTLCache[dict] = TTLCache(max_size=10, ttl=300)
        cache.set("rules", tables)
        tables = cache.get("rules")
        stats = await cache.get_or_fetch("stats", fetch_stats)
    """

    def __init__(
        self,
        max_size: int = 100,
        ttl: float = 300.0,
        stale_time: float | None = None,
        clock: Callable[[], float] = time.monotonic,
        name: str = "cache",
    ):
        if max_size < 1:
            raise ValueError(f"max_size must be positive, got {max_size}")
        if ttl <= 0:
            raise ValueError(f"ttl must be positive, got {ttl}")
        if stale_time is None:
            stale_time = ttl * DEFAULT_STALE_RATIO
        if not 0 <= stale_time < ttl:
            raise ValueError(f"stale_time must be in [0, ttl), got {stale_time} for ttl {ttl}")

        self.name = name
        self._max_size = max_size
        self._ttl = ttl
        self._stale_ratio = stale_time / ttl
        self._clock = clock
        self._lock = threading.Lock()
        self._entries: dict[str, CacheEntry[V]] = {}
        self._hit_count = 0
        self._miss_count = 0

        self._inflight: dict[str, asyncio.Future] = {}
        self._refreshing: set[str] = set()
        self._background_tasks: set[asyncio.Task] = set()

    @property
    def ttl(self) -> float:
        return self._ttl

    @property
    def max_size(self) -> int:
        return self._max_size

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    # =========================================================================
    # SYNC API
    # =========================================================================

    def get(self, key: str) -> V | None:
        """Value if present and not expired, else None (counted as a miss)."""
        entry = self._lookup(key)
        return entry.value if entry is not None else None

    def _lookup(self, key: str) -> CacheEntry[V] | None:
        with self._lock:
            now = self._clock()
            entry = self._entries.get(key)
            if entry is None or entry.is_expired(now):
                self._miss_count += 1
                logger.debug(f"[Cache] {self.name}: miss for key {key}")
                return None
            self._hit_count += 1
            logger.debug(f"[Cache] {self.name}: hit for key {key}, age {entry.age(now):.1f}s")
            return entry

    def set(self, key: str, value: V, ttl: float | None = None) -> None:
        entry_ttl = self._ttl if ttl is None else ttl
        if entry_ttl <= 0:
            raise ValueError(f"ttl must be positive, got {entry_ttl}")

        with self._lock:
            if key not in self._entries and len(self._entries) >= self._max_size:
                self._evict_oldest()
            self._entries[key] = CacheEntry(
                value=value,
                timestamp=self._clock(),
                ttl=entry_ttl,
                stale_time=entry_ttl * self._stale_ratio,
            )
        logger.debug(f"[Cache] {self.name}: stored key {key}, ttl {entry_ttl}s")

    def _evict_oldest(self) -> None:
        oldest = min(self._entries, key=lambda k: self._entries[k].timestamp)
        del self._entries[oldest]
        logger.debug(f"[Cache] {self.name}: evicted oldest entry {oldest}")

    def remove(self, key: str) -> None:
        with self._lock:
            self._entries.pop(key, None)

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()
            self._hit_count = 0
            self._miss_count = 0
        logger.info(f"[Cache] {self.name}: cleared")

    def get_stats(self) -> CacheStats:
        with self._lock:
            now = self._clock()
            entries = list(self._entries.values())
            hits, misses = self._hit_count, self._miss_count

        valid = [e for e in entries if not e.is_expired(now)]
        lookups = hits + misses
        return CacheStats(
            total=len(entries),
            valid=len(valid),
            stale=sum(1 for e in valid if e.is_stale(now)),
            hit_count=hits,
            miss_count=misses,
            hit_rate=hits / lookups if lookups else 0.0,
        )

    # =========================================================================
    # ASYNC API
    # =========================================================================

    async def get_or_fetch(self, key: str, fetch: Callable[[], Awaitable[V]]) -> V:
        """Cached value, refreshing stale entries in the background."""
        entry = self._lookup(key)
        if entry is not None:
            if entry.is_stale(self._clock()):
                self._schedule_refresh(key, fetch)
            return entry.value

        future = self._inflight.get(key)
        if future is None:
            future = asyncio.ensure_future(self._fetch_and_store(key, fetch))
            self._inflight[key] = future
            future.add_done_callback(lambda _f, k=key: self._inflight.pop(k, None))
        return await asyncio.shield(future)

    async def _fetch_and_store(self, key: str, fetch: Callable[[], Awaitable[V]]) -> V:
        value = await fetch()
        self.set(key, value)
        return value

    def _schedule_refresh(self, key: str, fetch: Callable[[], Awaitable[V]]) -> None:
        if key in self._refreshing or key in self._inflight:
            return
        self._refreshing.add(key)
        task = asyncio.create_task(self._refresh(key, fetch))
        self._background_tasks.add(task)
        task.add_done_callback(self._background_tasks.discard)

    async def _refresh(self, key: str, fetch: Callable[[], Awaitable[V]]) -> None:
        try:
            value = await fetch()
            self.set(key, value)
            logger.debug(f"[Cache] {self.name}: refreshed stale key {key}")
        except Exception as e:
            logger.warning(f"[Cache] {self.name}: background refresh failed for {key}: {e}")
        finally:
            self._refreshing.discard(key)

    async def wait_for_refreshes(self) -> None:
        """Await any background refreshes still running."""
        if self._background_tasks:
            await asyncio.gather(*list(self._background_tasks), return_exceptions=True)
