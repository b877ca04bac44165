"""
Cache Evals -- expiry, eviction, stats, and stale-while-revalidate fetching.

A fake clock drives time so every expiry boundary is exact.
"""

import asyncio

import pytest

from tonegate.cache import TTLCache, create_caches
from tonegate.config import Settings


class Fetcher:
    """Async fetch function that counts calls and can be told to fail."""

    def __init__(self, value="fresh", error: Exception | None = None):
        self.value = value
        self.error = error
        self.calls = 0

    async def __call__(self):
        self.calls += 1
        await asyncio.sleep(0)
        if self.error is not None:
            raise self.error
        return self.value


class TestConstruction:
    """Eval: Are nonsensical cache parameters rejected?"""

    @pytest.mark.parametrize("kwargs", [
        {"max_size": 0},
        {"ttl": 0},
        {"ttl": -5},
        {"ttl": 10, "stale_time": 10},
        {"ttl": 10, "stale_time": -1},
    ])
    def test_invalid_parameters(self, kwargs):
        with pytest.raises(ValueError):
            TTLCache(**kwargs)

    def test_per_entry_ttl_must_be_positive(self):
        with pytest.raises(ValueError):
            TTLCache().set("k", 1, ttl=0)

    def test_caches_from_settings(self):
        caches = create_caches(Settings(knowledge_ttl=30, enforcement_cache_size=7))
        assert caches.knowledge.ttl == 30
        assert caches.enforcement.max_size == 7
        caches.readability.set("k", 1)
        caches.clear_all()
        assert len(caches.readability) == 0


class TestSyncAccess:
    """Eval: Do get/set honour TTL, capacity, and accounting?"""

    def test_hit_then_expiry(self, clock):
        cache = TTLCache(ttl=10, clock=clock)
        cache.set("k", "v")
        clock.advance(10)
        assert cache.get("k") == "v"
        clock.advance(0.5)
        assert cache.get("k") is None

    def test_per_entry_ttl(self, clock):
        cache = TTLCache(ttl=10, clock=clock)
        cache.set("short", 1, ttl=2)
        cache.set("long", 2)
        clock.advance(3)
        assert cache.get("short") is None
        assert cache.get("long") == 2

    def test_evicts_oldest_at_capacity(self, clock):
        cache = TTLCache(max_size=2, ttl=100, clock=clock)
        cache.set("a", 1)
        clock.advance(1)
        cache.set("b", 2)
        clock.advance(1)
        cache.set("c", 3)
        assert len(cache) == 2
        assert cache.get("a") is None
        assert cache.get("b") == 2
        assert cache.get("c") == 3

    def test_overwrite_does_not_evict(self, clock):
        cache = TTLCache(max_size=2, ttl=100, clock=clock)
        cache.set("a", 1)
        cache.set("b", 2)
        cache.set("a", 10)
        assert cache.get("a") == 10
        assert cache.get("b") == 2

    def test_stats(self, clock):
        cache = TTLCache(ttl=10, clock=clock)
        cache.set("a", 1)
        cache.set("b", 2, ttl=1)
        cache.get("a")
        cache.get("missing")
        clock.advance(8.5)

        stats = cache.get_stats()
        assert stats.total == 2
        assert stats.valid == 1
        assert stats.stale == 1
        assert stats.hit_count == 1
        assert stats.miss_count == 1
        assert stats.hit_rate == 0.5
        assert "hit rate: 50.0%" in str(stats)

    def test_clear_resets_counters(self, clock):
        cache = TTLCache(clock=clock)
        cache.set("a", 1)
        cache.get("a")
        cache.clear()
        stats = cache.get_stats()
        assert (stats.total, stats.hit_count, stats.miss_count) == (0, 0, 0)
        assert stats.hit_rate == 0.0

    def test_remove(self):
        cache = TTLCache()
        cache.set("a", 1)
        cache.remove("a")
        cache.remove("never-set")
        assert cache.get("a") is None


class TestGetOrFetch:
    """Eval: Does get_or_fetch dedupe, propagate, and refresh in the background?"""

    @pytest.mark.asyncio
    async def test_cold_miss_fetches_and_stores(self, clock):
        cache = TTLCache(ttl=10, clock=clock)
        fetch = Fetcher("value")
        assert await cache.get_or_fetch("k", fetch) == "value"
        assert await cache.get_or_fetch("k", fetch) == "value"
        assert fetch.calls == 1

    @pytest.mark.asyncio
    async def test_concurrent_cold_misses_share_one_fetch(self, clock):
        cache = TTLCache(ttl=10, clock=clock)
        fetch = Fetcher("shared")
        results = await asyncio.gather(*[cache.get_or_fetch("k", fetch) for _ in range(5)])
        assert results == ["shared"] * 5
        assert fetch.calls == 1

    @pytest.mark.asyncio
    async def test_cold_miss_failure_reaches_every_caller(self, clock):
        cache = TTLCache(ttl=10, clock=clock)
        failing = Fetcher(error=RuntimeError("backend down"))
        results = await asyncio.gather(
            *[cache.get_or_fetch("k", failing) for _ in range(3)],
            return_exceptions=True,
        )
        assert all(isinstance(r, RuntimeError) for r in results)
        assert failing.calls == 1
        assert cache.get("k") is None

        recovered = Fetcher("back")
        assert await cache.get_or_fetch("k", recovered) == "back"

    @pytest.mark.asyncio
    async def test_fresh_hit_does_not_refresh(self, clock):
        cache = TTLCache(ttl=10, clock=clock)
        cache.set("k", "cached")
        fetch = Fetcher("new")
        clock.advance(5)
        assert await cache.get_or_fetch("k", fetch) == "cached"
        await cache.wait_for_refreshes()
        assert fetch.calls == 0

    @pytest.mark.asyncio
    async def test_stale_hit_serves_old_value_and_refreshes_once(self, clock):
        cache = TTLCache(ttl=10, clock=clock)
        cache.set("k", "old")
        clock.advance(9)
        fetch = Fetcher("new")

        assert await cache.get_or_fetch("k", fetch) == "old"
        assert await cache.get_or_fetch("k", fetch) == "old"
        await cache.wait_for_refreshes()

        assert fetch.calls == 1
        assert cache.get("k") == "new"

    @pytest.mark.asyncio
    async def test_failed_refresh_keeps_stale_value(self, clock):
        cache = TTLCache(ttl=10, clock=clock)
        cache.set("k", "old")
        clock.advance(9)
        failing = Fetcher(error=RuntimeError("backend down"))

        assert await cache.get_or_fetch("k", failing) == "old"
        await cache.wait_for_refreshes()

        assert failing.calls == 1
        assert cache.get("k") == "old"

    @pytest.mark.asyncio
    async def test_custom_stale_point(self, clock):
        cache = TTLCache(ttl=10, stale_time=2, clock=clock)
        cache.set("k", "old")
        clock.advance(3)
        fetch = Fetcher("new")
        await cache.get_or_fetch("k", fetch)
        await cache.wait_for_refreshes()
        assert cache.get("k") == "new"
