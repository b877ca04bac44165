"""
Caching -- bounded TTL caches with stale-while-revalidate refresh.

Components:
  - TTLCache: Generic cache with hit/miss stats and async get_or_fetch
  - create_caches: Builds the knowledge/enforcement/readability caches from Settings
"""

from .shared import ServiceCaches, create_caches
from .ttl_cache import CacheEntry, CacheStats, TTLCache

__all__ = ["CacheEntry", "CacheStats", "ServiceCaches", "TTLCache", "create_caches"]
