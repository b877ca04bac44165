"""Process-level caches, built from Settings and passed to the services that use them."""

from dataclasses import dataclass

from ..config import Settings
from .ttl_cache import TTLCache


@dataclass
class ServiceCaches:
    """Knowledge (rule tables and stats), enforcement results, readability analyses."""

    knowledge: TTLCache
    enforcement: TTLCache
    readability: TTLCache

    def clear_all(self) -> None:
        for cache in (self.knowledge, self.enforcement, self.readability):
            cache.clear()


def create_caches(settings: Settings | None = None) -> ServiceCaches:
    settings = settings or Settings()
    return ServiceCaches(
        knowledge=TTLCache(
            max_size=settings.knowledge_cache_size,
            ttl=settings.knowledge_ttl,
            name="knowledge",
        ),
        enforcement=TTLCache(
            max_size=settings.enforcement_cache_size,
            ttl=settings.enforcement_ttl,
            name="enforcement",
        ),
        readability=TTLCache(
            max_size=settings.readability_cache_size,
            ttl=settings.readability_ttl,
            name="readability",
        ),
    )
