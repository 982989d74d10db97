"""Domain entities for contentcache."""

from contentcache.core.entities.cache_entry import CacheEntry, EntryState
from contentcache.core.entities.cache_key import CacheKey, EntityId
from contentcache.core.entities.content_config import ContentConfig

__all__ = [
    "CacheEntry",
    "CacheKey",
    "ContentConfig",
    "EntityId",
    "EntryState",
]
