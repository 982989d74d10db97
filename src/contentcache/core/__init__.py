"""Core domain layer for contentcache."""

from contentcache.core.errors import ConfigurationError, ContentCacheError
from contentcache.core.entities import (
    CacheEntry,
    CacheKey,
    ContentConfig,
    EntityId,
    EntryState,
)
from contentcache.core.interfaces import (
    ICacheStore,
    IKeyBuilder,
    ITransport,
    Loader,
    TransportError,
)
from contentcache.core.services import ContentAccessor

__all__ = [
    # Errors
    "ContentCacheError",
    "ConfigurationError",
    "TransportError",
    # Entities
    "CacheEntry",
    "CacheKey",
    "ContentConfig",
    "EntityId",
    "EntryState",
    # Interfaces
    "ICacheStore",
    "IKeyBuilder",
    "ITransport",
    "Loader",
    # Services
    "ContentAccessor",
]
