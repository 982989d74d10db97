"""Infrastructure layer implementations for contentcache."""

from contentcache.infrastructure.key_builders import ContentKeyBuilder
from contentcache.infrastructure.stores import InMemoryCacheStore

__all__ = [
    "ContentKeyBuilder",
    "InMemoryCacheStore",
]
