"""Cache-aside store implementations."""

from contentcache.infrastructure.stores.memory import InMemoryCacheStore

__all__ = ["InMemoryCacheStore"]
