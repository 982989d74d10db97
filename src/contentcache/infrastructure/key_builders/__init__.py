"""Cache key builder implementations."""

from contentcache.infrastructure.key_builders.default import ContentKeyBuilder

__all__ = ["ContentKeyBuilder"]
