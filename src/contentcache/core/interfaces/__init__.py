"""Core interfaces (Protocol classes) for contentcache."""

from contentcache.core.interfaces.cache_store import ICacheStore, Loader
from contentcache.core.interfaces.key_builder import IKeyBuilder
from contentcache.core.interfaces.transport import ITransport, TransportError

__all__ = [
    "ICacheStore",
    "IKeyBuilder",
    "ITransport",
    "Loader",
    "TransportError",
]
