"""contentcache - cache-aside accessor for content service entities.

Fetches single content entities through an async transport and keeps
them in a cache-aside store, so repeated reads are served locally and
concurrent reads of the same entity share one network request.
Collection reads always go to the transport.

Example:
    from contentcache import ContentAccessor, ContentConfig, TransportError

    async def request(verb, path, entity_id, params):
        ...  # perform the HTTP call, raise TransportError on failure

    content = ContentAccessor(
        transport=request,
        config=ContentConfig(preview_content=True),
    )

    article = await content.get("article", "42", {"status": "draft"})
    articles = await content.list("article", {"limit": 10})

Sharing a store with other loaders:
    from contentcache import InMemoryCacheStore, cached

    store = InMemoryCacheStore(maxsize=500)
    content = ContentAccessor(transport=request, store=store)

    @cached(store, key="content_author:{id}")
    async def get_author(id: str) -> dict:
        return await request("get", "/content/author", id, {})
"""

from contentcache.core.entities import (
    CacheEntry,
    CacheKey,
    ContentConfig,
    EntityId,
    EntryState,
)
from contentcache.core.errors import ConfigurationError, ContentCacheError
from contentcache.core.interfaces import (
    ICacheStore,
    IKeyBuilder,
    ITransport,
    Loader,
    TransportError,
)
from contentcache.core.services import ContentAccessor
from contentcache.decorators import cached
from contentcache.infrastructure import (
    ContentKeyBuilder,
    InMemoryCacheStore,
)
from contentcache.utils.query import merge_query

__version__ = "0.1.0"

__all__ = [
    # Version
    "__version__",
    # Core entities
    "CacheEntry",
    "CacheKey",
    "ContentConfig",
    "EntityId",
    "EntryState",
    # Errors
    "ContentCacheError",
    "ConfigurationError",
    "TransportError",
    # Core interfaces
    "ICacheStore",
    "IKeyBuilder",
    "ITransport",
    "Loader",
    # Core services
    "ContentAccessor",
    # Infrastructure implementations
    "ContentKeyBuilder",
    "InMemoryCacheStore",
    # Helpers
    "cached",
    "merge_query",
]
