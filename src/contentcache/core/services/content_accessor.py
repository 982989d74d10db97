"""Content accessor - cache-aside entry point for content retrieval."""

import logging
from collections.abc import Mapping
from typing import Any

from contentcache.core.entities.cache_key import EntityId
from contentcache.core.entities.content_config import ContentConfig
from contentcache.core.interfaces.cache_store import ICacheStore
from contentcache.core.interfaces.key_builder import IKeyBuilder
from contentcache.core.interfaces.transport import ITransport
from contentcache.utils.query import content_path, merge_query

logger = logging.getLogger(__name__)

GET_VERB = "get"


class ContentAccessor:
    """Domain service that retrieves content entities.

    Single-entity reads go through the cache-aside store, keyed by
    entity type and id. Collection reads go straight to the
    transport and are never cached.
    """

    def __init__(
        self,
        transport: ITransport,
        store: ICacheStore | None = None,
        key_builder: IKeyBuilder | None = None,
        config: ContentConfig | None = None,
    ) -> None:
        """Initialize the accessor.

        Args:
            transport: Async callable performing content requests.
            store: The cache-aside store. A store sized by ``config``
                is created when not provided.
            key_builder: The key builder. Defaults to a
                ContentKeyBuilder using ``config.key_prefix``.
            config: Optional configuration. Uses defaults if not provided.
        """
        from contentcache.infrastructure.key_builders.default import (
            ContentKeyBuilder,
        )
        from contentcache.infrastructure.stores.memory import InMemoryCacheStore

        self._config = config or ContentConfig()
        self._transport = transport

        if store is None:
            store = InMemoryCacheStore.from_config(self._config)
        if key_builder is None:
            key_builder = ContentKeyBuilder(prefix=self._config.key_prefix)
        self._store = store
        self._key_builder = key_builder

    @property
    def config(self) -> ContentConfig:
        """Get the accessor configuration."""
        return self._config

    @property
    def store(self) -> ICacheStore:
        """Get the cache-aside store backing ``get``."""
        return self._store

    async def get(
        self,
        type_name: str,
        entity_id: EntityId,
        query: Mapping[str, Any] | None = None,
    ) -> Any:
        """Get one entity, from the store when possible.

        Args:
            type_name: The entity type, e.g. ``article``.
            entity_id: The entity identifier.
            query: Optional extra query parameters. Merged after the
                configured ``$preview`` flag, so caller keys win.

        Returns:
            The cached or freshly fetched entity.

        Raises:
            ValueError: If the type or id is missing or malformed.
            TransportError: If the fetch fails. Nothing is cached.
        """
        key = self._key_builder.build(type_name, entity_id)
        params = merge_query(self._config.preview_content, query)

        async def loader() -> Any:
            return await self._transport(
                GET_VERB, content_path(type_name), entity_id, params
            )

        if not self._config.enabled:
            logger.debug("Caching disabled, fetching %s directly", key)
            return await loader()

        return await self._store.get_or_load(key, loader)

    async def list(
        self,
        type_name: str,
        query: Mapping[str, Any] | None = None,
    ) -> Any:
        """List entities of one type. Always hits the transport.

        Args:
            type_name: The entity type, e.g. ``article``.
            query: Optional query parameters, passed through unchanged.
                None is forwarded as None.

        Returns:
            Whatever the transport returns.

        Raises:
            ValueError: If the type is empty.
            TransportError: If the fetch fails.
        """
        if not type_name:
            raise ValueError("Entity type must be a non-empty string")

        path = content_path(type_name)
        logger.debug("Listing %s", path)
        params = dict(query) if query is not None else None
        return await self._transport(GET_VERB, path, None, params)
