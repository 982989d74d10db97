"""Default key builder implementation."""

from contentcache.core.entities.cache_key import CacheKey, EntityId


class ContentKeyBuilder:
    """Key builder producing ``<prefix>_<type>:<id>`` keys.

    With the default prefix an ``article`` with id ``42`` is stored
    under ``content_article:42``.
    """

    def __init__(self, prefix: str = "content") -> None:
        """Initialize the key builder.

        Args:
            prefix: Prefix for every namespace.
        """
        self._prefix = prefix

    @property
    def prefix(self) -> str:
        """Get the namespace prefix."""
        return self._prefix

    def namespace(self, type_name: str) -> str:
        """Return the namespace shared by all entities of one type."""
        return f"{self._prefix}_{type_name}"

    def build(self, type_name: str, entity_id: EntityId) -> str:
        """Build the cache key for one entity.

        Args:
            type_name: The entity type, e.g. ``article``.
            entity_id: The entity identifier.

        Returns:
            The cache key string.

        Raises:
            ValueError: If the type or id is missing or malformed.
        """
        return str(CacheKey.from_components(self._prefix, type_name, entity_id))
