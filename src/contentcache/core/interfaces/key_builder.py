"""Key builder interface."""

from typing import Protocol

from contentcache.core.entities.cache_key import EntityId


class IKeyBuilder(Protocol):
    """Contract for building cache keys from entity coordinates.

    Key builders must be deterministic: the same type and id always
    map to the same key, and different types never share a key.
    """

    def build(self, type_name: str, entity_id: EntityId) -> str:
        """Build the cache key for one entity.

        Args:
            type_name: The entity type, e.g. ``article``.
            entity_id: The entity identifier.

        Returns:
            A unique string key for the entity.
        """
        ...
