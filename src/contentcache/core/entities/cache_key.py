"""Cache key value object."""

from dataclasses import dataclass

EntityId = str | int


@dataclass(frozen=True)
class CacheKey:
    """Immutable cache key value object.

    Combines the per-type namespace (``content_<type>``) with the
    entity identifier. The namespace never contains ``:``, so the
    first separator in the string form always ends the namespace.
    """

    namespace: str
    entity_id: str

    def __str__(self) -> str:
        """Return the full cache key string.

        Returns:
            The complete cache key as a string.
        """
        return f"{self.namespace}:{self.entity_id}"

    @classmethod
    def from_components(
        cls,
        prefix: str,
        type_name: str,
        entity_id: EntityId,
    ) -> "CacheKey":
        """Create a CacheKey from raw components.

        Args:
            prefix: Namespace prefix (``content`` by default).
            type_name: The entity type, e.g. ``article``.
            entity_id: The entity identifier. Normalised with ``str()``.

        Returns:
            A new CacheKey instance.

        Raises:
            ValueError: If the type is empty or contains ``:``, or the
                id is missing.
        """
        if not type_name:
            raise ValueError("Entity type must be a non-empty string")
        if ":" in type_name:
            raise ValueError(f"Entity type may not contain ':': {type_name!r}")
        if entity_id is None or entity_id == "":
            raise ValueError(f"An id is required to get a {type_name!r} entity")

        return cls(namespace=f"{prefix}_{type_name}", entity_id=str(entity_id))
