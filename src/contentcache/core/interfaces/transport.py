"""Transport interface."""

from typing import Any, Protocol

from contentcache.core.entities.cache_key import EntityId


class TransportError(Exception):
    """Raised by a transport when a content request fails.

    The accessor and store never wrap this error: every caller
    waiting on a failed fetch receives the instance the transport
    raised. The request attributes are optional and only filled
    in by transports that know them.
    """

    def __init__(
        self,
        message: str,
        *,
        verb: str | None = None,
        path: str | None = None,
        entity_id: EntityId | None = None,
        status: int | None = None,
    ) -> None:
        super().__init__(message)
        self.verb = verb
        self.path = path
        self.entity_id = entity_id
        self.status = status


class ITransport(Protocol):
    """Contract for the network collaborator.

    Any async callable with this signature qualifies, including a
    plain ``async def request(verb, path, entity_id, params)``.
    """

    async def __call__(
        self,
        verb: str,
        path: str,
        entity_id: EntityId | None,
        params: dict[str, Any] | None,
    ) -> Any:
        """Perform one content request.

        Args:
            verb: HTTP-style verb, always ``"get"`` for this accessor.
            path: Resource path, e.g. ``/content/article``.
            entity_id: Entity identifier, or None for list requests.
            params: Query parameters, or None for a list without a query.

        Returns:
            The decoded response payload.

        Raises:
            TransportError: If the request fails.
        """
        ...
