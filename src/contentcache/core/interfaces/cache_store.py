"""Cache-aside store interface."""

from collections.abc import Awaitable, Callable
from typing import Any, Protocol

Loader = Callable[[], Awaitable[Any]]


class ICacheStore(Protocol):
    """Contract for cache-aside stores.

    A store answers one question per key: has this value already
    been computed, or must it be computed now. Concurrent misses for
    the same key must share a single loader invocation.
    """

    async def get_or_load(self, key: str, loader: Loader) -> Any:
        """Return the stored value for key, loading it on a miss.

        Args:
            key: Opaque cache key.
            loader: Zero-argument callable producing the value. Called
                at most once per in-flight load and never retained.

        Returns:
            The stored or freshly loaded value.

        Raises:
            Exception: Whatever the loader raised. Failures are never
                stored.
        """
        ...

    async def clear(self) -> None:
        """Drop all resolved entries."""
        ...
