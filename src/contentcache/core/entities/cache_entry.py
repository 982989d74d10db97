"""Cache entry entity."""

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from enum import Enum
from typing import Any


class EntryState(Enum):
    """Lifecycle of a key inside the cache-aside store.

    ABSENT: Nothing stored and nothing loading.
    LOADING: A load is in flight; callers attach to it.
    RESOLVED: A value is stored and served without loading.
    """

    ABSENT = "absent"
    LOADING = "loading"
    RESOLVED = "resolved"


@dataclass(frozen=True)
class CacheEntry:
    """Immutable cache entry value object.

    Holds a resolved value together with the time it was stored
    and an optional time-to-live.
    """

    key: str
    value: Any
    created_at: datetime
    ttl: timedelta | None = None

    @property
    def expires_at(self) -> datetime | None:
        """Calculate expiration time.

        Returns:
            The datetime when this entry expires, or None if no TTL.
        """
        if self.ttl is None:
            return None
        return self.created_at + self.ttl

    @property
    def is_expired(self) -> bool:
        """Check if entry has expired."""
        if self.expires_at is None:
            return False
        return datetime.now(timezone.utc) > self.expires_at

    @classmethod
    def create(
        cls,
        key: str,
        value: Any,
        ttl: timedelta | None = None,
    ) -> "CacheEntry":
        """Factory method to create a new cache entry.

        Args:
            key: The cache key.
            value: The resolved value.
            ttl: Optional time-to-live.

        Returns:
            A new CacheEntry instance.
        """
        return cls(
            key=key,
            value=value,
            created_at=datetime.now(timezone.utc),
            ttl=ttl,
        )
