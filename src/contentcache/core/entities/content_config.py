"""Content accessor configuration entity."""

from collections.abc import Mapping
from dataclasses import dataclass
from datetime import timedelta
from typing import Any

from contentcache.core.errors import ConfigurationError


@dataclass
class ContentConfig:
    """Content accessor configuration.

    Preview Mode:
        When preview_content=True, every cached ``get`` asks the
        transport for preview (unpublished) variants by sending
        ``$preview: true`` along with the caller's query.

    Store Sizing:
        The default store is unbounded and entries live as long as
        the store does. Setting max_size bounds it with LRU eviction;
        setting ttl expires resolved entries.
    """

    preview_content: bool = False
    enabled: bool = True
    key_prefix: str = "content"

    max_size: int | None = None
    ttl: timedelta | None = None

    def __post_init__(self) -> None:
        """Validate sizing options."""
        if not self.key_prefix or ":" in self.key_prefix:
            raise ConfigurationError(
                f"key_prefix must be non-empty and free of ':': {self.key_prefix!r}"
            )
        if self.max_size is not None and self.max_size < 1:
            raise ConfigurationError(f"max_size must be >= 1, got {self.max_size}")
        if self.ttl is not None and self.ttl.total_seconds() <= 0:
            raise ConfigurationError(f"ttl must be positive, got {self.ttl}")

    @classmethod
    def from_options(cls, options: Mapping[str, Any] | None) -> "ContentConfig":
        """Build a config from a camelCase client options mapping.

        Recognised keys: ``previewContent``, ``enabled``, ``keyPrefix``,
        ``maxSize`` and ``ttlSeconds``. Unknown keys are ignored so the
        same options object can be shared with the transport.
        """
        options = options or {}
        ttl_seconds = options.get("ttlSeconds")

        return cls(
            preview_content=bool(options.get("previewContent", False)),
            enabled=bool(options.get("enabled", True)),
            key_prefix=options.get("keyPrefix", "content"),
            max_size=options.get("maxSize"),
            ttl=timedelta(seconds=ttl_seconds) if ttl_seconds is not None else None,
        )
