"""Library errors."""


class ContentCacheError(Exception):
    """Base class for errors raised by contentcache itself."""

    pass


class ConfigurationError(ContentCacheError, ValueError):
    """Raised when a configuration value is invalid."""

    pass
