"""Domain services for contentcache."""

from contentcache.core.services.content_accessor import ContentAccessor

__all__ = ["ContentAccessor"]
