"""Query parameter utilities for content requests."""

from collections.abc import Mapping
from typing import Any

PREVIEW_PARAM = "$preview"


def merge_query(
    preview_content: bool,
    query: Mapping[str, Any] | None = None,
) -> dict[str, Any]:
    """Merge the configured preview flag with a caller's query.

    The preview flag is applied first and the caller's fields second,
    so a caller that sends its own ``$preview`` overrides the config.

    Args:
        preview_content: The configured preview flag.
        query: Optional caller-supplied query parameters.

    Returns:
        A new dict; the caller's mapping is never mutated.
    """
    merged: dict[str, Any] = {PREVIEW_PARAM: preview_content}
    if query:
        merged.update(query)
    return merged


def content_path(type_name: str) -> str:
    """Return the resource path for an entity type."""
    return f"/content/{type_name}"
