"""Pytest configuration for contentcache tests."""

from unittest.mock import AsyncMock

import pytest

from contentcache import ContentAccessor, ContentConfig, InMemoryCacheStore


@pytest.fixture
def transport() -> AsyncMock:
    """Create a transport that echoes the requested entity."""

    async def respond(verb: str, path: str, entity_id, params: dict) -> dict:
        if entity_id is None:
            return {"items": [], "path": path}
        return {"id": entity_id, "path": path}

    return AsyncMock(side_effect=respond)


@pytest.fixture
def store() -> InMemoryCacheStore:
    """Create a fresh store so no entries leak between tests."""
    return InMemoryCacheStore()


@pytest.fixture
def accessor(transport: AsyncMock, store: InMemoryCacheStore) -> ContentAccessor:
    """Create an accessor with preview content enabled."""
    return ContentAccessor(
        transport=transport,
        store=store,
        config=ContentConfig(preview_content=True),
    )
