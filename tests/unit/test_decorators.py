"""Tests for the cached decorator."""

import asyncio

import pytest

from contentcache import InMemoryCacheStore, TransportError
from contentcache.decorators import cached


class TestCachedDecorator:
    """Tests for @cached decorator."""

    @pytest.mark.asyncio
    async def test_cached_function(self, store: InMemoryCacheStore) -> None:
        """Test that @cached stores function results."""
        call_count = 0

        @cached(store, key="content_author:{id}")
        async def get_author(id: str) -> dict:
            nonlocal call_count
            call_count += 1
            return {"id": id}

        result1 = await get_author(id="123")
        result2 = await get_author(id="123")

        assert result1 == {"id": "123"}
        assert result2 is result1
        assert call_count == 1
        assert "content_author:123" in store

    @pytest.mark.asyncio
    async def test_positional_arguments_interpolated(
        self, store: InMemoryCacheStore
    ) -> None:
        """Test placeholders resolve from positional arguments too."""

        @cached(store, key="content_{type_name}:{id}")
        async def fetch(type_name: str, id: str) -> str:
            return f"{type_name}/{id}"

        assert await fetch("article", "1") == "article/1"
        assert await fetch(type_name="article", id="1") == "article/1"
        assert len(store) == 1

    @pytest.mark.asyncio
    async def test_default_arguments_interpolated(
        self, store: InMemoryCacheStore
    ) -> None:
        """Test placeholders resolve from parameter defaults."""

        @cached(store, key="content_{type_name}:{id}")
        async def fetch(id: str, type_name: str = "page") -> str:
            return id

        await fetch("home")

        assert "content_page:home" in store

    @pytest.mark.asyncio
    async def test_cached_different_args(self, store: InMemoryCacheStore) -> None:
        """Test that different args create different entries."""
        call_count = 0

        @cached(store, key="user:{id}")
        async def get_user(id: str) -> dict:
            nonlocal call_count
            call_count += 1
            return {"id": id}

        await get_user(id="1")
        await get_user(id="2")
        await get_user(id="1")

        assert call_count == 2

    @pytest.mark.asyncio
    async def test_callable_key(self, store: InMemoryCacheStore) -> None:
        """Test a key function receives the call's arguments."""

        @cached(store, key=lambda slug, locale="en": f"content_page:{slug}:{locale}")
        async def get_page(slug: str, locale: str = "en") -> str:
            return slug

        await get_page("about", locale="de")

        assert "content_page:about:de" in store

    @pytest.mark.asyncio
    async def test_concurrent_calls_share_execution(
        self, store: InMemoryCacheStore
    ) -> None:
        """Test concurrent calls with the same key run the function once."""
        release = asyncio.Event()
        call_count = 0

        @cached(store, key="slow:{id}")
        async def slow(id: str) -> str:
            nonlocal call_count
            call_count += 1
            await release.wait()
            return id

        tasks = [asyncio.create_task(slow(id="x")) for _ in range(4)]
        await asyncio.sleep(0)
        release.set()

        assert await asyncio.gather(*tasks) == ["x", "x", "x", "x"]
        assert call_count == 1

    @pytest.mark.asyncio
    async def test_failures_not_cached(self, store: InMemoryCacheStore) -> None:
        """Test a raising function is called again on the next call."""
        call_count = 0

        @cached(store, key="flaky:{id}")
        async def flaky(id: str) -> str:
            nonlocal call_count
            call_count += 1
            raise TransportError("down")

        for _ in range(2):
            with pytest.raises(TransportError):
                await flaky(id="1")

        assert call_count == 2

    @pytest.mark.asyncio
    async def test_unknown_placeholder(self, store: InMemoryCacheStore) -> None:
        """Test a template naming no parameter raises KeyError."""

        @cached(store, key="item:{missing}")
        async def get_item(id: str) -> str:
            return id

        with pytest.raises(KeyError):
            await get_item(id="1")

    def test_preserves_metadata(self, store: InMemoryCacheStore) -> None:
        """Test that the decorator preserves function metadata."""

        @cached(store, key="doc:{id}")
        async def my_function(id: str) -> str:
            """My docstring."""
            return id

        assert my_function.__name__ == "my_function"
        assert my_function.__doc__ == "My docstring."
