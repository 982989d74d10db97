"""Tests for query helpers."""

from contentcache.utils.query import content_path, merge_query


class TestMergeQuery:
    """Tests for merge_query."""

    def test_preview_only(self) -> None:
        """Test the preview flag is always present."""
        assert merge_query(True) == {"$preview": True}
        assert merge_query(False, None) == {"$preview": False}

    def test_caller_fields_added(self) -> None:
        """Test caller fields are merged alongside the preview flag."""
        assert merge_query(True, {"status": "draft"}) == {
            "$preview": True,
            "status": "draft",
        }

    def test_caller_preview_wins(self) -> None:
        """Test a caller-supplied $preview overrides the configured flag."""
        assert merge_query(True, {"$preview": False}) == {"$preview": False}

    def test_preview_key_comes_first(self) -> None:
        """Test the preview flag precedes caller fields."""
        merged = merge_query(True, {"status": "draft", "locale": "en"})

        assert list(merged) == ["$preview", "status", "locale"]

    def test_caller_query_not_mutated(self) -> None:
        """Test the caller's mapping is left untouched."""
        query = {"status": "draft"}

        merge_query(True, query)

        assert query == {"status": "draft"}


def test_content_path() -> None:
    """Test resource paths are built per type."""
    assert content_path("article") == "/content/article"
