"""Tests for scoring data models and row parsing."""
from datetime import datetime, timezone

import pytest

from src.toolscout.scoring.models import (
    CollectionSummary,
    SearchConfig,
    SearchFilters,
    ToolRecord,
    parse_timestamp,
)


class TestToolRecord:
    def test_from_row_full(self):
        tool = ToolRecord.from_row({
            "id": 7,
            "name": "PixelFree",
            "description": "Edit images",
            "long_description": "Longer",
            "category_id": 3,
            "pricing_type": "Freemium",
            "rating": "4.5",
            "views": 120,
            "featured": True,
            "tags": ["image"],
            "features": ["API"],
        })
        assert tool.id == "7"
        assert tool.category_id == "3"
        assert tool.rating == 4.5
        assert tool.tags == ("image",)
        assert tool.features == ("API",)

    def test_from_row_nulls_fall_back(self):
        tool = ToolRecord.from_row({
            "id": "t", "name": "X", "description": None, "rating": None,
            "views": None, "tags": None, "category_id": None, "featured": None,
        })
        assert tool.description == ""
        assert tool.rating == 0.0
        assert tool.views == 0
        assert tool.tags == ()
        assert tool.category_id is None
        assert tool.featured is False
        assert tool.long_description is None

    def test_null_pricing_stays_unset(self):
        tool = ToolRecord.from_row({"id": "v", "name": "Mystery Voice", "pricing_type": None})
        assert tool.pricing_type == ""
        assert ToolRecord(id="t", name="X").pricing_type == ""

    def test_from_row_requires_id(self):
        with pytest.raises(KeyError):
            ToolRecord.from_row({"name": "no id"})

    def test_immutable(self):
        tool = ToolRecord(id="t", name="X")
        with pytest.raises(AttributeError):
            tool.name = "Y"


class TestCollectionSummary:
    def test_from_row_with_embedded_count_and_owner(self):
        c = CollectionSummary.from_row({
            "id": "c1",
            "name": "Favourites",
            "views": 12,
            "shares": 2,
            "created_at": "2025-12-01T08:30:00Z",
            "owner": {"full_name": "Ann", "email": "ann@example.com"},
            "collection_tools": [{"count": 4}],
        })
        assert c.tool_count == 4
        assert c.owner_full_name == "Ann"
        assert c.created_at == datetime(2025, 12, 1, 8, 30, tzinfo=timezone.utc)

    def test_plain_tool_count_column_wins(self):
        c = CollectionSummary.from_row({
            "id": "c1", "name": "n", "created_at": "2025-12-01T00:00:00+00:00",
            "tool_count": 9, "collection_tools": [{"count": 4}],
        })
        assert c.tool_count == 9

    def test_no_count_no_owner(self):
        c = CollectionSummary.from_row({"id": "c1", "name": "n", "created_at": "2025-12-01T00:00:00"})
        assert c.tool_count is None
        assert c.owner_email is None
        assert c.views == 0


def test_parse_timestamp_naive_is_utc():
    assert parse_timestamp("2025-01-02T03:04:05").tzinfo is timezone.utc


def test_parse_timestamp_keeps_offset():
    parsed = parse_timestamp("2025-01-02T03:04:05+02:00")
    assert parsed.utcoffset().total_seconds() == 7200


def test_search_filters_default_is_empty():
    assert SearchFilters().is_empty()
    assert not SearchFilters(features=["api"]).is_empty()


def test_search_config_defaults():
    config = SearchConfig()
    assert config.result_limit == 12
    assert config.catalog_limit == 100
    assert config.min_term_length == 3
    assert config.leaderboard_limit == 50
