"""Tests for additive relevance scoring."""
import math

import pytest

from src.toolscout.scoring.relevance import rank_tools, relevance_score, term_score
from tests.factories import make_tool


def test_score_formula_all_fields():
    tool = make_tool(
        "Image Studio",
        description="Create image assets",
        long_description="An image pipeline",
        tags=["Image"],
        rating=4.0,
        views=99,
        featured=True,
    )
    # 10 + 5 + 3 + 4 for "image", rating*2 = 8, log10(100) = 2, featured 5
    assert relevance_score(tool, ["image"]) == pytest.approx(37.0)


def test_terms_accumulate_across_fields():
    tool = make_tool("Notion AI", description="Writing in your notes", tags=["notes"])
    assert term_score(tool, "notion") == 10
    assert term_score(tool, "notes") == 5 + 4
    assert relevance_score(tool, ["notion", "notes"]) == pytest.approx(19.0)


def test_featured_adds_exactly_five():
    plain = make_tool("Writer", description="writing", rating=3.5, views=42)
    featured = make_tool("Writer", description="writing", rating=3.5, views=42, featured=True)
    diff = relevance_score(featured, ["writing"]) - relevance_score(plain, ["writing"])
    assert diff == pytest.approx(5.0)


def test_no_terms_leaves_popularity_only():
    tool = make_tool("X", rating=2.5, views=9)
    assert relevance_score(tool, []) == pytest.approx(5.0 + math.log10(10))


def test_adding_matching_field_never_lowers_score():
    base = make_tool("Tool", description="nothing here")
    richer = make_tool("Tool", description="video editing", tags=["video"])
    assert relevance_score(richer, ["video"]) >= relevance_score(base, ["video"])


def test_missing_long_description_scores_zero_for_that_field():
    tool = make_tool("Tool", long_description=None)
    assert term_score(tool, "tool") == 10


def test_rank_tools_sorts_descending():
    low = make_tool("Low", description="chat")
    high = make_tool("ChatMaster", description="chat", tags=["chat"])
    ranked = rank_tools([low, high], ["chat"])
    assert [s.tool.name for s in ranked] == ["ChatMaster", "Low"]
    assert ranked[0].score > ranked[1].score


def test_rank_tools_ties_keep_input_order():
    tools = [make_tool(f"Same{i}", id=f"id{i}", description="same") for i in range(4)]
    ranked = rank_tools(tools, ["same"])
    assert [s.tool.id for s in ranked] == ["id0", "id1", "id2", "id3"]
