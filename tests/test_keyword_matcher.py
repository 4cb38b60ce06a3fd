"""Tests for substring keyword matching helpers."""
from src.toolscout.utils.keyword_matcher import all_matches, first_match, match_keywords


def test_match_keywords_case_insensitive():
    assert match_keywords("Looking For a tool", ["looking for"])
    assert not match_keywords("nothing here", ["api", "automation"])


def test_match_keywords_is_substring_based():
    assert match_keywords("canvas versus figma", ["vs", "versus"])
    assert match_keywords("Freemium plans", ["free"])


def test_first_match_respects_keyword_order():
    assert first_match("freemium", ["free", "freemium"]) == "free"
    assert first_match("freemium", ["freemium", "free"]) == "freemium"
    assert first_match("paid", ["free"]) is None


def test_all_matches_in_keyword_order():
    assert all_matches("integration and API access", ["api", "automation", "integration"]) == [
        "api",
        "integration",
    ]


def test_empty_inputs():
    assert not match_keywords("", ["a"])
    assert first_match("text", []) is None
    assert all_matches("text", []) == []
