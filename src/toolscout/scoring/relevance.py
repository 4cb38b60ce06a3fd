"""Additive relevance scoring for search results.

score = Σ per-term field matches + rating * 2 + log10(views + 1) + featured bonus
"""

from __future__ import annotations

import math
from typing import Sequence

from .models import ScoredTool, ToolRecord

NAME_WEIGHT = 10
DESCRIPTION_WEIGHT = 5
LONG_DESCRIPTION_WEIGHT = 3
TAG_WEIGHT = 4
RATING_WEIGHT = 2
FEATURED_BONUS = 5


def term_score(tool: ToolRecord, term: str) -> int:
    """Points one term earns across the tool's fields. Fields are additive."""
    term = term.lower()
    score = 0
    if term in tool.name.lower():
        score += NAME_WEIGHT
    if term in tool.description.lower():
        score += DESCRIPTION_WEIGHT
    if tool.long_description and term in tool.long_description.lower():
        score += LONG_DESCRIPTION_WEIGHT
    if any(term in tag.lower() for tag in tool.tags):
        score += TAG_WEIGHT
    return score


def relevance_score(tool: ToolRecord, terms: Sequence[str]) -> float:
    score: float = sum(term_score(tool, term) for term in terms)
    score += tool.rating * RATING_WEIGHT
    score += math.log10(max(tool.views, 0) + 1)
    if tool.featured:
        score += FEATURED_BONUS
    return score


def rank_tools(tools: Sequence[ToolRecord], terms: Sequence[str]) -> list[ScoredTool]:
    """Score and sort tools, highest first. Equal scores keep input order."""
    scored = [ScoredTool(tool=t, score=relevance_score(t, terms)) for t in tools]
    scored.sort(key=lambda s: s.score, reverse=True)
    return scored
