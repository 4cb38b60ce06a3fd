"""Collection leaderboard ranking.

Rewards views and collection depth with a mild linear penalty for age:

    score = round(views * 10 + tool_count * 5 - max(0, age_days * 0.1))

Ties on score are broken by collection id so the order never depends on the
order candidates arrived in.
"""

from __future__ import annotations

import math
from datetime import datetime, timezone
from typing import Optional, Sequence

from .models import CollectionSummary, RankedCollection

VIEW_WEIGHT = 10
TOOL_WEIGHT = 5
DAILY_FRESHNESS_PENALTY = 0.1
ANONYMOUS_OWNER = "Anonymous"


def resolve_tool_count(collection: CollectionSummary) -> int:
    """A missing tool count counts as an empty collection."""
    return collection.tool_count if collection.tool_count is not None else 0


def resolve_owner_name(full_name: Optional[str], email: Optional[str]) -> str:
    """Display name for a collection owner.

    Precedence: non-blank full name, then the local part of a non-blank
    email, then "Anonymous".
    """
    if full_name and full_name.strip():
        return full_name.strip()
    if email and email.strip():
        local_part = email.strip().split("@", 1)[0]
        if local_part:
            return local_part
    return ANONYMOUS_OWNER


def age_in_days(created_at: datetime, now: datetime) -> int:
    """Whole days elapsed, floored. Negative for timestamps in the future."""
    return math.floor((now - created_at).total_seconds() / 86400)


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def collection_score(collection: CollectionSummary, now: datetime) -> int:
    view_score = collection.views * VIEW_WEIGHT
    tool_score = resolve_tool_count(collection) * TOOL_WEIGHT
    freshness_penalty = max(0.0, age_in_days(collection.created_at, now) * DAILY_FRESHNESS_PENALTY)
    return _round_half_up(view_score + tool_score - freshness_penalty)


def rank_collections(
    candidates: Sequence[CollectionSummary],
    now: Optional[datetime] = None,
) -> list[RankedCollection]:
    """Score and dense-rank collections, best first.

    Ranks run 1..N with no gaps; equal scores get consecutive ranks ordered
    by id. Pass `now` for reproducible results.
    """
    if not candidates:
        return []
    now = now or datetime.now(timezone.utc)
    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)

    scored = [(collection_score(c, now), c) for c in candidates]
    scored.sort(key=lambda pair: (-pair[0], pair[1].id))

    return [
        RankedCollection(
            collection=collection,
            rank=position,
            score=score,
            owner_name=resolve_owner_name(collection.owner_full_name, collection.owner_email),
        )
        for position, (score, collection) in enumerate(scored, start=1)
    ]
