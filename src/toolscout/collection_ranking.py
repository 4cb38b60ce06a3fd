"""Leaderboard loading: public collections from the backend, ranked."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from src.toolscout.backend import SupabaseClient
from src.toolscout.scoring.leaderboard import rank_collections
from src.toolscout.scoring.models import CollectionSummary, RankedCollection, SearchConfig
from src.utils.logger import get_logger

logger = get_logger("toolscout.leaderboard")


async def load_leaderboard(
    backend: SupabaseClient,
    config: Optional[SearchConfig] = None,
    now: Optional[datetime] = None,
) -> list[RankedCollection]:
    """Fetch public collections and rank them.

    A failed fetch (or an unreadable row) yields an empty leaderboard; no
    ranking is computed over partial data.
    """
    config = config or SearchConfig()
    try:
        rows = await backend.fetch_public_collections(limit=config.leaderboard_limit)
        candidates = [CollectionSummary.from_row(row) for row in rows]
    except Exception as e:
        logger.error(f"❌ Error loading collection leaderboard: {e}")
        return []

    ranked = rank_collections(candidates, now=now)
    logger.debug(f"Ranked {len(ranked)} public collection(s)")
    return ranked
