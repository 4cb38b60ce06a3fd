"""
Ranking refresh and interaction tracking triggers.

Fire-and-forget glue over the backend's aggregation procedures: nothing here
reads results back or decides anything based on them.
"""

from __future__ import annotations

import asyncio
from typing import Any, Optional

from src.toolscout.backend import SupabaseClient
from src.utils.logger import get_logger

RANKING_PROCEDURES = (
    "update_popular_rankings",
    "update_weekly_rankings",
    "update_monthly_rankings",
    "update_trending_rankings",
    "update_rising_rankings",
)


class RankingRefresher:
    """
    Triggers ranking recomputation and records tool/collection interactions.

    Every public method swallows backend errors after logging them.
    """

    def __init__(self, backend: SupabaseClient):
        """
        Initialize the refresher.

        Args:
            backend: Client used to invoke remote procedures
        """
        self.backend = backend
        self.logger = get_logger("toolscout.RankingRefresher")

    async def refresh_all_rankings(self) -> None:
        """
        Run all ranking procedures concurrently and wait for every one.

        A failure in one procedure does not stop or roll back the others;
        failures are reported once, in aggregate.
        """
        results = await asyncio.gather(
            *(self.backend.call_rpc(name) for name in RANKING_PROCEDURES),
            return_exceptions=True,
        )
        errors = [r for r in results if isinstance(r, BaseException)]
        if errors:
            self.logger.error(
                f"❌ Error updating rankings: {len(errors)}/{len(RANKING_PROCEDURES)} "
                f"procedures failed: {errors[0]}"
            )
            return
        self.logger.info("✅ All rankings updated successfully")

    async def _track(self, procedure: str, params: dict[str, Any], label: str) -> None:
        try:
            await self.backend.call_rpc(procedure, params)
        except Exception as e:
            self.logger.error(f"❌ Error tracking {label}: {e}")

    async def record_view(self, tool_id: str) -> None:
        await self._track("track_tool_view", {"p_tool_id": tool_id}, "tool view")

    async def record_click(self, tool_id: str) -> None:
        await self._track("track_tool_click", {"p_tool_id": tool_id}, "tool click")

    async def record_favorite(self, tool_id: str) -> None:
        await self._track("track_tool_favorite", {"p_tool_id": tool_id}, "tool favorite")

    async def record_collection_view(self, collection_id: str, user_id: Optional[str] = None) -> None:
        """Insert a collection view row; these feed the leaderboard's view counter."""
        try:
            await self.backend.insert(
                "collection_views",
                {"collection_id": collection_id, "viewer_user_id": user_id, "viewer_ip": None},
            )
        except Exception as e:
            self.logger.error(f"❌ Error tracking collection view: {e}")

    async def record_collection_share(self, collection_id: str, user_id: Optional[str] = None) -> None:
        try:
            await self.backend.insert(
                "collection_shares",
                {"collection_id": collection_id, "shared_by_user_id": user_id},
            )
        except Exception as e:
            self.logger.error(f"❌ Error tracking collection share: {e}")
