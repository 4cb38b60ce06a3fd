"""ToolSearch: async entry point for free-text tool search."""

from __future__ import annotations

import asyncio
import time
from typing import Optional, Sequence

from src.toolscout.backend import SupabaseClient
from src.toolscout.scoring.logging import NullSearchLogger, SearchLogger
from src.toolscout.scoring.matcher import match
from src.toolscout.scoring.models import (
    CatalogSnapshot,
    Category,
    ConversationTurn,
    SearchConfig,
    SearchResponse,
    ToolRecord,
)
from src.toolscout.scoring.responder import ERROR_MESSAGE
from src.toolscout.scoring.vocabulary import DEFAULT_VOCABULARY, Vocabulary
from src.utils.logger import get_logger


class ToolSearch:
    """Reads a fresh catalog snapshot per query and runs the matcher on it.

    Never raises: any failure while reading the snapshot or matching is
    logged and turned into the fixed apology response with no results.
    """

    def __init__(
        self,
        backend: SupabaseClient,
        config: Optional[SearchConfig] = None,
        vocabulary: Vocabulary = DEFAULT_VOCABULARY,
        search_logger: Optional[SearchLogger] = None,
    ) -> None:
        self.backend = backend
        self.config = config or SearchConfig()
        self.vocabulary = vocabulary
        self.search_logger = search_logger or NullSearchLogger()
        self.logger = get_logger("toolscout.ToolSearch")

    async def load_snapshot(self) -> CatalogSnapshot:
        """Read published tools and categories concurrently.

        Both reads always run to completion; if either fails the first
        failure is raised and any second one is logged.
        """
        tool_rows, category_rows = await asyncio.gather(
            self.backend.fetch_published_tools(limit=self.config.catalog_limit),
            self.backend.fetch_categories(),
            return_exceptions=True,
        )
        errors = [r for r in (tool_rows, category_rows) if isinstance(r, BaseException)]
        if errors:
            for extra in errors[1:]:
                self.logger.warning(f"⚠️ Snapshot read also failed: {extra}")
            raise errors[0]
        return CatalogSnapshot(
            tools=tuple(ToolRecord.from_row(row) for row in tool_rows),
            categories=tuple(Category.from_row(row) for row in category_rows),
        )

    async def search(
        self,
        query: str,
        history: Sequence[ConversationTurn] = (),
    ) -> SearchResponse:
        started = time.perf_counter()
        try:
            snapshot = await self.load_snapshot()
            result = match(query, history, snapshot, self.config, self.vocabulary)
        except Exception as e:
            latency_ms = (time.perf_counter() - started) * 1000
            self.logger.error(f"❌ Error performing search for {query!r}: {e}")
            try:
                await self.search_logger.log_search_failure(query, str(e), latency_ms)
            except Exception as log_err:
                self.logger.error(f"❌ Failed to record search failure: {log_err}")
            return SearchResponse(response=ERROR_MESSAGE)

        latency_ms = (time.perf_counter() - started) * 1000
        self.logger.info(
            f"🔍 {query!r} → {len(result.results)} result(s), intent={result.intent.value}"
        )
        try:
            await self.search_logger.log_search(query, result, latency_ms)
        except Exception as e:
            self.logger.error(f"❌ Failed to record search: {e}")
        return result
