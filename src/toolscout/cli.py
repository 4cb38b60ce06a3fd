from __future__ import annotations
from typing import Optional, Sequence
from src.toolscout.backend import SupabaseClient
from src.toolscout.collection_ranking import load_leaderboard
from src.toolscout.ranking_jobs import RANKING_PROCEDURES, RankingRefresher
from src.toolscout.scoring.models import RankedCollection, SearchResponse
from src.toolscout.search import ToolSearch
from src.toolscout.settings import ToolscoutSettings
from src.toolscout.utils.audit import JsonlSearchLogger
from src.toolscout.yaml_config import load_vocabulary
from src.utils.logger import get_logger

logger = get_logger("toolscout.cli")


def format_search(result: SearchResponse) -> str:
    lines = [result.response]
    if result.filters.to_dict():
        applied = ", ".join(f"{k}={v}" for k, v in result.filters.to_dict().items())
        lines.append(f"Filters: {applied}")
    for position, tool in enumerate(result.results, start=1):
        badge = " ★" if tool.featured else ""
        lines.append(f"  {position:>2}. {tool.name}{badge} [{tool.pricing_type or 'Unknown'}, {tool.rating:.1f}]")
    return "\n".join(lines)


def format_leaderboard(ranked: Sequence[RankedCollection]) -> str:
    if not ranked:
        return "No public collections to rank."
    lines = ["Collection Leaderboard", "=" * 40]
    for entry in ranked:
        lines.append(
            f"  #{entry.rank:<3} {entry.name}  by {entry.owner_name}  "
            f"(score {entry.score}, {entry.collection.views} views)"
        )
    return "\n".join(lines)


async def cmd_search(
    query: str,
    settings: Optional[ToolscoutSettings] = None,
    backend: Optional[SupabaseClient] = None,
) -> str:
    settings = settings or ToolscoutSettings()
    vocabulary = load_vocabulary(settings.vocabulary)
    search_logger = None
    if settings.audit_log_dir:
        try:
            search_logger = JsonlSearchLogger(log_dir=settings.audit_log_dir)
        except OSError as e:
            logger.error(f"❌ Audit log disabled, cannot open {settings.audit_log_dir}: {e}")
    client = backend or SupabaseClient(settings)
    try:
        searcher = ToolSearch(client, vocabulary=vocabulary, search_logger=search_logger)
        result = await searcher.search(query)
    finally:
        if backend is None:
            await client.aclose()
        if search_logger is not None:
            search_logger.close()
    return format_search(result)


async def cmd_leaderboard(
    settings: Optional[ToolscoutSettings] = None,
    backend: Optional[SupabaseClient] = None,
) -> str:
    client = backend or SupabaseClient(settings or ToolscoutSettings())
    try:
        ranked = await load_leaderboard(client)
    finally:
        if backend is None:
            await client.aclose()
    return format_leaderboard(ranked)


async def cmd_refresh(
    settings: Optional[ToolscoutSettings] = None,
    backend: Optional[SupabaseClient] = None,
) -> str:
    client = backend or SupabaseClient(settings or ToolscoutSettings())
    try:
        await RankingRefresher(client).refresh_all_rankings()
    finally:
        if backend is None:
            await client.aclose()
    return f"Triggered {len(RANKING_PROCEDURES)} ranking procedures: {', '.join(RANKING_PROCEDURES)}"
