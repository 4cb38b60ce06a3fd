"""Text relevance matcher: query + catalog snapshot -> ranked search response.

Pure: no I/O, no shared state. Async data access and error fallback live in
src.toolscout.search.ToolSearch.
"""

from __future__ import annotations

from typing import Optional, Sequence

from src.utils.logger import get_logger

from .filters import extract_filters, narrow_candidates, query_terms
from .intent import detect_intent
from .models import (
    CatalogSnapshot,
    ConversationTurn,
    SearchConfig,
    SearchResponse,
)
from .relevance import rank_tools
from .responder import ResponseContext, generate_response
from .vocabulary import DEFAULT_VOCABULARY, Vocabulary

logger = get_logger("toolscout.matcher")


def match(
    query: str,
    history: Sequence[ConversationTurn],
    snapshot: CatalogSnapshot,
    config: Optional[SearchConfig] = None,
    vocabulary: Vocabulary = DEFAULT_VOCABULARY,
) -> SearchResponse:
    """Classify, filter, score and summarize `query` against `snapshot`.

    Returns at most config.result_limit tools ordered by relevance. When no
    tool survives narrowing the fixed no-results narrative is returned
    whatever the intent.
    """
    config = config or SearchConfig()
    intent = detect_intent(query, vocabulary)
    filters = extract_filters(query, vocabulary)
    terms = query_terms(query, config.min_term_length)

    candidates = narrow_candidates(snapshot.tools, snapshot.categories, filters, terms)
    context = ResponseContext(
        query=query,
        intent=intent,
        filters=filters,
        recommend_cap=config.recommend_cap,
    )
    logger.debug(
        f"Query {query!r}: intent={intent.value}, filters={filters.to_dict()}, "
        f"{len(candidates)}/{len(snapshot.tools)} candidates, {len(history)} prior turns"
    )

    if not candidates:
        return SearchResponse(
            response=generate_response(context, 0),
            filters=filters,
            results=[],
            intent=intent,
        )

    ranked = rank_tools(candidates, terms)
    return SearchResponse(
        response=generate_response(context, len(ranked)),
        filters=filters,
        results=[s.tool for s in ranked[:config.result_limit]],
        intent=intent,
    )
