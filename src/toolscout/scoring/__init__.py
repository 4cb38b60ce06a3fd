"""Search relevance matching and collection leaderboard ranking."""

from .leaderboard import rank_collections, resolve_owner_name
from .matcher import match
from .models import (
    CatalogSnapshot,
    Category,
    CollectionSummary,
    ConversationTurn,
    Intent,
    PricingTier,
    RankedCollection,
    ScoredTool,
    SearchConfig,
    SearchFilters,
    SearchResponse,
    ToolRecord,
)
from .vocabulary import Vocabulary

__all__ = [
    "CatalogSnapshot",
    "Category",
    "CollectionSummary",
    "ConversationTurn",
    "Intent",
    "PricingTier",
    "RankedCollection",
    "ScoredTool",
    "SearchConfig",
    "SearchFilters",
    "SearchResponse",
    "ToolRecord",
    "Vocabulary",
    "match",
    "rank_collections",
    "resolve_owner_name",
]
