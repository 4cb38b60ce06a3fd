"""Core data models for search relevance and leaderboard ranking."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Literal, Optional


class PricingTier(str, Enum):
    FREE = "Free"
    PAID = "Paid"
    FREEMIUM = "Freemium"
    TRIAL = "Trial"


class Intent(str, Enum):
    """Coarse label for what kind of answer a query expects."""
    SEARCH = "search"
    COMPARE = "compare"
    RECOMMEND = "recommend"
    QUESTION = "question"
    PRICING = "pricing"
    GENERAL = "general"


def parse_timestamp(value: Any) -> datetime:
    """Parse a backend timestamp into an aware datetime (UTC when naive)."""
    if isinstance(value, datetime):
        parsed = value
    else:
        text = str(value)
        if text.endswith("Z"):
            text = text[:-1] + "+00:00"
        parsed = datetime.fromisoformat(text)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


@dataclass(frozen=True)
class Category:
    id: str
    name: str
    slug: str = ""

    @classmethod
    def from_row(cls, row: dict[str, Any]) -> "Category":
        return cls(id=str(row["id"]), name=row.get("name") or "", slug=row.get("slug") or "")


@dataclass(frozen=True)
class ToolRecord:
    """A published tool as read from the catalog snapshot. Never mutated."""
    id: str
    name: str
    description: str = ""
    long_description: Optional[str] = None
    category_id: Optional[str] = None
    pricing_type: str = ""
    rating: float = 0.0
    views: int = 0
    featured: bool = False
    tags: tuple[str, ...] = ()
    features: tuple[str, ...] = ()

    @classmethod
    def from_row(cls, row: dict[str, Any]) -> "ToolRecord":
        """Build from a backend row; null columns fall back to field defaults.

        A missing pricing tier stays empty so no pricing filter matches it.
        """
        return cls(
            id=str(row["id"]),
            name=row.get("name") or "",
            description=row.get("description") or "",
            long_description=row.get("long_description"),
            category_id=(str(row["category_id"]) if row.get("category_id") is not None else None),
            pricing_type=row.get("pricing_type") or "",
            rating=float(row.get("rating") or 0.0),
            views=int(row.get("views") or 0),
            featured=bool(row.get("featured")),
            tags=tuple(row.get("tags") or ()),
            features=tuple(row.get("features") or ()),
        )


@dataclass
class ScoredTool:
    """A tool with its relevance score for the current query."""
    tool: ToolRecord
    score: float = 0.0


@dataclass
class SearchFilters:
    """Filters derived from a query. Ephemeral, never persisted."""
    category: Optional[str] = None
    pricing: Optional[str] = None
    features: list[str] = field(default_factory=list)

    def is_empty(self) -> bool:
        return self.category is None and self.pricing is None and not self.features

    def to_dict(self) -> dict[str, Any]:
        """Only the filters that are set, for callers updating UI filter state."""
        result: dict[str, Any] = {}
        if self.category is not None:
            result["category"] = self.category
        if self.pricing is not None:
            result["pricing"] = self.pricing
        if self.features:
            result["features"] = list(self.features)
        return result


@dataclass(frozen=True)
class ConversationTurn:
    role: Literal["user", "assistant"]
    content: str


@dataclass(frozen=True)
class CatalogSnapshot:
    """Published tools and the category vocabulary read at query time."""
    tools: tuple[ToolRecord, ...] = ()
    categories: tuple[Category, ...] = ()


@dataclass
class SearchResponse:
    response: str
    filters: SearchFilters = field(default_factory=SearchFilters)
    results: list[ToolRecord] = field(default_factory=list)
    intent: Intent = Intent.GENERAL


@dataclass(frozen=True)
class CollectionSummary:
    """A public collection as read for the leaderboard. Never mutated."""
    id: str
    name: str
    created_at: datetime
    description: Optional[str] = None
    views: int = 0
    shares: Optional[int] = None
    tool_count: Optional[int] = None
    owner_full_name: Optional[str] = None
    owner_email: Optional[str] = None

    @classmethod
    def from_row(cls, row: dict[str, Any]) -> "CollectionSummary":
        """Build from a tool_collections row with embedded owner and tool count.

        The tool count arrives either as a plain ``tool_count`` column or as
        a PostgREST aggregate ``collection_tools: [{"count": n}]``.
        """
        owner = row.get("owner") or {}
        tool_count = row.get("tool_count")
        if tool_count is None:
            aggregate = row.get("collection_tools")
            if isinstance(aggregate, list) and aggregate:
                tool_count = aggregate[0].get("count")
        return cls(
            id=str(row["id"]),
            name=row.get("name") or "",
            created_at=parse_timestamp(row["created_at"]),
            description=row.get("description"),
            views=int(row.get("views") or 0),
            shares=row.get("shares"),
            tool_count=tool_count,
            owner_full_name=owner.get("full_name"),
            owner_email=owner.get("email"),
        )


@dataclass(frozen=True)
class RankedCollection:
    """A CollectionSummary with its leaderboard position attached."""
    collection: CollectionSummary
    rank: int
    score: int
    owner_name: str

    @property
    def id(self) -> str:
        return self.collection.id

    @property
    def name(self) -> str:
        return self.collection.name


@dataclass
class SearchConfig:
    """Search and leaderboard limits with the defaults the catalog uses."""
    result_limit: int = 12
    catalog_limit: int = 100
    min_term_length: int = 3
    leaderboard_limit: int = 50
    recommend_cap: int = 5
