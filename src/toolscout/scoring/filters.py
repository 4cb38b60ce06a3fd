"""Filter extraction and candidate narrowing.

Each narrowing step takes the surviving candidates and returns a new list,
preserving relative order so the later stable sort keeps ties in place.
"""

from __future__ import annotations

from typing import Iterable, Optional, Sequence

from src.toolscout.utils.keyword_matcher import all_matches, first_match, match_keywords

from .models import Category, SearchFilters, ToolRecord
from .vocabulary import DEFAULT_VOCABULARY, Vocabulary


def query_terms(query: str, min_length: int = 3) -> list[str]:
    """Lowercase whitespace tokens of at least min_length characters."""
    return [w for w in query.lower().split() if len(w) >= min_length]


def extract_filters(query: str, vocabulary: Vocabulary = DEFAULT_VOCABULARY) -> SearchFilters:
    """Derive pricing, category and feature filters from a query.

    Pricing and category are first-match over the ordered vocabulary;
    features collect every keyword present.
    """
    filters = SearchFilters()

    for entry in vocabulary.pricing_keywords:
        if match_keywords(query, [entry.keyword]):
            filters.pricing = entry.tier.value
            break

    filters.category = first_match(query, vocabulary.categories)
    filters.features = all_matches(query, vocabulary.feature_keywords)
    return filters


def resolve_category(name: str, categories: Iterable[Category]) -> Optional[Category]:
    """First category whose name contains `name`, case-insensitively."""
    needle = name.lower()
    for category in categories:
        if needle in category.name.lower():
            return category
    return None


def _searchable_fields(tool: ToolRecord, include_name: bool) -> list[str]:
    fields = [tool.description.lower()]
    if include_name:
        fields.insert(0, tool.name.lower())
    if tool.long_description:
        fields.append(tool.long_description.lower())
    return fields


def _tool_mentions(tool: ToolRecord, token: str, include_name: bool) -> bool:
    token = token.lower()
    if any(token in text for text in _searchable_fields(tool, include_name)):
        return True
    return any(token in tag.lower() for tag in tool.tags)


def filter_by_category(
    tools: Sequence[ToolRecord], category: Optional[Category]
) -> list[ToolRecord]:
    if category is None:
        return list(tools)
    return [t for t in tools if t.category_id == category.id]


def filter_by_pricing(tools: Sequence[ToolRecord], pricing: Optional[str]) -> list[ToolRecord]:
    if pricing is None:
        return list(tools)
    wanted = pricing.lower()
    return [t for t in tools if t.pricing_type.lower() == wanted]


def filter_by_features(tools: Sequence[ToolRecord], features: Sequence[str]) -> list[ToolRecord]:
    """Keep tools mentioning any requested feature in description, long description or tags."""
    if not features:
        return list(tools)
    return [
        t for t in tools
        if any(_tool_mentions(t, feature, include_name=False) for feature in features)
    ]


def filter_by_terms(tools: Sequence[ToolRecord], terms: Sequence[str]) -> list[ToolRecord]:
    """Keep tools where any term appears in name, descriptions or tags.

    With no terms nothing matches: a query made only of short words
    returns no candidates.
    """
    return [
        t for t in tools
        if any(_tool_mentions(t, term, include_name=True) for term in terms)
    ]


def narrow_candidates(
    tools: Sequence[ToolRecord],
    categories: Sequence[Category],
    filters: SearchFilters,
    terms: Sequence[str],
) -> list[ToolRecord]:
    """Apply category, pricing, feature and free-text narrowing in order."""
    category = resolve_category(filters.category, categories) if filters.category else None
    candidates = filter_by_category(tools, category)
    candidates = filter_by_pricing(candidates, filters.pricing)
    candidates = filter_by_features(candidates, filters.features)
    return filter_by_terms(candidates, terms)
