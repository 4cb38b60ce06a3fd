"""Narrative summaries for search results."""

from __future__ import annotations

from dataclasses import dataclass

from .models import Intent, SearchFilters

ERROR_MESSAGE = "I encountered an error while searching. Please try again."


@dataclass(frozen=True)
class ResponseContext:
    """What the narrative step knows beyond the results themselves."""
    query: str
    intent: Intent
    filters: SearchFilters
    recommend_cap: int = 5


def no_results_message(query: str) -> str:
    return (
        f'I couldn\'t find any tools matching "{query}". '
        "Try adjusting your search or browse our categories to discover tools."
    )


def _plural(count: int) -> str:
    return "" if count == 1 else "s"


def _lead_sentence(context: ResponseContext, count: int) -> str:
    if context.intent is Intent.RECOMMEND:
        return (
            f"Based on your search, here are the top "
            f"{min(count, context.recommend_cap)} recommended tools."
        )
    if context.intent is Intent.PRICING:
        noun = context.filters.pricing or "tool"
        return f"I found {count} {noun}{_plural(count)} matching your criteria."
    if context.intent is Intent.COMPARE:
        return (
            "Here are tools related to your comparison query. "
            "You can select multiple to compare them side-by-side."
        )
    return f"I found {count} relevant tool{_plural(count)} for you."


def generate_response(context: ResponseContext, match_count: int) -> str:
    """Build the narrative for `match_count` matches (counted before truncation)."""
    if match_count == 0:
        return no_results_message(context.query)

    parts = [_lead_sentence(context, match_count)]
    if context.filters.category:
        parts.append(f"Showing {context.filters.category} tools.")
    if context.filters.pricing:
        parts.append(f"Filtered by {context.filters.pricing} pricing.")
    return " ".join(parts)
