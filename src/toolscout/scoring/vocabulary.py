"""Keyword tables for intent detection and filter extraction."""

from __future__ import annotations

from pydantic import BaseModel, Field

from .models import Intent, PricingTier


class IntentRule(BaseModel):
    intent: Intent
    keywords: list[str] = Field(default_factory=list)


class PricingKeyword(BaseModel):
    keyword: str
    tier: PricingTier


def _default_intent_rules() -> list[IntentRule]:
    return [
        IntentRule(intent=Intent.SEARCH, keywords=["show me", "find", "looking for"]),
        IntentRule(intent=Intent.COMPARE, keywords=["compare", "difference", "vs"]),
        IntentRule(intent=Intent.RECOMMEND, keywords=["best", "top", "recommend"]),
        IntentRule(intent=Intent.QUESTION, keywords=["how", "what", "why"]),
        IntentRule(intent=Intent.PRICING, keywords=["free", "price", "cost"]),
    ]


def _default_pricing_keywords() -> list[PricingKeyword]:
    # "free" is checked first, so "freemium" never reaches its own entry
    return [
        PricingKeyword(keyword="free", tier=PricingTier.FREE),
        PricingKeyword(keyword="paid", tier=PricingTier.PAID),
        PricingKeyword(keyword="freemium", tier=PricingTier.FREEMIUM),
    ]


DEFAULT_CATEGORIES = [
    "writing", "image", "video", "audio", "code", "chat", "productivity",
    "research", "design", "marketing", "data", "business",
]

DEFAULT_FEATURE_KEYWORDS = ["api", "automation", "analytics", "collaboration", "integration"]


class Vocabulary(BaseModel):
    """Ordered keyword tables.

    Order is significant everywhere except feature_keywords: the first match wins.
    """
    intent_rules: list[IntentRule] = Field(default_factory=_default_intent_rules)
    pricing_keywords: list[PricingKeyword] = Field(default_factory=_default_pricing_keywords)
    categories: list[str] = Field(default_factory=lambda: list(DEFAULT_CATEGORIES))
    feature_keywords: list[str] = Field(default_factory=lambda: list(DEFAULT_FEATURE_KEYWORDS))


DEFAULT_VOCABULARY = Vocabulary()
