"""Ordered first-match intent classification."""

from __future__ import annotations

from src.toolscout.utils.keyword_matcher import match_keywords

from .models import Intent
from .vocabulary import DEFAULT_VOCABULARY, Vocabulary


def detect_intent(query: str, vocabulary: Vocabulary = DEFAULT_VOCABULARY) -> Intent:
    """Classify a query by the first rule whose keywords it contains.

    Rules are evaluated in vocabulary order; a query with "best free" is a
    recommendation, not a pricing question. Falls back to Intent.GENERAL.
    """
    for rule in vocabulary.intent_rules:
        if match_keywords(query, rule.keywords):
            return rule.intent
    return Intent.GENERAL
