"""
Keyword matching utilities for intent detection and filter extraction.

All matching is plain case-insensitive substring containment, so "vs"
matches inside longer words and "free" matches inside "freemium".
"""

from typing import Iterable, List, Optional


def match_keywords(text: str, keywords: Iterable[str]) -> bool:
    """
    Check if any keyword appears in text (case-insensitive).

    Args:
        text: Text to search
        keywords: Keywords to look for

    Returns:
        True if any keyword matches, False otherwise
    """
    text_lower = text.lower()

    for keyword in keywords:
        if keyword.lower() in text_lower:
            return True

    return False


def first_match(text: str, keywords: Iterable[str]) -> Optional[str]:
    """
    Return the first keyword (in the given order) contained in text.

    Args:
        text: Text to search
        keywords: Ordered keywords; earlier entries take precedence

    Returns:
        The matching keyword as given, or None
    """
    text_lower = text.lower()

    for keyword in keywords:
        if keyword.lower() in text_lower:
            return keyword

    return None


def all_matches(text: str, keywords: Iterable[str]) -> List[str]:
    """Return every keyword contained in text, in keyword order."""
    text_lower = text.lower()
    return [keyword for keyword in keywords if keyword.lower() in text_lower]
