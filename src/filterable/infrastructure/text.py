"""Text helpers: query tokenization and insensitive containment.

Folding uses casefold() and NFKD decomposition with combining marks
removed, so "José" and "JOSE" both fold to "jose".
"""

from __future__ import annotations

import unicodedata

from filterable.domain.config import DEFAULT_SEARCH_CONFIG, SearchConfig


def tokenize(query: str) -> tuple[str, ...]:
    """Split query into non-empty whitespace-delimited tokens.

    Leading, trailing and repeated whitespace produce no tokens.
    Duplicates are kept in order.

    Args:
        query: Raw user input.

    Returns:
        Tokens in query order. Empty tuple = no filter.
    """
    return tuple(query.split())


def fold(text: str, config: SearchConfig = DEFAULT_SEARCH_CONFIG) -> str:
    """Normalize text for comparison according to config.

    Args:
        text: Text to normalize.
        config: Which differences to ignore.

    Returns:
        Folded text.
    """
    if config.ignore_diacritics:
        decomposed = unicodedata.normalize("NFKD", text)
        text = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    if config.ignore_case:
        text = text.casefold()
    return unicodedata.normalize("NFC", text)


def contains(haystack: str, needle: str, config: SearchConfig = DEFAULT_SEARCH_CONFIG) -> bool:
    """Check substring containment ignoring case/diacritics per config.

    Args:
        haystack: Text searched in.
        needle: Text searched for.
        config: Which differences to ignore.

    Returns:
        True if folded needle occurs in folded haystack.
    """
    return fold(needle, config) in fold(haystack, config)
