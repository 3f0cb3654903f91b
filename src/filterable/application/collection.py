"""Collection filters: apply combinators across a sequence.

Results keep the original relative order. Input is never mutated;
every call returns a new list.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from filterable.application.combinators import passes_all
from filterable.infrastructure.text import tokenize

if TYPE_CHECKING:
    from collections.abc import Collection, Iterable

    from filterable.application.combinators import MatchFunction

logger = logging.getLogger(__name__)


def filter_by_text[T](
    items: Iterable[T],
    query: str,
    *,
    match: MatchFunction[T, str] | None = None,
) -> list[T]:
    """Keep items that match every token of query.

    Args:
        items: Items to filter.
        query: Raw search query.
        match: Match function. None = item.matches.

    Returns:
        Matching items in input order. All items if query has no tokens.
    """
    tokens = tokenize(query)
    if not tokens:
        return list(items)

    kept = [item for item in items if passes_all(item, tokens, match=match)]
    logger.debug("text filter %r kept %d item(s)", tokens, len(kept))
    return kept


def filter_by_values[T, F](
    items: Iterable[T],
    filters: Collection[F],
    *,
    match: MatchFunction[T, F] | None = None,
) -> list[T]:
    """Keep items that match every filter value.

    Args:
        items: Items to filter.
        filters: Filter values, e.g. a Selection or a set.
        match: Match function. None = item.matches.

    Returns:
        Matching items in input order. All items if filters is empty.
    """
    if not filters:
        return list(items)

    snapshot = tuple(filters)
    kept = [item for item in items if passes_all(item, snapshot, match=match)]
    logger.debug("value filter %r kept %d item(s)", snapshot, len(kept))
    return kept
