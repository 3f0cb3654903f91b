"""Combinators: AND over filter values, AND over search tokens.

Free generic functions over the Matchable contract. By default the
item's own matches() is used; pass match= to test items that are not
Matchable themselves (see infrastructure.keypaths.by_fields).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from filterable.infrastructure.text import tokenize

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

    from filterable.domain.protocols import Matchable


type MatchFunction[T, F] = Callable[[T, F], bool]


def _own_matches[F](item: Matchable[F], filter_value: F) -> bool:
    return item.matches(filter_value)


def passes_all[T, F](
    item: T,
    filters: Iterable[F],
    *,
    match: MatchFunction[T, F] | None = None,
) -> bool:
    """Check item passes every filter value (AND).

    Args:
        item: Item to test.
        filters: Filter values. Empty = always True.
        match: Match function. None = item.matches.

    Returns:
        True if item matches all filters. Stops at first failure.
    """
    fn = match or _own_matches
    return all(fn(item, f) for f in filters)


def passes_search[T](
    item: T,
    query: str,
    *,
    match: MatchFunction[T, str] | None = None,
) -> bool:
    """Check item passes every whitespace-separated token of query.

    Args:
        item: Item whose filter type is text.
        query: Raw query. Empty or whitespace-only = always True.
        match: Match function. None = item.matches.

    Returns:
        True if item matches all tokens.
    """
    return passes_all(item, tokenize(query), match=match)
