"""Build FilterReport from a filtering pass."""

from __future__ import annotations

from typing import TYPE_CHECKING

from filterable.application.collection import filter_by_text, filter_by_values
from filterable.domain.report import FilterReport
from filterable.infrastructure.text import tokenize

if TYPE_CHECKING:
    from collections.abc import Collection, Sequence

    from filterable.application.combinators import MatchFunction


def report_text_search[T](
    items: Sequence[T],
    query: str,
    *,
    match: MatchFunction[T, str] | None = None,
) -> FilterReport:
    """Run filter_by_text and describe the outcome.

    Args:
        items: Items to filter.
        query: Raw search query.
        match: Match function. None = item.matches.

    Returns:
        Report with kept items and applied tokens.
    """
    kept = filter_by_text(items, query, match=match)
    return FilterReport(kept=tuple(kept), total=len(items), tokens=tokenize(query), query=query)


def report_value_filter[T, F](
    items: Sequence[T],
    filters: Collection[F],
    *,
    match: MatchFunction[T, F] | None = None,
) -> FilterReport:
    """Run filter_by_values and describe the outcome."""
    kept = filter_by_values(items, filters, match=match)
    return FilterReport(kept=tuple(kept), total=len(items), filters=tuple(filters))
