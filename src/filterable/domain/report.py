"""Filter report: outcome of one filtering pass over a collection."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class FilterReport:
    """Outcome of filtering a collection.

    Invariants:
        - total >= 0
        - len(kept) <= total

    Attributes:
        kept: Items that passed, in input order.
        total: Number of items inspected.
        tokens: Search tokens applied (text search), else empty.
        filters: Filter values applied (value filter), else empty.
        query: Raw query (text search), else None.
    """

    kept: tuple[object, ...]
    total: int
    tokens: tuple[str, ...] = ()
    filters: tuple[object, ...] = ()
    query: str | None = None

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.total < 0:
            raise ValueError(f"total must be >= 0, got {self.total}")
        if len(self.kept) > self.total:
            raise ValueError(f"kept ({len(self.kept)}) exceeds total ({self.total})")

    @property
    def rejected(self) -> int:
        """Number of items filtered out."""
        return self.total - len(self.kept)

    @property
    def is_unfiltered(self) -> bool:
        """True when no token or filter value was applied."""
        return not self.tokens and not self.filters
