"""Domain exceptions: all public errors of filterable.

Matching and filtering never raise. Errors only come from
constructing value objects with invalid input (FAIL-FIRST).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Collection


class FilterableError(Exception):
    """Base for all filterable exceptions.

    Allows: except FilterableError to catch all library errors.
    """


class SelectionInvariantError(FilterableError, ValueError):
    """Distinct filter type given more than one selected value.

    Inherits ValueError for semantic correctness (invalid value set).

    Attributes:
        values: The offending values.
    """

    def __init__(self, values: Collection[object]) -> None:
        """Initialize with the values that violate the invariant."""
        if len(values) < 2:
            raise ValueError("SelectionInvariantError requires at least two values")

        self.values = tuple(values)
        type_name = type(self.values[0]).__name__
        super().__init__(
            f"Distinct filter type {type_name} allows one selected value, got {len(self.values)}"
        )
