"""Selection toggle: add/remove/replace selected filter values.

Transition on toggle(value), keyed by (selected, distinct):

    (yes, yes) -> empty
    (yes, no)  -> value removed
    (no,  yes) -> exactly {value}
    (no,  no)  -> value added

Not synchronized. Callers guard concurrent toggles.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from filterable.domain.exceptions import SelectionInvariantError
from filterable.domain.protocols import is_distinct_filter_type

if TYPE_CHECKING:
    from collections.abc import Hashable, Iterable, Iterator

logger = logging.getLogger(__name__)


def toggle[F: Hashable](selection: set[F], value: F) -> None:
    """Toggle value in a caller-owned selection set, in place.

    Args:
        selection: Selected filter values. Mutated.
        value: Filter value to toggle.
    """
    selected = value in selection
    distinct = is_distinct_filter_type(value)

    match (selected, distinct):
        case (True, True):
            selection.clear()
        case (True, False):
            selection.discard(value)
        case (False, True):
            selection.clear()
            selection.add(value)
        case (False, False):
            selection.add(value)

    logger.debug(
        "toggle %r (selected=%s, distinct=%s) -> %d selected",
        value,
        selected,
        distinct,
        len(selection),
    )


class Selection[F: Hashable]:
    """Selected filter values, changed only through toggle().

    For distinct filter types holds at most one value at all times.

    Example:
        selection = Selection[Tag]()
        selection.toggle(Tag.RED)
        filter_by_values(items, selection)
    """

    __slots__ = ("_values",)

    def __init__(self, values: Iterable[F] = ()) -> None:
        """Initialize selection.

        Args:
            values: Initially selected values.

        Raises:
            SelectionInvariantError: If more than one value of a distinct type given.
        """
        initial = set(values)
        if len(initial) > 1 and any(is_distinct_filter_type(v) for v in initial):
            raise SelectionInvariantError(initial)
        self._values: set[F] = initial

    def toggle(self, value: F) -> None:
        """Toggle value. See module docstring for transitions."""
        toggle(self._values, value)

    def clear(self) -> None:
        """Deselect everything."""
        self._values.clear()

    @property
    def values(self) -> frozenset[F]:
        """Snapshot of selected values."""
        return frozenset(self._values)

    def __contains__(self, value: object) -> bool:
        return value in self._values

    def __iter__(self) -> Iterator[F]:
        return iter(tuple(self._values))

    def __len__(self) -> int:
        return len(self._values)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Selection):
            return self._values == other._values
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Selection({', '.join(sorted(map(repr, self._values)))})"
