"""Capability contracts: Matchable items and FilterKind values.

Matchable is structural (Protocol): any object with a matches() method
qualifies, no inheritance required.

FilterKind is a type-level flag. A filter type declares
is_distinct_filter_type as a class attribute; absent means True.
Enum types must wrap it in enum.nonmember so it does not become a member:

    class Sort(Enum):
        NAME = auto()
        DATE = auto()

    class Tag(Enum):
        is_distinct_filter_type = nonmember(False)
        RED = auto()
        BLUE = auto()
"""

from __future__ import annotations

from typing import ClassVar, Protocol, runtime_checkable


@runtime_checkable
class Matchable[F](Protocol):
    """Item that reports pass/fail for a single filter value.

    matches() must be pure and total: an undefined comparison
    is "does not match", never an exception.
    """

    def matches(self, filter_value: F, /) -> bool:
        """Check whether this item passes the filter value."""
        ...


class FilterKind(Protocol):
    """Filter value type carrying the distinctness flag.

    Distinct: a selection holds at most one value of this type.
    Not distinct: any number of values may be selected together.
    """

    is_distinct_filter_type: ClassVar[bool]


def is_distinct_filter_type(value: object) -> bool:
    """Read the distinctness flag declared by the type of a filter value.

    The flag is always looked up on type(value). A filter value that is
    itself a class is judged by its metaclass, not by its own attributes.

    Args:
        value: Filter value.

    Returns:
        Declared flag, True when the type does not declare one.

    Raises:
        TypeError: If the declared flag is not a bool (e.g. an Enum that
            declared it without nonmember, turning it into a member).
    """
    kind = type(value)
    flag = getattr(kind, "is_distinct_filter_type", True)
    if not isinstance(flag, bool):
        raise TypeError(
            f"{kind.__name__}.is_distinct_filter_type must be bool, got {type(flag).__name__}"
            " (Enum types must declare it with enum.nonmember)"
        )
    return flag
