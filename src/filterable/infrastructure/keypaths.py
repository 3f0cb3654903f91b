"""Matching items by text extracted from their fields.

An item passes a token when at least one extracted field contains it
(OR over fields). Combined with passes_search() this gives
"every token is found in some field".

Fields are accessors: a callable item -> str | None, or a dotted
attribute path ("owner.name"). A path yields None when any hop is None.
Field values that are None or not str never match.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import ClassVar

from filterable.domain.config import DEFAULT_SEARCH_CONFIG, SearchConfig
from filterable.infrastructure.text import contains

type FieldAccessor[T] = Callable[[T], str | None]
type FieldSpec[T] = FieldAccessor[T] | str


def resolve_accessor[T](spec: FieldSpec[T]) -> FieldAccessor[T]:
    """Turn a field spec into a callable accessor.

    Args:
        spec: Callable accessor or dotted attribute path.

    Returns:
        Callable accessor.

    Raises:
        ValueError: If path string is empty.
        TypeError: If spec is neither str nor callable.
    """
    if isinstance(spec, str):
        if not spec:
            raise ValueError("field path must not be empty")
        return _attribute_path(spec)
    if not callable(spec):
        raise TypeError(f"field must be callable or attribute path, got {type(spec).__name__}")
    return spec


def _attribute_path(path: str) -> FieldAccessor:
    """Accessor following a dotted attribute path.

    A None at any hop yields None. Missing attributes raise AttributeError.
    """
    names = tuple(path.split("."))
    if not all(names):
        raise ValueError(f"invalid field path '{path}'")

    def _accessor(item: object) -> object:
        value = item
        for name in names:
            if value is None:
                return None
            value = getattr(value, name)
        return value

    return _accessor


def any_field_contains[T](
    item: T,
    accessors: Sequence[FieldAccessor[T]],
    token: str,
    config: SearchConfig = DEFAULT_SEARCH_CONFIG,
) -> bool:
    """Check whether any extracted field of item contains token.

    Args:
        item: Item to inspect.
        accessors: Field accessors.
        token: Search token.
        config: Comparison options.

    Returns:
        True if at least one str field contains token. Fields that are
        None or not str are skipped.
        No accessors = always False.
    """
    for accessor in accessors:
        text = accessor(item)
        if isinstance(text, str) and contains(text, token, config):
            return True
    return False


class FilterableByKeypaths:
    """Mixin: text Matchable backed by a list of searchable fields.

    Subclasses set search_fields (and optionally search_config):

        @dataclass(frozen=True)
        class Person(FilterableByKeypaths):
            search_fields = ("name", "city")
            name: str
            city: str | None = None

    Accessors are resolved when the subclass is defined (invalid fields
    raise there) and again if search_fields is reassigned later.
    """

    search_fields: ClassVar[Sequence[FieldSpec]] = ()
    search_config: ClassVar[SearchConfig] = DEFAULT_SEARCH_CONFIG

    # (search_fields the accessors were built from, accessors)
    _resolved_fields: ClassVar[tuple[Sequence[FieldSpec], tuple[FieldAccessor, ...]]] = ((), ())

    __slots__ = ()

    def __init_subclass__(cls, **kwargs: object) -> None:
        super().__init_subclass__(**kwargs)
        cls._resolve_search_fields()

    @classmethod
    def _resolve_search_fields(cls) -> tuple[FieldAccessor, ...]:
        fields = cls.search_fields
        accessors = tuple(resolve_accessor(spec) for spec in fields)
        cls._resolved_fields = (fields, accessors)
        return accessors

    @classmethod
    def _search_accessors(cls) -> tuple[FieldAccessor, ...]:
        fields, accessors = cls._resolved_fields
        if fields is not cls.search_fields:
            return cls._resolve_search_fields()
        return accessors

    def matches(self, filter_value: str, /) -> bool:
        """Check whether any search field contains filter_value."""
        cls = type(self)
        return any_field_contains(self, cls._search_accessors(), filter_value, cls.search_config)


class FieldMatcher[T]:
    """Adapter: makes any item a text Matchable over given fields.

    For items whose class cannot inherit FilterableByKeypaths.

    Attributes:
        item: Wrapped item.
    """

    __slots__ = ("_accessors", "_config", "item")

    def __init__(
        self,
        item: T,
        fields: Sequence[FieldSpec[T]],
        config: SearchConfig = DEFAULT_SEARCH_CONFIG,
    ) -> None:
        """Initialize matcher.

        Args:
            item: Item to wrap.
            fields: Accessors or attribute paths.
            config: Comparison options.
        """
        self.item = item
        self._accessors = tuple(resolve_accessor(spec) for spec in fields)
        self._config = config

    def matches(self, filter_value: str, /) -> bool:
        """Check whether any field of the wrapped item contains filter_value."""
        return any_field_contains(self.item, self._accessors, filter_value, self._config)

    def __repr__(self) -> str:
        return f"FieldMatcher({self.item!r})"


def by_fields[T](
    *fields: FieldSpec[T],
    config: SearchConfig = DEFAULT_SEARCH_CONFIG,
) -> Callable[[T, str], bool]:
    """Create match function: item passes token if any field contains it.

    Args:
        *fields: Accessors or attribute paths.
        config: Comparison options.

    Returns:
        Function (item, token) -> bool usable as a matcher.
    """
    accessors = tuple(resolve_accessor(spec) for spec in fields)

    def _matches(item: T, token: str) -> bool:
        return any_field_contains(item, accessors, token, config)

    return _matches
