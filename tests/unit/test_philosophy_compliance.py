"""Philosophy compliance tests.

Tests verifying library-wide rules:
- FAIL-FIRST validation of value objects
- Immutability of configs and reports
- Totality: core operations never raise on edge inputs
- Public API surface
"""

from __future__ import annotations

import dataclasses

import pytest

import filterable
from filterable import (
    ConsoleConfig,
    FilterReport,
    SearchConfig,
    Selection,
    SelectionInvariantError,
    filter_by_text,
    filter_by_values,
    passes_all,
    passes_search,
    toggle,
)
from tests.factories import Category, Nameless, Person, Tag, make_product

# =============================================================================
# FAIL-FIRST Validation
# =============================================================================


class TestFailFirstValidation:
    """Invalid construction raises immediately, never falls back."""

    def test_search_config_type(self) -> None:
        """SearchConfig rejects non-bool flags."""
        with pytest.raises(TypeError):
            SearchConfig(ignore_case="yes")  # type: ignore[arg-type]

    def test_console_config_range(self) -> None:
        """ConsoleConfig rejects out-of-range values."""
        with pytest.raises(ValueError):
            ConsoleConfig(max_items=-5)

    def test_report_invariant(self) -> None:
        """FilterReport rejects inconsistent counts."""
        with pytest.raises(ValueError):
            FilterReport(kept=(1, 2, 3), total=2)

    def test_selection_invariant(self) -> None:
        """Selection rejects multiple distinct values."""
        with pytest.raises(SelectionInvariantError):
            Selection([Category.BOOKS, Category.GAMES])


# =============================================================================
# Immutability
# =============================================================================


class TestImmutability:
    """Value objects are frozen."""

    @pytest.mark.parametrize(
        ("obj", "attr"),
        [
            (SearchConfig(), "ignore_case"),
            (ConsoleConfig(), "width"),
            (FilterReport(kept=(), total=0), "total"),
        ],
    )
    def test_frozen(self, obj: object, attr: str) -> None:
        """Assignment raises FrozenInstanceError."""
        with pytest.raises(dataclasses.FrozenInstanceError):
            setattr(obj, attr, None)


# =============================================================================
# Totality
# =============================================================================


class TestTotality:
    """Core operations have defined results for all edge inputs."""

    def test_empty_inputs(self) -> None:
        """Empty collections and queries are handled."""
        assert passes_all(make_product(), ()) is True
        assert passes_search(Person(name="Ann"), "") is True
        assert filter_by_text([], "abc") == []
        assert filter_by_values([], [Tag.SALE]) == []

    def test_unknown_filter_value(self) -> None:
        """Filter values the item does not know do not match."""
        assert passes_all(make_product(), ["not-a-filter"]) is False

    def test_zero_field_item(self) -> None:
        """Item without search fields fails tokens but passes blank query."""
        assert filter_by_text([Nameless(name="x")], "x") == []
        assert filter_by_text([Nameless(name="x")], "") == [Nameless(name="x")]

    def test_toggle_total(self) -> None:
        """toggle accepts any (set, value) pair."""
        selection: set[object] = {Tag.SALE, Category.BOOKS}
        toggle(selection, Tag.NEW)
        assert Tag.NEW in selection
        toggle(selection, Category.MUSIC)
        assert selection == {Category.MUSIC}


# =============================================================================
# Public API
# =============================================================================


class TestPublicApi:
    """Everything in __all__ is importable from the package root."""

    def test_all_exported(self) -> None:
        """__all__ names resolve."""
        for name in filterable.__all__:
            assert hasattr(filterable, name), name

    def test_version(self) -> None:
        """Version is a string."""
        assert isinstance(filterable.__version__, str)
