"""Search configuration.

Immutable, validated on construction.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SearchConfig:
    """How text fields are compared against search tokens.

    Defaults give case- and diacritic-insensitive containment,
    so "jose" finds "José".

    Attributes:
        ignore_case: Compare casefolded text.
        ignore_diacritics: Strip combining marks before comparing.
    """

    ignore_case: bool = True
    ignore_diacritics: bool = True

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not isinstance(self.ignore_case, bool):
            raise TypeError(f"ignore_case must be bool, got {type(self.ignore_case).__name__}")
        if not isinstance(self.ignore_diacritics, bool):
            raise TypeError(
                f"ignore_diacritics must be bool, got {type(self.ignore_diacritics).__name__}"
            )


DEFAULT_SEARCH_CONFIG = SearchConfig()
