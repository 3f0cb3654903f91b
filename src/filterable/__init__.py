"""filterable - composable declarative filtering over collections."""

__version__ = "0.1.0"

from filterable.application.collection import filter_by_text, filter_by_values
from filterable.application.combinators import passes_all, passes_search
from filterable.application.reporters import ConsoleConfig, ConsoleReporter
from filterable.application.reporting import report_text_search, report_value_filter
from filterable.application.selection import Selection, toggle
from filterable.domain.config import SearchConfig
from filterable.domain.exceptions import FilterableError, SelectionInvariantError
from filterable.domain.protocols import FilterKind, Matchable, is_distinct_filter_type
from filterable.domain.report import FilterReport
from filterable.infrastructure.keypaths import FieldMatcher, FilterableByKeypaths, by_fields
from filterable.infrastructure.text import tokenize

__all__ = [
    "ConsoleConfig",
    "ConsoleReporter",
    "FieldMatcher",
    "FilterKind",
    "FilterReport",
    "FilterableByKeypaths",
    "FilterableError",
    "Matchable",
    "SearchConfig",
    "Selection",
    "SelectionInvariantError",
    "__version__",
    "by_fields",
    "filter_by_text",
    "filter_by_values",
    "is_distinct_filter_type",
    "passes_all",
    "passes_search",
    "report_text_search",
    "report_value_filter",
    "tokenize",
    "toggle",
]
