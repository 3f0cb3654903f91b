"""Reporter protocol: contract for all reporters."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from filterable.domain.report import FilterReport


class ReporterProtocol(Protocol):
    """Protocol for filter report reporters.

    Output is str, not print(). Caller decides destination.
    """

    def report(self, report: FilterReport) -> str:
        """Format filter report as string.

        Args:
            report: Report to format.

        Returns:
            Formatted string representation.
        """
        ...
