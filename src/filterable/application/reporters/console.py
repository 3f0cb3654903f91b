"""Console reporter: FilterReport -> rich formatted string."""

from __future__ import annotations

from dataclasses import dataclass
from io import StringIO
from typing import TYPE_CHECKING

from rich.console import Console
from rich.markup import escape
from rich.table import Table

if TYPE_CHECKING:
    from filterable.domain.report import FilterReport


@dataclass(frozen=True, slots=True)
class ConsoleConfig:
    """Configuration for console reporter.

    Attributes:
        max_items: Max kept items to list. None = unlimited.
        width: Console width in characters.
        title: Header rule text.
    """

    max_items: int | None = None
    width: int = 120
    title: str = "FILTER RESULT"

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.max_items is not None and self.max_items < 0:
            raise ValueError(f"max_items must be >= 0, got {self.max_items}")
        if self.width < 20:
            raise ValueError(f"width must be >= 20, got {self.width}")
        if not self.title:
            raise ValueError("title must not be empty")


class ConsoleReporter:
    """Console reporter: outputs rich formatted text.

    Output is str, not print(). Caller decides destination.
    """

    def __init__(self, config: ConsoleConfig | None = None) -> None:
        """Initialize reporter.

        Args:
            config: Reporter configuration. Uses defaults if None.
        """
        self._config = config or ConsoleConfig()

    def report(self, report: FilterReport) -> str:
        """Format filter report as rich formatted string.

        Args:
            report: Report to format.

        Returns:
            Formatted string with header, criteria and kept items table.
        """
        output = StringIO()
        console = Console(
            file=output,
            force_terminal=True,
            width=self._config.width,
            highlight=False,
        )

        self._render_header(console, report)
        self._render_criteria(console, report)
        self._render_items(console, report)

        return output.getvalue()

    def _render_header(self, console: Console, report: FilterReport) -> None:
        console.print()
        console.rule(f"[bold]{escape(self._config.title)}[/bold]")
        console.print()
        console.print(
            f"[bold]Kept:[/bold] {len(report.kept)} of {report.total} "
            f"([dim]rejected {report.rejected}[/dim])"
        )
        console.print()

    def _render_criteria(self, console: Console, report: FilterReport) -> None:
        if report.is_unfiltered:
            console.print("[dim]No filter applied[/dim]")
            console.print()
            return

        if report.tokens:
            tokens = ", ".join(escape(repr(t)) for t in report.tokens)
            console.print(f"[bold]Tokens:[/bold] {tokens}")
        if report.filters:
            filters = ", ".join(escape(str(f)) for f in report.filters)
            console.print(f"[bold]Filters:[/bold] {filters}")
        console.print()

    def _render_items(self, console: Console, report: FilterReport) -> None:
        if not report.kept:
            console.print("[yellow]No items matched[/yellow]")
            return

        limit = self._config.max_items
        shown = report.kept if limit is None else report.kept[:limit]

        table = Table(show_header=True, header_style="bold")
        table.add_column("#", justify="right")
        table.add_column("Item")
        for index, item in enumerate(shown, start=1):
            table.add_row(str(index), escape(repr(item)))
        console.print(table)

        hidden = len(report.kept) - len(shown)
        if hidden:
            console.print(f"[dim]... {hidden} more[/dim]")
