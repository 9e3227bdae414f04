"""Console reporter: Lineup → rich formatted string."""

from __future__ import annotations

from dataclasses import dataclass
from io import StringIO
from typing import TYPE_CHECKING

from rich.console import Console
from rich.markup import escape
from rich.table import Table

if TYPE_CHECKING:
    from statist.domain.lineup import Lineup


@dataclass(frozen=True, slots=True)
class ConsoleConfig:
    """Configuration for console reporter.

    All fields have defaults. Immutable (frozen dataclass).

    Attributes:
        title: Table title.
        show_index: Show member position column.
        width: Console width in characters (must be > 0).
        force_terminal: Emit ANSI styles even when not writing to a tty.
    """

    title: str = "MUSTER"
    show_index: bool = True
    width: int = 100
    force_terminal: bool = False

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.width <= 0:
            raise ValueError(f"width must be > 0, got {self.width}")


class ConsoleReporter:
    """Console reporter: outputs the lineup as a rich table.

    Output is str, not print(). Caller decides destination.
    Members are rendered in lineup order; a member raising in
    state_string() aborts the report.
    """

    def __init__(self, config: ConsoleConfig | None = None) -> None:
        """Initialize reporter.

        Args:
            config: Reporter configuration. Uses defaults if None.
        """
        self._config = config or ConsoleConfig()

    def report(self, lineup: Lineup) -> str:
        """Format lineup as rich table string.

        Args:
            lineup: Lineup to format.

        Returns:
            Rendered table, or a one-line notice for an empty lineup.
        """
        output = StringIO()
        console = Console(
            file=output,
            force_terminal=self._config.force_terminal,
            width=self._config.width,
        )

        if not lineup:
            console.print(f"[bold]{escape(self._config.title)}[/bold]: no statists enlisted")
            return output.getvalue()

        console.print(self._build_table(lineup))
        return output.getvalue()

    def _build_table(self, lineup: Lineup) -> Table:
        """Build table with one row per member."""
        table = Table(title=escape(self._config.title))
        if self._config.show_index:
            table.add_column("#", justify="right", style="dim")
        table.add_column("Name", style="bold")
        table.add_column("State")

        for i, member in enumerate(lineup):
            row = [member.name(), member.state_string()]
            if self._config.show_index:
                row.insert(0, str(i))
            table.add_row(*(escape(cell) for cell in row))

        return table
