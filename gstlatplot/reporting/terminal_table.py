"""Terminal statistics table using rich output."""

from typing import Optional, Sequence

from rich.console import Console
from rich.table import Table

from ..core.stats import STATS_COLUMNS, StatsRow


class StatsTableReporter:
    """Render per-series latency statistics as a terminal table."""

    def __init__(self, console: Optional[Console] = None, precision: int = 4):
        self.console = console or Console()
        self.precision = precision

    def build(self, rows: Sequence[StatsRow], title: str = "Latency statistics [ms]") -> Table:
        table = Table(title=title)
        for column in STATS_COLUMNS[:-1]:
            table.add_column(column, justify="right")
        table.add_column(STATS_COLUMNS[-1], style="bold")

        for row in rows:
            style = "bold red" if row.is_total else None
            table.add_row(
                self._fmt(row.median),
                self._fmt(row.mean),
                self._fmt(row.stdev),
                self._fmt(row.variance),
                row.label,
                style=style,
            )
        return table

    def render(self, rows: Sequence[StatsRow]) -> None:
        """Print the statistics table."""
        self.console.print(self.build(rows))

    def _fmt(self, value: float) -> str:
        return f"{value:.{self.precision}f}"
