"""Completion table: which days have a committed solution, per year."""

from dataclasses import dataclass
from datetime import date

from rich.table import Table

from .puzzle_calendar import DAYS_PER_YEAR, available_years, released_days


@dataclass
class YearProgress:
    year: int
    solved: set[int]
    released: int

    @property
    def bar(self) -> str:
        return "".join(
            "*" if day in self.solved else ("." if day <= self.released else " ")
            for day in range(1, DAYS_PER_YEAR + 1)
        )


def collect_progress(committed: dict[int, set[int]], today: date) -> list[YearProgress]:
    return [
        YearProgress(year, committed.get(year, set()), len(released_days(year, today)))
        for year in available_years(today)
    ]


def progress_table(rows: list[YearProgress]) -> Table:
    table = Table(title="Progress", show_lines=False)
    table.add_column("Year", style="bold cyan")
    table.add_column("Days", no_wrap=True)
    table.add_column("Solved", justify="right")
    for row in rows:
        style = "green" if len(row.solved) == DAYS_PER_YEAR else None
        table.add_row(str(row.year), row.bar, f"{len(row.solved)}/{row.released}", style=style)
    return table
