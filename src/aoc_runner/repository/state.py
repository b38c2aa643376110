"""Read-only queries over the puzzle workspace's version control."""

from collections import defaultdict
from pathlib import Path
from typing import Optional, Union

from ..layout import PuzzleLayout
from ..logging_config import get_logger
from ..models import RepositorySnapshot
from .protocols import VersionControl

logger = get_logger(__name__)

YearFilter = Optional[Union[int, str]]


class RepositoryState:
    """Solution-file view of the repository.

    Every call re-queries the backend; nothing is cached because a human
    may commit or edit between two steps of the same command.
    """

    def __init__(self, backend: VersionControl, layout: PuzzleLayout):
        self.backend = backend
        self.layout = layout

    def untracked_solutions(self, year_filter: YearFilter = None) -> list[Path]:
        paths = self.backend.list_untracked(self.layout.solutions_prefix(year_filter))
        solutions = [p for p in paths if self.layout.is_solution_path(p)]
        logger.debug("Untracked solutions (year=%s): %s", year_filter, solutions)
        return solutions

    def last_committed_solution(self, year_filter: YearFilter = None) -> Optional[Path]:
        path = self.backend.most_recent_added(
            self.layout.solutions_prefix(year_filter), accept=self.layout.is_solution_path
        )
        logger.debug("Last committed solution (year=%s): %s", year_filter, path)
        return path

    def has_pending_changes(self) -> bool:
        return self.backend.has_pending_changes()

    def committed_days(self, year: Union[int, str]) -> set[int]:
        days = set()
        for path in self.backend.list_committed(self.layout.solutions_prefix(year)):
            parsed = self.layout.parse_solution_path(path)
            if parsed and parsed[0] == int(year):
                days.add(parsed[1])
        return days

    def committed_days_by_year(self) -> dict[int, set[int]]:
        by_year: dict[int, set[int]] = defaultdict(set)
        for path in self.backend.list_committed(self.layout.solutions_prefix()):
            parsed = self.layout.parse_solution_path(path)
            if parsed:
                by_year[parsed[0]].add(parsed[1])
        return dict(by_year)

    def snapshot(self, year_filter: YearFilter = None) -> RepositorySnapshot:
        return RepositorySnapshot(
            untracked_solution_paths=tuple(self.untracked_solutions(year_filter)),
            last_committed_solution_path=self.last_committed_solution(year_filter),
            has_pending_modifications=self.has_pending_changes(),
        )
