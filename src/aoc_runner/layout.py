"""File layout of a puzzle workspace.

    solutions/2023/day_05.py        solution module (part_one / part_two)
    specs/2023/test_day_05.py       pytest spec file
    inputs/2023/day_05.txt          cached real input
    instructions/2023/day_05.md     cached instructions text
"""

import re
from pathlib import Path, PurePosixPath
from typing import Optional, Union

from .config import Settings
from .models import PuzzleId


class PuzzleLayout:
    """Maps puzzle ids to workspace paths and back."""

    _SOLUTION_NAME_RE = re.compile(r"^day_(\d{2})\.py$")

    def __init__(self, settings: Settings):
        self.root = Path(settings.root)
        self.solutions_dir = settings.solutions_dir
        self.specs_dir = settings.specs_dir
        self.inputs_dir = settings.inputs_dir
        self.instructions_dir = settings.instructions_dir

    @staticmethod
    def _stem(puzzle: PuzzleId) -> str:
        return f"day_{puzzle.day:02d}"

    def solution_path(self, puzzle: PuzzleId) -> Path:
        return self.root / self.solutions_dir / str(puzzle.year) / f"{self._stem(puzzle)}.py"

    def spec_path(self, puzzle: PuzzleId) -> Path:
        return self.root / self.specs_dir / str(puzzle.year) / f"test_{self._stem(puzzle)}.py"

    def input_path(self, puzzle: PuzzleId) -> Path:
        return self.root / self.inputs_dir / str(puzzle.year) / f"{self._stem(puzzle)}.txt"

    def instructions_path(self, puzzle: PuzzleId) -> Path:
        return self.root / self.instructions_dir / str(puzzle.year) / f"{self._stem(puzzle)}.md"

    def puzzle_files(self, puzzle: PuzzleId) -> list[Path]:
        return [
            self.solution_path(puzzle),
            self.spec_path(puzzle),
            self.input_path(puzzle),
            self.instructions_path(puzzle),
        ]

    def year_dir(self, year: Union[int, str]) -> Path:
        return self.root / self.solutions_dir / str(year)

    def solutions_prefix(self, year: Optional[Union[int, str]] = None) -> str:
        """Repository-relative path prefix used to scope version-control queries."""
        if year is None:
            return self.solutions_dir
        return f"{self.solutions_dir}/{year}"

    def parse_solution_path(self, path: Union[str, Path]) -> Optional[tuple[int, int]]:
        """Extract (year, day) from a repository-relative solution path.

        Returns None for anything that is not ``<solutions>/<YYYY>/day_<DD>.py``.
        The values are not range-checked here.
        """
        parts = PurePosixPath(Path(path).as_posix()).parts
        if len(parts) < 3 or parts[-3] != PurePosixPath(self.solutions_dir).name:
            return None
        year_part, name = parts[-2], parts[-1]
        match = self._SOLUTION_NAME_RE.match(name)
        if not match or not re.fullmatch(r"\d{4}", year_part):
            return None
        return int(year_part), int(match.group(1))

    def is_solution_path(self, path: Union[str, Path]) -> bool:
        return self.parse_solution_path(path) is not None
