"""Tests for workspace paths, the release calendar and the scaffolder."""

from datetime import date
from pathlib import Path

import pytest

from aoc_runner.config import Settings
from aoc_runner.layout import PuzzleLayout
from aoc_runner.models import PuzzleId
from aoc_runner.puzzle_calendar import available_years, is_released, released_days
from aoc_runner.scaffold import Scaffolder

PUZZLE = PuzzleId(2023, 5)


class TestPuzzleLayout:
    def test_paths(self, layout, tmp_path):
        assert layout.solution_path(PUZZLE) == tmp_path / "solutions/2023/day_05.py"
        assert layout.spec_path(PUZZLE) == tmp_path / "specs/2023/test_day_05.py"
        assert layout.input_path(PUZZLE) == tmp_path / "inputs/2023/day_05.txt"
        assert layout.instructions_path(PUZZLE) == tmp_path / "instructions/2023/day_05.md"
        assert len(layout.puzzle_files(PUZZLE)) == 4

    def test_custom_directories(self, tmp_path):
        layout = PuzzleLayout(Settings(root=tmp_path, solutions_dir="aoc", specs_dir="tests"))
        assert layout.solution_path(PUZZLE) == tmp_path / "aoc/2023/day_05.py"
        assert layout.spec_path(PUZZLE) == tmp_path / "tests/2023/test_day_05.py"
        assert layout.solutions_prefix(2023) == "aoc/2023"
        assert layout.parse_solution_path("aoc/2023/day_05.py") == (2023, 5)
        assert layout.parse_solution_path("solutions/2023/day_05.py") is None

    @pytest.mark.parametrize(
        "path,expected",
        [
            ("solutions/2023/day_05.py", (2023, 5)),
            (Path("solutions/2015/day_25.py"), (2015, 25)),
            ("solutions/2023/day_5.py", None),
            ("solutions/2023/day_05.txt", None),
            ("solutions/23/day_05.py", None),
            ("solutions/2023/helpers/day_05.py", None),
            ("specs/2023/day_05.py", None),
            ("day_05.py", None),
        ],
    )
    def test_parse_solution_path(self, layout, path, expected):
        assert layout.parse_solution_path(path) == expected

    def test_solutions_prefix(self, layout):
        assert layout.solutions_prefix() == "solutions"
        assert layout.solutions_prefix("2019") == "solutions/2019"


class TestCalendar:
    def test_release_boundary(self):
        assert is_released(2024, 10, date(2024, 12, 10))
        assert not is_released(2024, 11, date(2024, 12, 10))

    def test_available_years(self):
        assert list(available_years(date(2024, 11, 30))) == list(range(2015, 2024))
        assert list(available_years(date(2024, 12, 1)))[-1] == 2024

    def test_released_days(self):
        assert len(released_days(2023, date(2024, 3, 1))) == 25
        assert list(released_days(2024, date(2024, 12, 3))) == [1, 2, 3]
        assert len(released_days(2024, date(2024, 12, 31))) == 25
        assert list(released_days(2024, date(2024, 6, 1))) == []

    def test_validated_puzzle_id(self):
        assert PuzzleId.validated("2024", "10", date(2024, 12, 10)) == PuzzleId(2024, 10)
        assert str(PuzzleId(2024, 3)) == "2024 day 03"

    def test_puzzle_ids_are_ordered(self):
        assert sorted([PuzzleId(2023, 2), PuzzleId(2015, 9), PuzzleId(2023, 1)]) == [
            PuzzleId(2015, 9),
            PuzzleId(2023, 1),
            PuzzleId(2023, 2),
        ]


class TestScaffolder:
    def test_creates_stubs(self, layout):
        created = Scaffolder(layout).bootstrap(PUZZLE)
        assert created == [layout.solution_path(PUZZLE), layout.spec_path(PUZZLE)]

        solution = layout.solution_path(PUZZLE).read_text()
        assert "def part_one(input_text):" in solution
        assert "def part_two(input_text):" in solution

        spec = layout.spec_path(PUZZLE).read_text()
        assert '"../../solutions/2023/day_05.py"' in spec
        assert spec.count("@pytest.mark.skip") == 2

    def test_existing_files_are_kept(self, layout):
        path = layout.solution_path(PUZZLE)
        path.parent.mkdir(parents=True)
        path.write_text("ANSWER = 42\n")

        created = Scaffolder(layout).bootstrap(PUZZLE)

        assert created == [layout.spec_path(PUZZLE)]
        assert path.read_text() == "ANSWER = 42\n"

    def test_second_bootstrap_creates_nothing(self, layout):
        scaffolder = Scaffolder(layout)
        scaffolder.bootstrap(PUZZLE)
        assert scaffolder.bootstrap(PUZZLE) == []

    def test_spec_stub_is_valid_python(self, layout):
        Scaffolder(layout).bootstrap(PUZZLE)
        compile(layout.spec_path(PUZZLE).read_text(), "test_day_05.py", "exec")
        compile(layout.solution_path(PUZZLE).read_text(), "day_05.py", "exec")
