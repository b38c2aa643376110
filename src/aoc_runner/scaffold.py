"""Starter files for a new puzzle.

Both spec cases start parked behind ``@pytest.mark.skip``. Removing the
part-one marker (after filling in the example) lets the runner try the real
input; the part-two marker is removed automatically once part one is
accepted.
"""

import os
from pathlib import Path

from .layout import PuzzleLayout
from .logging_config import get_logger
from .models import PuzzleId

logger = get_logger(__name__)

SOLUTION_TEMPLATE = '''"""{puzzle}."""


def part_one(input_text):
    raise NotImplementedError


def part_two(input_text):
    raise NotImplementedError
'''

SPEC_TEMPLATE = '''import importlib.util
from pathlib import Path

import pytest

SOLUTION_PATH = Path(__file__).parent / "{solution_relpath}"


def _load_solution():
    spec = importlib.util.spec_from_file_location("solution", SOLUTION_PATH)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


solution = _load_solution()

EXAMPLE = """\\
"""


@pytest.mark.skip(reason="example not filled in")
def test_part_one():
    assert solution.part_one(EXAMPLE) == None


@pytest.mark.skip(reason="part two is locked")
def test_part_two():
    assert solution.part_two(EXAMPLE) == None
'''


class Scaffolder:
    def __init__(self, layout: PuzzleLayout):
        self.layout = layout

    def bootstrap(self, puzzle: PuzzleId) -> list[Path]:
        """Write the solution and spec stubs; existing files are left alone."""
        solution = self.layout.solution_path(puzzle)
        spec = self.layout.spec_path(puzzle)
        relpath = Path(os.path.relpath(solution, spec.parent)).as_posix()

        created = []
        for path, content in (
            (solution, SOLUTION_TEMPLATE.format(puzzle=puzzle)),
            (spec, SPEC_TEMPLATE.format(solution_relpath=relpath)),
        ):
            if path.exists():
                logger.info("Keeping existing %s", path)
                continue
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(content, encoding="utf-8")
            created.append(path)
        return created
