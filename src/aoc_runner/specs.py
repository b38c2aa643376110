"""Run a puzzle's pytest specs and classify the outcome.

The engine is treated as a black box: pass/fail comes from the exit
status and the skip count from pytest's verbose output.
"""

import re
import subprocess
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol, Sequence

from .layout import PuzzleLayout
from .logging_config import get_logger
from .models import PuzzleId, SpecOutcome

logger = get_logger(__name__)

# One verbose result line per skipped case, e.g.
#   specs/2023/test_day_05.py::test_part_two SKIPPED (locked)   [ 50%]
SKIPPED_RE = re.compile(r"^\S+::.* SKIPPED\b", re.MULTILINE)

# Decorator that parks a case until its part is unlocked
SKIP_MARKER_RE = re.compile(r"^[ \t]*@pytest\.mark\.skip\b.*\n?", re.MULTILINE)


@dataclass(frozen=True)
class EngineResult:
    passed: bool
    output_text: str


class SpecEngine(Protocol):
    def run(self, spec_paths: Sequence[Path], capture: bool) -> EngineResult: ...


class PytestEngine:
    """Runs pytest in a subprocess so solution imports never leak into this process."""

    def __init__(self, root: Path, python: str = sys.executable):
        self.root = Path(root)
        self.python = python

    def run(self, spec_paths: Sequence[Path], capture: bool) -> EngineResult:
        cmd = [self.python, "-m", "pytest", "-v", *(str(p) for p in spec_paths)]
        logger.debug("Running %s", " ".join(cmd))
        if capture:
            result = subprocess.run(cmd, cwd=self.root, capture_output=True, text=True)
            return EngineResult(result.returncode == 0, result.stdout + result.stderr)
        result = subprocess.run(cmd, cwd=self.root)
        return EngineResult(result.returncode == 0, "")


def count_skipped(output_text: str) -> int:
    return len(SKIPPED_RE.findall(output_text))


class SpecRunner:
    def __init__(self, engine: SpecEngine, layout: PuzzleLayout):
        self.engine = engine
        self.layout = layout

    def run_silent(self, puzzle: PuzzleId) -> SpecOutcome:
        """Run the specs quietly; on failure replay them with full output."""
        spec_paths = [self.layout.spec_path(puzzle)]
        result = self.engine.run(spec_paths, capture=True)
        outcome = SpecOutcome(passed=result.passed, skipped_count=count_skipped(result.output_text))
        logger.debug("Specs for %s: %s", puzzle, outcome)
        if not outcome.passed:
            self.engine.run(spec_paths, capture=False)
        return outcome

    def run_verbose(self, puzzle: PuzzleId) -> bool:
        return self.engine.run([self.layout.spec_path(puzzle)], capture=False).passed

    def unlock_part_two(self, puzzle: PuzzleId) -> int:
        """Activate parked spec cases by deleting their skip decorators.

        Returns the number of cases unlocked.
        """
        path = self.layout.spec_path(puzzle)
        if not path.exists():
            logger.warning("No spec file to unlock at %s", path)
            return 0
        source = path.read_text(encoding="utf-8")
        unlocked, count = SKIP_MARKER_RE.subn("", source)
        if count:
            path.write_text(unlocked, encoding="utf-8")
            logger.info("Unlocked %d spec case(s) in %s", count, path)
        return count
