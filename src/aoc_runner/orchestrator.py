"""Decide which part(s) of a puzzle to run against the real input."""

import importlib.util
from pathlib import Path
from types import ModuleType
from typing import Any, Callable, Optional, Protocol

from .logging_config import get_logger
from .models import AnswerState, PuzzleId, RunAnswers, RunFlags
from .specs import SpecRunner

logger = get_logger(__name__)

InputProvider = Callable[[PuzzleId], str]


class Solution(Protocol):
    def part_one(self, input_text: str) -> Any: ...

    def part_two(self, input_text: str) -> Any: ...


def load_solution(path: Path, puzzle: PuzzleId) -> ModuleType:
    """Import a solution module straight from its file."""
    module_name = f"aoc_solution_{puzzle.year}_{puzzle.day:02d}"
    spec = importlib.util.spec_from_file_location(module_name, path)
    if spec is None or spec.loader is None:
        raise ImportError(f"Cannot load solution from {path}")
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


class SolutionFile:
    """A solution module that is only imported when a part is actually run."""

    def __init__(self, path: Path, puzzle: PuzzleId):
        self.path = path
        self.puzzle = puzzle
        self._module: Optional[ModuleType] = None

    def _load(self) -> ModuleType:
        if self._module is None:
            self._module = load_solution(self.path, self.puzzle)
        return self._module

    def part_one(self, input_text: str) -> Any:
        return self._load().part_one(input_text)

    def part_two(self, input_text: str) -> Any:
        return self._load().part_two(input_text)


def should_run_part_one(flags: RunFlags, answers: AnswerState, skipped_count: int) -> bool:
    if flags.force_part_one:
        return True
    if flags.force_part_two:
        return False
    # Once both parts are solved part one is still re-derived for display
    return (not answers.known(1) and skipped_count <= 1) or answers.known(2)


def should_run_part_two(flags: RunFlags, answers: AnswerState, skipped_count: int) -> bool:
    if flags.force_part_two:
        return True
    if flags.force_part_one:
        return False
    return (answers.known(1) and not answers.known(2) and skipped_count == 0) or answers.known(2)


def _as_answer(value: Any) -> Optional[str]:
    if value is None:
        return None
    # A blank result is never worth submitting
    return str(value).strip() or None


class RunOrchestrator:
    """Gate real-input runs on passing specs, then run the eligible parts."""

    def __init__(self, spec_runner: SpecRunner, input_provider: InputProvider):
        self.spec_runner = spec_runner
        self.input_provider = input_provider

    def orchestrate(
        self,
        puzzle: PuzzleId,
        flags: RunFlags,
        answer_state: AnswerState,
        solution: Solution,
    ) -> RunAnswers:
        if flags.spec_only:
            self.spec_runner.run_verbose(puzzle)
            return RunAnswers()

        outcome = self.spec_runner.run_silent(puzzle)
        if not outcome.passed:
            logger.info("Specs failed for %s; not running real input", puzzle)
            return RunAnswers()

        run_one = should_run_part_one(flags, answer_state, outcome.skipped_count)
        run_two = should_run_part_two(flags, answer_state, outcome.skipped_count)
        logger.debug(
            "Eligibility for %s: part one=%s part two=%s (skipped=%d, known=%s)",
            puzzle,
            run_one,
            run_two,
            outcome.skipped_count,
            answer_state,
        )
        if not (run_one or run_two):
            return RunAnswers()

        input_text = self.input_provider(puzzle)
        answer_one = _as_answer(solution.part_one(input_text)) if run_one else None
        answer_two = _as_answer(solution.part_two(input_text)) if run_two else None
        return RunAnswers(answer_one=answer_one, answer_two=answer_two)
