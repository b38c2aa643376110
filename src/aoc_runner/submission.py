"""Submit answers to the grading service and act on its verdict."""

from typing import Callable, Protocol

import typer
from rich.console import Console
from rich.markdown import Markdown

from .logging_config import get_logger
from .models import (
    AnswerState,
    Classification,
    PuzzleId,
    Skipped,
    SubmissionOutcome,
    SubmissionResult,
)
from .service import PuzzleFetcher
from .specs import SpecRunner

logger = get_logger(__name__)

CORRECT_PREFIX = "That's the right answer!"

# Checked in order against the trimmed message
_CLASSIFIERS = [
    ("That's not the right answer", Classification.INCORRECT),
    ("You gave an answer too recently", Classification.TOO_RECENT),
    ("Did you already complete it", Classification.ALREADY_SOLVED),
    ("You don't seem to be solving the right level", Classification.ALREADY_SOLVED),
]

_STYLES = {
    Classification.CORRECT: "green",
    Classification.INCORRECT: "red",
    Classification.TOO_RECENT: "red",
    Classification.ALREADY_SOLVED: "yellow",
    Classification.OTHER: "yellow",
}

PART_TWO_HEADING = "--- Part Two ---"


class GradingService(Protocol):
    def submit(self, year: int, day: int, part: int, answer: str) -> str: ...


Confirm = Callable[[str], bool]


def _console_confirm(message: str) -> bool:
    return typer.confirm(message, default=True)


def trim_message(response_text: str) -> str:
    """Keep the first paragraph of a reply, minus its trailing navigation link."""
    message = response_text.strip().split("\n\n", 1)[0]
    return message.split("[[", 1)[0].strip()


def classify(response_text: str) -> SubmissionResult:
    message = trim_message(response_text)
    if message.startswith(CORRECT_PREFIX):
        return SubmissionResult(message, Classification.CORRECT)
    for phrase, classification in _CLASSIFIERS:
        if phrase in message:
            return SubmissionResult(message, classification)
    logger.warning("Unrecognised submit message %r", message)
    return SubmissionResult(message, Classification.OTHER)


def part_two_text(instructions_text: str) -> str:
    _, heading, rest = instructions_text.partition(PART_TWO_HEADING)
    return heading + rest if heading else ""


class SubmissionCoordinator:
    """Guards against resubmission, submits on confirmation, unlocks part two."""

    def __init__(
        self,
        grading_service: Callable[[], GradingService],
        fetcher: PuzzleFetcher,
        spec_runner: SpecRunner,
        console: Console,
        confirm: Confirm = _console_confirm,
    ):
        self._grading_service = grading_service
        self.fetcher = fetcher
        self.spec_runner = spec_runner
        self.console = console
        self.confirm = confirm

    def submit_if_confirmed(
        self,
        puzzle: PuzzleId,
        part: int,
        candidate_answer: str,
        already_correct: AnswerState,
    ) -> SubmissionOutcome:
        if already_correct.complete:
            self.console.print(f"[green]{puzzle} is already complete.[/green]")
            return Skipped("already complete")

        known = already_correct.answer(part)
        if known is not None:
            if known == candidate_answer:
                self.console.print(f"Part {part} already solved with same answer: {known}")
            else:
                self.console.print(
                    f"[red]Part {part} already solved with different answer: {known}[/red]"
                )
            return Skipped("already solved")

        if not self.confirm(f"Submit {candidate_answer!r} for {puzzle} part {part}?"):
            return Skipped("declined")

        response_text = self._grading_service().submit(
            puzzle.year, puzzle.day, part, candidate_answer
        )
        result = classify(response_text)
        self.console.print(result.raw_message, style=_STYLES[result.classification], markup=False)

        if result.correct:
            self._after_correct(puzzle, part)
        return result

    def _after_correct(self, puzzle: PuzzleId, part: int) -> None:
        instructions = self.fetcher.fetch_instructions(puzzle, overwrite=True)
        if part != 1:
            logger.info("%s finished", puzzle)
            return
        unlocked = self.spec_runner.unlock_part_two(puzzle)
        logger.info("Part two of %s unlocked (%d spec case(s))", puzzle, unlocked)
        text = part_two_text(instructions)
        if text:
            self.console.print()
            self.console.print(Markdown(text))
