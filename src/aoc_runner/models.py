"""Data models shared by the locator, runner and submission flow."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from enum import Enum
from pathlib import Path
from typing import Optional, Union

from .exceptions import ConflictingFlagsError, InvalidPuzzleError
from .puzzle_calendar import DAYS_PER_YEAR, FIRST_YEAR, is_released


@dataclass(frozen=True, order=True)
class PuzzleId:
    year: int
    day: int

    @classmethod
    def validated(cls, year: object, day: object, today: date) -> "PuzzleId":
        """Build a PuzzleId, raising InvalidPuzzleError on any calendar violation."""
        try:
            year_i = int(str(year))
        except ValueError:
            raise InvalidPuzzleError("year must be an integer", year=year, day=day)
        try:
            day_i = int(str(day))
        except ValueError:
            raise InvalidPuzzleError("day must be an integer", year=year, day=day)

        if year_i < FIRST_YEAR:
            raise InvalidPuzzleError(f"year must be {FIRST_YEAR} or later", year=year_i, day=day_i)
        if year_i > today.year:
            raise InvalidPuzzleError(
                f"year must be {today.year} or earlier", year=year_i, day=day_i
            )
        if not 1 <= day_i <= DAYS_PER_YEAR:
            raise InvalidPuzzleError(
                f"day must be between 1 and {DAYS_PER_YEAR}", year=year_i, day=day_i
            )
        if not is_released(year_i, day_i, today):
            raise InvalidPuzzleError("puzzle is not released yet", year=year_i, day=day_i)
        return cls(year_i, day_i)

    def __str__(self) -> str:
        return f"{self.year} day {self.day:02d}"


@dataclass(frozen=True)
class RepositorySnapshot:
    untracked_solution_paths: tuple[Path, ...]
    last_committed_solution_path: Optional[Path]
    has_pending_modifications: bool


@dataclass(frozen=True)
class AnswerState:
    """Answers the grading service has already confirmed as correct."""

    part_one: Optional[str] = None
    part_two: Optional[str] = None

    def known(self, part: int) -> bool:
        return self.answer(part) is not None

    def answer(self, part: int) -> Optional[str]:
        if part == 1:
            return self.part_one
        if part == 2:
            return self.part_two
        raise ValueError(f"part must be 1 or 2, got {part}")

    @property
    def complete(self) -> bool:
        return self.part_one is not None and self.part_two is not None


@dataclass(frozen=True)
class SpecOutcome:
    passed: bool
    skipped_count: int


class Classification(Enum):
    CORRECT = "correct"
    INCORRECT = "incorrect"
    ALREADY_SOLVED = "already_solved"
    TOO_RECENT = "too_recent"
    OTHER = "other"


@dataclass(frozen=True)
class SubmissionResult:
    raw_message: str
    classification: Classification

    @property
    def correct(self) -> bool:
        return self.classification is Classification.CORRECT


@dataclass(frozen=True)
class Skipped:
    """A submission that was short-circuited before reaching the network."""

    reason: str


SubmissionOutcome = Union[SubmissionResult, Skipped]


@dataclass(frozen=True)
class RunFlags:
    spec_only: bool = False
    force_part_one: bool = False
    force_part_two: bool = False

    def __post_init__(self) -> None:
        if self.spec_only and self.force_part_one:
            raise ConflictingFlagsError("--spec", "--real-part-1")
        if self.spec_only and self.force_part_two:
            raise ConflictingFlagsError("--spec", "--real-part-2")


@dataclass(frozen=True)
class RunAnswers:
    answer_one: Optional[str] = None
    answer_two: Optional[str] = None

    @property
    def empty(self) -> bool:
        return self.answer_one is None and self.answer_two is None

    def submission_target(self, known: AnswerState) -> Optional[tuple[int, str]]:
        """The part to offer for submission, with its answer.

        The lowest computed part the service has not confirmed yet, since
        part two stays locked until part one is accepted. When every computed
        part is already confirmed, the highest one is returned so the
        resubmission guard can report on it.
        """
        computed = [
            (part, value)
            for part, value in ((1, self.answer_one), (2, self.answer_two))
            if value is not None
        ]
        if not computed:
            return None
        for part, value in computed:
            if not known.known(part):
                return part, value
        return computed[-1]
