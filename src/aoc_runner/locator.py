"""Work out which puzzle a command should act on.

Resolution cascades from the most explicit signal to the least:

    1. explicit year + day hints
    2. an untracked solution file (the puzzle being worked on right now)
    3. a year hint for a year with no solutions yet (start at day 1)
    4. the most recently committed solution (re-run it, or advance to the next day)
    5. an interactive prompt seeded with the earliest unsolved puzzle
"""

import re
from datetime import date
from typing import Callable, Optional, Union

import typer

from .exceptions import InputError
from .layout import PuzzleLayout
from .logging_config import get_logger
from .models import PuzzleId
from .puzzle_calendar import (
    DAYS_PER_YEAR,
    FIRST_YEAR,
    Clock,
    available_years,
    puzzle_today,
    released_days,
)
from .repository import RepositoryState

logger = get_logger(__name__)

Hint = Optional[Union[int, str]]
Candidate = tuple[Union[int, str], Union[int, str]]
Prompt = Callable[[str], str]

_ACCEPT_DEFAULT = {"", "y", "yes"}


def normalize_year(year_hint: Union[int, str]) -> str:
    """Expand two-digit years: ``23`` -> ``2023``."""
    text = str(year_hint).strip()
    if re.fullmatch(r"\d{2}", text):
        return f"20{text}"
    return text


def next_day(year: int, day: int) -> Optional[tuple[int, int]]:
    """The puzzle after (year, day), or None once the year is finished."""
    if day >= DAYS_PER_YEAR:
        return None
    return year, day + 1


def suggest_default(
    committed: dict[int, set[int]], today: date
) -> Optional[tuple[int, int]]:
    """Earliest released puzzle without a committed solution."""
    for year in available_years(today):
        done = committed.get(year, set())
        for day in released_days(year, today):
            if day not in done:
                return year, day
    return None


def _console_prompt(message: str) -> str:
    return typer.prompt(message, default="", show_default=False)


class PuzzleLocator:
    """Resolves a PuzzleId from hints, repository state and the calendar."""

    def __init__(
        self,
        repository: RepositoryState,
        layout: PuzzleLayout,
        clock: Clock = puzzle_today,
        prompt: Prompt = _console_prompt,
    ):
        self.repository = repository
        self.layout = layout
        self.clock = clock
        self.prompt = prompt

    def resolve(
        self,
        year_hint: Hint = None,
        day_hint: Hint = None,
        prefer_untracked_or_most_recently_done: bool = False,
    ) -> PuzzleId:
        """Resolve the target puzzle.

        Args:
            year_hint: Year from the command line; two digits are allowed
            day_hint: Day from the command line; requires ``year_hint``
            prefer_untracked_or_most_recently_done: Resume mode. Prefer the
                puzzle being worked on, else re-target the last committed one.
                When False, advance to the puzzle after the last committed one.

        Raises:
            InputError: Invalid or incomplete hints, or an out-of-calendar result
        """
        today = self.clock()
        year = normalize_year(year_hint) if year_hint is not None else None

        if year is not None and day_hint is not None:
            return PuzzleId.validated(year, day_hint, today)
        if day_hint is not None:
            raise InputError("day requires year", details={"day": str(day_hint)})

        candidate = self._from_workspace(year, prefer_untracked_or_most_recently_done)
        if candidate is None:
            candidate = self._interactive(today)

        puzzle = PuzzleId.validated(*candidate, today)
        logger.info("Resolved puzzle %s", puzzle)
        return puzzle

    def _from_workspace(self, year: Optional[str], resume: bool) -> Optional[Candidate]:
        if resume:
            untracked = self.repository.untracked_solutions(year)
            if untracked:
                parsed = self.layout.parse_solution_path(untracked[0])
                if parsed:
                    logger.debug("Resuming untracked work in %s", untracked[0])
                    return parsed

        if year is not None and not self.layout.year_dir(year).exists():
            logger.debug("No solutions for %s yet; starting at day 1", year)
            return year, 1

        last = self.repository.last_committed_solution(year)
        parsed = self.layout.parse_solution_path(last) if last is not None else None
        if parsed is None:
            return None
        if resume:
            return parsed
        following = next_day(*parsed)
        if following is None:
            logger.debug("Year %s is finished", parsed[0])
        return following

    def _interactive(self, today: date) -> tuple[int, int]:
        default = suggest_default(self.repository.committed_days_by_year(), today)
        years = available_years(today)
        last_year = years[-1] if years else FIRST_YEAR

        while True:
            if default is not None:
                message = (
                    f"Next puzzle is {default[0]} day {default[1]:02d}. "
                    "Press enter to accept or type a year"
                )
            else:
                message = "Which year? (YYYY)"
            answer = self.prompt(message).strip()

            if default is not None and answer.lower() in _ACCEPT_DEFAULT:
                return default
            if re.fullmatch(r"\d{4}", answer) and FIRST_YEAR <= int(answer) <= last_year:
                return int(answer), 1
            logger.warning(
                "Expected a year between %d and %d, got %r", FIRST_YEAR, last_year, answer
            )
