"""Release calendar of the puzzle series.

Puzzles unlock at midnight US Eastern time, one per day from 1 to 25
December, every year since 2015.
"""

from datetime import date, datetime
from typing import Callable
from zoneinfo import ZoneInfo

PUZZLE_TZ = ZoneInfo("America/New_York")

FIRST_YEAR = 2015
DAYS_PER_YEAR = 25
RELEASE_MONTH = 12

Clock = Callable[[], date]


def puzzle_today() -> date:
    """Current date in the timezone puzzles are released in."""
    return datetime.now(tz=PUZZLE_TZ).date()


def release_date(year: int, day: int) -> date:
    return date(year, RELEASE_MONTH, day)


def is_released(year: int, day: int, today: date) -> bool:
    return release_date(year, day) <= today


def available_years(today: date) -> range:
    """Years with at least one released puzzle.

    The current year only counts once December has started.
    """
    last = today.year if today.month == RELEASE_MONTH else today.year - 1
    return range(FIRST_YEAR, last + 1)


def released_days(year: int, today: date) -> range:
    if year < today.year:
        return range(1, DAYS_PER_YEAR + 1)
    if year > today.year or today.month != RELEASE_MONTH:
        return range(1, 1)
    return range(1, min(today.day, DAYS_PER_YEAR) + 1)
