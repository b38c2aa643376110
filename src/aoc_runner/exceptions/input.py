"""User input errors: puzzle hints and command-line flags."""

from typing import Optional

from .base import AocRunnerError


class InputError(AocRunnerError):
    """Raised when user-supplied arguments or flags are malformed or conflicting."""

    pass


class InvalidPuzzleError(InputError):
    """Raised when a year/day pair violates the puzzle calendar."""

    def __init__(self, reason: str, year: Optional[object] = None, day: Optional[object] = None):
        details = {}
        if year is not None:
            details["year"] = str(year)
        if day is not None:
            details["day"] = str(day)
        super().__init__(f"Invalid puzzle: {reason}", details=details)
        self.reason = reason
        self.year = year
        self.day = day


class ConflictingFlagsError(InputError):
    """Raised when mutually exclusive flags are combined."""

    def __init__(self, *flags: str):
        super().__init__(f"Options {' and '.join(flags)} cannot be combined")
        self.flags = flags
