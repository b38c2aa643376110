"""Exception hierarchy for aoc-runner."""

from .base import AocRunnerError
from .config import ConfigError, InvalidConfigError, MissingCredentialError
from .input import ConflictingFlagsError, InputError, InvalidPuzzleError
from .service import ServiceError

__all__ = [
    "AocRunnerError",
    "InputError",
    "InvalidPuzzleError",
    "ConflictingFlagsError",
    "ConfigError",
    "InvalidConfigError",
    "MissingCredentialError",
    "ServiceError",
]
