"""
Logging configuration for aoc-runner.

Log records go to stderr through rich so they never interleave with the
answers and prompts printed on stdout. The level follows
``Settings.verbosity``, whichever source it was set from.
"""

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

ROOT_LOGGER = "aoc_runner"

LEVELS = {
    "quiet": logging.ERROR,
    "normal": logging.WARNING,
    "verbose": logging.DEBUG,
}


def setup_logging(verbosity: str = "normal") -> logging.Logger:
    """
    Install a rich handler on the root logger.

    Args:
        verbosity: ``quiet`` (errors only), ``normal`` (warnings) or
            ``verbose`` (every decision, with timestamps and call sites)

    Returns:
        The aoc_runner logger
    """
    level = LEVELS[verbosity]
    verbose = verbosity == "verbose"

    handler = RichHandler(
        console=Console(stderr=True),
        rich_tracebacks=True,
        tracebacks_show_locals=verbose,
        markup=False,
        show_time=verbose,
        show_path=verbose,
    )
    logging.basicConfig(
        level=level, format="%(message)s", datefmt="[%X]", handlers=[handler], force=True
    )

    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(level)
    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    Get a logger namespaced under aoc_runner.

    Args:
        name: Module name (e.g., 'aoc_runner.locator' or just 'locator');
              None returns the aoc_runner logger itself
    """
    if name is None:
        return logging.getLogger(ROOT_LOGGER)

    if not name.startswith(ROOT_LOGGER):
        name = f"{ROOT_LOGGER}.{name}"

    return logging.getLogger(name)
