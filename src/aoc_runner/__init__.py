"""
aoc-runner - daily puzzle workflow automation.

Works out which puzzle you are on from your git history, gates real-input
runs on passing specs, and submits answers without ever resubmitting a
solved part.
"""

__version__ = "0.1.0"
__author__ = "aoc-runner contributors"

from .ledger import AnswerLedger
from .locator import PuzzleLocator
from .models import AnswerState, PuzzleId, RunAnswers, RunFlags, SpecOutcome, SubmissionResult
from .orchestrator import RunOrchestrator
from .specs import SpecRunner
from .submission import SubmissionCoordinator

__all__ = [
    "AnswerLedger",
    "AnswerState",
    "PuzzleId",
    "PuzzleLocator",
    "RunAnswers",
    "RunFlags",
    "RunOrchestrator",
    "SpecOutcome",
    "SpecRunner",
    "SubmissionCoordinator",
    "SubmissionResult",
]
