"""Version-control access for the puzzle workspace."""

from .git import GitBackend
from .protocols import VersionControl
from .state import RepositoryState

__all__ = ["GitBackend", "RepositoryState", "VersionControl"]
