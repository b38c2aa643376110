"""Protocol for the version-control backend."""

from pathlib import Path
from typing import Callable, Optional, Protocol, Sequence

PathFilter = Callable[[Path], bool]


class VersionControl(Protocol):
    """Backends answer with empty results when the repository is unavailable."""

    def list_untracked(self, prefix: str) -> list[Path]: ...

    def most_recent_added(
        self, prefix: str, accept: Optional[PathFilter] = None
    ) -> Optional[Path]: ...

    def list_committed(self, prefix: str) -> list[Path]: ...

    def has_pending_changes(self) -> bool: ...

    def commit(self, message: str, paths: Sequence[Path]) -> None: ...
