"""Git backend via subprocess."""

import subprocess
from pathlib import Path
from typing import Optional, Sequence

from ..logging_config import get_logger
from .protocols import PathFilter

logger = get_logger(__name__)


class GitBackend:
    """Runs git in the workspace root; queries degrade to empty results on failure."""

    def __init__(self, repo_path: Path, timeout: int = 10):
        self.repo_path = str(Path(repo_path).resolve())
        self.timeout = timeout

    def _query(self, *args: str) -> Optional[str]:
        try:
            result = subprocess.run(
                ["git", "-C", self.repo_path, *args],
                capture_output=True,
                text=True,
                timeout=self.timeout,
            )
        except (FileNotFoundError, subprocess.TimeoutExpired) as e:
            logger.warning("git %s unavailable: %s", args[0], e)
            return None
        if result.returncode != 0:
            stderr = result.stderr.strip()
            if "not a git repository" in stderr:
                logger.warning("%s is not a git repository", self.repo_path)
            else:
                # An empty repository has no HEAD yet; that is not worth a warning
                logger.debug("git %s failed: %s", args[0], stderr)
            return None
        return result.stdout

    @staticmethod
    def _lines(output: Optional[str]) -> list[Path]:
        if not output:
            return []
        return [Path(line) for line in output.splitlines() if line.strip()]

    def list_untracked(self, prefix: str) -> list[Path]:
        return sorted(
            self._lines(self._query("ls-files", "--others", "--exclude-standard", "--", prefix))
        )

    def most_recent_added(
        self, prefix: str, accept: Optional[PathFilter] = None
    ) -> Optional[Path]:
        """Newest file under *prefix* whose adding commit is most recent."""
        output = self._query(
            "log", "--relative", "--diff-filter=A", "--name-only", "--format=", "--", prefix
        )
        for path in self._lines(output):
            if accept is None or accept(path):
                return path
        return None

    def list_committed(self, prefix: str) -> list[Path]:
        return self._lines(self._query("ls-tree", "-r", "--name-only", "HEAD", "--", prefix))

    def has_pending_changes(self) -> bool:
        output = self._query("status", "--porcelain")
        return bool(output and output.strip())

    def commit(self, message: str, paths: Sequence[Path]) -> None:
        """Stage *paths* and commit them. Failures propagate."""
        existing = [str(p) for p in paths if (Path(self.repo_path) / p).exists()]
        if existing:
            subprocess.run(
                ["git", "-C", self.repo_path, "add", "--", *existing],
                check=True,
                capture_output=True,
                text=True,
                timeout=self.timeout,
            )
        subprocess.run(
            ["git", "-C", self.repo_path, "commit", "-m", message],
            check=True,
            capture_output=True,
            text=True,
            timeout=self.timeout,
        )
        logger.info("Committed %d path(s): %s", len(existing), message)
