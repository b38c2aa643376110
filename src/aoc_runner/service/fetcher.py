"""Cached access to puzzle instructions and inputs."""

from pathlib import Path
from typing import Callable, Optional

from ..layout import PuzzleLayout
from ..logging_config import get_logger
from ..models import PuzzleId
from .client import AdventClient

logger = get_logger(__name__)


class PuzzleFetcher:
    """Reads from the workspace cache and only goes to the network on a miss.

    The client is built on first use so cache hits never need a session token.
    """

    def __init__(self, client_factory: Callable[[], AdventClient], layout: PuzzleLayout):
        self._client_factory = client_factory
        self._client: Optional[AdventClient] = None
        self.layout = layout

    @property
    def client(self) -> AdventClient:
        if self._client is None:
            self._client = self._client_factory()
        return self._client

    def close(self) -> None:
        if self._client is not None:
            self._client.close()
            self._client = None

    def fetch_instructions(self, puzzle: PuzzleId, overwrite: bool = False) -> str:
        path = self.layout.instructions_path(puzzle)
        cached = self._cached(path, overwrite)
        if cached is not None:
            return cached
        text = self.client.get_instructions(puzzle.year, puzzle.day) + "\n"
        self._store(path, text)
        return text

    def fetch_input(self, puzzle: PuzzleId, overwrite: bool = False) -> str:
        path = self.layout.input_path(puzzle)
        cached = self._cached(path, overwrite)
        if cached is not None:
            return cached
        text = self.client.get_input(puzzle.year, puzzle.day)
        self._store(path, text)
        return text

    @staticmethod
    def _cached(path: Path, overwrite: bool) -> Optional[str]:
        if overwrite or not path.is_file():
            return None
        logger.debug("Cache hit %s", path)
        return path.read_text(encoding="utf-8")

    @staticmethod
    def _store(path: Path, text: str) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
        logger.info("Saved %s", path)
