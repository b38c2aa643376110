"""Puzzle site access: HTTP client and on-disk cache."""

from .client import AdventClient
from .fetcher import PuzzleFetcher
from .html import page_text

__all__ = ["AdventClient", "PuzzleFetcher", "page_text"]
