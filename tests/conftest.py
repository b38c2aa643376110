"""Shared fixtures: a temporary puzzle workspace and scripted interaction."""

import subprocess
from datetime import date
from pathlib import Path

import pytest
from fakes import TODAY, FakeVersionControl

from aoc_runner.config import Settings
from aoc_runner.layout import PuzzleLayout
from aoc_runner.repository import RepositoryState


@pytest.fixture
def today() -> date:
    return TODAY


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(root=tmp_path)


@pytest.fixture
def layout(settings) -> PuzzleLayout:
    return PuzzleLayout(settings)


@pytest.fixture
def make_repository(layout):
    def factory(**kwargs) -> tuple[RepositoryState, FakeVersionControl]:
        backend = FakeVersionControl(**kwargs)
        return RepositoryState(backend, layout), backend

    return factory


@pytest.fixture
def scripted_prompt():
    """Prompt that replays answers and records the messages it was shown."""

    class ScriptedPrompt:
        def __init__(self):
            self.answers: list[str] = []
            self.messages: list[str] = []

        def __call__(self, message: str) -> str:
            self.messages.append(message)
            if not self.answers:
                raise AssertionError(f"unexpected prompt: {message}")
            return self.answers.pop(0)

    return ScriptedPrompt()


@pytest.fixture
def git_repo(tmp_path) -> Path:
    """An initialised git repository with an identity configured."""
    repo = tmp_path / "workspace"
    repo.mkdir()
    subprocess.run(["git", "init", str(repo)], capture_output=True, check=True)
    subprocess.run(
        ["git", "-C", str(repo), "config", "user.email", "test@test.com"], capture_output=True
    )
    subprocess.run(["git", "-C", str(repo), "config", "user.name", "Test"], capture_output=True)
    subprocess.run(
        ["git", "-C", str(repo), "config", "commit.gpgsign", "false"], capture_output=True
    )
    return repo
