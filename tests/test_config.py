"""Tests for settings loading and validation."""

import os
from pathlib import Path
from typing import Literal, Optional

import pytest

from aoc_runner.config import Settings, _parse_env_value, load_settings
from aoc_runner.exceptions import ConfigError, InvalidConfigError, MissingCredentialError


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep the developer's own AOC_* variables out of these tests."""
    for key in list(os.environ):
        if key.startswith("AOC_"):
            monkeypatch.delenv(key)


class TestSettings:
    def test_defaults(self, tmp_path):
        settings = Settings(root=tmp_path)
        assert settings.solutions_dir == "solutions"
        assert settings.base_url == "https://adventofcode.com"
        assert settings.session_token is None
        assert settings.verbosity == "normal"

    @pytest.mark.parametrize(
        "kwargs,key",
        [
            ({"http_timeout": 0}, "http_timeout"),
            ({"git_timeout": 0}, "git_timeout"),
            ({"verbosity": "loud"}, "verbosity"),
            ({"solutions_dir": ""}, "solutions_dir"),
            ({"specs_dir": "/abs/specs"}, "specs_dir"),
            ({"base_url": "adventofcode.com"}, "base_url"),
        ],
    )
    def test_invalid_values(self, tmp_path, kwargs, key):
        with pytest.raises(InvalidConfigError) as exc_info:
            Settings(root=tmp_path, **kwargs)
        assert exc_info.value.key == key

    def test_require_session(self, tmp_path):
        assert Settings(root=tmp_path, session_token="abc").require_session() == "abc"

    def test_missing_session(self, tmp_path):
        with pytest.raises(MissingCredentialError, match="AOC_SESSION_TOKEN"):
            Settings(root=tmp_path).require_session()


class TestLoadSettings:
    def test_no_sources(self, tmp_path):
        settings = load_settings(root=tmp_path)
        assert settings.root == tmp_path
        assert settings == Settings(root=tmp_path)

    def test_project_config_is_discovered(self, tmp_path):
        (tmp_path / "aoc-runner.toml").write_text('solutions_dir = "src"\nhttp_timeout = 5.0\n')
        settings = load_settings(root=tmp_path)
        assert settings.solutions_dir == "src"
        assert settings.http_timeout == 5.0

    def test_namespaced_table(self, tmp_path):
        (tmp_path / "aoc-runner.toml").write_text('[aoc-runner]\nspecs_dir = "tests"\n')
        assert load_settings(root=tmp_path).specs_dir == "tests"

    def test_explicit_file_beats_project_file(self, tmp_path):
        (tmp_path / "aoc-runner.toml").write_text('inputs_dir = "project"\n')
        explicit = tmp_path / "other.toml"
        explicit.write_text('inputs_dir = "explicit"\n')
        assert load_settings(config_file=explicit, root=tmp_path).inputs_dir == "explicit"

    def test_env_beats_files(self, tmp_path, monkeypatch):
        (tmp_path / "aoc-runner.toml").write_text('session_token = "from-file"\n')
        monkeypatch.setenv("AOC_SESSION_TOKEN", "from-env")
        monkeypatch.setenv("AOC_GIT_TIMEOUT", "30")
        settings = load_settings(root=tmp_path)
        assert settings.session_token == "from-env"
        assert settings.git_timeout == 30

    def test_overrides_beat_env(self, tmp_path, monkeypatch):
        monkeypatch.setenv("AOC_VERBOSITY", "quiet")
        assert load_settings(root=tmp_path, verbose=True).verbosity == "verbose"

    def test_none_overrides_are_ignored(self, tmp_path, monkeypatch):
        monkeypatch.setenv("AOC_BASE_URL", "http://localhost:8000")
        settings = load_settings(root=tmp_path, base_url=None, verbose=False)
        assert settings.base_url == "http://localhost:8000"
        assert settings.verbosity == "normal"

    def test_quiet_override(self, tmp_path):
        assert load_settings(root=tmp_path, quiet=True).verbosity == "quiet"

    def test_missing_explicit_file(self, tmp_path):
        with pytest.raises(InvalidConfigError, match="config"):
            load_settings(config_file=tmp_path / "nope.toml", root=tmp_path)

    def test_malformed_toml(self, tmp_path):
        (tmp_path / "aoc-runner.toml").write_text("solutions_dir = \n")
        with pytest.raises(ConfigError):
            load_settings(root=tmp_path)

    def test_unknown_key(self, tmp_path):
        (tmp_path / "aoc-runner.toml").write_text('colour = "blue"\n')
        with pytest.raises(InvalidConfigError):
            load_settings(root=tmp_path)

    def test_bad_env_number(self, tmp_path, monkeypatch):
        monkeypatch.setenv("AOC_HTTP_TIMEOUT", "soon")
        with pytest.raises(InvalidConfigError, match="AOC_HTTP_TIMEOUT"):
            load_settings(root=tmp_path)


class TestParseEnvValue:
    @pytest.mark.parametrize(
        "value,type_hint,expected",
        [
            ("true", bool, True),
            ("OFF", bool, False),
            ("7", int, 7),
            ("2.5", float, 2.5),
            ("abc", str, "abc"),
            ("abc", Optional[str], "abc"),
            ("quiet", Literal["quiet", "normal"], "quiet"),
            ("x", Path, None),
        ],
    )
    def test_parse(self, value, type_hint, expected):
        assert _parse_env_value(value, type_hint) == expected

    def test_bad_bool(self):
        with pytest.raises(ValueError):
            _parse_env_value("maybe", bool)
