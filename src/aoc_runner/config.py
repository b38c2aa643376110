"""Configuration loading for aoc-runner.

Settings are resolved once at startup and passed explicitly to every
collaborator. Sources are merged in priority order:
    1. Defaults (defined in Settings)
    2. Project config (./aoc-runner.toml)
    3. Explicit config file (--config)
    4. Environment variables (AOC_* prefix, e.g. AOC_SESSION_TOKEN)
    5. CLI overrides (passed as kwargs)

Example:
    >>> settings = load_settings(verbose=True)
    >>> settings.verbosity
    'verbose'
"""

from __future__ import annotations

import os
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Literal, Optional, get_type_hints

from .exceptions import InvalidConfigError, MissingCredentialError

Verbosity = Literal["quiet", "normal", "verbose"]

ENV_PREFIX = "AOC_"
PROJECT_CONFIG_NAME = "aoc-runner.toml"


@dataclass(frozen=True)
class Settings:
    """Runtime configuration.

    Attributes:
        Workspace layout (relative to root):
            solutions_dir: Solution modules, ``<year>/day_<DD>.py``
            specs_dir: pytest spec files, ``<year>/test_day_<DD>.py``
            inputs_dir: Cached real inputs
            instructions_dir: Cached puzzle instructions (text)

        Puzzle site:
            base_url: Root URL of the puzzle site
            session_token: Session cookie value; required for network access
            user_agent: Sent with every request
            http_timeout: Per-request timeout in seconds

        Version control:
            git_timeout: Timeout for each git subprocess, in seconds

        Output control:
            verbosity: Logging verbosity level
    """

    root: Path = field(default_factory=Path.cwd)

    solutions_dir: str = "solutions"
    specs_dir: str = "specs"
    inputs_dir: str = "inputs"
    instructions_dir: str = "instructions"

    base_url: str = "https://adventofcode.com"
    session_token: Optional[str] = None
    user_agent: str = "aoc-runner (+https://pypi.org/project/aoc-runner/)"
    http_timeout: float = 30.0

    git_timeout: int = 10

    verbosity: Verbosity = "normal"

    def __post_init__(self) -> None:
        if self.http_timeout <= 0:
            raise InvalidConfigError("http_timeout", self.http_timeout, "must be positive")
        if self.git_timeout < 1:
            raise InvalidConfigError("git_timeout", self.git_timeout, "must be at least 1")
        if self.verbosity not in ("quiet", "normal", "verbose"):
            raise InvalidConfigError(
                "verbosity", self.verbosity, "expected quiet, normal or verbose"
            )
        for name in ("solutions_dir", "specs_dir", "inputs_dir", "instructions_dir"):
            value = getattr(self, name)
            if not value or Path(value).is_absolute():
                raise InvalidConfigError(name, value, "must be a relative directory name")
        if not self.base_url.startswith(("http://", "https://")):
            raise InvalidConfigError("base_url", self.base_url, "must be an http(s) URL")

    def require_session(self) -> str:
        """Return the session token or raise if it is not configured."""
        if not self.session_token:
            raise MissingCredentialError(f"{ENV_PREFIX}SESSION_TOKEN")
        return self.session_token


def load_settings(config_file: Optional[Path] = None, **overrides) -> Settings:
    """Load settings with auto-discovery and merging.

    Args:
        config_file: Optional explicit config file path
        **overrides: Direct overrides (typically from CLI flags); ``None``
            values are ignored

    Returns:
        Validated Settings instance

    Raises:
        ConfigError: If a config file is missing or invalid
    """
    merged: dict[str, Any] = {}

    root = Path(overrides.get("root") or Path.cwd())

    project_config = root / PROJECT_CONFIG_NAME
    if project_config.exists():
        merged.update(_load_toml_file(project_config))

    if config_file is not None:
        if not config_file.exists():
            raise InvalidConfigError("config", str(config_file), "file not found")
        merged.update(_load_toml_file(config_file))

    merged.update(_load_env_vars())

    if "verbose" in overrides:
        if overrides["verbose"]:
            overrides["verbosity"] = "verbose"
        del overrides["verbose"]
    if "quiet" in overrides:
        if overrides["quiet"]:
            overrides["verbosity"] = "quiet"
        del overrides["quiet"]

    merged.update({k: v for k, v in overrides.items() if v is not None})

    if "root" in merged:
        merged["root"] = Path(merged["root"])

    try:
        return Settings(**merged)
    except TypeError as e:
        # Unknown field in config
        raise InvalidConfigError("settings", sorted(merged), str(e))


def _load_env_vars() -> dict[str, Any]:
    """Load configuration from AOC_* environment variables.

    Every Settings field except ``root`` can be set this way, e.g.
    AOC_SESSION_TOKEN, AOC_BASE_URL, AOC_HTTP_TIMEOUT, AOC_SOLUTIONS_DIR.
    """
    type_hints = get_type_hints(Settings)

    result: dict[str, Any] = {}

    for field_name in Settings.__dataclass_fields__:
        if field_name == "root":
            continue
        env_key = f"{ENV_PREFIX}{field_name.upper()}"
        env_value = os.environ.get(env_key)

        if env_value is None:
            continue

        type_hint = type_hints.get(field_name)
        if type_hint is None:
            continue

        try:
            parsed = _parse_env_value(env_value, type_hint)
        except ValueError as e:
            raise InvalidConfigError(env_key, env_value, str(e))
        if parsed is not None:
            result[field_name] = parsed

    return result


def _parse_env_value(value: str, type_hint: Any) -> Any:
    """Parse an environment variable string to the field's type."""
    # Optional[X] is Union[X, None]
    args = getattr(type_hint, "__args__", ())
    if type(None) in args:
        non_none_types = [t for t in args if t is not type(None)]
        if non_none_types:
            type_hint = non_none_types[0]

    origin = getattr(type_hint, "__origin__", None)

    if type_hint is bool:
        lower = value.lower()
        if lower in ("true", "1", "yes", "on"):
            return True
        if lower in ("false", "0", "no", "off"):
            return False
        raise ValueError(f"expected true/false, got '{value}'")

    if type_hint is int:
        return int(value)

    if type_hint is float:
        return float(value)

    if type_hint is str or origin is Literal:
        return value

    return None


def _load_toml_file(path: Path) -> dict:
    """Load a TOML config file; only the [aoc-runner] table is read if present."""
    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        raise InvalidConfigError("config", str(path), str(e))
    return data.get("aoc-runner", data)
