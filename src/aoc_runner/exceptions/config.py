"""Configuration exceptions: settings files, environment, credentials."""

from typing import Any

from .base import AocRunnerError


class ConfigError(AocRunnerError):
    """Base class for configuration-related errors."""

    pass


class InvalidConfigError(ConfigError):
    """Raised when configuration values are invalid."""

    def __init__(self, key: str, value: Any, reason: str):
        super().__init__(
            f"Invalid configuration for {key}: {value}",
            details={"key": key, "value": str(value), "reason": reason},
        )
        self.key = key
        self.value = value
        self.reason = reason


class MissingCredentialError(ConfigError):
    """Raised when the grading-service session token is not configured."""

    def __init__(self, env_var: str):
        super().__init__(
            f"No session token configured; set {env_var} or session_token in aoc-runner.toml"
        )
        self.env_var = env_var
