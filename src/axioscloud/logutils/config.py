"""Logging configuration for axioscloud.

Defaults depend on where the code runs: rich console output on a developer
machine, plain stderr in CI and under pytest, JSON in production.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

_TRUTHY = ("true", "1", "yes")


class Environment(Enum):
    """Application environment enumeration."""

    DEVELOPMENT = "development"
    TESTING = "testing"
    PRODUCTION = "production"
    CI = "ci"


@dataclass
class LogConfig:
    """Logging configuration container."""

    # Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    level: str = "WARNING"

    # Structured JSON lines on stderr
    json_format: bool = False

    # Rich console output (ignored when json_format is set)
    use_rich: bool = True

    # Mask passwords, session GUIDs, vendor tokens and keys
    mask_sensitive: bool = True

    # Per-module log levels
    module_levels: dict[str, str] = field(default_factory=dict)

    # Static fields added to every JSON record
    extra_fields: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_env(cls) -> LogConfig:
        """Create configuration from environment variables.

        Environment variables:
            LOG_LEVEL: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
            LOG_JSON: Use JSON format (true/false)
            LOG_RICH: Use Rich console (true/false)
            LOG_MASK_SENSITIVE: Mask sensitive data (true/false)
        """
        config = cls.for_environment(detect_environment())

        if level := os.getenv("LOG_LEVEL"):
            config.level = level.upper()
        if json_format := os.getenv("LOG_JSON"):
            config.json_format = json_format.lower() in _TRUTHY
        if use_rich := os.getenv("LOG_RICH"):
            config.use_rich = use_rich.lower() in _TRUTHY
        if mask_sensitive := os.getenv("LOG_MASK_SENSITIVE"):
            config.mask_sensitive = mask_sensitive.lower() in _TRUTHY

        return config

    @classmethod
    def for_environment(cls, env: Environment) -> LogConfig:
        """Get default configuration for an environment."""
        if env == Environment.PRODUCTION:
            return cls(level="INFO", json_format=True, use_rich=False)
        if env == Environment.CI:
            return cls(level="INFO", use_rich=False)
        if env == Environment.TESTING:
            return cls(level="DEBUG", use_rich=False)
        # Library default: quiet unless asked
        return cls(level="WARNING", use_rich=True)


def detect_environment() -> Environment:
    """Detect the current runtime environment."""
    if os.getenv("CI") or os.getenv("GITHUB_ACTIONS"):
        return Environment.CI

    env_name = os.getenv("ENVIRONMENT", os.getenv("ENV", "")).lower()
    if env_name in ("prod", "production"):
        return Environment.PRODUCTION
    if env_name in ("test", "testing"):
        return Environment.TESTING

    if os.getenv("PYTEST_CURRENT_TEST"):
        return Environment.TESTING

    return Environment.DEVELOPMENT


# Global configuration instance
_config: LogConfig | None = None


def get_config() -> LogConfig:
    """Get the current logging configuration."""
    global _config
    if _config is None:
        _config = LogConfig.from_env()
    return _config


def set_config(config: LogConfig) -> None:
    """Set the logging configuration."""
    global _config
    _config = config


def reset_config() -> None:
    """Reset to default configuration from environment."""
    global _config
    _config = None
