"""Dataclass settings for vibe-env.

Each settings class has a ``from_env`` classmethod that reads
``{prefix}_*`` environment variables, with ``VIBE_ENV`` as the default prefix.
"""

import logging
import os
from dataclasses import dataclass
from typing import Optional

from vibe_env.config.overrides import DEFAULT_PREFIX
from vibe_env.exceptions import ConfigurationError

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class OverrideSettings:
    """Prefixed override configuration

    Attributes:
        prefix: Key prefix marking override variables (default: VIBE_TOOLS_)
    """

    prefix: str = DEFAULT_PREFIX

    @classmethod
    def from_env(cls, prefix: str = "VIBE_ENV") -> "OverrideSettings":
        """Load override settings from environment variables

        Environment variables:
            {prefix}_OVERRIDE_PREFIX: Override prefix; an empty value is kept as-is
        """
        return cls(prefix=os.environ.get(f"{prefix}_OVERRIDE_PREFIX", DEFAULT_PREFIX))


@dataclass
class LogSettings:
    """Logging configuration

    Attributes:
        level: Level name (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional file path for log output
        json_format: Emit JSON instead of text
    """

    level: str = "INFO"
    log_file: Optional[str] = None
    json_format: bool = False

    def __post_init__(self):
        self.level = self.level.strip().upper()
        if self.level not in VALID_LOG_LEVELS:
            raise ConfigurationError(
                code="INVALID_LOG_LEVEL",
                message=f"Unknown log level '{self.level}'",
                details={"valid_levels": list(VALID_LOG_LEVELS)},
            )

    @classmethod
    def from_env(cls, prefix: str = "VIBE_ENV", strict: bool = True) -> "LogSettings":
        """Load log settings from environment variables

        Args:
            prefix: Environment variable prefix
            strict: Raise on an unknown level; when False fall back to INFO

        Environment variables:
            {prefix}_LOG_LEVEL: Logging level
            {prefix}_LOG_FILE: Log file path
            {prefix}_LOG_JSON: "true" to enable JSON output
        """
        level = os.environ.get(f"{prefix}_LOG_LEVEL", "INFO")
        if not strict and level.strip().upper() not in VALID_LOG_LEVELS:
            level = "INFO"

        return cls(
            level=level,
            log_file=os.environ.get(f"{prefix}_LOG_FILE") or None,
            json_format=os.environ.get(f"{prefix}_LOG_JSON", "false").lower() == "true",
        )

    def get_level(self) -> int:
        """Return the numeric ``logging`` level."""
        return getattr(logging, self.level)
