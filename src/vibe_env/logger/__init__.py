"""
vibe-env logger module.

Usage:
    from vibe_env.logger import get_logger, DefaultLogger

    # Configured from VIBE_ENV_LOG_* environment variables
    logger = get_logger()
    logger.info("Loaded environment")

    # Capture output, e.g. in tests
    buffer = io.StringIO()
    logger = DefaultLogger(output=buffer, include_timestamp=False)

Environment Variables:
    {PREFIX}_LOG_LEVEL: DEBUG, INFO, WARNING, ERROR or CRITICAL (default INFO)
    {PREFIX}_LOG_FILE: Optional file path for log output
    {PREFIX}_LOG_JSON: "true" for JSON output

    {PREFIX} is derived from the logger name ("vibe-env" -> "VIBE_ENV").
"""

from typing import Optional

from .default_logger import DefaultLogger
from .interface import Logger
from .structured_logger import JsonFormatter, StructuredLogger, TextFormatter


def _get_env_prefix(name: str) -> str:
    """Convert a logger name to its environment variable prefix."""
    return name.upper().replace("-", "_")


def create_logger(
    name: str = "vibe-env",
    level: Optional[int] = None,
    log_file: Optional[str] = None,
    json_format: Optional[bool] = None,
) -> Logger:
    """Create a StructuredLogger, filling unset options from the environment.

    An unknown {PREFIX}_LOG_LEVEL falls back to INFO.
    """
    from vibe_env.config.settings import LogSettings

    settings = LogSettings.from_env(prefix=_get_env_prefix(name), strict=False)

    return StructuredLogger(
        name=name,
        level=settings.get_level() if level is None else level,
        log_file=settings.log_file if log_file is None else log_file,
        json_format=settings.json_format if json_format is None else json_format,
    )


def get_logger(name: str = "vibe-env") -> Logger:
    """Get a logger configured purely from environment variables."""
    return create_logger(name=name)


__all__ = [
    "Logger",
    "DefaultLogger",
    "StructuredLogger",
    "JsonFormatter",
    "TextFormatter",
    "create_logger",
    "get_logger",
]
