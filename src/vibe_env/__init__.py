"""vibe-env - Environment overlay helpers.

- config: prefixed environment overrides, .env loading, typed settings
- logger: logging interface with text and JSON implementations
- exceptions: structured error classes
"""

__version__ = "1.0.0"

from vibe_env.logger import (
    DefaultLogger,
    Logger,
    StructuredLogger,
    create_logger,
    get_logger,
)

from vibe_env.config import (
    DEFAULT_PREFIX,
    EnvLoader,
    LogSettings,
    OverrideSettings,
    apply_prefixed_overrides,
    bootstrap_environment,
)

from vibe_env.exceptions import (
    ConfigurationError,
    VibeEnvError,
)

__all__ = [
    "__version__",
    # Logger
    "Logger",
    "DefaultLogger",
    "StructuredLogger",
    "create_logger",
    "get_logger",
    # Config
    "DEFAULT_PREFIX",
    "apply_prefixed_overrides",
    "bootstrap_environment",
    "EnvLoader",
    "OverrideSettings",
    "LogSettings",
    # Exceptions
    "VibeEnvError",
    "ConfigurationError",
]
