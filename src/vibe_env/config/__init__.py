"""Configuration module for vibe-env.

Example:
    from vibe_env.config import apply_prefixed_overrides, bootstrap_environment

    # Force VIBE_TOOLS_<NAME> values onto <NAME> in os.environ
    apply_prefixed_overrides()

    # Load ./.env first, then apply overrides
    bootstrap_environment()
"""

from vibe_env.config.overrides import (
    DEFAULT_PREFIX,
    LOG_TAG,
    PREVIEW_LENGTH,
    apply_prefixed_overrides,
    preview_value,
)
from vibe_env.config.settings import LogSettings, OverrideSettings
from vibe_env.config.env_loader import EnvLoader, bootstrap_environment

__all__ = [
    # Prefixed overrides
    "DEFAULT_PREFIX",
    "LOG_TAG",
    "PREVIEW_LENGTH",
    "apply_prefixed_overrides",
    "preview_value",
    # Settings
    "OverrideSettings",
    "LogSettings",
    # Loading
    "EnvLoader",
    "bootstrap_environment",
]
