"""Exceptions raised by vibe-env.

Usage:
    from vibe_env.exceptions import VibeEnvError, ConfigurationError
"""

from vibe_env.exceptions.base import ConfigurationError, VibeEnvError

__all__ = [
    "VibeEnvError",
    "ConfigurationError",
]
