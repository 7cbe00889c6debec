"""Base exception classes for vibe-env.

Errors carry a machine-readable code, a human-readable message and an
optional details dict so callers can report them consistently.
"""

from typing import Any, Dict, Optional


class VibeEnvError(Exception):
    """Base exception for all vibe-env errors.

    Attributes:
        code: Machine-readable error code (e.g., "INVALID_LOG_LEVEL")
        message: Human-readable error message
        details: Optional additional context
    """

    def __init__(self, code: str, message: str, details: Optional[Dict[str, Any]] = None):
        self.code = code
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        if self.details:
            return f"{self.code}: {self.message} (details: {self.details})"
        return f"{self.code}: {self.message}"

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to a JSON-serializable dictionary."""
        return {
            "code": self.code,
            "message": self.message,
            "details": self.details,
        }


class ConfigurationError(VibeEnvError):
    """Raised when settings read from the environment are invalid."""

    pass
