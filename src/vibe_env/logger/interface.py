"""
Logger interface for vibe-env.

Anything that reports environment changes writes through this interface, so
callers and tests can substitute their own sink.
"""

from abc import ABC, abstractmethod
from typing import Any


class Logger(ABC):
    """Abstract logging sink.

    Example:
        class ListLogger(Logger):
            def __init__(self):
                self.lines = []

            def info(self, message: str, **kwargs: Any) -> None:
                self.lines.append(message)
            # ... implement the other levels
    """

    @abstractmethod
    def debug(self, message: str, **kwargs: Any) -> None:
        """Log a debug message."""

    @abstractmethod
    def info(self, message: str, **kwargs: Any) -> None:
        """Log an info message.

        Args:
            message: The message to log
            **kwargs: Extra key-value pairs attached to the entry
        """

    @abstractmethod
    def warning(self, message: str, **kwargs: Any) -> None:
        """Log a warning message."""

    @abstractmethod
    def error(self, message: str, **kwargs: Any) -> None:
        """Log an error message."""

    @abstractmethod
    def critical(self, message: str, **kwargs: Any) -> None:
        """Log a critical message."""

    @abstractmethod
    def get_session_id(self) -> str:
        """Return the identifier shared by every entry from this instance."""
