"""
Stream logger that prints one formatted line per entry.

Writes to stdout by default. Pass any text stream (e.g. ``io.StringIO``) as
``output`` to capture lines in tests.
"""

import sys
import uuid
from datetime import datetime, timezone
from typing import Any, Optional, TextIO

from .interface import Logger


class DefaultLogger(Logger):
    """Plain-text logger bound to a single output stream.

    Example:
        logger = DefaultLogger(output=io.StringIO(), include_timestamp=False)
        logger.info("Overrode FOO", target="FOO")
        # [INFO] [vibe-env] Overrode FOO (target=FOO)
    """

    def __init__(
        self,
        name: str = "vibe-env",
        output: Optional[TextIO] = None,
        include_timestamp: bool = True,
    ):
        """Initialize the logger.

        Args:
            name: Logger name shown on every line
            output: Output stream; resolved to ``sys.stdout`` at write time when None
            include_timestamp: Prefix lines with a UTC ISO timestamp
        """
        self._name = name
        self._session_id = str(uuid.uuid4())
        self._output = output
        self._include_timestamp = include_timestamp

    def get_session_id(self) -> str:
        return self._session_id

    def _format_message(self, level: str, message: str, **kwargs: Any) -> str:
        parts = []
        if self._include_timestamp:
            parts.append(datetime.now(timezone.utc).isoformat())
        parts.append(f"[{level}]")
        parts.append(f"[{self._name}]")
        parts.append(message)
        if kwargs:
            parts.append("(" + " ".join(f"{k}={v}" for k, v in kwargs.items()) + ")")
        return " ".join(parts)

    def _log(self, level: str, message: str, **kwargs: Any) -> None:
        stream = self._output if self._output is not None else sys.stdout
        print(self._format_message(level, message, **kwargs), file=stream, flush=True)

    def debug(self, message: str, **kwargs: Any) -> None:
        self._log("DEBUG", message, **kwargs)

    def info(self, message: str, **kwargs: Any) -> None:
        self._log("INFO", message, **kwargs)

    def warning(self, message: str, **kwargs: Any) -> None:
        self._log("WARNING", message, **kwargs)

    def error(self, message: str, **kwargs: Any) -> None:
        self._log("ERROR", message, **kwargs)

    def critical(self, message: str, **kwargs: Any) -> None:
        self._log("CRITICAL", message, **kwargs)
