"""Prefixed environment variable overrides.

Copies the value of every ``<PREFIX><NAME>`` key onto ``<NAME>``, replacing
whatever ``<NAME>`` held before. Lets a deployment force specific settings
without editing the variables the application already reads.

Example:
    VIBE_TOOLS_OPENAI_API_KEY=sk-...  =>  OPENAI_API_KEY=sk-...
"""

import os
from typing import MutableMapping, Optional

from vibe_env.logger import DefaultLogger, Logger

DEFAULT_PREFIX = "VIBE_TOOLS_"
LOG_TAG = "[VIBE_TOOLS_PREFIX]"
PREVIEW_LENGTH = 8

# Writes straight to stdout; never touches the logging module
_default_sink: Logger = DefaultLogger()


def preview_value(value: str, length: int = PREVIEW_LENGTH) -> str:
    """Return the leading characters of a value for logging.

    This only shortens the value; it is not a redaction guarantee.
    """
    return value[:length]


def apply_prefixed_overrides(
    env: Optional[MutableMapping[str, Optional[str]]] = None,
    prefix: str = DEFAULT_PREFIX,
    logger: Optional[Logger] = None,
) -> None:
    """Copy prefixed values onto their unprefixed keys, in place.

    Prefixed values always win, including over an existing value at the
    target key. Entries whose value is None are skipped. When several
    prefixed keys map to the same target, the last one in iteration order
    wins.

    Args:
        env: Mapping to mutate; ``os.environ`` (looked up at call time) when None
        prefix: Key prefix to strip; not validated, an empty prefix matches every key
        logger: Sink for per-override and summary lines; a stdout line logger when None
    """
    if env is None:
        env = os.environ
    if logger is None:
        logger = _default_sink

    count = 0
    for key, value in list(env.items()):
        if not key.startswith(prefix):
            continue
        target_key = key[len(prefix):]
        if value is None:
            continue

        state = "existing" if env.get(target_key) is not None else "new"
        env[target_key] = value
        count += 1

        logger.info(f"{LOG_TAG} Overrode {target_key}: {state} -> {preview_value(value)}...")

    if count > 0:
        logger.info(f"{LOG_TAG} Applied {count} prefixed environment variable overrides")
