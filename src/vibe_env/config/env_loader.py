"""Environment loading with optional .env support.

``EnvLoader`` builds a dict in deterministic order:
1) .env file (if it exists)
2) OS environment variables
3) Explicit overrides (highest precedence)

``bootstrap_environment`` is the process start-up path: it loads a .env file
into ``os.environ`` without clobbering existing variables, then applies
prefixed overrides on top.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Mapping, MutableMapping, Optional

from dotenv import dotenv_values, load_dotenv

from vibe_env.config.overrides import DEFAULT_PREFIX, apply_prefixed_overrides
from vibe_env.config.settings import OverrideSettings
from vibe_env.logger import Logger


class EnvLoader:
    """Load environment-style key/value pairs with .env support."""

    def __init__(self, env_file: Optional[Path | str] = None) -> None:
        self.env_file = Path(env_file) if env_file else None

    @property
    def env_path(self) -> Path:
        return self.env_file or Path.cwd() / ".env"

    def load(self, overrides: Optional[Mapping[str, str]] = None) -> MutableMapping[str, str]:
        """Load environment data into a new dict.

        Precedence (low -> high): .env file, OS env vars, overrides
        """
        data: MutableMapping[str, str] = {}

        if self.env_path.exists():
            file_values = dotenv_values(self.env_path)
            data.update({k: v for k, v in file_values.items() if v is not None})

        data.update(os.environ)

        if overrides:
            data.update({k: str(v) for k, v in overrides.items()})

        return data

    def load_with_prefix_overrides(
        self,
        overrides: Optional[Mapping[str, str]] = None,
        prefix: str = DEFAULT_PREFIX,
        logger: Optional[Logger] = None,
    ) -> MutableMapping[str, str]:
        """Load as ``load`` does, then apply prefixed overrides to the result.

        ``os.environ`` is left untouched.
        """
        data = self.load(overrides)
        apply_prefixed_overrides(data, prefix=prefix, logger=logger)
        return data


def bootstrap_environment(
    env_file: Optional[Path | str] = None,
    prefix: Optional[str] = None,
    logger: Optional[Logger] = None,
) -> None:
    """Prepare ``os.environ`` for the running process.

    Args:
        env_file: .env file to load; defaults to ``./.env``, skipped when missing
        prefix: Override prefix; read from VIBE_ENV_OVERRIDE_PREFIX when None
        logger: Sink for override log lines
    """
    env_path = EnvLoader(env_file).env_path
    if env_path.exists():
        load_dotenv(env_path, override=False)

    if prefix is None:
        prefix = OverrideSettings.from_env().prefix

    apply_prefixed_overrides(os.environ, prefix=prefix, logger=logger)
