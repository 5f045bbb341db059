"""Process-wide configuration."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass
from functools import lru_cache

from assetpack.interval import parse_interval

ROOT_ENV_VAR = "ASSETPACK_ROOT"
POLL_INTERVAL_ENV_VAR = "ASSETPACK_POLL_INTERVAL"
DEFAULT_POLL_INTERVAL = "1s"


@dataclass(frozen=True, slots=True)
class Settings:
    """Application root and watcher settings."""

    root: str
    poll_interval: float = 1.0  # Seconds

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Settings:
        """Build settings from environment variables.

        ``ASSETPACK_ROOT`` defaults to the current working directory and
        ``ASSETPACK_POLL_INTERVAL`` accepts values such as ``"500ms"``.
        """
        env = os.environ if environ is None else environ
        root = env.get(ROOT_ENV_VAR) or os.getcwd()
        interval = env.get(POLL_INTERVAL_ENV_VAR) or DEFAULT_POLL_INTERVAL
        return cls(
            root=os.path.abspath(root),
            poll_interval=parse_interval(interval),
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Settings resolved once for the lifetime of the process."""
    return Settings.from_env()


def application_root() -> str:
    """Absolute directory that logical asset paths are resolved against."""
    return get_settings().root
