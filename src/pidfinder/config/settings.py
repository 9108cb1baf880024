from __future__ import annotations

"""Settings consumed by the finder, the CLI and logging setup.

Each field has its own reader so a caller that overrides one field (the CLI's
``--backend`` for instance) never trips over a bad value in another.
"""


import logging
from dataclasses import dataclass
from functools import lru_cache

from .errors import ConfigurationError
from .runtime import env_str

DEFAULT_PROC_ROOT = "/proc"
DEFAULT_BACKEND = "procfs"
DEFAULT_LOG_LEVEL = "WARNING"

SUPPORTED_BACKENDS = ("procfs", "psutil")


@dataclass(frozen=True)
class FinderSettings:
    proc_root: str
    backend: str
    log_level: str


def get_proc_root() -> str:
    return env_str("PIDFINDER_PROC_ROOT", or_value=DEFAULT_PROC_ROOT)


def get_backend() -> str:
    backend = env_str("PIDFINDER_BACKEND", or_value=DEFAULT_BACKEND).lower()
    if backend not in SUPPORTED_BACKENDS:
        raise ConfigurationError.invalid_value(
            "PIDFINDER_BACKEND", backend, f"Expected one of {', '.join(SUPPORTED_BACKENDS)}"
        )
    return backend


def get_log_level() -> str:
    log_level = env_str("PIDFINDER_LOG_LEVEL", or_value=DEFAULT_LOG_LEVEL).upper()
    if not isinstance(logging.getLevelName(log_level), int):
        raise ConfigurationError.invalid_value("PIDFINDER_LOG_LEVEL", log_level)
    return log_level


@lru_cache(maxsize=1)
def get_finder_settings() -> FinderSettings:
    return FinderSettings(proc_root=get_proc_root(), backend=get_backend(), log_level=get_log_level())
