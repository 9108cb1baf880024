"""Shared configuration helpers and dataclasses."""

from .errors import ConfigurationError
from .runtime import env_bool, env_int, env_str, read_dotenv
from .settings import (
    SUPPORTED_BACKENDS,
    FinderSettings,
    get_backend,
    get_finder_settings,
    get_log_level,
    get_proc_root,
)

__all__ = [
    "ConfigurationError",
    "FinderSettings",
    "SUPPORTED_BACKENDS",
    "env_bool",
    "env_int",
    "env_str",
    "get_backend",
    "get_finder_settings",
    "get_log_level",
    "get_proc_root",
    "read_dotenv",
]
