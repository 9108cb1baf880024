from __future__ import annotations

"""Runtime helpers for working with environment-backed configuration.

Values come from the process environment first. Variables that are unset or
blank fall back to ``KEY=value`` lines in the first ``.env`` candidate that
declares them.
"""


import os
from pathlib import Path
from typing import Callable, Optional, TypeVar

from .errors import ConfigurationError

T = TypeVar("T")

_TRUE_VALUES = {"1", "true", "t", "yes", "y", "on"}
_FALSE_VALUES = {"0", "false", "f", "no", "n", "off"}
_QUOTES = ("'", '"')
_EXPORT_PREFIX = "export "

_DOTENV_CANDIDATES = (Path(".env"), Path.home() / ".env")

_DEFAULT_VALUES: dict[str, str] | None = None


def _unquote(value: str) -> str:
    if len(value) >= 2 and value[0] == value[-1] and value[0] in _QUOTES:
        return value[1:-1]
    return value


def read_dotenv(path: Path) -> dict[str, str]:
    """
    Parse a ``.env`` file into a mapping.

    Blank lines, ``#`` comments and lines without ``=`` are ignored. An
    ``export`` prefix and one pair of matching quotes around the value are
    removed. A missing file yields an empty mapping.

    Raises:
        ConfigurationError: If the file exists but cannot be read
    """
    try:
        text = path.read_text()
    except FileNotFoundError:
        return {}
    except OSError as exc:
        raise ConfigurationError(f"Failed to load configuration from {path}") from exc

    values: dict[str, str] = {}
    for line in text.splitlines():
        stripped = line.strip()
        if not stripped or stripped.startswith("#"):
            continue
        key, sep, raw_value = stripped.partition("=")
        if not sep:
            continue
        key = key.strip()
        if key.startswith(_EXPORT_PREFIX):
            key = key[len(_EXPORT_PREFIX) :].strip()
        if key:
            values[key] = _unquote(raw_value.strip())
    return values


def _load_default_values() -> dict[str, str]:
    global _DEFAULT_VALUES
    if _DEFAULT_VALUES is not None:
        return _DEFAULT_VALUES

    defaults: dict[str, str] = {}
    for path in _DOTENV_CANDIDATES:
        for key, value in read_dotenv(path).items():
            # Earlier candidates win
            defaults.setdefault(key, value)

    _DEFAULT_VALUES = defaults
    return defaults


def _default_value(name: str) -> Optional[str]:
    return _load_default_values().get(name)


def _normalize(value: str | None, *, strip: bool) -> str | None:
    if value is None:
        return None
    return value.strip() if strip else value


def _coerce(name: str, raw_value: str, *, cast: Callable[[str], T], kind: str) -> T:
    try:
        return cast(raw_value)
    except (TypeError, ValueError) as exc:
        raise ConfigurationError(f"Environment variable {name!r} must be {kind} (got {raw_value!r})") from exc


def env_str(
    name: str,
    or_value: str | None = None,
    *,
    required: bool = False,
    strip: bool = True,
    allow_blank: bool = False,
) -> str | None:
    """Fetch an environment variable as a string with validation."""

    value = _normalize(os.getenv(name), strip=strip)

    if value is None or (not allow_blank and value == ""):
        configured_default = _default_value(name)
        if configured_default is not None:
            value = _normalize(configured_default, strip=strip)

    if value is None or (not allow_blank and value == ""):
        if required:
            raise ConfigurationError(f"Required environment variable {name!r} is not set")
        return or_value
    return value


def env_int(name: str, or_value: int | None = None, *, required: bool = False) -> int | None:
    """Fetch an environment variable and coerce it to ``int``."""

    raw = env_str(name, strip=True, allow_blank=False)
    if raw is None:
        if required and or_value is None:
            raise ConfigurationError(f"Required environment variable {name!r} is not set")
        return or_value
    return _coerce(name, raw, cast=int, kind="an integer")


def env_bool(name: str, or_value: bool | None = None, *, required: bool = False) -> bool | None:
    """Fetch an environment variable and coerce it to ``bool``."""

    raw = env_str(name, strip=True, allow_blank=False)
    if raw is None:
        if required and or_value is None:
            raise ConfigurationError(f"Required environment variable {name!r} is not set")
        return or_value

    lowered = raw.lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    raise ConfigurationError(f"Environment variable {name!r} must be a boolean (got {raw!r})")
