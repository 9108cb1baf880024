"""
Centralized logging configuration.

This module provides a single setup_logging function that configures the root
logger with:
- Console output at the configured level (stdout unless another stream is given)
- Optional file output (truncated on each start unless PIDFINDER_LOG_APPEND is set)
"""

import logging
import logging.handlers
import sys
import threading
from pathlib import Path
from typing import Optional, TextIO, Union

from pidfinder.config import ConfigurationError, env_bool, get_log_level

# Thread-safe lock for logging configuration
_config_lock = threading.Lock()
_MODULE_LOGGER = logging.getLogger(__name__)
_UNKNOWN_LOGGER_NAME = "<unknown>"

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _resolve_level(level: Optional[Union[int, str]]) -> int:
    if level is None:
        level = get_log_level()
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.strip().upper())
    if not isinstance(resolved, int):
        raise ConfigurationError.invalid_value("log level", level)
    return resolved


def _close_handlers(logger: logging.Logger, logger_name: Optional[str] = None) -> None:
    """Close all handlers for a logger, logging any errors."""
    for handler in list(logger.handlers):
        try:
            handler.close()
        except OSError as e:
            safe_name = logger_name if logger_name else _UNKNOWN_LOGGER_NAME
            _MODULE_LOGGER.debug("Handler close failed for logger '%s': %s", safe_name, e)


def _reset_root_handlers(root_logger: logging.Logger) -> None:
    _close_handlers(root_logger)
    root_logger.handlers = []


def _build_console_handler(level: int, stream: Optional[TextIO]) -> logging.Handler:
    console_handler = logging.StreamHandler(stream if stream is not None else sys.stdout)
    console_handler.setFormatter(logging.Formatter(LOG_FORMAT, LOG_DATE_FORMAT))
    console_handler.setLevel(level)
    return console_handler


def _build_file_handler(log_file: Path, level: int) -> logging.Handler:
    log_file.parent.mkdir(parents=True, exist_ok=True)
    file_mode = "a" if env_bool("PIDFINDER_LOG_APPEND", or_value=False) else "w"

    handler_cls = getattr(logging.handlers, "WatchedFileHandler", logging.FileHandler)
    file_handler = handler_cls(log_file, mode=file_mode)
    file_handler.setFormatter(logging.Formatter(LOG_FORMAT, LOG_DATE_FORMAT))
    file_handler.setLevel(level)
    return file_handler


def _suppress_noisy_third_parties() -> None:
    logging.getLogger("asyncio").setLevel(logging.WARNING)


def setup_logging(
    level: Optional[Union[int, str]] = None,
    *,
    log_file: Optional[Path] = None,
    stream: Optional[TextIO] = None,
) -> None:
    """Configure logging for the application. Console output goes to *stream*, stdout by default."""

    resolved_level = _resolve_level(level)

    with _config_lock:
        root_logger = logging.getLogger()
        _reset_root_handlers(root_logger)

        root_logger.addHandler(_build_console_handler(resolved_level, stream))
        if log_file is not None:
            root_logger.addHandler(_build_file_handler(Path(log_file).expanduser(), resolved_level))

        root_logger.setLevel(resolved_level)
        _suppress_noisy_third_parties()
