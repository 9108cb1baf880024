"""Find running processes by executable name."""

from .async_helpers import find_process_ids_async
from .exceptions import (
    ApplicationError,
    ConfigurationError,
    ExecutablePathNotFoundError,
    ProcessLookupTimeoutError,
    ProcessTableEnumerationError,
)
from .process_finder import ProcessFinder, find_process_ids
from .process_models import ProcessEntry, ProcessTable
from .process_table import ProcfsProcessTable, PsutilProcessTable, create_process_table

__all__ = [
    "ApplicationError",
    "ConfigurationError",
    "ExecutablePathNotFoundError",
    "ProcessEntry",
    "ProcessFinder",
    "ProcessLookupTimeoutError",
    "ProcessTable",
    "ProcessTableEnumerationError",
    "ProcfsProcessTable",
    "PsutilProcessTable",
    "create_process_table",
    "find_process_ids",
    "find_process_ids_async",
]
