"""Exception classes for process lookup.

All custom exceptions inherit from ApplicationError so callers can catch the
whole family at once. Each concrete class also inherits the builtin it stands
in for, so ``except OSError`` keeps working for enumeration failures.

Exception classes support two patterns:
1. No-argument raise: raise ProcessTableEnumerationError()
2. Contextual attributes: err = ProcessTableEnumerationError(root="/proc"); raise err
"""

from typing import Any

from ..config.errors import ConfigurationError


class ApplicationError(Exception):
    """Base exception for all application errors.

    Supports keyword arguments that are stored as attributes for debugging.
    """

    def __init__(self, message: str = "", **kwargs: Any) -> None:
        if not message:
            message = self.__class__.__doc__ or "Application error occurred"
        super().__init__(message)
        for key, value in kwargs.items():
            setattr(self, key, value)


class ProcessTableEnumerationError(ApplicationError, OSError):
    """Process table root could not be enumerated."""

    def __init__(self, message: str = "", **kwargs: Any) -> None:
        if not message:
            message = "Process table root could not be enumerated"
        super().__init__(message, **kwargs)


class ExecutablePathNotFoundError(ApplicationError, LookupError):
    """Executable image path could not be resolved for a process."""

    def __init__(self, message: str = "", **kwargs: Any) -> None:
        if not message:
            message = "Executable image path could not be resolved"
        super().__init__(message, **kwargs)


class ProcessLookupTimeoutError(ApplicationError, TimeoutError):
    """Process lookup did not finish within the allotted time."""

    def __init__(self, message: str = "", **kwargs: Any) -> None:
        if not message:
            message = "Process lookup timed out"
        super().__init__(message, **kwargs)


__all__ = [
    "ApplicationError",
    "ConfigurationError",
    "ExecutablePathNotFoundError",
    "ProcessLookupTimeoutError",
    "ProcessTableEnumerationError",
]
