"""Process table backends.

Two backends read the live process table:

- ``ProcfsProcessTable`` walks a procfs root directly (``/proc`` on Linux).
- ``PsutilProcessTable`` asks psutil, which also works where no procfs exists.

Both raise ``ProcessTableEnumerationError`` when the table cannot be listed and
``ExecutablePathNotFoundError`` for any per-process resolution failure.
"""

from __future__ import annotations

import logging
import os
from typing import List, Optional

from .config import SUPPORTED_BACKENDS, ConfigurationError
from .config.settings import DEFAULT_PROC_ROOT
from .exceptions import ExecutablePathNotFoundError, ProcessTableEnumerationError
from .process_models import ProcessTable

logger = logging.getLogger(__name__)

_DELETED_SUFFIX = " (deleted)"


def parse_pid(name: str) -> Optional[int]:
    """Return the PID encoded in a process table entry name, or None."""
    # str.isdigit accepts non-ASCII digits such as "²"
    if not name or not name.isascii() or not name.isdigit():
        return None
    pid = int(name)
    if pid <= 0:
        return None
    return pid


def strip_deleted_suffix(path: str) -> str:
    """Drop the marker the kernel appends when the executable was unlinked."""
    if path.endswith(_DELETED_SUFFIX):
        return path[: -len(_DELETED_SUFFIX)]
    return path


class ProcfsProcessTable:
    """Reads the process table from a procfs mount."""

    def __init__(self, root: str = DEFAULT_PROC_ROOT):
        self.root = root

    def list_process_identifiers(self) -> List[int]:
        try:
            with os.scandir(self.root) as entries:
                names = [entry.name for entry in entries]
        except OSError as exc:
            raise ProcessTableEnumerationError(
                f"Cannot enumerate process table at {self.root}: {exc}",
                root=self.root,
            ) from exc

        pids: List[int] = []
        for name in names:
            pid = parse_pid(name)
            if pid is not None:
                pids.append(pid)
        return pids

    def resolve_executable_path(self, pid: int) -> str:
        link_path = os.path.join(self.root, str(pid), "exe")
        try:
            target = os.readlink(link_path)
        except OSError as exc:
            raise ExecutablePathNotFoundError(
                f"Cannot resolve executable for PID {pid}: {exc}",
                pid=pid,
            ) from exc
        return strip_deleted_suffix(target)


class PsutilProcessTable:
    """Reads the process table through psutil."""

    def list_process_identifiers(self) -> List[int]:
        import psutil

        try:
            return [pid for pid in psutil.pids() if pid > 0]
        except (psutil.Error, OSError) as exc:
            raise ProcessTableEnumerationError(f"Cannot enumerate process table via psutil: {exc}") from exc

    def resolve_executable_path(self, pid: int) -> str:
        import psutil

        try:
            path = psutil.Process(pid).exe()
        except (
            psutil.NoSuchProcess,
            psutil.AccessDenied,
            psutil.ZombieProcess,
            OSError,
        ) as exc:
            raise ExecutablePathNotFoundError(
                f"Cannot resolve executable for PID {pid}: {exc}",
                pid=pid,
            ) from exc
        if not path:
            # Kernel threads have no executable image
            raise ExecutablePathNotFoundError(f"PID {pid} has no executable image", pid=pid)
        return strip_deleted_suffix(path)


def create_process_table(backend: str = "procfs", proc_root: str = DEFAULT_PROC_ROOT) -> ProcessTable:
    """Build the process table backend named by *backend*."""
    normalized = backend.strip().lower()
    if normalized == "procfs":
        return ProcfsProcessTable(proc_root)
    if normalized == "psutil":
        return PsutilProcessTable()
    raise ConfigurationError.invalid_value("backend", backend, f"Expected one of {', '.join(SUPPORTED_BACKENDS)}")
