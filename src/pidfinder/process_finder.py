"""
Process Finder

Look up running processes by the basename of their executable image, the way
``pidof`` does.

Usage:
    from pidfinder.process_finder import find_process_ids

    nginx_pids = find_process_ids("nginx")

Every call performs its own scan of the process table. Per-process failures
(the process exited mid-scan, access was denied) are treated as non-matches;
only a failure to enumerate the table itself reaches the caller.
"""

from __future__ import annotations

import logging
import os
import string
from typing import Iterator, List, Optional

from .config import get_finder_settings
from .exceptions import ExecutablePathNotFoundError
from .process_models import ProcessEntry, ProcessTable
from .process_table import create_process_table

logger = logging.getLogger(__name__)

_ASCII_FOLD = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


def ascii_fold(value: str) -> str:
    """Lowercase ASCII letters only, independent of locale and Unicode rules."""
    return value.translate(_ASCII_FOLD)


def executable_basename(path: str) -> str:
    """Return the final component of an executable path."""
    return os.path.basename(path)


def names_match(binary_name: str, executable_path: str) -> bool:
    return ascii_fold(executable_basename(executable_path)) == ascii_fold(binary_name)


def default_process_table() -> ProcessTable:
    """Build the process table selected by configuration."""
    settings = get_finder_settings()
    return create_process_table(settings.backend, settings.proc_root)


class ProcessFinder:
    """Stateless lookup of PIDs by executable name over a process table."""

    def __init__(self, process_table: Optional[ProcessTable] = None):
        self.process_table = process_table if process_table is not None else default_process_table()

    def iter_entries(self) -> Iterator[ProcessEntry]:
        """
        Yield an entry for every process whose executable path resolves.

        Raises:
            ProcessTableEnumerationError: When the process table root cannot be listed.
        """
        for pid in self.process_table.list_process_identifiers():
            try:
                executable_path = self.process_table.resolve_executable_path(pid)
            except ExecutablePathNotFoundError as exc:
                logger.debug("Skipping PID %s: %s", pid, exc)
                continue
            yield ProcessEntry(pid=pid, executable_path=executable_path)

    def find_process_ids(self, binary_name: str, *, exclude_pid: Optional[int] = None) -> List[int]:
        """
        Return PIDs of processes whose executable basename equals *binary_name*.

        The comparison is ASCII case-insensitive. PIDs are returned in process
        table enumeration order.

        Args:
            binary_name: Executable basename to look for, e.g. ``"nginx"``
            exclude_pid: PID to leave out of the result

        Returns:
            Matching PIDs, possibly empty

        Raises:
            ProcessTableEnumerationError: When the process table root cannot be listed.
        """
        if not binary_name:
            return []

        matches: List[int] = []
        for entry in self.iter_entries():
            if exclude_pid is not None and entry.pid == exclude_pid:
                continue
            if names_match(binary_name, entry.executable_path):
                matches.append(entry.pid)

        logger.debug("Found %d process(es) for %r", len(matches), binary_name)
        return matches


def find_process_ids(
    binary_name: str,
    *,
    process_table: Optional[ProcessTable] = None,
    exclude_pid: Optional[int] = None,
) -> List[int]:
    """Return PIDs of processes running *binary_name*. See ``ProcessFinder.find_process_ids``."""
    return ProcessFinder(process_table).find_process_ids(binary_name, exclude_pid=exclude_pid)
