from __future__ import annotations

"""Asyncio wrappers around the blocking process lookup."""

import asyncio
import logging
from typing import List, Optional

from .exceptions import ProcessLookupTimeoutError
from .process_finder import find_process_ids
from .process_models import ProcessTable

logger = logging.getLogger(__name__)


async def find_process_ids_async(
    binary_name: str,
    *,
    timeout_seconds: Optional[float] = None,
    process_table: Optional[ProcessTable] = None,
    exclude_pid: Optional[int] = None,
) -> List[int]:
    """
    Run ``find_process_ids`` in a worker thread so the event loop stays responsive.

    Args:
        binary_name: Executable basename to look for
        timeout_seconds: Upper bound on the lookup; None waits indefinitely
        process_table: Process table to scan; defaults to the configured backend
        exclude_pid: PID to leave out of the result

    Raises:
        ProcessLookupTimeoutError: If the lookup exceeds timeout_seconds
        ProcessTableEnumerationError: When the process table root cannot be listed
    """
    if timeout_seconds is not None and timeout_seconds <= 0:
        raise ValueError(f"timeout_seconds must be positive (got {timeout_seconds})")

    lookup = asyncio.to_thread(
        find_process_ids,
        binary_name,
        process_table=process_table,
        exclude_pid=exclude_pid,
    )
    try:
        return await asyncio.wait_for(lookup, timeout=timeout_seconds)
    except asyncio.TimeoutError as exc:
        # The worker thread cannot be interrupted; it finishes in the background
        logger.warning("Lookup for %r exceeded %ss", binary_name, timeout_seconds)
        raise ProcessLookupTimeoutError(
            f"Lookup for {binary_name!r} did not finish within {timeout_seconds}s",
            binary_name=binary_name,
            timeout_seconds=timeout_seconds,
        ) from exc
