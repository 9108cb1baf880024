"""Command-line entry point: print the PIDs of processes running a named binary.

Usage:
    pidfinder nginx
    pidfinder -s -o %PPID python3
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from typing import List, Optional, Sequence, Set

from .config import SUPPORTED_BACKENDS, ConfigurationError, get_backend, get_proc_root
from .exceptions import ProcessTableEnumerationError
from .logging_config import setup_logging
from .process_finder import ProcessFinder
from .process_table import create_process_table

logger = logging.getLogger(__name__)

EXIT_FOUND = 0
EXIT_NOT_FOUND = 1
EXIT_FAILURE = 2

PARENT_PID_TOKEN = "%PPID"


def _parse_omitted_pid(value: str) -> int:
    if value == PARENT_PID_TOKEN:
        return os.getppid()
    try:
        pid = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid PID: {value!r}") from exc
    if pid <= 0:
        raise argparse.ArgumentTypeError(f"PID must be positive: {value!r}")
    return pid


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pidfinder",
        description="Print the PIDs of running processes whose executable matches NAME (case-insensitive).",
    )
    parser.add_argument("names", nargs="+", metavar="NAME", help="executable basename to look for")
    parser.add_argument("-s", "--single-shot", action="store_true", help="print only the first matching PID")
    parser.add_argument(
        "-o",
        "--omit",
        action="append",
        default=[],
        type=_parse_omitted_pid,
        metavar="PID",
        help=f"omit this PID from the output; {PARENT_PID_TOKEN} means the parent process (repeatable)",
    )
    parser.add_argument("--backend", choices=SUPPORTED_BACKENDS, help="process table backend")
    parser.add_argument("--proc-root", help="procfs mount to scan (procfs backend only)")
    parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    return parser


def collect_pids(finder: ProcessFinder, names: Sequence[str], omitted: Set[int], single_shot: bool) -> List[int]:
    """Gather matching PIDs across names, skipping omitted and repeated PIDs."""
    seen: Set[int] = set()
    collected: List[int] = []
    for name in names:
        for pid in finder.find_process_ids(name):
            if pid in omitted or pid in seen:
                continue
            seen.add(pid)
            collected.append(pid)
            if single_shot:
                return collected
    return collected


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        # stdout carries only the PID list
        setup_logging(logging.DEBUG if args.verbose else None, stream=sys.stderr)
        process_table = create_process_table(
            args.backend or get_backend(),
            args.proc_root or get_proc_root(),
        )
        # The CLI never reports itself
        omitted = set(args.omit) | {os.getpid()}
        pids = collect_pids(ProcessFinder(process_table), args.names, omitted, args.single_shot)
    except (ProcessTableEnumerationError, ConfigurationError) as exc:
        print(f"pidfinder: {exc}", file=sys.stderr)
        return EXIT_FAILURE

    if not pids:
        logger.debug("No process found for %s", ", ".join(args.names))
        return EXIT_NOT_FOUND

    print(" ".join(str(pid) for pid in pids))
    return EXIT_FOUND


if __name__ == "__main__":
    sys.exit(main())
