from __future__ import annotations

from dataclasses import dataclass
from typing import List, Protocol


@dataclass(frozen=True)
class ProcessEntry:
    """A live process observed during a single scan."""

    pid: int
    executable_path: str


class ProcessTable(Protocol):
    """Minimal contract for a source of live processes."""

    def list_process_identifiers(self) -> List[int]: ...

    def resolve_executable_path(self, pid: int) -> str: ...
