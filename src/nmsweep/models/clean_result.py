"""Deletion result dataclasses."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path


@dataclass(frozen=True, slots=True)
class DeletionOutcome:
    """Result of removing a single directory."""

    path: Path
    succeeded: bool
    error: str = ""


@dataclass(slots=True)
class DeletionReport:
    """Outcome of a deletion batch.

    ``freed_bytes`` is the size measured during the scan, not a
    re-measurement after deletion. If some removals fail the real
    amount of reclaimed space is lower, so it is reported as approximate.
    """

    outcomes: list[DeletionOutcome] = field(default_factory=list)
    freed_bytes: int = 0

    @property
    def deleted_count(self) -> int:
        return sum(1 for o in self.outcomes if o.succeeded)

    @property
    def failed(self) -> list[DeletionOutcome]:
        return [o for o in self.outcomes if not o.succeeded]

    @property
    def failed_paths(self) -> list[Path]:
        return [o.path for o in self.failed]
