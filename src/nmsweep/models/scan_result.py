"""Scan result dataclasses."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path


@dataclass(frozen=True, slots=True)
class DirectoryEntry:
    """A discovered ``node_modules`` directory and its measured size."""

    path: Path
    size_bytes: int


@dataclass(slots=True)
class ScanResult:
    """Result of scanning a root for ``node_modules`` directories.

    ``total_bytes`` is derived from the entries, so it always covers
    every discovered directory, not only the ones shown to the user.
    """

    root: Path
    entries: list[DirectoryEntry] = field(default_factory=list)

    @property
    def total_bytes(self) -> int:
        """Sum of all entry sizes."""
        return sum(e.size_bytes for e in self.entries)

    @property
    def paths(self) -> list[Path]:
        return [e.path for e in self.entries]

    def ranked(self) -> list[DirectoryEntry]:
        """Entries ordered largest first; equal sizes keep discovery order."""
        return sorted(self.entries, key=lambda e: e.size_bytes, reverse=True)
