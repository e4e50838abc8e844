"""Scanning and deletion orchestration engine."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable

from nmsweep.config import SweepConfig
from nmsweep.core.deleter import DeleteProgressCallback, delete_directories
from nmsweep.core.finder import find_node_modules
from nmsweep.core.size import SizeProbe
from nmsweep.models.clean_result import DeletionReport
from nmsweep.models.scan_result import DirectoryEntry, ScanResult

log = logging.getLogger(__name__)

SizeProgressCallback = Callable[[int, int, Path], None]  # (index, total, path)


class InvalidRootError(Exception):
    """Raised when the scan root does not exist."""


class SweepEngine:
    """Finds, measures and deletes ``node_modules`` directories.

    Every phase runs sequentially: the walk completes before sizing
    starts, and each directory is measured before the next one.
    """

    def __init__(self, config: SweepConfig | None = None, probe: SizeProbe | None = None) -> None:
        self.config = config or SweepConfig()
        self.probe = probe or SizeProbe()

    def find(self, root: Path) -> list[Path]:
        """Locate matches below *root* without measuring them.

        Raises:
            InvalidRootError: If *root* does not exist.
        """
        if not root.exists():
            raise InvalidRootError(f'Path "{root}" does not exist')
        log.info("Searching %s (max depth %d)", root, self.config.max_depth)
        paths = find_node_modules(root, self.config.max_depth, self.config)
        log.info("Found %d %s directories", len(paths), self.config.target_name)
        return paths

    def measure(
        self,
        root: Path,
        paths: list[Path],
        on_progress: SizeProgressCallback | None = None,
    ) -> ScanResult:
        """Measure each path in order and build the scan result."""
        entries: list[DirectoryEntry] = []
        for index, path in enumerate(paths, 1):
            if on_progress:
                on_progress(index, len(paths), path)
            entries.append(DirectoryEntry(path=path, size_bytes=self.probe.size_of(path)))
        return ScanResult(root=root, entries=entries)

    def delete(
        self,
        scan: ScanResult,
        on_progress: DeleteProgressCallback | None = None,
    ) -> DeletionReport:
        """Delete every directory of a scan.

        The reported freed size is the scan total, not a re-measurement.
        """
        outcomes = delete_directories(scan.paths, on_progress=on_progress)
        report = DeletionReport(outcomes=outcomes, freed_bytes=scan.total_bytes)
        log.info(
            "Deleted %d of %d directories, %d failed",
            report.deleted_count,
            len(outcomes),
            len(report.failed),
        )
        return report
