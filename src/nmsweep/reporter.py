"""Terminal output for scan and deletion results."""

from __future__ import annotations

from pathlib import Path

import click

from nmsweep.config import COLORS, DISPLAY_LIMIT
from nmsweep.models.clean_result import DeletionOutcome, DeletionReport
from nmsweep.models.scan_result import ScanResult
from nmsweep.utils import format_elapsed, format_size

_RULE = "═" * 39


class Reporter:
    """Writes human-readable progress and results to the terminal.

    Args:
        color: Force colors on or off. ``None`` lets click decide based
            on whether the output is a terminal.
        limit: Maximum number of directories listed after a scan.
    """

    def __init__(self, color: bool | None = None, limit: int = DISPLAY_LIMIT) -> None:
        self.color = color
        self.limit = limit
        self._deleted = 0

    def _style(self, text: str, role: str, **kwargs) -> str:
        return click.style(text, fg=COLORS[role], **kwargs)

    def echo(self, message: str = "", err: bool = False, nl: bool = True) -> None:
        click.echo(message, err=err, nl=nl, color=self.color)

    def banner(self) -> None:
        self.echo(self._style("╔════════════════════════════════════════╗", "banner"))
        self.echo(self._style("║   Clean Node Modules Tool              ║", "banner"))
        self.echo(self._style("╚════════════════════════════════════════╝", "banner"))
        self.echo()

    def searching(self, root: Path) -> None:
        self.echo(self._style("Searching for node_modules directories in:", "info"))
        self.echo(self._style(str(root), "path"))
        self.echo()
        self.echo(self._style("This may take a moment...", "info"))
        self.echo()

    def error(self, message: str) -> None:
        self.echo(self._style(f"Error: {message}", "error"), err=True)

    def nothing_found(self) -> None:
        self.echo(self._style("No node_modules directories found!", "success"))

    def found(self, count: int) -> None:
        self.echo(self._style(f"Found {count} node_modules directories:", "success"))
        self.echo()

    def measuring(self, index: int, total: int, path: Path) -> None:
        self.echo(f"\rMeasuring {index}/{total}", nl=False)
        if index == total:
            self.echo("\n")

    def scan_result(self, scan: ScanResult, elapsed: float | None = None) -> None:
        """Print the largest directories and the total over all of them."""
        ranked = scan.ranked()
        for position, entry in enumerate(ranked[: self.limit], 1):
            self.echo(f"{self._style(f'{position}.', 'index')} {entry.path}")
            self.echo(f"   {self._style(f'Size: {format_size(entry.size_bytes)}', 'size')}")

        hidden = len(ranked) - self.limit
        if hidden > 0:
            self.echo()
            self.echo(self._style(f"... and {hidden} more", "info"))

        self.echo()
        self.echo(self._style(_RULE, "info"))
        self.echo(self._style(f"Total size: {format_size(scan.total_bytes)}", "success", bold=True))
        if elapsed is not None:
            self.echo(f"Scanned in {format_elapsed(elapsed)}")
        self.echo(self._style(_RULE, "info"))
        self.echo()

    def dry_run(self) -> None:
        self.echo("(dry run, no directories were deleted)")

    def cancelled(self) -> None:
        self.echo(self._style("Operation cancelled.", "info"))

    def deleting(self) -> None:
        self._deleted = 0
        self.echo()
        self.echo(self._style("Deleting...", "info"))
        self.echo()

    def deletion_progress(self, index: int, total: int, outcome: DeletionOutcome) -> None:
        if outcome.succeeded:
            self._deleted += 1
            self.echo(self._style(f"Deleted {self._deleted}/{total}", "success") + "\r", nl=False)
        else:
            self.echo()
            message = f"Failed to delete: {outcome.path}"
            if outcome.error:
                message += f" ({outcome.error})"
            self.echo(self._style(message, "error"), err=True)

    def deletion_report(self, report: DeletionReport) -> None:
        """Print the batch summary; freed space is the scan estimate."""
        self.echo()
        self.echo()
        self.echo(self._style(f"✓ Successfully deleted {report.deleted_count} directories!", "success"))
        if report.failed:
            self.echo(self._style(f"✗ {len(report.failed)} directories could not be deleted:", "error"), err=True)
            for path in report.failed_paths:
                self.echo(f"  {path}", err=True)
        self.echo(self._style(f"Freed up approximately {format_size(report.freed_bytes)}", "size"))
