"""CLI interface for nmsweep."""

from __future__ import annotations

import logging
import sys
import time
from pathlib import Path

import click

from nmsweep import __version__
from nmsweep.config import DEFAULT_MAX_DEPTH, SweepConfig
from nmsweep.confirm import confirm
from nmsweep.core.engine import InvalidRootError, SweepEngine
from nmsweep.reporter import Reporter

log = logging.getLogger(__name__)

CONFIRM_PROMPT = "Do you want to delete all these directories? (yes/no):"


def _setup_logging(verbosity: int) -> None:
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG
    logging.basicConfig(level=level, format="%(levelname)s: %(message)s")


@click.command()
@click.argument("path", required=False, type=click.Path(path_type=Path))
@click.option(
    "--max-depth", "-d",
    default=DEFAULT_MAX_DEPTH,
    show_default=True,
    type=click.IntRange(min=0),
    help="How many directory levels below PATH to search",
)
@click.option("--dry-run", is_flag=True, help="Show what would be deleted without doing it")
@click.option("--no-color", is_flag=True, help="Disable colored output")
@click.option("-v", "--verbose", count=True, help="Increase verbosity (-v info, -vv debug)")
@click.version_option(__version__, prog_name="nmsweep")
def main(path: Path | None, max_depth: int, dry_run: bool, no_color: bool, verbose: int) -> None:
    """Find node_modules directories below PATH and delete them.

    PATH defaults to the current directory. Nothing is deleted without
    answering "yes" to the confirmation prompt.
    """
    _setup_logging(verbose)
    config = SweepConfig(max_depth=max_depth)
    reporter = Reporter(color=False if no_color else None, limit=config.display_limit)
    reporter.banner()

    try:
        root = path if path is not None else Path.cwd()
        engine = SweepEngine(config)
        reporter.searching(root)
        started = time.monotonic()
        paths = engine.find(root)
    except InvalidRootError as exc:
        reporter.error(str(exc))
        sys.exit(1)
    except Exception as exc:
        log.debug("Startup failed", exc_info=True)
        reporter.error(str(exc))
        sys.exit(1)

    if not paths:
        reporter.nothing_found()
        return

    reporter.found(len(paths))
    scan = engine.measure(root, paths, on_progress=reporter.measuring)
    reporter.scan_result(scan, elapsed=time.monotonic() - started)

    if dry_run:
        reporter.dry_run()
        return

    prompt = CONFIRM_PROMPT if no_color else click.style(CONFIRM_PROMPT, fg="red")
    if not confirm(prompt):
        reporter.cancelled()
        return

    reporter.deleting()
    report = engine.delete(scan, on_progress=reporter.deletion_progress)
    reporter.deletion_report(report)
