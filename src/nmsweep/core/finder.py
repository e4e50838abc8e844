"""Depth-bounded search for ``node_modules`` directories."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from nmsweep.config import DEFAULT_MAX_DEPTH, SweepConfig

log = logging.getLogger(__name__)


def find_node_modules(
    root: Path | str,
    max_depth: int = DEFAULT_MAX_DEPTH,
    config: SweepConfig | None = None,
) -> list[Path]:
    """Collect every ``node_modules`` directory below *root*.

    The walk is depth-first. Matches are recorded and never descended
    into, hidden and excluded directories are skipped entirely, and
    directories at *max_depth* are listed but not recursed into.
    Directories that cannot be read are skipped silently.

    Args:
        root: Directory to start from.
        max_depth: How many levels below *root* may be descended.
        config: Target name and exclusion rules. Defaults to :class:`SweepConfig`.

    Returns:
        Matched paths, parents before children within each branch.
    """
    if max_depth < 0:
        raise ValueError(f"max_depth must be non-negative, got {max_depth}")

    config = config or SweepConfig()
    found: list[Path] = []
    _walk(Path(root), 0, max_depth, config, found)
    return found


def _walk(
    directory: Path,
    depth: int,
    max_depth: int,
    config: SweepConfig,
    found: list[Path],
) -> None:
    try:
        with os.scandir(directory) as it:
            children = sorted(it, key=lambda e: e.name)
    except OSError as e:
        log.debug("Cannot read %s: %s", directory, e)
        return

    for child in children:
        try:
            # Follows symlinks; cycles are cut off by the depth bound.
            if not child.is_dir():
                continue
        except OSError:
            log.debug("Cannot stat: %s", child.path)
            continue

        if config.is_excluded(child.name):
            continue

        path = directory / child.name
        if child.name == config.target_name:
            log.debug("Found %s", path)
            found.append(path)
            continue

        if depth < max_depth:
            _walk(path, depth + 1, max_depth, config, found)
