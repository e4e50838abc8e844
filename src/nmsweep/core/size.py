"""Directory size measurement.

Sizes are the sum of the apparent sizes of all regular files below a
directory. Two strategies exist: GNU ``find`` (C-speed walk) and a pure
Python ``os.scandir`` walk. :class:`SizeProbe` tries them in order and
falls back to the next one on failure.
"""

from __future__ import annotations

import logging
import os
import subprocess
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Sequence

from nmsweep.utils import has_command

log = logging.getLogger(__name__)

# Timeout for a single ``find`` invocation (seconds).
_FIND_TIMEOUT = 60


class SizeProbeError(Exception):
    """Raised when a size strategy cannot measure a directory."""


class SizeStrategy(ABC):
    """A way of computing the total byte size of a directory tree."""

    name: str = "strategy"

    def is_available(self) -> bool:
        """Whether this strategy can run on the current system."""
        return True

    @abstractmethod
    def measure(self, path: Path) -> int:
        """Return the size of *path* in bytes.

        Raises:
            SizeProbeError: If the size could not be determined.
        """


class FindSizeStrategy(SizeStrategy):
    """Walk a directory tree using GNU find (pure C, no Python per-file overhead)."""

    name = "find"

    def __init__(self, timeout: float = _FIND_TIMEOUT) -> None:
        self._timeout = timeout

    def is_available(self) -> bool:
        return has_command("find")

    def measure(self, path: Path) -> int:
        try:
            proc = subprocess.run(
                ["find", str(path), "-type", "f", "-printf", "%s\n"],
                capture_output=True,
                timeout=self._timeout,
            )
        except (OSError, subprocess.TimeoutExpired) as e:
            raise SizeProbeError(f"find failed for {path}: {e}") from e

        # find exits non-zero when parts of the tree are unreadable but
        # still prints what it could see.
        if proc.returncode != 0 and not proc.stdout:
            stderr = proc.stderr.decode(errors="replace").strip()
            raise SizeProbeError(f"find exited with {proc.returncode} for {path}: {stderr}")

        total = 0
        try:
            for line in proc.stdout.split(b"\n"):
                if line:
                    total += int(line)
        except ValueError as e:
            raise SizeProbeError(f"Unexpected find output for {path}") from e
        return total


class ScandirSizeStrategy(SizeStrategy):
    """Walk a directory tree using os.scandir (pure Python fallback).

    Unreadable files and directories contribute nothing. Symlinks are
    not followed, including *path* itself, so a linked directory
    measures 0 as it does with ``find``.
    """

    name = "scandir"

    def measure(self, path: Path) -> int:
        if os.path.islink(path):
            return 0
        total = 0
        stack: list[Path | str] = [path]
        while stack:
            current = stack.pop()
            try:
                with os.scandir(current) as it:
                    for entry in it:
                        try:
                            if entry.is_file(follow_symlinks=False):
                                total += entry.stat(follow_symlinks=False).st_size
                            elif entry.is_dir(follow_symlinks=False):
                                stack.append(entry.path)
                        except OSError:
                            log.debug("Cannot stat: %s", entry.path)
            except OSError:
                log.debug("Cannot read directory: %s", current)
        return total


def default_strategies() -> list[SizeStrategy]:
    return [FindSizeStrategy(), ScandirSizeStrategy()]


class SizeProbe:
    """Measures directory sizes with automatic strategy fallback.

    :meth:`size_of` never raises. If every strategy fails the directory
    is reported as empty, so a broken measurement undercounts instead of
    aborting the run.
    """

    def __init__(self, strategies: Sequence[SizeStrategy] | None = None) -> None:
        if strategies is None:
            strategies = default_strategies()
        self._strategies = [s for s in strategies if s.is_available()]
        log.debug("Size strategies: %s", ", ".join(s.name for s in self._strategies) or "none")

    @property
    def strategies(self) -> list[SizeStrategy]:
        return list(self._strategies)

    def size_of(self, path: Path) -> int:
        """Return the size of *path* in bytes, or 0 if it cannot be measured."""
        for strategy in self._strategies:
            try:
                return strategy.measure(path)
            except (SizeProbeError, OSError) as e:
                log.debug("Size strategy '%s' failed: %s", strategy.name, e)
        log.warning("Could not measure size of %s", path)
        return 0
