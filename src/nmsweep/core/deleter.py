"""Recursive removal of discovered directories."""

from __future__ import annotations

import logging
import shutil
from pathlib import Path
from typing import Callable, Iterable

from nmsweep.models.clean_result import DeletionOutcome

log = logging.getLogger(__name__)

DeleteProgressCallback = Callable[[int, int, DeletionOutcome], None]  # (index, total, outcome)


def remove_directory(path: Path) -> None:
    """Remove *path* and everything below it.

    A path that no longer exists is left alone. A symlink is unlinked
    without touching its target.
    """
    if path.is_symlink():
        path.unlink()
    elif path.is_dir():
        shutil.rmtree(path)
    elif path.exists():
        path.unlink()


def delete_directories(
    paths: Iterable[Path],
    on_progress: DeleteProgressCallback | None = None,
) -> list[DeletionOutcome]:
    """Remove each path in order and return one outcome per path.

    Failures are recorded and do not stop the batch. A path that is
    already gone, before or during its removal, counts as deleted.
    """
    paths = list(paths)
    outcomes: list[DeletionOutcome] = []

    for index, path in enumerate(paths, 1):
        try:
            remove_directory(path)
            outcome = DeletionOutcome(path=path, succeeded=True)
        except OSError as e:
            if not path.exists() and not path.is_symlink():
                log.debug("%s disappeared during removal", path)
                outcome = DeletionOutcome(path=path, succeeded=True)
            else:
                log.info("Failed to delete %s: %s", path, e)
                outcome = DeletionOutcome(path=path, succeeded=False, error=str(e))

        outcomes.append(outcome)
        if on_progress:
            on_progress(index, len(paths), outcome)

    return outcomes
