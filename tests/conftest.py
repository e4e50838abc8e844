"""Shared test fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest

from nmsweep.core.size import ScandirSizeStrategy, SizeProbe


def write_files(directory: Path, count: int, size: int) -> None:
    """Create *count* files of *size* bytes each in *directory*."""
    directory.mkdir(parents=True, exist_ok=True)
    for i in range(count):
        (directory / f"file{i}.js").write_bytes(b"x" * size)


@pytest.fixture
def projects(tmp_path):
    """Two projects: projA with 10 files (100 bytes) in node_modules, projB empty."""
    root = tmp_path / "work"
    write_files(root / "projA" / "node_modules", 10, 10)
    (root / "projA" / "index.js").write_text("console.log('a')\n")
    (root / "projB" / "node_modules").mkdir(parents=True)
    (root / "projB" / "package.json").write_text("{}\n")
    return root


@pytest.fixture
def scandir_probe():
    """Size probe that never shells out."""
    return SizeProbe([ScandirSizeStrategy()])
