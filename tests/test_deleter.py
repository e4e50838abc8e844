"""Tests for directory removal."""

from __future__ import annotations

import os
import shutil

import pytest

from nmsweep.core.deleter import delete_directories, remove_directory
from nmsweep.models.clean_result import DeletionOutcome


class TestRemoveDirectory:
    def test_removes_tree(self, projects):
        target = projects / "projA" / "node_modules"
        remove_directory(target)
        assert not target.exists()
        assert (projects / "projA" / "index.js").exists()

    def test_missing_path_is_noop(self, tmp_path):
        remove_directory(tmp_path / "gone")

    def test_symlink_removes_link_only(self, tmp_path):
        real = tmp_path / "real"
        real.mkdir()
        (real / "keep.txt").write_text("keep")
        link = tmp_path / "node_modules"
        link.symlink_to(real, target_is_directory=True)

        remove_directory(link)
        assert not link.is_symlink()
        assert (real / "keep.txt").exists()


class TestDeleteDirectories:
    def test_deletes_all(self, projects):
        paths = [projects / "projA" / "node_modules", projects / "projB" / "node_modules"]
        outcomes = delete_directories(paths)

        assert [o.succeeded for o in outcomes] == [True, True]
        assert [o.path for o in outcomes] == paths
        assert not any(p.exists() for p in paths)
        assert (projects / "projB" / "package.json").exists()

    def test_vanished_path_is_success(self, tmp_path):
        outcomes = delete_directories([tmp_path / "already_gone" / "node_modules"])
        assert outcomes == [DeletionOutcome(path=tmp_path / "already_gone" / "node_modules", succeeded=True)]

    def test_failure_does_not_abort_batch(self, tmp_path, monkeypatch):
        first = tmp_path / "a" / "node_modules"
        second = tmp_path / "b" / "node_modules"
        first.mkdir(parents=True)
        second.mkdir(parents=True)

        real_rmtree = shutil.rmtree

        def flaky_rmtree(path, *args, **kwargs):
            if path == first:
                raise PermissionError(13, "Permission denied", str(path))
            return real_rmtree(path, *args, **kwargs)

        monkeypatch.setattr("nmsweep.core.deleter.shutil.rmtree", flaky_rmtree)
        outcomes = delete_directories([first, second])

        assert outcomes[0].succeeded is False
        assert "Permission denied" in outcomes[0].error
        assert outcomes[1].succeeded is True
        assert first.exists()
        assert not second.exists()

    def test_disappearing_during_removal_is_success(self, tmp_path, monkeypatch):
        target = tmp_path / "node_modules"
        target.mkdir()
        real_rmtree = shutil.rmtree

        def racing_rmtree(path, *args, **kwargs):
            real_rmtree(path)
            raise FileNotFoundError(2, "No such file or directory", str(path))

        monkeypatch.setattr("nmsweep.core.deleter.shutil.rmtree", racing_rmtree)
        outcomes = delete_directories([target])
        assert outcomes[0].succeeded is True

    def test_progress_callback(self, projects):
        events: list[tuple[int, int, bool]] = []
        delete_directories(
            [projects / "projA" / "node_modules", projects / "projB" / "node_modules"],
            on_progress=lambda i, n, outcome: events.append((i, n, outcome.succeeded)),
        )
        assert events == [(1, 2, True), (2, 2, True)]

    @pytest.mark.skipif(os.geteuid() == 0, reason="root can delete anything")
    def test_permission_denied_recorded(self, tmp_path):
        parent = tmp_path / "proj"
        target = parent / "node_modules"
        (target / "pkg").mkdir(parents=True)
        (target / "pkg" / "index.js").write_text("x")
        (target / "pkg").chmod(0o500)
        try:
            outcomes = delete_directories([target])
        finally:
            (target / "pkg").chmod(0o755)

        assert outcomes[0].succeeded is False
        assert outcomes[0].error
        assert target.exists()
