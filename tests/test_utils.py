"""Tests for formatting helpers."""

from __future__ import annotations

import pytest

from nmsweep.utils import format_elapsed, format_size, has_command


class TestFormatSize:
    @pytest.mark.parametrize(
        ("size", "expected"),
        [
            (0, "0 Bytes"),
            (1, "1 Bytes"),
            (1023, "1023 Bytes"),
            (1024, "1 KB"),
            (1536, "1.5 KB"),
            (1152, "1.13 KB"),
            (1024 * 1024, "1 MB"),
            (int(2.25 * 1024 * 1024), "2.25 MB"),
            (1073741824, "1 GB"),
            (1234567890, "1.15 GB"),
        ],
    )
    def test_values(self, size, expected):
        assert format_size(size) == expected

    def test_caps_at_gigabytes(self):
        assert format_size(2048 * 1024**3) == "2048 GB"


class TestFormatElapsed:
    def test_millis(self):
        assert format_elapsed(0.25) == "250 ms"

    def test_seconds(self):
        assert format_elapsed(12.34) == "12.3s"

    def test_minutes(self):
        assert format_elapsed(125) == "2m 5s"


class TestHasCommand:
    def test_found(self, monkeypatch):
        monkeypatch.setattr("shutil.which", lambda name: f"/usr/bin/{name}")
        assert has_command("find") is True

    def test_not_found(self, monkeypatch):
        monkeypatch.setattr("shutil.which", lambda name: None)
        assert has_command("find") is False
