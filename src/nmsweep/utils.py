"""Shared utility functions."""

from __future__ import annotations

import shutil
from decimal import ROUND_HALF_UP, Decimal

_UNITS = ("Bytes", "KB", "MB", "GB")


def has_command(name: str) -> bool:
    """Check if a command exists on the system."""
    return shutil.which(name) is not None


def format_size(size_bytes: int) -> str:
    """Convert a byte count to a human-readable string.

    Uses 1024-based units up to GB and two decimal places with trailing
    zeros dropped, e.g. ``1536 -> "1.5 KB"``. Halves round up.
    """
    if size_bytes <= 0:
        return "0 Bytes"

    value = float(size_bytes)
    unit = 0
    while value >= 1024 and unit < len(_UNITS) - 1:
        value /= 1024
        unit += 1

    rounded = Decimal(value).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
    text = f"{rounded:f}".rstrip("0").rstrip(".")
    return f"{text} {_UNITS[unit]}"


def format_elapsed(seconds: float) -> str:
    """Format an elapsed time as a human-readable string."""
    if seconds < 1:
        return f"{seconds * 1000:.0f} ms"
    if seconds < 60:
        return f"{seconds:.1f}s"
    minutes = int(seconds) // 60
    secs = seconds - minutes * 60
    return f"{minutes}m {secs:.0f}s"
