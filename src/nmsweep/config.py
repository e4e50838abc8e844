"""Read-only configuration shared by the scanner and the CLI."""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType

TARGET_DIR_NAME = "node_modules"

DEFAULT_MAX_DEPTH = 5

# Number of directories listed before the rest is summarized.
DISPLAY_LIMIT = 20

# Platform library and system folders that never contain projects.
EXCLUDED_DIR_NAMES: frozenset[str] = frozenset({
    "Library",
    "Applications",
    "System",
    "Windows",
})

# click color names used by the reporter.
COLORS = MappingProxyType({
    "banner": "cyan",
    "info": "yellow",
    "path": "blue",
    "index": "magenta",
    "size": "cyan",
    "success": "green",
    "error": "red",
})


@dataclass(frozen=True, slots=True)
class SweepConfig:
    """Settings for one run. Instances are immutable."""

    target_name: str = TARGET_DIR_NAME
    max_depth: int = DEFAULT_MAX_DEPTH
    excluded_names: frozenset[str] = EXCLUDED_DIR_NAMES
    skip_hidden: bool = True
    display_limit: int = DISPLAY_LIMIT

    def is_excluded(self, name: str) -> bool:
        """Whether a directory name is skipped without descending into it."""
        if self.skip_hidden and name.startswith("."):
            return True
        return name in self.excluded_names
