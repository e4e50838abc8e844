"""nmsweep data models."""

from nmsweep.models.scan_result import DirectoryEntry, ScanResult
from nmsweep.models.clean_result import DeletionOutcome, DeletionReport

__all__ = [
    "DeletionOutcome",
    "DeletionReport",
    "DirectoryEntry",
    "ScanResult",
]
