"""Public surface for the relocation feature."""

from .domain.errors import (
    PersistenceFailure,
    RelocationError,
    ScanFailure,
    UnreadablePath,
    ValidationFailure,
)
from .domain.models import SCAN_MAX_DEPTH, DiscoveredFile, RelocationResult, Track, TrackPathUpdate
from .usecases.detect_missing import MissingTrackDetector
from .usecases.relocate_tracks import TrackRelocator
from .usecases.tree_scanner import TreeScanner

__all__ = [
    "DiscoveredFile",
    "MissingTrackDetector",
    "PersistenceFailure",
    "RelocationError",
    "RelocationResult",
    "SCAN_MAX_DEPTH",
    "ScanFailure",
    "Track",
    "TrackPathUpdate",
    "TrackRelocator",
    "TreeScanner",
    "UnreadablePath",
    "ValidationFailure",
]
