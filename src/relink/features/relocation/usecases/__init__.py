"""Relocation use cases: detection, scanning, matching and search-root validation."""

from .detect_missing import MissingTrackDetector
from .ports import FileSystemGateway, TrackReader, TrackWriter
from .relocate_tracks import TrackRelocator
from .search_root import require_search_root, validate_search_root
from .tree_scanner import TreeScanner

__all__ = [
    "FileSystemGateway",
    "MissingTrackDetector",
    "TrackReader",
    "TrackRelocator",
    "TrackWriter",
    "TreeScanner",
    "require_search_root",
    "validate_search_root",
]
