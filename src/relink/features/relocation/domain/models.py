"""Data structures that describe tracks and relocation outcomes."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Final

# How many directory levels below the search root are enumerated. Bounds the
# traversal on deep trees and reparse-point loops without cycle detection.
SCAN_MAX_DEPTH: Final[int] = 5


def basename(path: str) -> str:
    """Return the last component of ``path``, accepting both separator styles."""

    return path.replace("\\", "/").rstrip("/").rsplit("/", 1)[-1]


@dataclass(slots=True)
class Track:
    """A library record pointing at a media file.

    ``path`` is either absolute or relative to the library root and is the only
    field relocation changes.
    """

    id: int
    path: str

    @property
    def filename(self) -> str:
        """Basename of the stored path; the key used for matching."""

        return basename(self.path)


@dataclass(slots=True, frozen=True)
class TrackPathUpdate:
    """The ``{id, path}`` pair persisted for a relocated track."""

    id: int
    path: str

    @classmethod
    def from_track(cls, track: Track) -> "TrackPathUpdate":
        return cls(id=track.id, path=track.path)


class EntryKind(str, Enum):
    """Kind of a directory entry as seen without following symlinks."""

    FILE = "file"
    DIRECTORY = "directory"
    OTHER = "other"


@dataclass(slots=True, frozen=True)
class DirectoryEntry:
    """A single entry returned by directory enumeration."""

    name: str
    path: str
    kind: EntryKind


@dataclass(slots=True, frozen=True)
class DiscoveredFile:
    """A regular file found while scanning a search root."""

    name: str
    path: str


@dataclass(slots=True)
class RelocationResult:
    """Partition of missing tracks into relocated and still-missing lists."""

    relocated: list[Track] = field(default_factory=list)
    still_missing: list[Track] = field(default_factory=list)

    @property
    def updates(self) -> list[TrackPathUpdate]:
        """Store updates for every relocated track, in relocation order."""

        return [TrackPathUpdate.from_track(track) for track in self.relocated]


__all__ = [
    "DirectoryEntry",
    "DiscoveredFile",
    "EntryKind",
    "RelocationResult",
    "Track",
    "TrackPathUpdate",
    "basename",
]
