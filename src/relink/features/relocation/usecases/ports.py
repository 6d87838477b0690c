"""Ports for the relocation feature.

Where: features/relocation/usecases.
What: Protocols describing the track store and filesystem the engine relies on.
Why: Keep detection, scanning and matching testable against in-memory fakes.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol, runtime_checkable

from ..domain.models import DirectoryEntry, Track, TrackPathUpdate


@runtime_checkable
class TrackReader(Protocol):
    """Read access to the track store."""

    def fetch_tracks(self) -> list[Track]:
        """Return a full snapshot of every track."""

        ...


@runtime_checkable
class TrackWriter(Protocol):
    """Batched write access to the track store."""

    def update_tracks(self, updates: Sequence[TrackPathUpdate]) -> int:
        """Persist all updates atomically; raise ``PersistenceFailure`` otherwise."""

        ...


class FileSystemGateway(Protocol):
    """Filesystem operations needed by the relocation use cases."""

    def exists(self, path: str) -> bool:
        """Return True if the path exists; access errors yield False."""

        ...

    def is_dir(self, path: str) -> bool:
        """Return True when the path is a directory; access errors yield False."""

        ...

    def is_file(self, path: str) -> bool:
        """Return True when the path is a regular file; access errors yield False."""

        ...

    def list_entries(self, path: str) -> list[DirectoryEntry]:
        """Return the direct entries of ``path``; raises ``OSError`` on failure."""

        ...
