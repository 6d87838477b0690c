"""Use case that finds tracks whose stored path no longer exists."""

from __future__ import annotations

from collections.abc import Iterable
from logging import Logger, getLogger

from ..domain.models import Track
from ..domain.paths import resolve_track_path
from .ports import FileSystemGateway


class MissingTrackDetector:
    """Classify tracks as present or missing against a library root."""

    _filesystem: FileSystemGateway
    _logger: Logger

    def __init__(self, filesystem: FileSystemGateway, *, logger: Logger | None = None) -> None:
        self._filesystem = filesystem
        self._logger = logger or getLogger(__name__)

    def detect(self, tracks: Iterable[Track], library_root: str) -> list[Track]:
        """Return the missing tracks in input order.

        Stored paths are only resolved for the existence check; tracks are
        returned untouched.
        """

        missing: list[Track] = []
        for track in tracks:
            resolved = resolve_track_path(track.path, library_root)
            if self._filesystem.exists(resolved):
                continue
            self._logger.debug(
                "Track %s is missing: %s",
                track.id,
                resolved,
                extra={
                    "relocation_event": "relocation.track.missing",
                    "track_id": track.id,
                    "source_path": resolved,
                    "library_root": library_root,
                },
            )
            missing.append(track)
        return missing


__all__ = ["MissingTrackDetector"]
