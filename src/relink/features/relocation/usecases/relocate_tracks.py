"""Use cases matching missing tracks against files found under a search root."""

from __future__ import annotations

from collections.abc import Sequence
from logging import Logger, getLogger

from ..domain.models import SCAN_MAX_DEPTH, DiscoveredFile, RelocationResult, Track
from ..domain.paths import to_stored_path
from .ports import FileSystemGateway
from .tree_scanner import TreeScanner


class TrackRelocator:
    """Repair missing tracks by filename against a scanned search root.

    When several files share a basename, the first one in scan order wins.
    The scan order is deterministic (see ``TreeScanner``), so repeated runs
    over an unchanged tree pick the same file.
    """

    _scanner: TreeScanner
    _logger: Logger

    def __init__(
        self,
        filesystem: FileSystemGateway,
        *,
        scanner: TreeScanner | None = None,
        logger: Logger | None = None,
    ) -> None:
        self._logger = logger or getLogger(__name__)
        self._scanner = scanner or TreeScanner(filesystem, logger=self._logger)

    def relocate(
        self,
        missing: Sequence[Track],
        search_root: str,
        library_root: str,
    ) -> RelocationResult:
        """Partition ``missing`` into relocated and still-missing tracks.

        Matched tracks have ``path`` rewritten in place to the library-relative,
        forward-slash form of the discovered file.

        Raises:
            ScanFailure: The search root could not be enumerated; nothing is relocated.
        """

        discovered = self._scanner.scan(search_root, SCAN_MAX_DEPTH)
        candidates_by_name = self._group_by_name(discovered)

        result = RelocationResult()
        for track in missing:
            candidates = candidates_by_name.get(track.filename)
            if not candidates:
                result.still_missing.append(track)
                continue

            match = candidates[0]
            if len(candidates) > 1:
                self._log_ambiguous(track, match, candidates[1:], library_root)

            previous = track.path
            track.path = to_stored_path(match.path, library_root)
            self._logger.debug(
                "Relocated track %s: %s → %s",
                track.id,
                previous,
                track.path,
                extra={
                    "relocation_event": "relocation.track.relocated",
                    "track_id": track.id,
                    "source_path": previous,
                    "target_path": track.path,
                },
            )
            result.relocated.append(track)

        return result

    @staticmethod
    def _group_by_name(discovered: Sequence[DiscoveredFile]) -> dict[str, list[DiscoveredFile]]:
        grouped: dict[str, list[DiscoveredFile]] = {}
        for candidate in discovered:
            grouped.setdefault(candidate.name, []).append(candidate)
        return grouped

    def _log_ambiguous(
        self,
        track: Track,
        match: DiscoveredFile,
        ignored: Sequence[DiscoveredFile],
        library_root: str,
    ) -> None:
        self._logger.warning(
            "Track %s matches %d files named %s; using %s, ignoring %s",
            track.id,
            len(ignored) + 1,
            match.name,
            match.path,
            ", ".join(candidate.path for candidate in ignored),
            extra={
                "relocation_event": "relocation.track.ambiguous",
                "track_id": track.id,
                "target_path": match.path,
                "ignored_count": len(ignored),
                "library_root": library_root,
            },
        )


__all__ = ["TrackRelocator"]
