"""Application service to find missing tracks and relink them to moved files."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from contextlib import AbstractContextManager, nullcontext
from dataclasses import dataclass
from logging import Logger, getLogger
from pathlib import Path
from typing import Protocol, final

from relink.config.paths import default_database_path
from relink.features.relocation import (
    MissingTrackDetector,
    RelocationResult,
    Track,
    TrackPathUpdate,
    TrackRelocator,
)
from relink.features.relocation.adapters import LocalFileSystemGateway, SqliteTrackRepository
from relink.features.relocation.usecases.ports import FileSystemGateway, TrackReader, TrackWriter
from relink.features.relocation.usecases.search_root import require_search_root
from relink.platform.db.db_manager import DatabaseManager


@dataclass(slots=True)
class RelocateServiceRequest:
    """Parameters describing a relocation run."""

    library_root: Path
    search_root: Path | None = None
    dry_run: bool = False


@dataclass(slots=True)
class RelocationOutcome:
    """What a relocation run found, changed and saved."""

    missing: list[Track]
    result: RelocationResult | None = None
    search_root: Path | None = None
    saved: int = 0


class RelocationReporter(Protocol):
    """Observer notified as the workflow moves through its stages."""

    def stage(self, label: str) -> AbstractContextManager[object]:
        """Wrap a running stage (for a spinner or similar)."""
        ...

    def missing_detected(self, missing: Sequence[Track]) -> None:
        ...

    def relocation_finished(self, result: RelocationResult) -> None:
        ...

    def save_finished(self, saved: int, *, dry_run: bool) -> None:
        ...


class SilentReporter:
    """Reporter that ignores every notification."""

    def stage(self, label: str) -> AbstractContextManager[object]:
        return nullcontext()

    def missing_detected(self, missing: Sequence[Track]) -> None:
        return None

    def relocation_finished(self, result: RelocationResult) -> None:
        return None

    def save_finished(self, saved: int, *, dry_run: bool) -> None:
        return None


@final
class RelocateMusicService:
    """Application façade wiring adapters into the relocation use cases."""

    _reader: TrackReader
    _writer: TrackWriter
    _filesystem: FileSystemGateway
    _detector: MissingTrackDetector
    _relocator: TrackRelocator
    _logger: Logger

    def __init__(
        self,
        *,
        library_root: Path,
        db_path: Path | str | None = None,
        reader: TrackReader | None = None,
        writer: TrackWriter | None = None,
        filesystem: FileSystemGateway | None = None,
        logger: Logger | None = None,
    ) -> None:
        if (reader is None) != (writer is None):
            raise ValueError("reader and writer must be provided together")

        self._logger = logger or getLogger(__name__)
        self.library_root = library_root

        if reader is None:
            database = default_database_path(library_root, explicit_path=db_path)
            if not database.is_file():
                raise FileNotFoundError(f"Track database not found: {database}")
            repository = SqliteTrackRepository(DatabaseManager(database))
            self._reader = repository
            self._writer = repository
        else:
            assert writer is not None
            self._reader = reader
            self._writer = writer

        self._filesystem = filesystem or LocalFileSystemGateway()
        self._detector = MissingTrackDetector(self._filesystem, logger=self._logger)
        self._relocator = TrackRelocator(self._filesystem, logger=self._logger)

    @property
    def filesystem(self) -> FileSystemGateway:
        return self._filesystem

    def find_missing(self, library_root: Path | None = None) -> list[Track]:
        """Load the track snapshot and return the tracks whose file is gone.

        Relative paths resolve against ``library_root``, or the service's own
        library root when omitted.
        """

        root = library_root or self.library_root
        tracks = self._reader.fetch_tracks()
        missing = self._detector.detect(tracks, str(root))
        self._logger.debug("%d of %d track(s) are missing", len(missing), len(tracks))
        return missing

    def relocate(
        self,
        missing: Sequence[Track],
        search_root: Path,
        library_root: Path | None = None,
    ) -> RelocationResult:
        """Match ``missing`` against files under ``search_root``; raises ``ScanFailure``."""

        root = library_root or self.library_root
        return self._relocator.relocate(missing, str(search_root), str(root))

    def save(self, updates: Sequence[TrackPathUpdate]) -> int:
        """Persist relocated paths in one batch; raises ``PersistenceFailure``."""

        saved = self._writer.update_tracks(updates)
        self._logger.info(
            "Saved %d relocated track path(s)",
            saved,
            extra={"relocation_event": "relocation.save.complete", "saved": saved},
        )
        return saved

    def run(
        self,
        request: RelocateServiceRequest,
        *,
        ask_for_search_root: Callable[[], Path],
        reporter: RelocationReporter | None = None,
    ) -> RelocationOutcome:
        """Detect, relocate and save, stopping early when a stage has nothing to pass on.

        ``ask_for_search_root`` is only called when missing tracks exist and the
        request does not name a search root.
        """

        reporter = reporter or SilentReporter()

        with reporter.stage("Find missing tracks"):
            missing = self.find_missing(request.library_root)
        reporter.missing_detected(missing)
        outcome = RelocationOutcome(missing=missing)
        if not missing:
            return outcome

        if request.search_root is not None:
            search_root = require_search_root(str(request.search_root), self._filesystem)
        else:
            search_root = ask_for_search_root()
        outcome.search_root = search_root

        with reporter.stage("Relocate missing tracks"):
            result = self.relocate(missing, search_root, request.library_root)
        outcome.result = result
        reporter.relocation_finished(result)
        if not result.relocated:
            return outcome

        if request.dry_run:
            reporter.save_finished(0, dry_run=True)
            return outcome

        with reporter.stage("Save relocated tracks"):
            outcome.saved = self.save(result.updates)
        reporter.save_finished(outcome.saved, dry_run=False)
        return outcome

    def close(self) -> None:
        """Release the store connection when the service owns it."""

        close = getattr(self._reader, "close", None)
        if callable(close):
            close()
