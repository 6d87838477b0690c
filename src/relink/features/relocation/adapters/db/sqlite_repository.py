"""SQLite-backed adapters for the relocation feature."""

from __future__ import annotations

import sqlite3
from collections.abc import Sequence

from relink.platform.db.daos.track_dao import TrackDAO
from relink.platform.db.db_manager import DatabaseManager

from ...domain.errors import PersistenceFailure
from ...domain.models import Track, TrackPathUpdate
from ...usecases.ports import TrackReader, TrackWriter


class SqliteTrackRepository(TrackReader, TrackWriter):
    """Bridge relocation use cases to the SQLite track store."""

    _db_manager: DatabaseManager
    _track_dao: TrackDAO

    def __init__(self, db_manager: DatabaseManager) -> None:
        self._db_manager = db_manager
        if self._db_manager.conn is None:
            self._db_manager.connect()
        if self._db_manager.conn is None:  # pragma: no cover
            raise RuntimeError("Database connection could not be established")

        self._track_dao = TrackDAO(self._db_manager.conn)

    def fetch_tracks(self) -> list[Track]:
        return [Track(id=track_id, path=path) for track_id, path in self._track_dao.fetch_all()]

    def update_tracks(self, updates: Sequence[TrackPathUpdate]) -> int:
        pairs = [(update.id, update.path) for update in updates]
        try:
            return self._track_dao.update_paths(pairs)
        except (sqlite3.Error, LookupError) as exc:
            raise PersistenceFailure(updates, exc) from exc

    def close(self) -> None:
        self._db_manager.close()


__all__ = ["SqliteTrackRepository"]
