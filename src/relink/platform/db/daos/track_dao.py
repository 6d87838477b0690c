"""Track DAO: read the track snapshot and write path corrections in one batch."""

from __future__ import annotations

import sqlite3
from collections.abc import Sequence
from typing import final

from relink.platform.logging import logger


@final
class TrackDAO:
    """Data access for the ``Track`` table."""

    conn: sqlite3.Connection

    def __init__(self, conn: sqlite3.Connection) -> None:
        """Initialize DAO.

        Args:
            conn: Database connection.
        """
        self.conn = conn

    def fetch_all(self) -> list[tuple[int, str]]:
        """Return every ``(id, path)`` row ordered by id."""

        cursor = self.conn.cursor()
        _ = cursor.execute("SELECT id, path FROM Track ORDER BY id")
        return [(int(row[0]), str(row[1] or "")) for row in cursor.fetchall()]

    def insert(self, path: str) -> int:
        """Insert a track and return its store-assigned id."""

        cursor = self.conn.cursor()
        _ = cursor.execute("INSERT INTO Track (path) VALUES (?)", (path,))
        self.conn.commit()
        track_id = cursor.lastrowid
        if track_id is None:  # pragma: no cover - sqlite always reports a rowid here
            raise sqlite3.DatabaseError("Insert did not report a row id")
        return track_id

    def update_paths(self, updates: Sequence[tuple[int, str]]) -> int:
        """Apply every ``(id, path)`` pair in a single transaction.

        Either all rows are updated and committed, or the transaction is rolled
        back and the error re-raised. An id that matches no row counts as a
        failure.

        Returns:
            int: Number of rows updated.
        """
        if not updates:
            return 0

        try:
            cursor = self.conn.cursor()
            updated = 0
            for track_id, path in updates:
                _ = cursor.execute("UPDATE Track SET path = ? WHERE id = ?", (path, track_id))
                if cursor.rowcount != 1:
                    raise LookupError(f"Track {track_id} does not exist")
                updated += 1
            self.conn.commit()
            return updated
        except (sqlite3.Error, LookupError) as e:
            logger.error("Failed to update %d track path(s): %s", len(updates), e)
            try:
                self.conn.rollback()
            except sqlite3.Error:
                pass
            raise
