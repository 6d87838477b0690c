"""Database manager for the track store."""

import sqlite3
from pathlib import Path
from typing import Any, final

from relink.platform.filesystem import ensure_parent_directory
from relink.platform.logging import logger


@final
class DatabaseManager:
    """Own the SQLite connection to a library's track store.

    By default the store must already exist and hold a ``Track`` table; it is
    opened read-write without touching its schema or journal mode. Pass
    ``create_schema=True`` to create a new store with a minimal ``Track`` table.
    """

    db_path: str | Path
    conn: sqlite3.Connection | None
    create_schema: bool

    def __init__(self, db_path: Path | str, *, create_schema: bool = False) -> None:
        """Initialize database manager.

        Args:
            db_path: Path to the store file, or ":memory:" for an in-memory database.
            create_schema: Create the file and the ``Track`` table when absent.
        """
        if db_path == ":memory:":
            self.db_path = ":memory:"
        else:
            self.db_path = Path(db_path) if isinstance(db_path, str) else db_path
        self.conn = None
        self.create_schema = create_schema

    def connect(self) -> None:
        """Connect to database and check (or create) the ``Track`` table.

        Raises:
            PermissionError: The store file cannot be opened.
            sqlite3.DatabaseError: The store has no ``Track`` table.
        """
        try:
            try:
                self.conn = self._open()
            except sqlite3.OperationalError as e:
                if "unable to open database file" in str(e):
                    raise PermissionError(f"Unable to open database at {self.db_path}") from e
                raise

            _ = self.conn.execute("PRAGMA foreign_keys = ON")
            _ = self.conn.execute("PRAGMA busy_timeout = 30000")

            if self._has_track_table():
                logger.debug("Track table found in %s", self.db_path)
            elif self.create_schema:
                self._init_schema()
            else:
                self.close()
                raise sqlite3.DatabaseError(
                    f"{self.db_path} has no Track table; is it a library database?"
                )

        except sqlite3.Error as e:
            logger.error("Failed to connect to database: %s", e)
            raise

    def _open(self) -> sqlite3.Connection:
        if isinstance(self.db_path, str):
            return sqlite3.connect(self.db_path, timeout=30.0, isolation_level="IMMEDIATE")

        if self.create_schema:
            _ = ensure_parent_directory(self.db_path)
            return sqlite3.connect(self.db_path, timeout=30.0, isolation_level="IMMEDIATE")

        # mode=rw refuses to create a missing file
        return sqlite3.connect(
            f"{self.db_path.resolve().as_uri()}?mode=rw",
            uri=True,
            timeout=30.0,
            isolation_level="IMMEDIATE",
        )

    def _has_track_table(self) -> bool:
        if self.conn is None:
            return False
        cursor = self.conn.execute("SELECT name FROM sqlite_master WHERE type='table' AND name = 'Track'")
        return cursor.fetchone() is not None

    def _init_schema(self) -> None:
        """Create the ``Track`` table in a new store."""
        if self.conn is None:
            return

        try:
            _ = self.conn.execute("PRAGMA journal_mode = WAL")
            _ = self.conn.execute("PRAGMA synchronous = NORMAL")

            cursor = self.conn.cursor()
            # Existing library stores carry many more columns; only id and path are relied upon.
            _ = cursor.execute(
                """
                CREATE TABLE IF NOT EXISTS Track (
                    id INTEGER PRIMARY KEY AUTOINCREMENT,
                    path TEXT NOT NULL,
                    created_at DATETIME DEFAULT CURRENT_TIMESTAMP,
                    updated_at DATETIME DEFAULT CURRENT_TIMESTAMP
                )
                """
            )
            _ = cursor.execute("CREATE INDEX IF NOT EXISTS idx_track_path ON Track(path)")
            self.conn.commit()
            logger.info("Initialized track store schema at %s", self.db_path)

        except sqlite3.Error as e:
            logger.error("Failed to initialize schema: %s", e)
            self.conn.rollback()
            raise

    def close(self) -> None:
        """Close database connection."""
        if self.conn:
            try:
                self.conn.close()
                self.conn = None
            except sqlite3.Error as e:
                logger.error("Failed to close database connection: %s", e)

    def __enter__(self) -> "DatabaseManager":
        self.connect()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: Any | None,
    ) -> None:
        self.close()
