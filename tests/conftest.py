"""Shared fixtures for building throwaway libraries and track stores."""

from __future__ import annotations

from collections.abc import Callable, Iterator, Sequence
from pathlib import Path

import pytest

from relink.config.paths import LIBRARY_DATABASE_RELATIVE_PATH
from relink.platform.db.daos.track_dao import TrackDAO
from relink.platform.db.db_manager import DatabaseManager

WriteFile = Callable[[Path], Path]
SeedTracks = Callable[[Path, Sequence[str]], list[int]]
ReadPaths = Callable[[Path], dict[int, str]]


@pytest.fixture
def write_file() -> WriteFile:
    """Return a helper creating a placeholder file (and its parents)."""

    def _write(path: Path) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        _ = path.write_bytes(b"audio")
        return path

    return _write


@pytest.fixture
def seed_tracks() -> SeedTracks:
    """Return a helper creating a track store and inserting paths in order."""

    def _seed(db_path: Path, paths: Sequence[str]) -> list[int]:
        with DatabaseManager(db_path, create_schema=True) as manager:
            assert manager.conn is not None
            dao = TrackDAO(manager.conn)
            return [dao.insert(path) for path in paths]

    return _seed


@pytest.fixture
def read_paths() -> ReadPaths:
    """Return a helper reading ``{id: path}`` for every stored track."""

    def _read(db_path: Path) -> dict[int, str]:
        with DatabaseManager(db_path) as manager:
            assert manager.conn is not None
            return dict(TrackDAO(manager.conn).fetch_all())

    return _read


@pytest.fixture
def library_root(tmp_path: Path) -> Path:
    """An empty library folder."""

    root = tmp_path / "library"
    root.mkdir()
    return root


@pytest.fixture
def library_db(library_root: Path) -> Path:
    """Location of the library's default track store (not yet created)."""

    return library_root / LIBRARY_DATABASE_RELATIVE_PATH


@pytest.fixture
def search_root(tmp_path: Path) -> Path:
    """An empty folder outside the library to search in."""

    root = tmp_path / "search"
    root.mkdir()
    return root


@pytest.fixture
def memory_db() -> Iterator[DatabaseManager]:
    """Connected in-memory database manager."""

    manager = DatabaseManager(":memory:", create_schema=True)
    manager.connect()
    yield manager
    manager.close()
