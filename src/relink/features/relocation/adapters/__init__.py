"""Adapters bridging relocation ports to concrete infrastructure."""

from .db.sqlite_repository import SqliteTrackRepository
from .filesystem.local import LocalFileSystemGateway

__all__ = ["LocalFileSystemGateway", "SqliteTrackRepository"]
