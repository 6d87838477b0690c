"""Filesystem adapter for relocation use cases."""

from __future__ import annotations

import os
import stat
from logging import Logger, getLogger

from ...domain.errors import UnreadablePath
from ...domain.models import DirectoryEntry, EntryKind
from ...usecases.ports import FileSystemGateway


class LocalFileSystemGateway(FileSystemGateway):
    """Thin wrapper around the local filesystem.

    Predicates treat every access error as "no"; enumeration lets ``OSError``
    propagate so the scanner can report it.
    """

    _logger: Logger

    def __init__(self, logger: Logger | None = None) -> None:
        self._logger = logger or getLogger(__name__)

    def exists(self, path: str) -> bool:
        return self._mode(path) is not None

    def is_dir(self, path: str) -> bool:
        mode = self._mode(path)
        return mode is not None and stat.S_ISDIR(mode)

    def is_file(self, path: str) -> bool:
        mode = self._mode(path)
        return mode is not None and stat.S_ISREG(mode)

    def list_entries(self, path: str) -> list[DirectoryEntry]:
        with os.scandir(path) as iterator:
            return [
                DirectoryEntry(name=entry.name, path=entry.path, kind=self._kind(entry))
                for entry in iterator
            ]

    def _mode(self, path: str) -> int | None:
        try:
            return self._stat(path).st_mode
        except FileNotFoundError:
            return None
        except UnreadablePath as exc:
            self._logger.debug("Treating unreadable path as missing: %s", exc)
            return None

    @staticmethod
    def _stat(path: str) -> os.stat_result:
        try:
            return os.stat(path)
        except FileNotFoundError:
            raise
        except (OSError, ValueError) as exc:
            raise UnreadablePath(path, exc) from exc

    @staticmethod
    def _kind(entry: os.DirEntry[str]) -> EntryKind:
        if entry.is_symlink():
            return EntryKind.OTHER
        if entry.is_file(follow_symlinks=False):
            return EntryKind.FILE
        if entry.is_dir(follow_symlinks=False):
            return EntryKind.DIRECTORY
        return EntryKind.OTHER


__all__ = ["LocalFileSystemGateway"]
