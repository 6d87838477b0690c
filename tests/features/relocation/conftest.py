"""In-memory filesystem double for relocation use case tests."""

from __future__ import annotations

import errno
import posixpath
from collections.abc import Iterable

import pytest

from relink.features.relocation.domain.models import DirectoryEntry, EntryKind


class FakeFileSystem:
    """POSIX-style tree held in memory.

    ``files`` and ``dirs`` are absolute paths; parents of every entry are
    created implicitly. Paths listed in ``links`` show up as symlinks and
    paths in ``unreadable`` raise ``PermissionError`` when listed.
    """

    def __init__(
        self,
        files: Iterable[str] = (),
        dirs: Iterable[str] = (),
        links: Iterable[str] = (),
        unreadable: Iterable[str] = (),
    ) -> None:
        self.kinds: dict[str, EntryKind] = {"/": EntryKind.DIRECTORY}
        for path in dirs:
            self._add(path, EntryKind.DIRECTORY)
        for path in files:
            self._add(path, EntryKind.FILE)
        for path in links:
            self._add(path, EntryKind.OTHER)
        self.unreadable = set(unreadable)
        self.listed: list[str] = []

    def _add(self, path: str, kind: EntryKind) -> None:
        parent = posixpath.dirname(path)
        while parent not in self.kinds:
            self.kinds[parent] = EntryKind.DIRECTORY
            parent = posixpath.dirname(parent)
        self.kinds[path] = kind

    def exists(self, path: str) -> bool:
        return posixpath.normpath(path) in self.kinds

    def is_dir(self, path: str) -> bool:
        return self.kinds.get(posixpath.normpath(path)) is EntryKind.DIRECTORY

    def is_file(self, path: str) -> bool:
        return self.kinds.get(posixpath.normpath(path)) is EntryKind.FILE

    def list_entries(self, path: str) -> list[DirectoryEntry]:
        self.listed.append(path)
        if path in self.unreadable:
            raise PermissionError(errno.EACCES, "Permission denied", path)
        kind = self.kinds.get(path)
        if kind is None:
            raise FileNotFoundError(errno.ENOENT, "No such file or directory", path)
        if kind is not EntryKind.DIRECTORY:
            raise NotADirectoryError(errno.ENOTDIR, "Not a directory", path)

        entries = [
            DirectoryEntry(name=posixpath.basename(child), path=child, kind=child_kind)
            for child, child_kind in self.kinds.items()
            if child != path and posixpath.dirname(child) == path
        ]
        # Listing order is deliberately not name order.
        return sorted(entries, key=lambda entry: entry.name, reverse=True)


@pytest.fixture
def fake_fs() -> type[FakeFileSystem]:
    """Return the in-memory filesystem class for building trees."""

    return FakeFileSystem
