"""
Summary: Bounded-depth enumeration of regular files below a search root.
Why: Give the matcher a flat, deterministically ordered candidate list.
"""

from __future__ import annotations

import time
from logging import Logger, getLogger

from ..domain.errors import ScanFailure
from ..domain.models import DiscoveredFile, EntryKind
from .ports import FileSystemGateway


class TreeScanner:
    """Collect ``DiscoveredFile`` values under a root, at most ``max_depth`` levels down.

    Within every directory, files are listed first in name order, followed by
    each subdirectory's results in name order. Symlinks and special files are
    never reported and symlinked directories are never entered.
    """

    _filesystem: FileSystemGateway
    _logger: Logger

    def __init__(self, filesystem: FileSystemGateway, *, logger: Logger | None = None) -> None:
        self._filesystem = filesystem
        self._logger = logger or getLogger(__name__)

    def scan(self, root: str, max_depth: int) -> list[DiscoveredFile]:
        """Enumerate ``root``.

        Raises:
            ValueError: ``max_depth`` is negative.
            ScanFailure: ``root`` or one of its subdirectories cannot be listed.
        """
        if max_depth < 0:
            raise ValueError(f"max_depth must be non-negative, got {max_depth}")

        self._logger.info(
            "Scanning %s (depth %d)",
            root,
            max_depth,
            extra={"relocation_event": "relocation.scan.start", "search_root": root, "max_depth": max_depth},
        )
        started = time.perf_counter()
        files = self._scan_directory(root, max_depth)
        duration = time.perf_counter() - started
        self._logger.info(
            "Scan of %s found %d file(s) in %.2fs",
            root,
            len(files),
            duration,
            extra={
                "relocation_event": "relocation.scan.complete",
                "search_root": root,
                "total_files": len(files),
                "duration_seconds": duration,
            },
        )
        return files

    def _scan_directory(self, directory: str, depth_remaining: int) -> list[DiscoveredFile]:
        try:
            entries = self._filesystem.list_entries(directory)
        except OSError as exc:
            raise ScanFailure(directory, exc) from exc

        entries = sorted(entries, key=lambda entry: entry.name)
        files = [
            DiscoveredFile(name=entry.name, path=entry.path)
            for entry in entries
            if entry.kind is EntryKind.FILE
        ]

        if depth_remaining > 0:
            for entry in entries:
                if entry.kind is EntryKind.DIRECTORY:
                    files.extend(self._scan_directory(entry.path, depth_remaining - 1))

        return files


__all__ = ["TreeScanner"]
