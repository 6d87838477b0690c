"""Filesystem helpers reused across multiple layers."""

from __future__ import annotations

import os
from pathlib import Path


def ensure_directory(directory: Path) -> Path:
    """Ensure ``directory`` exists as a folder and return it."""

    if directory.exists():
        if not directory.is_dir():
            raise NotADirectoryError(f"Path exists but is not a directory: {directory}")
        return directory

    directory.mkdir(parents=True, exist_ok=True)
    return directory


def ensure_parent_directory(path: Path) -> Path:
    """Ensure the parent directory for ``path`` exists and return it."""

    return ensure_directory(path.parent)


def resolve_to_cwd_if_relative(raw_path: str | Path, *, cwd: Path | None = None) -> Path:
    """Anchor a relative path at ``cwd`` (the process working directory by default)."""

    path = Path(raw_path).expanduser()
    if path.is_absolute():
        return path
    return (cwd or Path.cwd()) / path


def true_case_path(path: Path) -> Path:
    """Return ``path`` spelled with the casing stored on disk.

    Each component is matched against its parent's listing, preferring an exact
    match and falling back to a case-insensitive one. Components that cannot be
    listed or matched are kept as given.
    """

    absolute = Path(os.path.normpath(path.absolute()))
    anchor = absolute.anchor
    current = Path(anchor.upper() if len(anchor) <= 3 and anchor[:1].isalpha() else anchor)

    for part in absolute.parts[1:]:
        try:
            names = os.listdir(current)
        except OSError:
            current = current / part
            continue

        if part in names:
            current = current / part
            continue

        folded = part.casefold()
        match = next((name for name in sorted(names) if name.casefold() == folded), part)
        current = current / match

    return current


__all__ = [
    "ensure_directory",
    "ensure_parent_directory",
    "resolve_to_cwd_if_relative",
    "true_case_path",
]
