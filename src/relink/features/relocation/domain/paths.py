"""
Summary: Translate between stored track paths and filesystem paths.
Why: Resolution and re-relativisation must agree on separators and anchors.
"""

from __future__ import annotations

import os


def resolve_track_path(stored_path: str, library_root: str) -> str:
    """Return the filesystem path a stored track path refers to.

    Absolute stored paths are used as-is; relative ones are joined to
    ``library_root`` and normalised.
    """

    if os.path.isabs(stored_path):
        return stored_path
    return os.path.normpath(os.path.join(library_root, stored_path))


def to_stored_path(file_path: str, library_root: str) -> str:
    """Express ``file_path`` relative to ``library_root`` with forward slashes.

    When no relative form exists (different drive on Windows), the absolute
    path is stored instead.
    """

    try:
        relative = os.path.relpath(file_path, library_root)
    except ValueError:
        relative = os.path.abspath(file_path)
    return relative.replace("\\", "/")


__all__ = ["resolve_track_path", "to_stored_path"]
