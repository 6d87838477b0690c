"""Validation and canonicalisation of a user-supplied search folder."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Final

from relink.platform.filesystem import resolve_to_cwd_if_relative, true_case_path

from ..domain.errors import ValidationFailure
from .ports import FileSystemGateway

PATH_MISSING_MESSAGE: Final[str] = "Path doesn't exist"
PATH_NOT_FOLDER_MESSAGE: Final[str] = "Path isn't a folder"
PATH_NOT_ABSOLUTE_MESSAGE: Final[str] = "Path must be absolute"


def validate_search_root(
    raw: str,
    filesystem: FileSystemGateway,
    *,
    cwd: Path | None = None,
) -> str | None:
    """Return the message of the first failing rule, or None when ``raw`` is usable.

    Relative input is anchored at ``cwd`` before the rules run.
    """

    candidate = str(resolve_to_cwd_if_relative(raw.strip(), cwd=cwd))
    if not filesystem.exists(candidate):
        return PATH_MISSING_MESSAGE
    if not filesystem.is_dir(candidate):
        return PATH_NOT_FOLDER_MESSAGE
    if not os.path.isabs(candidate):
        return PATH_NOT_ABSOLUTE_MESSAGE
    return None


def require_search_root(
    raw: str,
    filesystem: FileSystemGateway,
    *,
    cwd: Path | None = None,
) -> Path:
    """Validate ``raw`` and return it absolute and in its on-disk casing.

    Raises:
        ValidationFailure: ``raw`` fails one of the rules.
    """

    message = validate_search_root(raw, filesystem, cwd=cwd)
    if message is not None:
        raise ValidationFailure(raw, message)
    return true_case_path(resolve_to_cwd_if_relative(raw.strip(), cwd=cwd))


__all__ = [
    "PATH_MISSING_MESSAGE",
    "PATH_NOT_ABSOLUTE_MESSAGE",
    "PATH_NOT_FOLDER_MESSAGE",
    "require_search_root",
    "validate_search_root",
]
