"""
Summary: Error taxonomy raised and absorbed by the relocation engine.
Why: Let the workflow tell run-ending failures apart from per-track noise.
"""

from __future__ import annotations

from collections.abc import Sequence

from .models import TrackPathUpdate


class RelocationError(Exception):
    """Base class for relocation failures."""


class UnreadablePath(RelocationError):
    """A track path could not be inspected; callers treat it as missing."""

    def __init__(self, path: str, cause: BaseException) -> None:
        self.path = path
        self.cause = cause
        super().__init__(f"Cannot read {path}: {cause}")


class ScanFailure(RelocationError):
    """The search root, or a folder below it, could not be enumerated."""

    def __init__(self, path: str, cause: BaseException) -> None:
        self.path = path
        self.cause = cause
        reason = cause.strerror if isinstance(cause, OSError) and cause.strerror else str(cause)
        super().__init__(f"Cannot scan {path}: {reason}")


class PersistenceFailure(RelocationError):
    """The batched path update was rejected; ``updates`` can be retried as-is."""

    def __init__(self, updates: Sequence[TrackPathUpdate], cause: BaseException) -> None:
        self.updates = list(updates)
        self.cause = cause
        super().__init__(f"Failed to save {len(self.updates)} relocated track(s): {cause}")


class ValidationFailure(RelocationError):
    """A user-supplied search folder failed validation."""

    def __init__(self, path: str, message: str) -> None:
        self.path = path
        self.message = message
        super().__init__(f"{message}: {path}")


__all__ = [
    "PersistenceFailure",
    "RelocationError",
    "ScanFailure",
    "UnreadablePath",
    "ValidationFailure",
]
