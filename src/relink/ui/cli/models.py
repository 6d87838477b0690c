"""src/relink/ui/cli/models.py
What: Shared UI-facing data structures for CLI presentation layers.
Why: Provide lightweight value objects without introducing import cycles.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass


@dataclass(slots=True, frozen=True)
class TrackListing:
    """A possibly truncated list of track paths ready for display."""

    total: int
    preview: list[str]
    truncated: bool

    @classmethod
    def build(cls, paths: Sequence[str], *, limit: int) -> "TrackListing":
        """Keep the first ``limit`` paths; a limit of 0 keeps everything."""

        preview = list(paths) if limit <= 0 else list(paths[:limit])
        return cls(total=len(paths), preview=preview, truncated=len(preview) < len(paths))

    @property
    def remaining(self) -> int:
        return self.total - len(self.preview)


def pluralize(word: str, count: int) -> str:
    """Return ``word`` or its plural for ``count``."""

    return word if count == 1 else f"{word}s"


__all__ = ["TrackListing", "pluralize"]
