"""Rich console handler for relink log output.

Where: platform/logging/handlers.py
What: Render structured relocation events with icons, colours and compact paths.
Why: Keep console formatting out of the engine, which only logs ``extra`` fields.
"""

from __future__ import annotations

import logging
from pathlib import PurePath, PurePosixPath, PureWindowsPath
from typing import Any, ClassVar, override

from rich.console import ConsoleRenderable
from rich.logging import RichHandler
from rich.style import Style
from rich.text import Text


class WhitePathRichHandler(RichHandler):
    """Custom Rich handler that displays file paths in white."""

    _RELOCATION_STYLES: ClassVar[dict[str, tuple[str, str]]] = {
        "relocation.scan.start": ("🔎", "cyan"),
        "relocation.scan.complete": ("✅", "green"),
        "relocation.track.missing": ("❓", "red"),
        "relocation.track.relocated": ("📦", "green"),
        "relocation.track.ambiguous": ("↪️", "yellow"),
        "relocation.save.complete": ("💾", "green"),
    }
    _PATH_SEGMENT_LIMIT: ClassVar[int] = 4

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        kwargs["show_time"] = False
        kwargs["show_path"] = False
        kwargs["show_level"] = False
        kwargs["rich_tracebacks"] = True
        kwargs["markup"] = True
        kwargs["omit_repeated_times"] = False
        super().__init__(*args, **kwargs)

    def _format_path(self, path: str, base: str | None = None) -> Text:
        """Format a path with coloured separators and ellipsis truncation.

        Args:
            path: Absolute or relative path string to format.
            base: Optional base path used to relativize ``path`` when possible.
        """
        pure_path = self._to_pure_path(path)
        base_path = self._to_pure_path(base) if base else None

        display_path: PurePath = pure_path
        if base_path is not None and pure_path.is_relative_to(base_path):
            relative_path = pure_path.relative_to(base_path)
            if str(relative_path) not in {"", "."}:
                display_path = relative_path

        is_windows = isinstance(display_path, PureWindowsPath)
        separator = "\\" if is_windows else "/"
        anchor = display_path.anchor
        body_parts = [part for part in display_path.parts if part and part != anchor]

        truncated = len(body_parts) > self._PATH_SEGMENT_LIMIT
        if truncated:
            body_parts = body_parts[-self._PATH_SEGMENT_LIMIT:]

        display_string = ""
        if anchor:
            display_string = anchor.rstrip("\\/") + separator if is_windows else separator
        if truncated:
            display_string += "…" + (separator if body_parts else "")
        display_string += separator.join(body_parts)

        return self._style_path_string(display_string or ".", separator)

    @staticmethod
    def _to_pure_path(raw_path: str) -> PurePath:
        """Return a platform-aware ``PurePath`` for the given raw string."""

        if "\\" in raw_path:
            return PureWindowsPath(raw_path)
        return PurePosixPath(raw_path)

    @staticmethod
    def _style_path_string(path_string: str, separator: str) -> Text:
        text = Text()
        separator_chars = {separator}
        if separator == "\\":
            separator_chars.add("/")

        for char in path_string:
            if char in separator_chars or char == "…":
                _ = text.append(char, style=Style(color="magenta"))
            else:
                _ = text.append(char, style=Style(color="white"))
        return text

    def _render_relocation_message(self, record: logging.LogRecord) -> Text | None:
        """Render structured relocation events with dedicated styling."""

        event = getattr(record, "relocation_event", None)
        if not isinstance(event, str):
            return None

        icon, color = self._RELOCATION_STYLES.get(event, ("ℹ️", "blue"))
        text = Text()
        _ = text.append(f"{icon} ", style=Style(color=color, bold=True))
        body = Text(style=Style(color=color))

        library_root = getattr(record, "library_root", None)
        if event == "relocation.scan.start":
            _ = body.append("Scanning ")
            _ = body.append_text(self._format_path(str(getattr(record, "search_root", ""))))
            max_depth = getattr(record, "max_depth", None)
            if isinstance(max_depth, int):
                _ = body.append(f" [depth={max_depth}]")
        elif event == "relocation.scan.complete":
            _ = body.append("Scan complete")
            metrics: list[str] = []
            total_files = getattr(record, "total_files", None)
            duration = getattr(record, "duration_seconds", None)
            if isinstance(total_files, int):
                metrics.append(f"files={total_files}")
            if isinstance(duration, (int, float)):
                metrics.append(f"duration={duration:.2f}s")
            if metrics:
                _ = body.append(" [" + ", ".join(metrics) + "]")
        elif event == "relocation.save.complete":
            saved = getattr(record, "saved", None)
            _ = body.append(f"Saved {saved} track path(s)" if isinstance(saved, int) else "Saved track paths")
        else:
            track_id = getattr(record, "track_id", None)
            if track_id is not None:
                _ = body.append(f"#{track_id} ")
            prefix = {
                "relocation.track.missing": "Missing ",
                "relocation.track.relocated": "Relocated ",
                "relocation.track.ambiguous": "Ambiguous match",
            }.get(event, "")
            _ = body.append(prefix)
            source_path = getattr(record, "source_path", None)
            target_path = getattr(record, "target_path", None)
            if source_path:
                _ = body.append_text(self._format_path(str(source_path), base=library_root))
            if target_path:
                _ = body.append(" → ")
                _ = body.append_text(self._format_path(str(target_path), base=library_root))
            ignored_count = getattr(record, "ignored_count", None)
            if isinstance(ignored_count, int) and ignored_count > 0:
                _ = body.append(f" (ignored {ignored_count} other candidate(s))")

        _ = text.append_text(body)
        return text

    @override
    def render_message(self, record: logging.LogRecord, message: str) -> ConsoleRenderable:
        relocation_text = self._render_relocation_message(record)
        if relocation_text is not None:
            return relocation_text
        return super().render_message(record, message)


__all__ = ["WhitePathRichHandler"]
