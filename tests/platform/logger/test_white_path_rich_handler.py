"""Tests for the ``WhitePathRichHandler`` relocation event rendering."""

from __future__ import annotations

import logging
from io import StringIO
from pathlib import Path
from typing import Any

from rich.console import Console
from rich.text import Text

from relink.platform.logging import RelocationEventFormatter, WhitePathRichHandler, setup_logger


def _make_handler() -> WhitePathRichHandler:
    """Create a handler instance with an in-memory console."""

    console = Console(file=StringIO(), force_terminal=True, soft_wrap=True)
    return WhitePathRichHandler(console=console)


def _build_record(**extras: Any) -> logging.LogRecord:
    """Create a ``LogRecord`` populated with relocation extras for testing."""

    record = logging.LogRecord(
        name="relink",
        level=logging.INFO,
        pathname="test",
        lineno=0,
        msg="",
        args=(),
        exc_info=None,
    )
    for key, value in extras.items():
        setattr(record, key, value)
    return record


def _render(**extras: Any) -> str:
    rendered = _make_handler().render_message(_build_record(**extras), "")
    assert isinstance(rendered, Text)
    return rendered.plain


def test_scan_start_shows_root_and_depth() -> None:
    plain = _render(
        relocation_event="relocation.scan.start",
        search_root="/media/music",
        max_depth=5,
    )

    assert plain == "🔎 Scanning /media/music [depth=5]"


def test_scan_complete_shows_metrics() -> None:
    plain = _render(
        relocation_event="relocation.scan.complete",
        search_root="/media/music",
        total_files=1200,
        duration_seconds=1.234,
    )

    assert "Scan complete [files=1200, duration=1.23s]" in plain


def test_relocated_paths_are_relative_to_library_root() -> None:
    plain = _render(
        relocation_event="relocation.track.relocated",
        track_id=12,
        source_path="old/song.mp3",
        target_path="new/song.mp3",
    )

    assert plain.endswith("#12 Relocated old/song.mp3 → new/song.mp3")


def test_missing_track_path_is_shortened_under_library_root() -> None:
    plain = _render(
        relocation_event="relocation.track.missing",
        track_id=3,
        source_path="/lib/gone/song.mp3",
        library_root="/lib",
    )

    assert plain.endswith("#3 Missing gone/song.mp3")


def test_long_paths_are_truncated_with_ellipsis() -> None:
    plain = _render(
        relocation_event="relocation.track.missing",
        track_id=1,
        source_path="/home/user/music/archive/2019/Artist/Album/01 Song.flac",
    )

    assert "/…/2019/Artist/Album/01 Song.flac" in plain
    assert "/home/user" not in plain


def test_windows_paths_keep_backslashes() -> None:
    plain = _render(
        relocation_event="relocation.track.missing",
        track_id=1,
        source_path="C:\\Music\\Album\\song.mp3",
    )

    assert "C:\\Music\\Album\\song.mp3" in plain


def test_ambiguous_match_counts_ignored_candidates() -> None:
    plain = _render(
        relocation_event="relocation.track.ambiguous",
        track_id=4,
        target_path="/lib/a/song.mp3",
        ignored_count=2,
        library_root="/lib",
    )

    assert "#4 Ambiguous match → a/song.mp3 (ignored 2 other candidate(s))" in plain


def test_save_complete_reports_count() -> None:
    assert _render(relocation_event="relocation.save.complete", saved=3).endswith("Saved 3 track path(s)")


def test_plain_records_fall_back_to_default_rendering() -> None:
    handler = _make_handler()
    record = _build_record()

    rendered = handler.render_message(record, "hello")

    assert isinstance(rendered, Text)
    assert rendered.plain == "hello"


def test_setup_logger_writes_log_file(tmp_path: Path) -> None:
    log_file = tmp_path / "logs" / "relink.log"

    configured = setup_logger(log_file=log_file)
    try:
        configured.info("written to file")
        for handler in configured.handlers:
            handler.flush()

        assert "written to file" in log_file.read_text(encoding="utf-8")
        assert any(isinstance(h, WhitePathRichHandler) for h in configured.handlers)
    finally:
        _ = setup_logger(log_file=None)


def test_file_formatter_tags_relocation_events() -> None:
    formatter = RelocationEventFormatter()
    record = _build_record(relocation_event="relocation.track.relocated")
    record.msg = "Relocated track 1"

    assert formatter.format(record).endswith("Relocated track 1 [relocation.track.relocated]")
    assert formatter.format(_build_record()).endswith(" - relink - INFO - ")


def test_setup_logger_uses_given_console() -> None:
    buffer = StringIO()
    console = Console(file=buffer, width=200, color_system=None)

    configured = setup_logger(log_file=None, console=console)
    try:
        configured.info("hello console")
        assert "hello console" in buffer.getvalue()
    finally:
        _ = setup_logger(log_file=None)
