"""Tests for console summaries of the missing/relocate flows."""

from __future__ import annotations

from io import StringIO

import pytest
from rich.console import Console

from relink.features.relocation import RelocationResult, Track
from relink.ui.cli.display.result import ResultDisplay
from relink.ui.cli.models import TrackListing, pluralize


def _display(**kwargs: bool) -> tuple[ResultDisplay, StringIO]:
    buffer = StringIO()
    console = Console(file=buffer, width=200, color_system=None)
    return ResultDisplay(console=console, **kwargs), buffer


def test_missing_detected_lists_tracks() -> None:
    display, buffer = _display()

    display.missing_detected([Track(id=1, path="a/x.mp3"), Track(id=2, path="b/y.mp3")])

    output = buffer.getvalue()
    assert "✔ Found 2 missing tracks" in output
    assert "  a/x.mp3" in output
    assert "  b/y.mp3" in output


def test_missing_detected_with_nothing_missing() -> None:
    display, buffer = _display()

    display.missing_detected([])

    assert "⚠ Didn't find any missing tracks" in buffer.getvalue()


def test_relocation_finished_partial() -> None:
    display, buffer = _display()
    result = RelocationResult(
        relocated=[Track(id=1, path="new/a.mp3")],
        still_missing=[Track(id=2, path="old/b.mp3"), Track(id=3, path="old/c.mp3")],
    )

    display.relocation_finished(result)

    lines = buffer.getvalue().splitlines()
    assert lines[0] == "⚠ Relocated 1 track, couldn't find 2 tracks"
    assert lines[1:] == ["  new/a.mp3", "  [still missing]", "  old/b.mp3", "  old/c.mp3"]


def test_relocation_finished_all_relocated() -> None:
    display, buffer = _display()

    display.relocation_finished(RelocationResult(relocated=[Track(id=1, path="a.mp3")]))

    assert buffer.getvalue().splitlines()[0] == "✔ Relocated 1 track"


def test_relocation_finished_nothing_found() -> None:
    display, buffer = _display()

    display.relocation_finished(RelocationResult(still_missing=[Track(id=1, path="a.mp3")]))

    lines = buffer.getvalue().splitlines()
    assert lines == ["✖ Couldn't find 1 track", "  a.mp3"]


@pytest.mark.parametrize(
    ("dry_run", "expected"),
    [
        (False, "✔ Saved 3 relocated tracks to the database"),
        (True, "Dry run: relocated tracks were not saved to the database"),
    ],
)
def test_save_finished(dry_run: bool, expected: str) -> None:
    display, buffer = _display()

    display.save_finished(3, dry_run=dry_run)

    assert expected in buffer.getvalue()


def test_quiet_display_prints_nothing() -> None:
    display, buffer = _display(quiet=True)

    display.missing_detected([Track(id=1, path="a.mp3")])
    display.relocation_finished(RelocationResult(relocated=[Track(id=1, path="a.mp3")]))
    display.save_finished(1, dry_run=False)

    assert buffer.getvalue() == ""


def test_track_list_is_truncated_to_limit() -> None:
    display, buffer = _display()
    display.limit = 2

    display.show_tracks([Track(id=i, path=f"{i}.mp3") for i in range(5)])

    assert buffer.getvalue().splitlines() == ["  0.mp3", "  1.mp3", "  ...and 3 more."]


def test_show_all_lists_every_track() -> None:
    display, buffer = _display(show_all=True)

    display.show_tracks([Track(id=i, path=f"{i}.mp3") for i in range(30)])

    assert len(buffer.getvalue().splitlines()) == 30


def test_paths_with_markup_are_printed_literally() -> None:
    display, buffer = _display()

    display.show_tracks([Track(id=1, path="[live] set/[red]intro.mp3")])

    assert "  [live] set/[red]intro.mp3" in buffer.getvalue()


def test_track_listing_and_pluralize() -> None:
    listing = TrackListing.build(["a", "b", "c"], limit=2)

    assert listing.preview == ["a", "b"]
    assert listing.truncated
    assert listing.remaining == 1
    assert not TrackListing.build(["a"], limit=0).truncated
    assert pluralize("track", 1) == "track"
    assert pluralize("track", 0) == "tracks"
