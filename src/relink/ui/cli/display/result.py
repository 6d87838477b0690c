"""src/relink/ui/cli/display/result.py
What: Render user-facing summaries for the missing/relocate CLI flows.
Why: Keep console output formatting consistent across the interface.
"""

from __future__ import annotations

from collections.abc import Sequence
from contextlib import AbstractContextManager
from typing import final

from rich.console import Console
from rich.markup import escape

from relink.config.settings import TRACK_LIST_LIMIT
from relink.features.relocation import RelocationResult, Track
from relink.ui.cli.models import TrackListing, pluralize

from .progress import ProgressDisplay, shared_console


@final
class ResultDisplay:
    """Report relocation stages and outcomes on the console."""

    console: Console

    def __init__(
        self,
        *,
        console: Console | None = None,
        quiet: bool = False,
        show_all: bool = False,
    ) -> None:
        self.console = console or Console()
        self.quiet = quiet
        self.limit = 0 if show_all else TRACK_LIST_LIMIT
        self.progress = ProgressDisplay(console=console or shared_console(), quiet=quiet)

    def stage(self, label: str) -> AbstractContextManager[object]:
        return self.progress.stage(label)

    def missing_detected(self, missing: Sequence[Track]) -> None:
        if self.quiet:
            return

        count = len(missing)
        if not count:
            self.console.print("[yellow]⚠ Didn't find any missing tracks[/yellow]")
            return

        self.console.print(f"[green]✔[/green] Found [red]{count}[/red] missing {pluralize('track', count)}")
        self.show_tracks(missing)

    def relocation_finished(self, result: RelocationResult) -> None:
        if self.quiet:
            return

        relocated = len(result.relocated)
        missing = len(result.still_missing)
        relocated_word = pluralize("track", relocated)
        missing_word = pluralize("track", missing)

        if not relocated:
            self.console.print(f"[red]✖[/red] Couldn't find [red]{missing}[/red] {missing_word}")
        elif missing:
            self.console.print(
                f"[yellow]⚠[/yellow] Relocated [green]{relocated}[/green] {relocated_word}, "
                f"couldn't find [red]{missing}[/red] {missing_word}"
            )
        else:
            self.console.print(f"[green]✔[/green] Relocated [green]{relocated}[/green] {relocated_word}")

        self.show_tracks(result.relocated)
        if result.still_missing:
            if result.relocated:
                self.console.print("  [still missing]", markup=False)
            self.show_tracks(result.still_missing, style="red")

    def save_finished(self, saved: int, *, dry_run: bool) -> None:
        if self.quiet:
            return

        if dry_run:
            self.console.print("[yellow]Dry run: relocated tracks were not saved to the database[/yellow]")
            return
        self.console.print(
            f"[green]✔[/green] Saved [green]{saved}[/green] relocated {pluralize('track', saved)} to the database"
        )

    def show_tracks(self, tracks: Sequence[Track], *, style: str | None = None) -> None:
        """Print one indented line per track, truncated to the configured limit."""

        if self.quiet:
            return

        listing = TrackListing.build([track.path for track in tracks], limit=self.limit)
        for path in listing.preview:
            line = f"  {escape(path)}"
            self.console.print(f"[{style}]{line}[/{style}]" if style else line)
        if listing.truncated and listing.remaining > 0:
            self.console.print(f"  ...and {listing.remaining} more.")
