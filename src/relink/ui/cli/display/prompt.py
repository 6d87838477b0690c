"""Interactive search-folder prompt for the relocate command."""

from __future__ import annotations

from pathlib import Path
from typing import final

from rich.console import Console
from rich.prompt import Confirm, Prompt

from relink.features.relocation import ValidationFailure
from relink.features.relocation.usecases.ports import FileSystemGateway
from relink.features.relocation.usecases.search_root import require_search_root

SEARCH_ROOT_QUESTION = "What folder would you like to search for your tracks in?"


@final
class SearchRootPrompt:
    """Ask for a search folder until the answer passes validation."""

    def __init__(self, filesystem: FileSystemGateway, *, console: Console | None = None) -> None:
        self.filesystem = filesystem
        self.console = console or Console()

    def __call__(self) -> Path:
        return self.ask()

    def ask(self) -> Path:
        """Return the validated folder in its on-disk casing; Ctrl-C propagates."""

        while True:
            answer = Prompt.ask(SEARCH_ROOT_QUESTION, console=self.console)
            try:
                return require_search_root(answer, self.filesystem)
            except ValidationFailure as failure:
                self.console.print(f"[red]{failure.message}[/red]")

    def confirm_retry(self, message: str) -> bool:
        """Ask whether a failed save should be attempted again."""

        return Confirm.ask(message, console=self.console, default=True)
