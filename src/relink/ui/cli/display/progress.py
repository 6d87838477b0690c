"""Progress display functionality for CLI."""

from collections.abc import Iterator
from contextlib import contextmanager
from typing import final

from rich.console import Console

from relink.platform.logging import WhitePathRichHandler, logger


def shared_console() -> Console:
    """Return the console used by the log handler so spinners and logs interleave cleanly."""

    for handler in logger.handlers:
        if isinstance(handler, WhitePathRichHandler):
            return handler.console
    return Console(stderr=True)


@final
class ProgressDisplay:
    """Show a spinner while a workflow stage runs."""

    console: Console

    def __init__(self, *, console: Console | None = None, quiet: bool = False) -> None:
        self.console = console or shared_console()
        self.quiet = quiet

    @contextmanager
    def stage(self, label: str) -> Iterator[None]:
        """Spin while the body runs.

        Failures propagate untouched; the command reporting them owns the message.
        """

        if self.quiet:
            yield
            return

        with self.console.status(f"[cyan]{label}...", spinner="dots3"):
            yield
