"""Command line argument options."""

from dataclasses import dataclass
from pathlib import Path
from typing import Literal, final


@final
@dataclass(slots=True)
class MissingArgs:
    """Command line arguments for the ``missing`` subcommand."""

    command: Literal["missing"]
    library_root: Path
    database_path: Path | None
    verbose: bool
    quiet: bool
    show_all: bool


@final
@dataclass(slots=True)
class RelocateArgs:
    """Command line arguments for the ``relocate`` subcommand."""

    command: Literal["relocate"]
    library_root: Path
    database_path: Path | None
    search_root: Path | None
    dry_run: bool
    verbose: bool
    quiet: bool
    show_all: bool


CLIArgs = MissingArgs | RelocateArgs

__all__ = ["CLIArgs", "MissingArgs", "RelocateArgs"]
