"""Command execution package for CLI."""

from relink.ui.cli.commands.executor import CommandExecutor
from relink.ui.cli.commands.missing import MissingCommand
from relink.ui.cli.commands.relocate import RelocateCommand

__all__ = [
    "CommandExecutor",
    "MissingCommand",
    "RelocateCommand",
]
