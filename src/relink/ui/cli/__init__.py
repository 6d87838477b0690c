"""Command line interface package."""

from relink.ui.cli.cli import CommandProcessor, main

__all__ = ["CommandProcessor", "main"]
