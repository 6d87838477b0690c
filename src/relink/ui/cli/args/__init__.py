"""Command line argument handling package."""

from relink.ui.cli.args.parser import ArgumentParser
from relink.ui.cli.args.options import CLIArgs, MissingArgs, RelocateArgs

__all__ = ["ArgumentParser", "CLIArgs", "MissingArgs", "RelocateArgs"]
