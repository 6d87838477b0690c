"""Command line argument parser."""

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import final

from relink.config.config import Config
from relink.platform.logging import DEFAULT_LOG_FILE, logger, setup_logger
from relink.ui.cli.args.options import CLIArgs, MissingArgs, RelocateArgs


@final
class ArgumentParser:
    """Command line argument parser."""

    @staticmethod
    def create_parser() -> argparse.ArgumentParser:
        """Create argument parser.

        Returns:
            argparse.ArgumentParser: Configured argument parser.
        """
        parser = argparse.ArgumentParser(
            prog="relink",
            description="relink - find library tracks whose files have moved and point them at the new location.",
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )

        subparsers = parser.add_subparsers(dest="command", required=True)

        missing_parser = subparsers.add_parser(
            "missing",
            help="List tracks whose files no longer exist",
        )
        ArgumentParser._configure_common(missing_parser)

        relocate_parser = subparsers.add_parser(
            "relocate",
            help="Search a folder for missing tracks and update their paths",
        )
        ArgumentParser._configure_common(relocate_parser)
        _ = relocate_parser.add_argument(
            "--search-root",
            type=str,
            help="Folder to search instead of prompting for one",
            metavar="SEARCH_ROOT",
        )
        _ = relocate_parser.add_argument(
            "--dry-run",
            action="store_true",
            help="Show what would be relocated without saving to the database",
        )

        return parser

    @staticmethod
    def process_args(args_list: Sequence[str] | None = None) -> CLIArgs:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).

        Returns:
            CLIArgs: Processed command line arguments.

        Raises:
            SystemExit: If the library root is unknown or invalid.
        """
        parser = ArgumentParser.create_parser()
        parsed_args = parser.parse_args(args_list)

        if parsed_args.quiet:
            log_level = logging.ERROR
        elif parsed_args.verbose:
            log_level = logging.DEBUG
        else:
            log_level = logging.INFO

        configuration = Config.load()
        log_file_path = configuration.log_file or DEFAULT_LOG_FILE
        _ = setup_logger(log_file=log_file_path, console_level=log_level)

        library_root = ArgumentParser._resolve_library_root(parsed_args.library, configuration)
        database_path = (
            Path(parsed_args.database).expanduser().resolve()
            if parsed_args.database
            else configuration.database_path
        )

        if parsed_args.command == "missing":
            return MissingArgs(
                command="missing",
                library_root=library_root,
                database_path=database_path,
                verbose=parsed_args.verbose,
                quiet=parsed_args.quiet,
                show_all=parsed_args.show_all,
            )

        if parsed_args.command == "relocate":
            return RelocateArgs(
                command="relocate",
                library_root=library_root,
                database_path=database_path,
                search_root=Path(parsed_args.search_root) if parsed_args.search_root else None,
                dry_run=parsed_args.dry_run,
                verbose=parsed_args.verbose,
                quiet=parsed_args.quiet,
                show_all=parsed_args.show_all,
            )

        logger.error("Unsupported command: %s", parsed_args.command)
        sys.exit(2)

    @staticmethod
    def _configure_common(parser: argparse.ArgumentParser) -> None:
        """Apply options shared by every subcommand."""

        _ = parser.add_argument(
            "--library",
            type=str,
            help="Library root folder (defaults to library_path from config.toml)",
            metavar="LIBRARY_ROOT",
        )
        _ = parser.add_argument(
            "--database",
            type=str,
            help="Track database file (defaults to <LIBRARY_ROOT>/Database2/m.db)",
            metavar="DATABASE",
        )
        _ = parser.add_argument(
            "--show-all",
            action="store_true",
            help="List every track instead of a truncated preview",
        )
        verbosity = parser.add_mutually_exclusive_group()
        _ = verbosity.add_argument(
            "--verbose",
            action="store_true",
            help="Show detailed matching information",
        )
        _ = verbosity.add_argument(
            "--quiet",
            action="store_true",
            help="Suppress all output except errors",
        )

    @staticmethod
    def _resolve_library_root(raw: str | None, configuration: Config) -> Path:
        candidate = Path(raw).expanduser() if raw else configuration.library_path
        if candidate is None:
            logger.error("No library root given; pass --library or set library_path in config.toml")
            sys.exit(1)

        library_root = candidate.resolve()
        if not library_root.is_dir():
            logger.error("Library root does not exist or is not a directory: %s", library_root)
            sys.exit(1)
        return library_root
