"""Command line interface for relink."""

import sys
from typing import final

from relink.platform.logging import logger
from relink.ui.cli.args import ArgumentParser
from relink.ui.cli.args.options import CLIArgs, MissingArgs
from relink.ui.cli.commands import CommandExecutor, MissingCommand, RelocateCommand


@final
class CommandProcessor:
    """Command line interface processor."""

    @staticmethod
    def process_command(args_list: list[str] | None = None) -> None:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).
        """
        try:
            args: CLIArgs = ArgumentParser.process_args(args_list)
            command: CommandExecutor = (
                MissingCommand(args) if isinstance(args, MissingArgs) else RelocateCommand(args)
            )
            try:
                exit_code = command.execute()
            finally:
                command.close()
            if exit_code:
                sys.exit(exit_code)

        except KeyboardInterrupt:
            logger.info("\nOperation cancelled by user")
            sys.exit(130)
        except Exception as e:
            logger.error("An unexpected error occurred: %s", str(e))
            sys.exit(1)


def main() -> int:
    """Main entry point.

    Returns:
        int: Process exit code (0 on success). Failures exit through
        ``sys.exit`` inside command processing.
    """
    CommandProcessor.process_command()
    return 0
