"""src/relink/ui/cli/commands/executor.py
What: Provide shared wiring for CLI command executors.
Why: Reuse service construction and presentation helpers across commands.
"""

from abc import ABC, abstractmethod

from relink.application.services.relocate_service import RelocateMusicService
from relink.ui.cli.args.options import CLIArgs
from relink.ui.cli.display.result import ResultDisplay


class CommandExecutor(ABC):
    """Base class for command execution."""

    args: CLIArgs
    service: RelocateMusicService
    result_display: ResultDisplay

    def __init__(self, args: CLIArgs) -> None:
        """Initialize command executor.

        Args:
            args: Command line arguments.
        """
        self.args = args
        self.service = RelocateMusicService(
            library_root=args.library_root,
            db_path=args.database_path,
        )
        self.result_display = ResultDisplay(quiet=args.quiet, show_all=args.show_all)

    @abstractmethod
    def execute(self) -> int:
        """Execute the command.

        Returns:
            Process exit code.
        """
        pass

    def close(self) -> None:
        self.service.close()
