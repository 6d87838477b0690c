"""Missing-track report command."""

from typing import final

from relink.ui.cli.commands.executor import CommandExecutor


@final
class MissingCommand(CommandExecutor):
    """List tracks whose stored path no longer resolves to a file."""

    def execute(self) -> int:
        """Exit code is 1 when any track is missing, so scripts can use it as a check."""

        with self.result_display.stage("Find missing tracks"):
            missing = self.service.find_missing()
        self.result_display.missing_detected(missing)
        return 1 if missing else 0
