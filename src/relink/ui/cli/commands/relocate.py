"""Relocate command implementation for the CLI."""

from __future__ import annotations

from typing import final

from relink.application.services.relocate_service import RelocateServiceRequest
from relink.features.relocation import PersistenceFailure, ScanFailure, ValidationFailure
from relink.platform.logging import logger
from relink.ui.cli.args.options import RelocateArgs
from relink.ui.cli.commands.executor import CommandExecutor
from relink.ui.cli.display.prompt import SearchRootPrompt


@final
class RelocateCommand(CommandExecutor):
    """Find missing tracks, search a folder for them and save the new paths."""

    args: RelocateArgs

    def __init__(self, args: RelocateArgs) -> None:
        super().__init__(args)
        self.prompt = SearchRootPrompt(self.service.filesystem, console=self.result_display.console)

    def execute(self) -> int:
        request = RelocateServiceRequest(
            library_root=self.args.library_root,
            search_root=self.args.search_root,
            dry_run=self.args.dry_run,
        )
        try:
            _ = self.service.run(
                request,
                ask_for_search_root=self.prompt,
                reporter=self.result_display,
            )
        except ValidationFailure as failure:
            logger.error("Invalid search root %s: %s", failure.path, failure.message)
            return 1
        except ScanFailure as failure:
            logger.error("%s", failure)
            return 1
        except PersistenceFailure as failure:
            return self._retry_save(failure)
        return 0

    def _retry_save(self, failure: PersistenceFailure) -> int:
        """Offer to re-send the same batch; scanning is not repeated."""

        logger.error("%s", failure)
        while not self.args.quiet and self.prompt.confirm_retry("Retry saving relocated tracks?"):
            try:
                with self.result_display.stage("Save relocated tracks"):
                    saved = self.service.save(failure.updates)
            except PersistenceFailure as again:
                logger.error("%s", again)
                failure = again
                continue
            self.result_display.save_finished(saved, dry_run=False)
            return 0
        return 1
