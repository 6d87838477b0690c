"""Display management for CLI interface."""

from relink.ui.cli.display.progress import ProgressDisplay
from relink.ui.cli.display.prompt import SearchRootPrompt
from relink.ui.cli.display.result import ResultDisplay

__all__ = ["ProgressDisplay", "ResultDisplay", "SearchRootPrompt"]
