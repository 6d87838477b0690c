"""Logger configuration bootstrap.

Where: platform/logging/config.py
What: Build the ``relink`` logger with a Rich console handler and a rotating file log.
Why: Every layer logs through one named logger; only this module decides where records go.
"""

from __future__ import annotations

import logging
import logging.handlers
from pathlib import Path
from typing import Final, override

from rich.console import Console

from relink.config.paths import default_log_file
from relink.platform.filesystem import ensure_parent_directory

from .handlers import WhitePathRichHandler

LOGGER_NAME: Final[str] = "relink"
DEFAULT_LOG_FILE: Final[Path] = default_log_file()

_LOG_MAX_BYTES: Final[int] = 10 * 1024 * 1024
_LOG_BACKUPS: Final[int] = 5


class RelocationEventFormatter(logging.Formatter):
    """Plain-text formatter that tags records carrying a ``relocation_event``."""

    def __init__(self) -> None:
        super().__init__("%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    @override
    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        event = getattr(record, "relocation_event", None)
        return f"{line} [{event}]" if isinstance(event, str) else line


def setup_logger(
    log_file: Path | None = None,
    console_level: int = logging.INFO,
    file_level: int = logging.DEBUG,
    *,
    console: Console | None = None,
) -> logging.Logger:
    """Set up and configure the application logger.

    Calling it again replaces the previous handlers, so the CLI can re-run it
    once the verbosity and configured log file are known.

    Args:
        log_file: Rotating log file. If None, only console logging is enabled.
        console_level: Logging level for console output.
        file_level: Logging level for file output.
        console: Rich console for log output; stderr by default.

    Returns:
        logging.Logger: Configured ``relink`` logger.
    """

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG)

    for handler in list(logger.handlers):
        handler.close()
    logger.handlers.clear()

    console_handler = WhitePathRichHandler(console=console or Console(stderr=True, soft_wrap=True))
    console_handler.setLevel(console_level)
    logger.addHandler(console_handler)

    if log_file is not None:
        resolved_log_file = Path(log_file).expanduser().resolve()
        _ = ensure_parent_directory(resolved_log_file)

        file_handler = logging.handlers.RotatingFileHandler(
            resolved_log_file,
            maxBytes=_LOG_MAX_BYTES,
            backupCount=_LOG_BACKUPS,
            encoding="utf-8",
        )
        file_handler.setLevel(file_level)
        file_handler.setFormatter(RelocationEventFormatter())
        logger.addHandler(file_handler)

    return logger


logger: Final[logging.Logger] = setup_logger(log_file=DEFAULT_LOG_FILE)


__all__ = ["DEFAULT_LOG_FILE", "LOGGER_NAME", "RelocationEventFormatter", "logger", "setup_logger"]
