"""Logging facade for relink.

Where: platform/logging/__init__.py
What: Re-export the shared ``relink`` logger, its setup function and the Rich handler.
Why: Callers import logging from one place regardless of how handlers are built.
"""

from __future__ import annotations

from .config import DEFAULT_LOG_FILE, LOGGER_NAME, RelocationEventFormatter, logger, setup_logger
from .handlers import WhitePathRichHandler

__all__ = [
    "DEFAULT_LOG_FILE",
    "LOGGER_NAME",
    "RelocationEventFormatter",
    "WhitePathRichHandler",
    "logger",
    "setup_logger",
]
