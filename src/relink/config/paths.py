"""Shared path utilities for configuration, database and log locations.

Policy (portable by default):
- Config: repository-root ``<repo_root>/config/config.toml``
- Track store: ``<library_root>/Database2/m.db`` unless overridden explicitly
  or through ``RELINK_DATABASE``.
- Logs: repository-root ``<repo_root>/logs/relink.log``
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path
from typing import Callable, Final


_ENV_DATABASE: Final[str] = "RELINK_DATABASE"

LIBRARY_DATABASE_RELATIVE_PATH: Final[Path] = Path("Database2") / "m.db"


def resolve_overridable_path(
    *,
    explicit_path: Path | str | None,
    env: Mapping[str, str] | None,
    env_var: str | None,
    default_factory: Callable[[], Path],
) -> Path:
    """Resolve a path honoring explicit and environment overrides, in that order."""

    if explicit_path is not None:
        return Path(explicit_path).expanduser().resolve()

    mapping = env if env is not None else os.environ
    if env_var:
        candidate = (mapping.get(env_var) or "").strip()
        if candidate:
            return Path(candidate).expanduser().resolve()

    return default_factory().expanduser().resolve()


def _detect_repo_root(start: Path | None = None) -> Path:
    """Detect the repository root by walking up parents.

    Looks for markers like ``pyproject.toml`` or ``.git``.

    Args:
        start: Starting path. Defaults to this file's directory.

    Returns:
        Path: Detected repository root, or the current working directory
        if no marker is found.
    """
    here = (start or Path(__file__).resolve()).parent
    for p in [here, *here.parents]:
        if (p / "pyproject.toml").exists() or (p / ".git").exists():
            return p
    return Path.cwd()


def default_config_path() -> Path:
    """Return ``<repo_root>/config/config.toml``."""

    return (_detect_repo_root() / "config" / "config.toml").resolve()


def default_database_path(
    library_root: Path,
    *,
    explicit_path: Path | str | None = None,
    env: Mapping[str, str] | None = None,
) -> Path:
    """Locate the track store that belongs to ``library_root``."""

    return resolve_overridable_path(
        explicit_path=explicit_path,
        env=env,
        env_var=_ENV_DATABASE,
        default_factory=lambda: library_root / LIBRARY_DATABASE_RELATIVE_PATH,
    )


def default_log_dir() -> Path:
    """Get the default directory for log files."""

    return (_detect_repo_root() / "logs").resolve()


def default_log_file() -> Path:
    """Get the default log file path."""

    return (default_log_dir() / "relink.log").resolve()


__all__ = [
    "LIBRARY_DATABASE_RELATIVE_PATH",
    "default_config_path",
    "default_database_path",
    "default_log_dir",
    "default_log_file",
    "resolve_overridable_path",
]
