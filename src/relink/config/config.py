"""Configuration management for relink."""

import tomllib
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any, ClassVar

from relink.config.paths import default_config_path
from relink.platform.filesystem import ensure_parent_directory
from relink.platform.logging import logger

TRACK_LIST_LIMIT_DEFAULT = 20


def _path_field(default: Path | None = None) -> Any:
    """Create a field for Path objects with proper conversion.

    Args:
        default: Default value for the field.

    Returns:
        Field with proper metadata for path handling.
    """
    return field(default=default, metadata={"path": True})


@dataclass
class Config:
    """Application configuration."""

    # Library root that relative track paths are resolved against
    library_path: Path | None = _path_field()

    # Track store override; defaults to <library_path>/Database2/m.db
    database_path: Path | None = _path_field()

    # Log file path
    log_file: Path | None = _path_field()

    # How many tracks the CLI lists per section (0 lists everything)
    track_list_limit: int = TRACK_LIST_LIMIT_DEFAULT

    _instance: ClassVar["Config | None"] = None
    _loaded_from: ClassVar[Path | None] = None

    def __post_init__(self) -> None:
        """Convert string paths to ``Path`` objects using field metadata."""
        for f in fields(self):
            if not f.metadata.get("path", False):
                continue
            value = getattr(self, f.name)
            if isinstance(value, str):
                setattr(self, f.name, Path(value).expanduser() if value.strip() else None)

    def save(self) -> None:
        """Save configuration to file."""
        config_dict = asdict(self)

        for key, value in config_dict.items():
            if isinstance(value, Path):
                config_dict[key] = str(value)

        try:
            target = default_config_path()
            _ = ensure_parent_directory(target)
            _ = target.write_text(self._render_toml(config_dict), encoding="utf-8")
            logger.info("Configuration saved to %s", target)
        except Exception as e:
            logger.error("Failed to save configuration: %s", e)
            raise

    def _render_toml(self, config: dict[str, Any]) -> str:
        """Render configuration as TOML with inline guidance."""

        lines: list[str] = []

        lines.append("# relink configuration file")
        lines.append("")

        lines.append("# Root folder of your media library (required for relink commands)")
        lines.append("# Relative track paths in the database are resolved against this folder")
        lines.append('# Example: library_path = "/path/to/Engine Library"')
        if config["library_path"] is not None:
            lines.append(f"library_path = {self._format_toml_value(config['library_path'])}")
        lines.append("")

        lines.append("# Track database (optional)")
        lines.append("# Defaults to <library_path>/Database2/m.db")
        if config["database_path"] is not None:
            lines.append(f"database_path = {self._format_toml_value(config['database_path'])}")
        lines.append("")

        lines.append("# Log file path (optional)")
        lines.append('# Example: log_file = "/path/to/logs/relink.log"')
        if config["log_file"] is not None:
            lines.append(f"log_file = {self._format_toml_value(config['log_file'])}")
        lines.append("")

        lines.append("# Number of tracks listed per section in command output (0 = all)")
        lines.append(f"track_list_limit = {self._format_toml_value(config['track_list_limit'])}")
        lines.append("")

        return "\n".join(lines)

    def _format_toml_value(self, value: Any) -> str:
        """Format a value for TOML serialization."""
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, (str, Path)):
            escaped = str(value).replace("\\", "\\\\").replace('"', '\\"')
            return f'"{escaped}"'
        return str(value)

    @classmethod
    def _check_types(cls, config_dict: dict[str, Any]) -> None:
        """Reject values TOML parsed into the wrong type.

        Raises:
            TypeError: A path is not a string, or ``track_list_limit`` is not
                a non-negative integer.
        """
        for f in fields(cls):
            if f.name not in config_dict:
                continue
            value = config_dict[f.name]
            if f.metadata.get("path", False):
                if not isinstance(value, str):
                    raise TypeError(f"{f.name} must be a string path, got {type(value).__name__}")
            elif f.name == "track_list_limit":
                if isinstance(value, bool) or not isinstance(value, int) or value < 0:
                    raise TypeError(f"track_list_limit must be a non-negative integer, got {value!r}")

    @classmethod
    def load(cls) -> "Config":
        """Load configuration from file, creating a default one when absent.

        Returns:
            Config: Loaded configuration object.
        """
        if cls._instance is not None:
            return cls._instance

        config_file = default_config_path()

        try:
            if config_file.exists():
                with open(config_file, "rb") as f:
                    config_dict = tomllib.load(f)

                known = {f.name for f in fields(cls)}
                unknown = sorted(set(config_dict) - known)
                if unknown:
                    logger.warning("Ignoring unknown configuration keys: %s", ", ".join(unknown))
                config_dict = {key: value for key, value in config_dict.items() if key in known}
                cls._check_types(config_dict)

                logger.debug("Configuration loaded from %s", config_file)
                instance = cls(**config_dict)

                cls._instance = instance
                cls._loaded_from = config_file
                return instance

            config = cls()
            config.save()
            logger.info("Created default configuration at %s", config_file)
            cls._instance = config
            cls._loaded_from = config_file
            return config

        except Exception as e:
            logger.error("Failed to load configuration: %s", e)
            raise


# Global configuration instance
config = Config.load()
