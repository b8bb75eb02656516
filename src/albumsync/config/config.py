"""Configuration management for albumsync."""

import tomllib
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any, ClassVar

from albumsync.config.file_ops import write_text_file
from albumsync.config.paths import default_config_path
from albumsync.platform.logging import logger


DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 8080
DEFAULT_COVER_FILE_NAME = "cover.jpg"
DEFAULT_AUDIO_EXTENSIONS: tuple[str, ...] = (
    ".mp3",
    ".flac",
    ".m4a",
    ".aac",
    ".ogg",
    ".wav",
    ".wma",
)
DEFAULT_ALLOWED_ORIGINS: tuple[str, ...] = ("http://localhost:5173",)


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

    # Log file path
    log_file: Path | None = _path_field()

    # Directory holding settings.json
    data_dir: Path | None = _path_field()

    # Web server
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    open_browser: bool = True
    allowed_origins: list[str] = field(default_factory=lambda: list(DEFAULT_ALLOWED_ORIGINS))

    # Library scanning
    audio_extensions: list[str] = field(default_factory=lambda: list(DEFAULT_AUDIO_EXTENSIONS))
    cover_file_name: str = DEFAULT_COVER_FILE_NAME

    # Singleton instance
    _instance: ClassVar["Config | None"] = None
    _loaded_from: ClassVar[Path | None] = None

    def __post_init__(self) -> None:
        """Convert string paths to ``Path`` objects using field metadata."""

        for f in fields(self):
            if not f.metadata.get("path", False):
                continue
            value = getattr(self, f.name)
            if isinstance(value, str):
                setattr(self, f.name, Path(value) if value.strip() else None)

    def save(self, target: Path | None = None) -> None:
        """Save configuration to file."""
        config_dict = asdict(self)

        for key, value in config_dict.items():
            if isinstance(value, Path):
                config_dict[key] = str(value)

        destination = target or default_config_path()
        try:
            content = self._render_toml(config_dict)
            write_text_file(destination, content)
            logger.info("Configuration saved to %s", destination)
        except Exception as e:
            logger.error("Failed to save configuration: %s", e)
            raise

    def _render_toml(self, config: dict[str, Any]) -> str:
        """Render configuration as TOML with inline guidance."""

        lines: list[str] = []

        lines.append("# albumsync Configuration File")
        lines.append("")

        lines.append("# Log file path (optional)")
        lines.append('# Example: log_file = "/path/to/logs/albumsync.log"')
        if config["log_file"] is not None:
            lines.append(f"log_file = {self._format_toml_value(config['log_file'])}")
        lines.append("")

        lines.append("# Directory holding settings.json (optional)")
        lines.append("# ALBUMSYNC_DATA_DIR takes effect when this is unset")
        if config["data_dir"] is not None:
            lines.append(f"data_dir = {self._format_toml_value(config['data_dir'])}")
        lines.append("")

        lines.append("# Web server")
        lines.append(f"host = {self._format_toml_value(config['host'])}")
        lines.append(f"port = {self._format_toml_value(config['port'])}")
        lines.append(f"open_browser = {self._format_toml_value(config['open_browser'])}")
        lines.append("# Origins allowed to call the API from a browser")
        lines.append(f"allowed_origins = {self._format_toml_value(config['allowed_origins'])}")
        lines.append("")

        lines.append("# Library scanning")
        lines.append("# Folders holding at least one file with these extensions are albums")
        lines.append(f"audio_extensions = {self._format_toml_value(config['audio_extensions'])}")
        lines.append(f"cover_file_name = {self._format_toml_value(config['cover_file_name'])}")
        lines.append("")

        return "\n".join(lines)

    def _format_toml_value(self, value: Any) -> str:
        """Format a value for TOML serialization.

        Args:
            value: Value to format

        Returns:
            str: Formatted value
        """
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, (list, tuple)):
            return "[" + ", ".join(self._format_toml_value(item) for item in value) + "]"
        if isinstance(value, (str, Path)):
            escaped = str(value).replace("\\", "\\\\").replace('"', '\\"')
            return f'"{escaped}"'
        return str(value)

    @classmethod
    def load(cls, config_file: Path | None = None) -> "Config":
        """Load configuration from file, creating a default one when missing.

        Args:
            config_file: Explicit TOML file. Defaults to the portable location.

        Returns:
            Config: Loaded configuration object.
        """
        if cls._instance is not None and config_file in (None, cls._loaded_from):
            return cls._instance

        config_file = config_file or default_config_path()

        try:
            if config_file.exists():
                with open(config_file, "rb") as f:
                    config_dict = tomllib.load(f)

                known = {f.name for f in fields(cls)}
                unknown = sorted(set(config_dict) - known)
                if unknown:
                    logger.warning("Ignoring unknown configuration keys: %s", ", ".join(unknown))
                config_dict = {key: value for key, value in config_dict.items() if key in known}

                logger.debug("Configuration loaded from %s", config_file)
                instance = cls(**config_dict)
            else:
                instance = cls()
                try:
                    instance.save(config_file)
                    logger.debug("Created default configuration at %s", config_file)
                except OSError as e:
                    logger.warning("Continuing with built-in defaults: %s", e)

            cls._instance = instance
            cls._loaded_from = config_file
            return instance

        except Exception as e:
            logger.error("Failed to load configuration: %s", e)
            raise


# Global configuration instance
config = Config.load()
