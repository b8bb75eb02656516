"""Where: src/albumsync/config/settings.py
What: Derived runtime settings sourced from persisted configuration.
Why: Expose validated constants to feature layers without file I/O.
Assumptions: - Config defaults remain compatible with current runtime expectations.
Trade-offs: - Validation is limited to simple boundary checks for speed.
"""

from __future__ import annotations

from pathlib import Path

from albumsync.config.config import (
    DEFAULT_AUDIO_EXTENSIONS,
    DEFAULT_COVER_FILE_NAME,
    DEFAULT_HOST,
    DEFAULT_PORT,
    config as app_config,
)
from albumsync.config.paths import default_data_dir, default_log_file, default_settings_file


def _normalize_extension(raw: str) -> str:
    value = raw.strip().lower()
    if value and not value.startswith("."):
        value = "." + value
    return value


# Library scanning -----------------------------------------------------------

_extensions = tuple(
    ext for ext in (_normalize_extension(e) for e in app_config.audio_extensions) if ext
)
AUDIO_EXTENSIONS: tuple[str, ...] = _extensions or DEFAULT_AUDIO_EXTENSIONS

# mp3 is reported separately from the overall audio count.
MP3_EXTENSION: str = ".mp3"

COVER_FILE_NAME: str = app_config.cover_file_name.strip() or DEFAULT_COVER_FILE_NAME

# Parent folders with these names are library roots, never artists.
ROOT_LEVEL_FOLDER_NAMES: tuple[str, ...] = ("music", "songs", "audio", "media")

UNKNOWN_ARTIST: str = "Unknown Artist"


# Web server -----------------------------------------------------------------

SERVER_HOST: str = app_config.host.strip() or DEFAULT_HOST

_port = app_config.port
SERVER_PORT: int = _port if 0 < _port < 65536 else DEFAULT_PORT

OPEN_BROWSER: bool = bool(app_config.open_browser)

ALLOWED_ORIGINS: tuple[str, ...] = tuple(
    origin.strip() for origin in app_config.allowed_origins if origin.strip()
)


# Persistence ----------------------------------------------------------------

DATA_DIR: Path = (
    app_config.data_dir.expanduser().resolve()
    if app_config.data_dir is not None
    else default_data_dir()
)
SETTINGS_FILE: Path = default_settings_file(DATA_DIR)
def resolve_log_file(log_file: Path | None) -> Path:
    """Return the configured log path expanded, or the default one."""

    if log_file is None:
        return default_log_file()
    return log_file.expanduser().resolve()


LOG_FILE: Path = resolve_log_file(app_config.log_file)
