"""Locations of the config file, the settings file and the log file.

Everything lives under the checkout by default: ``config/config.toml``,
``.data/settings.json`` and ``logs/albumsync.log``. ``ALBUMSYNC_DATA_DIR``
moves the data directory elsewhere.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path
from typing import Final


DATA_DIR_ENV_VAR: Final[str] = "ALBUMSYNC_DATA_DIR"
SETTINGS_FILE_NAME: Final[str] = "settings.json"
LOG_FILE_NAME: Final[str] = "albumsync.log"

_ROOT_MARKERS: Final[tuple[str, ...]] = ("pyproject.toml", ".git")


def _detect_repo_root(start: Path | None = None) -> Path:
    """Nearest ancestor holding a project marker; the working directory if none does."""

    origin = (start or Path(__file__).resolve()).parent
    for candidate in (origin, *origin.parents):
        if any((candidate / marker).exists() for marker in _ROOT_MARKERS):
            return candidate
    return Path.cwd()


def default_config_path() -> Path:
    return (_detect_repo_root() / "config" / "config.toml").resolve()


def default_data_dir(env: Mapping[str, str] | None = None) -> Path:
    """Directory holding the settings file.

    A non-blank ``ALBUMSYNC_DATA_DIR`` wins over ``<repo_root>/.data``.
    """

    override = (env if env is not None else os.environ).get(DATA_DIR_ENV_VAR, "").strip()
    if override:
        return Path(override).expanduser().resolve()
    return (_detect_repo_root() / ".data").resolve()


def default_settings_file(data_dir: Path | None = None) -> Path:
    base = data_dir if data_dir is not None else default_data_dir()
    return (base / SETTINGS_FILE_NAME).resolve()


def default_log_dir() -> Path:
    return (_detect_repo_root() / "logs").resolve()


def default_log_file() -> Path:
    return default_log_dir() / LOG_FILE_NAME


__all__ = [
    "DATA_DIR_ENV_VAR",
    "LOG_FILE_NAME",
    "SETTINGS_FILE_NAME",
    "default_config_path",
    "default_data_dir",
    "default_log_dir",
    "default_log_file",
    "default_settings_file",
]
