"""Persistence of the last used source and target directories."""

from __future__ import annotations

import json
from dataclasses import dataclass
from logging import Logger, getLogger
from pathlib import Path
from typing import Any, final

from albumsync.config.file_ops import write_text_file
from albumsync.config.settings import SETTINGS_FILE
from albumsync.shared.errors import AlbumSyncError


class SettingsError(AlbumSyncError):
    """Raised when settings cannot be written."""


@dataclass(slots=True, frozen=True)
class AppSettings:
    """Directories remembered between sessions."""

    last_source_directory: str = ""
    last_target_directory: str = ""

    def to_json(self) -> dict[str, str]:
        return {
            "lastSourceDirectory": self.last_source_directory,
            "lastTargetDirectory": self.last_target_directory,
        }

    @classmethod
    def from_json(cls, payload: Any) -> "AppSettings":
        """Build settings from the JSON document shape; raises ValueError when malformed."""

        if not isinstance(payload, dict):
            raise ValueError("settings document must be a JSON object")
        source = payload.get("lastSourceDirectory", "")
        target = payload.get("lastTargetDirectory", "")
        if not isinstance(source, str) or not isinstance(target, str):
            raise ValueError("settings directories must be strings")
        return cls(last_source_directory=source, last_target_directory=target)


@final
class SettingsStore:
    """Load and save ``AppSettings`` as a small JSON file."""

    path: Path

    def __init__(self, path: Path | None = None, logger: Logger | None = None) -> None:
        self.path = path or SETTINGS_FILE
        self._logger = logger or getLogger(__name__)

    def load(self) -> AppSettings:
        """Return stored settings; defaults when the file is missing or unreadable."""

        try:
            raw = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return AppSettings()
        except (OSError, UnicodeDecodeError) as exc:
            self._logger.warning("Could not read settings file %s: %s", self.path, exc)
            return AppSettings()

        try:
            return AppSettings.from_json(json.loads(raw))
        except ValueError as exc:
            self._logger.warning("Could not parse settings file %s: %s", self.path, exc)
            return AppSettings()

    def save(self, settings: AppSettings) -> None:
        """Write ``settings``; raises SettingsError when the file cannot be written."""

        content = json.dumps(settings.to_json(), indent=2)
        try:
            write_text_file(self.path, content)
        except OSError as exc:
            raise SettingsError(f"failed to write settings file: {exc}") from exc
        self._logger.debug("Settings saved to %s", self.path)


__all__ = ["AppSettings", "SettingsError", "SettingsStore"]
