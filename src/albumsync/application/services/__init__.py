"""Application services composed from feature use cases."""

from .settings_service import AppSettings, SettingsError, SettingsStore
from .sync_service import AlbumSyncService

__all__ = ["AlbumSyncService", "AppSettings", "SettingsError", "SettingsStore"]
