"""FastAPI dependencies resolving the process-wide services from app state."""

from fastapi import Request

from albumsync.application.services import AlbumSyncService, SettingsStore


def get_service(request: Request) -> AlbumSyncService:
    """FastAPI dependency for the shared sync service."""
    return request.app.state.service


def get_settings_store(request: Request) -> SettingsStore:
    """FastAPI dependency for the settings store."""
    return request.app.state.settings_store
