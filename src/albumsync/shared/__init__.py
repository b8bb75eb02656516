"""Definitions shared by every feature package."""

from .errors import AlbumSyncError

__all__ = ["AlbumSyncError"]
