"""Errors surfaced by sync and unsync."""

from __future__ import annotations

from albumsync.shared.errors import AlbumSyncError


class AlbumNotFoundError(AlbumSyncError):
    """Raised when unsync targets an album folder that does not exist."""

    def __init__(self, album_name: str, target_directory: str) -> None:
        super().__init__(f"album {album_name} not found in target directory")
        self.album_name = album_name
        self.target_directory = target_directory


class ReplicationError(AlbumSyncError):
    """Raised when creating, copying or deleting fails mid-operation.

    Files copied before the failure stay on disk.
    """

    def __init__(self, message: str, *, path: str | None = None) -> None:
        super().__init__(message)
        self.path = path


__all__ = ["AlbumNotFoundError", "ReplicationError"]
