"""Errors raised while browsing the library."""

from __future__ import annotations

from albumsync.shared.errors import AlbumSyncError


class BrowseError(AlbumSyncError):
    """Raised when a directory cannot be listed for the picker."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"Cannot browse {path}: {reason}")
        self.path = path
        self.reason = reason


__all__ = ["BrowseError"]
