"""Root of the albumsync exception hierarchy."""

from __future__ import annotations


class AlbumSyncError(Exception):
    """Base class for every error raised by albumsync features."""


__all__ = ["AlbumSyncError"]
