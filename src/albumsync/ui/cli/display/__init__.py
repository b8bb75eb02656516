"""Display management for CLI interface."""

from albumsync.ui.cli.display.albums import AlbumTableDisplay
from albumsync.ui.cli.display.sync_result import SyncResultDisplay

__all__ = ["AlbumTableDisplay", "SyncResultDisplay"]
