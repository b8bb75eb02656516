"""Scan command implementation for the CLI."""

from __future__ import annotations

from typing import final

from albumsync.application.services import AlbumSyncService
from albumsync.features.library import AlbumFolder
from albumsync.ui.cli.args.options import ScanArgs
from albumsync.ui.cli.display import AlbumTableDisplay


@final
class ScanCommand:
    """List the album folders of a library directory."""

    def __init__(
        self,
        args: ScanArgs,
        service: AlbumSyncService | None = None,
        display: AlbumTableDisplay | None = None,
    ) -> None:
        self.args = args
        self.service = service or AlbumSyncService()
        self.display = display or AlbumTableDisplay()

    def execute(self) -> list[AlbumFolder]:
        target = str(self.args.target_directory) if self.args.target_directory else None
        albums = self.service.scan(str(self.args.directory), target)
        self.display.show_albums(
            albums,
            show_sync_status=target is not None,
            quiet=self.args.quiet,
        )
        return albums
