"""Check, sync and unsync command implementations for the CLI."""

from __future__ import annotations

from typing import final

from albumsync.application.services import AlbumSyncService
from albumsync.features.sync import AlbumNotFoundError, ReplicationError
from albumsync.ui.cli.args.options import CheckArgs, SyncArgs, UnsyncArgs
from albumsync.ui.cli.display import SyncResultDisplay


@final
class CheckCommand:
    """Report whether the source album already has a copy in the target directory."""

    def __init__(
        self,
        args: CheckArgs,
        service: AlbumSyncService | None = None,
        display: SyncResultDisplay | None = None,
    ) -> None:
        self.args = args
        self.service = service or AlbumSyncService()
        self.display = display or SyncResultDisplay()

    def execute(self) -> bool:
        """Return True when a matching folder exists."""
        match = self.service.find_synced_copy(
            str(self.args.source_path),
            str(self.args.target_directory),
        )
        self.display.show_status(
            self.args.source_path,
            self.args.target_directory,
            match,
            quiet=self.args.quiet,
        )
        return match is not None


@final
class SyncCommand:
    """Copy one album folder into the target directory."""

    def __init__(
        self,
        args: SyncArgs,
        service: AlbumSyncService | None = None,
        display: SyncResultDisplay | None = None,
    ) -> None:
        self.args = args
        self.service = service or AlbumSyncService()
        self.display = display or SyncResultDisplay()

    def execute(self) -> bool:
        try:
            outcome = self.service.sync(
                str(self.args.source_path),
                str(self.args.target_directory),
            )
        except ReplicationError as e:
            self.display.show_error(str(e))
            return False
        self.display.show_sync(outcome, quiet=self.args.quiet)
        return True


@final
class UnsyncCommand:
    """Remove one album folder from the target directory."""

    def __init__(
        self,
        args: UnsyncArgs,
        service: AlbumSyncService | None = None,
        display: SyncResultDisplay | None = None,
    ) -> None:
        self.args = args
        self.service = service or AlbumSyncService()
        self.display = display or SyncResultDisplay()

    def execute(self) -> bool:
        try:
            outcome = self.service.unsync(str(self.args.target_directory), self.args.album_name)
        except (AlbumNotFoundError, ReplicationError) as e:
            self.display.show_error(str(e))
            return False
        self.display.show_unsync(outcome, quiet=self.args.quiet)
        return True
