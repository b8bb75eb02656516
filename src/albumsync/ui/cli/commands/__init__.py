"""Command execution package for CLI."""

from albumsync.ui.cli.commands.library import ScanCommand
from albumsync.ui.cli.commands.serve import ServeCommand
from albumsync.ui.cli.commands.sync import CheckCommand, SyncCommand, UnsyncCommand

__all__ = [
    "CheckCommand",
    "ScanCommand",
    "ServeCommand",
    "SyncCommand",
    "UnsyncCommand",
]
