"""Command line argument handling package."""

from albumsync.ui.cli.args.options import (
    CheckArgs,
    CLIArgs,
    ScanArgs,
    ServeArgs,
    SyncArgs,
    UnsyncArgs,
)
from albumsync.ui.cli.args.parser import ArgumentParser

__all__ = [
    "ArgumentParser",
    "CLIArgs",
    "CheckArgs",
    "ScanArgs",
    "ServeArgs",
    "SyncArgs",
    "UnsyncArgs",
]
