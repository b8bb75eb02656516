"""Command line interface package."""

from albumsync.ui.cli.cli import CommandProcessor, main

__all__ = ["CommandProcessor", "main"]
