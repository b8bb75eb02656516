"""Display utilities for check, sync and unsync results."""

from __future__ import annotations

from pathlib import Path
from typing import final

from rich.console import Console

from albumsync.features.sync import SyncOutcome, UnsyncOutcome


@final
class SyncResultDisplay:
    """Render single-album operation outcomes in the CLI."""

    console: Console

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def show_status(
        self,
        source_path: Path,
        target_directory: Path,
        match: str | None,
        *,
        quiet: bool = False,
    ) -> None:
        if quiet:
            return
        if match is None:
            self.console.print(f"[yellow]Not synced:[/yellow] {source_path} has no copy in {target_directory}")
            return
        self.console.print(f"[green]Synced:[/green] {source_path} → {match}")

    def show_sync(self, outcome: SyncOutcome, *, quiet: bool = False) -> None:
        if quiet:
            return
        self.console.print(f"[green]{outcome.message}[/green]")
        self.console.print(
            f"Files copied: {outcome.files_copied}  Directories created: {outcome.directories_created}"
        )

    def show_unsync(self, outcome: UnsyncOutcome, *, quiet: bool = False) -> None:
        if quiet:
            return
        self.console.print(f"[green]{outcome.message}[/green] ({outcome.target_path})")

    def show_error(self, message: str) -> None:
        """Errors are printed even in quiet mode."""
        self.console.print(f"[red]Error: {message}[/red]")
