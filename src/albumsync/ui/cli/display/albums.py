"""Rich table of scanned album folders."""

from __future__ import annotations

from typing import final

from rich.console import Console
from rich.table import Table

from albumsync.features.library import AlbumFolder


@final
class AlbumTableDisplay:
    """Render scan results as a table."""

    console: Console

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def show_albums(
        self,
        albums: list[AlbumFolder],
        *,
        show_sync_status: bool = False,
        quiet: bool = False,
    ) -> None:
        """Print one row per album, followed by a short summary."""
        if quiet:
            return

        if not albums:
            self.console.print("[yellow]No album folders found.[/yellow]")
            return

        table = Table(title="Albums", show_lines=False)
        table.add_column("Artist", style="cyan")
        table.add_column("Album", style="bold")
        table.add_column("Tracks", justify="right")
        table.add_column("MP3", justify="right")
        table.add_column("Size (MB)", justify="right")
        table.add_column("Cover", justify="center")
        if show_sync_status:
            table.add_column("Synced", justify="center")

        for album in albums:
            row = [
                album.artist,
                album.album,
                str(album.audio_count),
                str(album.mp3_count),
                f"{album.size_mb:.1f}",
                "✓" if album.has_cover else "",
            ]
            if show_sync_status:
                row.append("[green]✓[/green]" if album.is_synced else "")
            table.add_row(*row)

        self.console.print(table)

        total_size = sum(album.size_mb for album in albums)
        self.console.print(f"\nTotal albums: {len(albums)} ({total_size:.1f} MB)")
        if show_sync_status:
            synced = sum(1 for album in albums if album.is_synced)
            self.console.print(f"[green]Already synced: {synced}[/green]")
