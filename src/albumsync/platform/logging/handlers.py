"""Rich console handler that understands structured sync events."""

import logging
from pathlib import PurePath, PurePosixPath, PureWindowsPath
from typing import Any, ClassVar, override

from rich.console import ConsoleRenderable
from rich.logging import RichHandler
from rich.style import Style
from rich.text import Text


class SyncRichHandler(RichHandler):
    """Custom Rich handler rendering sync events with icons and compact paths."""

    _EVENT_STYLES: ClassVar[dict[str, tuple[str, str]]] = {
        "sync.album.start": ("🚀", "cyan"),
        "sync.album.complete": ("✅", "green"),
        "sync.album.error": ("❌", "red"),
        "sync.unsync.complete": ("🗑️", "magenta"),
        "sync.unsync.error": ("⛔", "red"),
        "sync.scan.complete": ("🎧", "blue"),
    }
    _PATH_SEGMENT_LIMIT: ClassVar[int] = 4

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        """Initialize the handler with custom settings.

        Args:
            *args: Positional arguments to pass to RichHandler.
            **kwargs: Keyword arguments to pass to RichHandler.
        """
        kwargs["show_time"] = False
        kwargs["show_path"] = False
        kwargs["show_level"] = False
        kwargs["rich_tracebacks"] = True
        kwargs["markup"] = False
        kwargs["omit_repeated_times"] = False
        super().__init__(*args, **kwargs)

    def _format_path(self, path: str) -> Text:
        """Render ``path`` keeping only its trailing segments, separators in magenta."""

        pure_path = self._to_pure_path(path)
        is_windows = isinstance(pure_path, PureWindowsPath)
        separator = "\\" if is_windows else "/"
        anchor = pure_path.anchor
        body_parts = [part for part in pure_path.parts if part and part != anchor]

        truncated = len(body_parts) > self._PATH_SEGMENT_LIMIT
        if truncated:
            body_parts = body_parts[-self._PATH_SEGMENT_LIMIT:]

        display = ""
        if anchor:
            display = anchor.rstrip("\\/") + separator if is_windows else separator
        if truncated:
            display += "…" + separator
        display += separator.join(body_parts)

        text = Text()
        for char in display or ".":
            if char in {separator, "…"}:
                _ = text.append(char, style=Style(color="magenta"))
            else:
                _ = text.append(char, style=Style(color="white"))
        return text

    @staticmethod
    def _to_pure_path(raw_path: str) -> PurePath:
        """Return a platform-aware ``PurePath`` for the given raw string."""

        if "\\" in raw_path:
            return PureWindowsPath(raw_path)
        return PurePosixPath(raw_path)

    def _render_sync_message(self, record: logging.LogRecord) -> Text | None:
        """Render structured sync events with dedicated styling."""

        event = getattr(record, "sync_event", None)
        if not isinstance(event, str):
            return None

        icon, color = self._EVENT_STYLES.get(event, ("ℹ️", "blue"))
        text = Text()
        _ = text.append(f"{icon} ", style=Style(color=color, bold=True))
        body = Text(style=Style(color=color))

        label = {
            "sync.album.start": "Syncing ",
            "sync.album.complete": "Synced ",
            "sync.album.error": "Sync failed ",
            "sync.unsync.complete": "Removed ",
            "sync.unsync.error": "Unsync failed ",
            "sync.scan.complete": "Scanned ",
        }.get(event, "")
        _ = body.append(label)

        source_path = getattr(record, "source_path", None)
        target_path = getattr(record, "target_path", None)
        if source_path:
            _ = body.append_text(self._format_path(str(source_path)))
        if target_path:
            if source_path:
                _ = body.append(" → ")
            _ = body.append_text(self._format_path(str(target_path)))

        metrics: list[str] = []
        files_copied = getattr(record, "files_copied", None)
        if isinstance(files_copied, int):
            metrics.append(f"files={files_copied}")
        album_count = getattr(record, "album_count", None)
        if isinstance(album_count, int):
            metrics.append(f"albums={album_count}")
        duration = getattr(record, "duration_seconds", None)
        if isinstance(duration, (int, float)):
            metrics.append(f"duration={duration:.2f}s")
        error_message = getattr(record, "error_message", None)
        if error_message:
            metrics.append(str(error_message))
        if metrics:
            _ = body.append(" (" + ", ".join(metrics) + ")")

        _ = text.append_text(body)
        return text

    @override
    def render_message(self, record: logging.LogRecord, message: str) -> ConsoleRenderable:
        """Render message with custom styling for sync events."""

        sync_text = self._render_sync_message(record)
        if sync_text is not None:
            return sync_text
        return super().render_message(record, message)


__all__ = ["SyncRichHandler"]
