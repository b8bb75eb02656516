"""Utility helpers for configuration file persistence."""

from __future__ import annotations

from pathlib import Path

from albumsync.platform.filesystem import ensure_parent_directory


def write_text_file(path: Path, content: str) -> None:
    """Persist textual content ensuring parent directories exist."""

    _ = ensure_parent_directory(path)
    _ = path.write_text(content, encoding="utf-8")


__all__ = ["write_text_file"]
