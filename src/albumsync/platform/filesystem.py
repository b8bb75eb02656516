"""Filesystem helpers reused across multiple layers."""

from __future__ import annotations

import os
from pathlib import Path


def ensure_directory(directory: Path) -> Path:
    """Ensure ``directory`` exists as a folder and return it."""

    if directory.exists():
        if not directory.is_dir():
            raise NotADirectoryError(f"Path exists but is not a directory: {directory}")
        return directory

    directory.mkdir(parents=True, exist_ok=True)
    return directory


def ensure_parent_directory(path: Path) -> Path:
    """Ensure the parent directory for ``path`` exists and return it."""

    return ensure_directory(path.parent)


def base_name(path: str | Path) -> str:
    """Return the final component of ``path`` ignoring trailing separators."""

    raw = str(path)
    if not raw:
        return "."
    text = raw.rstrip("/\\")
    if not text:
        return raw[0]
    return Path(text).name or text


def join_path(directory: str | Path, name: str) -> str:
    """Join ``name`` onto ``directory`` and collapse redundant separators and dots."""

    return os.path.normpath(os.path.join(str(directory), name))


__all__ = ["base_name", "ensure_directory", "ensure_parent_directory", "join_path"]
