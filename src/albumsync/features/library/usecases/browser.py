"""Directory browsing, drive enumeration and cover lookup for the library picker."""

from __future__ import annotations

import os
import string
import sys
from collections.abc import Callable
from pathlib import Path

from albumsync.config.settings import COVER_FILE_NAME
from albumsync.platform.filesystem import join_path

from ..domain.errors import BrowseError
from ..domain.models import DirectoryItem

_UNIX_MOUNT_ROOTS: tuple[str, ...] = ("/Volumes", "/media", "/mnt")


def browse_directory(path: str) -> list[DirectoryItem]:
    """List visible entries of ``path``: folders first, then files, each sorted by name.

    Raises:
        BrowseError: When ``path`` cannot be listed.
    """

    try:
        with os.scandir(path) as scan:
            entries = [entry for entry in scan if not entry.name.startswith(".")]
    except OSError as exc:
        raise BrowseError(path, exc.strerror or str(exc)) from exc
    except ValueError as exc:
        raise BrowseError(path, str(exc)) from exc

    items = [
        DirectoryItem(
            name=entry.name,
            path=join_path(path, entry.name),
            is_directory=_safe_is_dir(entry),
        )
        for entry in entries
    ]
    items.sort(key=lambda item: (not item.is_directory, item.name.casefold(), item.name))
    return items


def list_drives(
    *,
    platform: str | None = None,
    exists: Callable[[str], bool] = os.path.exists,
) -> list[str]:
    """Return browsable roots: drive letters on Windows, ``/`` plus mount folders elsewhere."""

    current = platform or sys.platform
    if current.startswith("win"):
        return [
            drive
            for drive in (f"{letter}:\\" for letter in string.ascii_uppercase)
            if exists(drive)
        ]

    drives = ["/"]
    drives.extend(root for root in _UNIX_MOUNT_ROOTS if exists(root))
    return drives


def find_cover_image(album_path: str | Path, cover_file_name: str = COVER_FILE_NAME) -> str | None:
    """Return the album's cover file, falling back to the parent folder's."""

    album = str(album_path)
    for folder in (album, os.path.dirname(os.path.normpath(album))):
        candidate = join_path(folder, cover_file_name)
        if os.path.isfile(candidate):
            return candidate
    return None


def _safe_is_dir(entry: os.DirEntry[str]) -> bool:
    try:
        return entry.is_dir()
    except OSError:
        return False


__all__ = ["browse_directory", "find_cover_image", "list_drives"]
