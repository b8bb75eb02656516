"""
Summary: Derive artist and album names from an album folder and its parent folder.
Why: Label scanned albums without reading tags for the common folder layouts.
"""

from __future__ import annotations

from collections.abc import Iterable

from albumsync.config.settings import ROOT_LEVEL_FOLDER_NAMES, UNKNOWN_ARTIST

# Tried in order when the parent folder cannot be the artist.
_FOLDER_NAME_SEPARATORS: tuple[str, ...] = (" - ", "-", "_")


def is_root_level_folder(
    folder_name: str,
    root_names: Iterable[str] = ROOT_LEVEL_FOLDER_NAMES,
) -> bool:
    """Return whether ``folder_name`` is a library root such as ``Music``."""

    lowered = folder_name.casefold()
    return any(lowered == name.casefold() for name in root_names)


def parse_artist_and_album(parent_folder_name: str, album_folder_name: str) -> tuple[str, str]:
    """Return ``(artist, album)`` for an album folder.

    ``Beatles/Abbey Road`` yields the parent as artist. Under a library root
    the folder name itself is split on `` - ``, then ``-``, then ``_``.
    """

    if parent_folder_name and not is_root_level_folder(parent_folder_name):
        return parent_folder_name, album_folder_name

    for separator in _FOLDER_NAME_SEPARATORS:
        artist, found, album = album_folder_name.partition(separator)
        if not found:
            continue
        artist = artist.strip()
        album = album.strip()
        if artist and album:
            return artist, album

    return UNKNOWN_ARTIST, album_folder_name


__all__ = ["is_root_level_folder", "parse_artist_and_album"]
