"""Records produced by library scans and directory browsing."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True, frozen=True)
class AlbumFolder:
    """One folder holding audio files, as found by a library scan."""

    path: str
    name: str
    artist: str
    album: str
    mp3_count: int
    audio_count: int
    has_cover: bool
    size_mb: float
    fingerprint: str
    is_synced: bool = False


@dataclass(slots=True, frozen=True)
class DirectoryItem:
    """A visible entry of a browsed directory."""

    name: str
    path: str
    is_directory: bool


__all__ = ["AlbumFolder", "DirectoryItem"]
