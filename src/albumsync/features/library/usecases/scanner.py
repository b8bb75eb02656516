"""Use case scanning a library root for album folders."""

from __future__ import annotations

import os
import time
from collections.abc import Iterable
from logging import Logger, getLogger
from pathlib import Path

from albumsync.config.settings import AUDIO_EXTENSIONS, COVER_FILE_NAME, MP3_EXTENSION, UNKNOWN_ARTIST
from albumsync.platform.filesystem import base_name

from ..domain.models import AlbumFolder
from ..domain.naming import parse_artist_and_album
from .browser import find_cover_image
from .ports import FingerprintPort, TagReaderPort

_BYTES_PER_MB = 1024 * 1024


class LibraryScanner:
    """Walk a library root and describe every folder that holds audio files."""

    _fingerprints: FingerprintPort
    _tag_reader: TagReaderPort | None
    _audio_extensions: tuple[str, ...]
    _cover_file_name: str
    _logger: Logger

    def __init__(
        self,
        *,
        fingerprints: FingerprintPort,
        tag_reader: TagReaderPort | None = None,
        audio_extensions: Iterable[str] = AUDIO_EXTENSIONS,
        cover_file_name: str = COVER_FILE_NAME,
        logger: Logger | None = None,
    ) -> None:
        self._fingerprints = fingerprints
        self._tag_reader = tag_reader
        self._audio_extensions = tuple(ext.lower() for ext in audio_extensions)
        self._cover_file_name = cover_file_name
        self._logger = logger or getLogger(__name__)

    def scan(self, directory: str) -> list[AlbumFolder]:
        """Return album records for every folder below ``directory``.

        The root itself is never reported. Unreadable folders are skipped.
        Each folder's fingerprint goes through the shared cache, so a scan
        warms it for later sync checks.
        """

        started = time.perf_counter()
        albums: list[AlbumFolder] = []
        root = os.path.normpath(directory)

        try:
            for dirpath, dirnames, filenames in os.walk(directory, onerror=self._log_walk_error):
                dirnames.sort()
                path = os.path.normpath(dirpath)
                if path == root:
                    continue
                album = self._describe(path, sorted(filenames))
                if album is not None:
                    albums.append(album)
        except ValueError as exc:
            self._logger.debug("Skipping unusable scan root %r: %s", directory, exc)

        self._logger.info(
            "Scanned %s: %d albums",
            directory,
            len(albums),
            extra={
                "sync_event": "sync.scan.complete",
                "source_path": directory,
                "album_count": len(albums),
                "duration_seconds": time.perf_counter() - started,
            },
        )
        return albums

    def is_audio_file(self, file_name: str) -> bool:
        lowered = file_name.lower()
        return any(lowered.endswith(ext) for ext in self._audio_extensions)

    def _describe(self, path: str, file_names: list[str]) -> AlbumFolder | None:
        audio_files = [name for name in file_names if self.is_audio_file(name)]
        if not audio_files:
            return None

        mp3_count = sum(1 for name in audio_files if name.lower().endswith(MP3_EXTENSION))
        folder_name = base_name(path)
        parent_name = Path(os.path.dirname(path)).name
        artist, album = parse_artist_and_album(parent_name, folder_name)
        if artist == UNKNOWN_ARTIST and self._tag_reader is not None:
            artist = self._tag_reader.read_artist(os.path.join(path, audio_files[0])) or artist

        return AlbumFolder(
            path=path,
            name=folder_name,
            artist=artist,
            album=album,
            mp3_count=mp3_count,
            audio_count=len(audio_files),
            has_cover=find_cover_image(path, self._cover_file_name) is not None,
            size_mb=calculate_folder_size(path),
            fingerprint=self._fingerprints.fingerprint(path),
        )

    def _log_walk_error(self, error: OSError) -> None:
        self._logger.debug("Skipping unreadable folder %s: %s", error.filename, error.strerror)


def calculate_folder_size(path: str | Path) -> float:
    """Return the total size of regular files below ``path`` in megabytes."""

    total = 0
    for dirpath, _, filenames in os.walk(path):
        for name in filenames:
            try:
                total += os.lstat(os.path.join(dirpath, name)).st_size
            except OSError:
                continue
    return total / _BYTES_PER_MB


__all__ = ["LibraryScanner", "calculate_folder_size"]
