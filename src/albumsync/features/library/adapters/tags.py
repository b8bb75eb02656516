"""Mutagen-backed tag reader used when folder names do not reveal the artist."""

from __future__ import annotations

from logging import Logger, getLogger

import mutagen
from mutagen import MutagenError

from ..usecases.ports import TagReaderPort

_ARTIST_KEYS: tuple[str, ...] = ("albumartist", "artist")


class MutagenTagReader(TagReaderPort):
    """Read easy tags (ID3, Vorbis, MP4, ASF) through ``mutagen.File``."""

    def __init__(self, logger: Logger | None = None) -> None:
        self._logger = logger or getLogger(__name__)

    def read_artist(self, path: str) -> str | None:
        try:
            audio = mutagen.File(path, easy=True)
        except (MutagenError, OSError) as exc:
            self._logger.debug("Could not read tags from %s: %s", path, exc)
            return None

        if audio is None or audio.tags is None:
            return None

        for key in _ARTIST_KEYS:
            try:
                values = audio.tags.get(key)
            except (KeyError, ValueError):
                continue
            if not values:
                continue
            value = str(values[0]).strip() if isinstance(values, list) else str(values).strip()
            if value:
                return value
        return None


__all__ = ["MutagenTagReader"]
