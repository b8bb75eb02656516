"""Ports for the library feature."""

from __future__ import annotations

from typing import Protocol


class FingerprintPort(Protocol):
    """Provide directory fingerprints; ``""`` means unavailable."""

    def fingerprint(self, path: str) -> str:
        ...


class TagReaderPort(Protocol):
    """Read album-level tags from an audio file."""

    def read_artist(self, path: str) -> str | None:
        """Return the album artist (or track artist) tag, or None when absent or unreadable."""

        ...


__all__ = ["FingerprintPort", "TagReaderPort"]
