"""
Summary: Pure directory fingerprint derivation from a folder name and its file names.
Why: Identify album folders by name and listing even when they live in different places.
"""

from __future__ import annotations

import hashlib
from collections.abc import Iterable
from typing import Final

from albumsync.shared.errors import AlbumSyncError

FINGERPRINT_SEPARATOR: Final[str] = "|"

# Returned instead of a digest when a directory cannot be listed.
UNAVAILABLE_FINGERPRINT: Final[str] = ""


class FingerprintReadError(AlbumSyncError):
    """Raised when a directory cannot be listed for fingerprinting."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"Cannot read directory {path}: {reason}")
        self.path = path
        self.reason = reason


def compute_fingerprint(folder_name: str, file_names: Iterable[str]) -> str:
    """Return the SHA-256 hex digest of ``folder_name|file1|file2|...``.

    File names are sorted by code point first, so listing order never matters.
    An empty listing still yields a digest (of ``folder_name|``).
    """

    payload = folder_name + FINGERPRINT_SEPARATOR + FINGERPRINT_SEPARATOR.join(sorted(file_names))
    return hashlib.sha256(payload.encode("utf-8", errors="surrogateescape")).hexdigest()


def is_available(fingerprint: str) -> bool:
    """Return whether ``fingerprint`` is a real digest rather than the sentinel."""

    return fingerprint != UNAVAILABLE_FINGERPRINT


__all__ = [
    "FINGERPRINT_SEPARATOR",
    "UNAVAILABLE_FINGERPRINT",
    "FingerprintReadError",
    "compute_fingerprint",
    "is_available",
]
