"""Where: src/albumsync/features/fingerprint/usecases/cache.py
What: In-memory fingerprint cache keyed by directory path string.
Why: Avoid relisting folders that were already fingerprinted during a session.
Assumptions: - Callers pass consistent path spellings; keys are never normalized.
Trade-offs: - Entries go stale when folders change; only explicit clears refresh them.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Final

from albumsync.platform.concurrency import ReadWriteLock

from ..domain.fingerprint import is_available


class FingerprintCache:
    """Thread-safe path → fingerprint mapping guarded by a reader/writer lock."""

    def __init__(self) -> None:
        self._entries: dict[str, str] = {}
        self._lock: Final[ReadWriteLock] = ReadWriteLock()

    def get(self, path: str) -> str | None:
        with self._lock.read_locked():
            return self._entries.get(path)

    def put(self, path: str, fingerprint: str) -> None:
        """Insert ``fingerprint`` unless ``path`` is already cached.

        The first stored value wins so a cached entry never changes in place.
        """

        with self._lock.write_locked():
            _ = self._entries.setdefault(path, fingerprint)

    def get_or_compute(self, path: str, compute: Callable[[str], str]) -> str:
        """Return the cached value for ``path`` or compute and store it.

        ``compute`` runs outside the lock, so two threads missing on the same
        path may both compute. Unavailable results are returned but not stored.
        """

        cached = self.get(path)
        if cached is not None:
            return cached

        fingerprint = compute(path)
        if not is_available(fingerprint):
            return fingerprint

        with self._lock.write_locked():
            return self._entries.setdefault(path, fingerprint)

    def discard(self, path: str) -> bool:
        """Drop ``path`` from the cache; returns True when an entry was removed."""

        with self._lock.write_locked():
            return self._entries.pop(path, None) is not None

    def clear(self) -> int:
        """Drop every entry and return how many were removed."""

        with self._lock.write_locked():
            removed = len(self._entries)
            self._entries.clear()
            return removed

    def __contains__(self, path: object) -> bool:
        with self._lock.read_locked():
            return path in self._entries

    def __len__(self) -> int:
        with self._lock.read_locked():
            return len(self._entries)


__all__ = ["FingerprintCache"]
