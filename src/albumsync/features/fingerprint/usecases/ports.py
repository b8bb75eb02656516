"""Ports for the fingerprint feature."""

from __future__ import annotations

from collections.abc import Callable
from typing import Protocol


class DirectoryListingPort(Protocol):
    """List the immediate entries of a directory."""

    def list_file_names(self, path: str) -> list[str]:
        """Return names of the immediate non-directory entries of ``path``.

        Raises:
            FingerprintReadError: When ``path`` is missing or unreadable.
        """

        ...


class FingerprintCachePort(Protocol):
    """Memoize fingerprints by path string."""

    def get(self, path: str) -> str | None:
        ...

    def put(self, path: str, fingerprint: str) -> None:
        ...

    def get_or_compute(self, path: str, compute: Callable[[str], str]) -> str:
        """Return the cached fingerprint or the result of ``compute(path)``."""

        ...


__all__ = ["DirectoryListingPort", "FingerprintCachePort"]
