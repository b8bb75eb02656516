"""Fingerprint engine combining directory listing, hashing and caching."""

from __future__ import annotations

from logging import Logger, getLogger

from albumsync.platform.filesystem import base_name

from ..domain.fingerprint import (
    UNAVAILABLE_FINGERPRINT,
    FingerprintReadError,
    compute_fingerprint,
)
from .ports import DirectoryListingPort, FingerprintCachePort


class FingerprintEngine:
    """Compute directory fingerprints through injected listing and cache ports."""

    _lister: DirectoryListingPort
    _cache: FingerprintCachePort
    _logger: Logger

    def __init__(
        self,
        *,
        cache: FingerprintCachePort,
        lister: DirectoryListingPort,
        logger: Logger | None = None,
    ) -> None:
        self._cache = cache
        self._lister = lister
        self._logger = logger or getLogger(__name__)

    def fingerprint(self, path: str) -> str:
        """Return the fingerprint of ``path`` or ``""`` when it cannot be read.

        Successful results are cached under the exact ``path`` string given.
        """

        return self._cache.get_or_compute(path, self._compute)

    def _compute(self, path: str) -> str:
        try:
            file_names = self._lister.list_file_names(path)
        except FingerprintReadError as exc:
            self._logger.debug("Fingerprint unavailable for %s: %s", path, exc.reason)
            return UNAVAILABLE_FINGERPRINT
        return compute_fingerprint(base_name(path), file_names)


__all__ = ["FingerprintEngine"]
