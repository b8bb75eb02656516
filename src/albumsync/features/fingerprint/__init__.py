# Where: albumsync.features.fingerprint.__init__
# What: Expose the fingerprint engine, cache and sentinel helpers.
# Why: Provide a cohesive import surface for the sync feature and application layer.

from .adapters.filesystem import LocalDirectoryLister
from .domain.fingerprint import (
    FINGERPRINT_SEPARATOR,
    UNAVAILABLE_FINGERPRINT,
    FingerprintReadError,
    compute_fingerprint,
    is_available,
)
from .usecases.cache import FingerprintCache
from .usecases.engine import FingerprintEngine
from .usecases.ports import DirectoryListingPort, FingerprintCachePort

__all__ = [
    "FINGERPRINT_SEPARATOR",
    "UNAVAILABLE_FINGERPRINT",
    "DirectoryListingPort",
    "FingerprintCache",
    "FingerprintCachePort",
    "FingerprintEngine",
    "FingerprintReadError",
    "LocalDirectoryLister",
    "compute_fingerprint",
    "is_available",
]
