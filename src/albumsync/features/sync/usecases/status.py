"""
Summary: Decide whether a source album already has a fingerprint twin in a target directory.
Why: Detect synced albums even after the copy was renamed or moved under the target.
"""

from __future__ import annotations

from logging import Logger, getLogger

from albumsync.features.fingerprint import is_available
from albumsync.platform.filesystem import join_path

from .ports import FileSystemGateway, FingerprintPort


class SyncStatusResolver:
    """Match a source fingerprint against the immediate subfolders of a target."""

    _fingerprints: FingerprintPort
    _filesystem: FileSystemGateway
    _logger: Logger

    def __init__(
        self,
        *,
        fingerprints: FingerprintPort,
        filesystem: FileSystemGateway,
        logger: Logger | None = None,
    ) -> None:
        self._fingerprints = fingerprints
        self._filesystem = filesystem
        self._logger = logger or getLogger(__name__)

    def is_synced(self, source_path: str, target_directory: str) -> bool:
        """Return True when some child of ``target_directory`` shares the source fingerprint.

        Folder names play no part: only fingerprints are compared.
        """

        source_fingerprint = self._fingerprints.fingerprint(source_path)
        if not is_available(source_fingerprint):
            self._logger.debug("Source %s is unreadable; reporting not synced", source_path)
            return False

        return self.find_matching_folder(target_directory, source_fingerprint) is not None

    def find_matching_folder(self, target_directory: str, fingerprint: str) -> str | None:
        """Return the first child folder whose fingerprint equals ``fingerprint``.

        Children are visited in filesystem enumeration order; if several
        match, whichever comes first wins.
        """

        if not is_available(fingerprint):
            return None

        for name in self._filesystem.list_subdirectories(target_directory):
            candidate = join_path(target_directory, name)
            if self._fingerprints.fingerprint(candidate) == fingerprint:
                self._logger.debug("Fingerprint match for %s: %s", fingerprint[:12], candidate)
                return candidate
        return None


__all__ = ["SyncStatusResolver"]
