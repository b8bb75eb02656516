"""Filesystem adapter listing directories for fingerprinting."""

from __future__ import annotations

import os

from ..domain.fingerprint import FingerprintReadError
from ..usecases.ports import DirectoryListingPort


class LocalDirectoryLister(DirectoryListingPort):
    """List immediate file names with ``os.scandir``."""

    def list_file_names(self, path: str) -> list[str]:
        try:
            with os.scandir(path) as entries:
                return [entry.name for entry in entries if not _is_directory(entry)]
        except OSError as exc:
            raise FingerprintReadError(path, exc.strerror or str(exc)) from exc
        except ValueError as exc:
            # Paths with an embedded NUL byte never reach the OS.
            raise FingerprintReadError(path, str(exc)) from exc


def _is_directory(entry: os.DirEntry[str]) -> bool:
    # Symlinks are not followed: a link to a directory is listed like a file.
    try:
        return entry.is_dir(follow_symlinks=False)
    except OSError:
        return False


__all__ = ["LocalDirectoryLister"]
