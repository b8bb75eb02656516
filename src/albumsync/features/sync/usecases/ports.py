"""Ports for the sync feature."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Protocol


class FingerprintPort(Protocol):
    """Provide directory fingerprints; ``""`` means unavailable."""

    def fingerprint(self, path: str) -> str:
        ...


class FileSystemGateway(Protocol):
    """Abstract filesystem operations needed by the sync use cases.

    Mutating operations raise ``OSError`` on failure.
    """

    def exists(self, path: str) -> bool:
        """Return True if the path exists."""

        ...

    def is_directory(self, path: str) -> bool:
        """Return True when the path is a directory."""

        ...

    def list_subdirectories(self, path: str) -> list[str]:
        """Return names of immediate subdirectories in enumeration order.

        Unreadable or missing directories yield an empty list.
        """

        ...

    def iter_tree(self, root: str) -> Iterator[tuple[str, bool]]:
        """Yield ``(relative_path, is_directory)`` for every entry below ``root``, parents first."""

        ...

    def make_directories(self, path: str) -> None:
        """Create ``path`` and any missing parents."""

        ...

    def copy_file(self, source: str, destination: str) -> None:
        """Copy file bytes, replacing ``destination`` when it exists."""

        ...

    def remove_tree(self, path: str) -> None:
        """Delete ``path`` and everything below it."""

        ...


__all__ = ["FileSystemGateway", "FingerprintPort"]
