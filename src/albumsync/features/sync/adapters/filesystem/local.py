"""Filesystem adapter for sync use cases."""

from __future__ import annotations

import os
import shutil
from collections.abc import Iterator

from ...usecases.ports import FileSystemGateway


class LocalFileSystemGateway(FileSystemGateway):
    """Thin wrapper around the local filesystem."""

    def exists(self, path: str) -> bool:
        return os.path.exists(path)

    def is_directory(self, path: str) -> bool:
        return os.path.isdir(path)

    def list_subdirectories(self, path: str) -> list[str]:
        try:
            with os.scandir(path) as entries:
                return [entry.name for entry in entries if _is_directory(entry)]
        except (OSError, ValueError):
            return []

    def iter_tree(self, root: str) -> Iterator[tuple[str, bool]]:
        yield from self._iter_tree(root, "")

    def _iter_tree(self, root: str, prefix: str) -> Iterator[tuple[str, bool]]:
        directory = os.path.join(root, prefix) if prefix else root
        with os.scandir(directory) as scan:
            entries = sorted(scan, key=lambda entry: entry.name)
        for entry in entries:
            relative_path = os.path.join(prefix, entry.name) if prefix else entry.name
            if _is_directory(entry):
                yield relative_path, True
                yield from self._iter_tree(root, relative_path)
            else:
                yield relative_path, False

    def make_directories(self, path: str) -> None:
        os.makedirs(path, mode=0o755, exist_ok=True)

    def copy_file(self, source: str, destination: str) -> None:
        _ = shutil.copyfile(source, destination)

    def remove_tree(self, path: str) -> None:
        if os.path.isdir(path) and not os.path.islink(path):
            shutil.rmtree(path)
        else:
            os.remove(path)


def _is_directory(entry: os.DirEntry[str]) -> bool:
    try:
        return entry.is_dir(follow_symlinks=False)
    except OSError:
        return False


__all__ = ["LocalFileSystemGateway"]
