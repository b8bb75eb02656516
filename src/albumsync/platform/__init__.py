"""Platform utilities shared across albumsync layers."""

from .concurrency import ReadWriteLock
from .filesystem import base_name, ensure_directory, ensure_parent_directory, join_path

__all__ = [
    "ReadWriteLock",
    "base_name",
    "ensure_directory",
    "ensure_parent_directory",
    "join_path",
]
