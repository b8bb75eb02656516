"""
Summary: Copy album folders into a target directory and remove them again.
Why: Implement sync and unsync as fail-fast filesystem operations that are safe to re-run.
"""

from __future__ import annotations

import os
import time
from logging import Logger, getLogger

from albumsync.platform.filesystem import base_name, join_path

from ..domain.errors import AlbumNotFoundError, ReplicationError
from ..domain.models import SyncOutcome, UnsyncOutcome
from .ports import FileSystemGateway


class ReplicationService:
    """Mirror and remove album folders through an injected filesystem gateway.

    Nothing here consults fingerprints; deciding whether to sync is the
    caller's job.
    """

    _filesystem: FileSystemGateway
    _logger: Logger

    def __init__(
        self,
        *,
        filesystem: FileSystemGateway,
        logger: Logger | None = None,
    ) -> None:
        self._filesystem = filesystem
        self._logger = logger or getLogger(__name__)

    def sync(self, source_path: str, target_directory: str) -> SyncOutcome:
        """Copy ``source_path`` into ``target_directory/<source name>``.

        Existing files are overwritten. The first failure aborts the copy and
        raises ``ReplicationError``; files copied before it stay in place, so
        running the sync again finishes the job.
        """

        folder_name = base_name(source_path)
        target_path = join_path(target_directory, folder_name)
        started = time.perf_counter()

        self._logger.debug(
            "Sync start",
            extra={
                "sync_event": "sync.album.start",
                "source_path": source_path,
                "target_path": target_path,
            },
        )

        try:
            self._check_source(source_path, target_path)
            try:
                self._filesystem.make_directories(target_path)
            except OSError as exc:
                raise ReplicationError(
                    f"failed to create target directory: {exc}",
                    path=target_path,
                ) from exc
            files_copied, directories_created = self._copy_tree(source_path, target_path)
        except ReplicationError as exc:
            self._logger.error(
                "Sync failed for %s: %s",
                source_path,
                exc,
                extra={
                    "sync_event": "sync.album.error",
                    "source_path": source_path,
                    "target_path": target_path,
                    "error_message": str(exc),
                },
            )
            raise

        self._logger.info(
            "Synced %s to %s",
            folder_name,
            target_path,
            extra={
                "sync_event": "sync.album.complete",
                "source_path": source_path,
                "target_path": target_path,
                "files_copied": files_copied,
                "duration_seconds": time.perf_counter() - started,
            },
        )
        return SyncOutcome(
            message=f"Successfully synced {folder_name} to {target_path}",
            source_path=source_path,
            target_path=target_path,
            files_copied=files_copied,
            directories_created=directories_created,
        )

    def unsync(self, target_directory: str, album_name: str) -> UnsyncOutcome:
        """Delete ``target_directory/<album_name>`` recursively.

        Raises:
            AlbumNotFoundError: When the album folder does not exist or the
                name would address something other than a direct child.
            ReplicationError: When deletion fails part-way.
        """

        if not _is_child_name(album_name):
            raise AlbumNotFoundError(album_name, target_directory)

        target_path = join_path(target_directory, album_name)
        if not self._filesystem.exists(target_path):
            raise AlbumNotFoundError(album_name, target_directory)

        try:
            self._filesystem.remove_tree(target_path)
        except OSError as exc:
            self._logger.error(
                "Unsync failed for %s: %s",
                target_path,
                exc,
                extra={
                    "sync_event": "sync.unsync.error",
                    "target_path": target_path,
                    "error_message": str(exc),
                },
            )
            raise ReplicationError(f"failed to remove album: {exc}", path=target_path) from exc

        self._logger.info(
            "Removed %s",
            target_path,
            extra={"sync_event": "sync.unsync.complete", "target_path": target_path},
        )
        return UnsyncOutcome(
            message=f"Successfully removed {album_name}",
            album_name=album_name,
            target_path=target_path,
        )

    def _check_source(self, source_path: str, target_path: str) -> None:
        if not self._filesystem.is_directory(source_path):
            raise ReplicationError(
                f"source folder not found: {source_path}",
                path=source_path,
            )
        source_real = os.path.realpath(source_path)
        target_real = os.path.realpath(target_path)
        if target_real == source_real or target_real.startswith(source_real + os.sep):
            raise ReplicationError(
                f"target {target_path} lies inside source {source_path}",
                path=target_path,
            )

    def _copy_tree(self, source_path: str, target_path: str) -> tuple[int, int]:
        files_copied = 0
        directories_created = 0
        current = source_path
        try:
            for relative_path, is_directory in self._filesystem.iter_tree(source_path):
                current = join_path(source_path, relative_path)
                destination = join_path(target_path, relative_path)
                if is_directory:
                    self._filesystem.make_directories(destination)
                    directories_created += 1
                else:
                    self._filesystem.copy_file(current, destination)
                    files_copied += 1
        except OSError as exc:
            raise ReplicationError(
                f"failed to copy files: {exc}",
                path=exc.filename or current,
            ) from exc
        return files_copied, directories_created


def _is_child_name(name: str) -> bool:
    if name in {"", ".", ".."}:
        return False
    separators = {"/", os.sep}
    if os.altsep:
        separators.add(os.altsep)
    return not any(separator in name for separator in separators)


__all__ = ["ReplicationService"]
