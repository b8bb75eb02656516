"""Application service wiring fingerprinting, sync and library adapters."""

from __future__ import annotations

from dataclasses import replace
from logging import Logger, getLogger
from typing import final

from albumsync.features.fingerprint import (
    DirectoryListingPort,
    FingerprintCache,
    FingerprintEngine,
    LocalDirectoryLister,
)
from albumsync.features.library import (
    AlbumFolder,
    DirectoryItem,
    LibraryScanner,
    MutagenTagReader,
    TagReaderPort,
    browse_directory,
    find_cover_image,
    list_drives,
)
from albumsync.features.sync import (
    FileSystemGateway,
    LocalFileSystemGateway,
    ReplicationService,
    SyncOutcome,
    SyncStatusResolver,
    UnsyncOutcome,
)


@final
class AlbumSyncService:
    """Application façade owning the fingerprint cache shared by every request.

    One instance serves the whole process; all methods are safe to call
    from concurrent worker threads.
    """

    cache: FingerprintCache
    engine: FingerprintEngine
    resolver: SyncStatusResolver
    replication: ReplicationService
    scanner: LibraryScanner

    def __init__(
        self,
        *,
        cache: FingerprintCache | None = None,
        lister: DirectoryListingPort | None = None,
        filesystem: FileSystemGateway | None = None,
        tag_reader: TagReaderPort | None = None,
        logger: Logger | None = None,
    ) -> None:
        service_logger = logger or getLogger(__name__)
        fs_gateway = filesystem or LocalFileSystemGateway()

        self.cache = cache if cache is not None else FingerprintCache()
        self.engine = FingerprintEngine(
            cache=self.cache,
            lister=lister or LocalDirectoryLister(),
            logger=service_logger,
        )
        self.resolver = SyncStatusResolver(
            fingerprints=self.engine,
            filesystem=fs_gateway,
            logger=service_logger,
        )
        self.replication = ReplicationService(filesystem=fs_gateway, logger=service_logger)
        self.scanner = LibraryScanner(
            fingerprints=self.engine,
            tag_reader=tag_reader or MutagenTagReader(service_logger),
            logger=service_logger,
        )

    def compute_fingerprint(self, path: str) -> str:
        """Fingerprint ``path``; ``""`` when it cannot be read."""

        return self.engine.fingerprint(path)

    def check_sync(self, source_path: str, target_directory: str) -> bool:
        return self.resolver.is_synced(source_path, target_directory)

    def find_synced_copy(self, source_path: str, target_directory: str) -> str | None:
        """Return the target folder holding the source's fingerprint twin, if any."""

        fingerprint = self.engine.fingerprint(source_path)
        return self.resolver.find_matching_folder(target_directory, fingerprint)

    def sync(self, source_path: str, target_directory: str) -> SyncOutcome:
        return self.replication.sync(source_path, target_directory)

    def unsync(self, target_directory: str, album_name: str) -> UnsyncOutcome:
        return self.replication.unsync(target_directory, album_name)

    def scan(self, directory: str, target_directory: str | None = None) -> list[AlbumFolder]:
        """Scan ``directory`` for albums, optionally flagging those synced into ``target_directory``."""

        albums = self.scanner.scan(directory)
        if not target_directory:
            return albums
        return [
            _with_synced(album, self.resolver.find_matching_folder(target_directory, album.fingerprint))
            for album in albums
        ]

    def browse(self, path: str) -> list[DirectoryItem]:
        return browse_directory(path)

    def drives(self) -> list[str]:
        return list_drives()

    def find_cover(self, album_path: str) -> str | None:
        return find_cover_image(album_path)

    def clear_cache(self, path: str | None = None) -> int:
        """Forget cached fingerprints: all of them, or only ``path``'s. Returns the count removed."""

        if path is None:
            return self.cache.clear()
        return 1 if self.cache.discard(path) else 0


def _with_synced(album: AlbumFolder, match: str | None) -> AlbumFolder:
    if match is None:
        return album
    return replace(album, is_synced=True)


__all__ = ["AlbumSyncService"]
