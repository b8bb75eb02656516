"""Shared fixtures for sync feature tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from albumsync.features.fingerprint import FingerprintCache, FingerprintEngine, LocalDirectoryLister
from albumsync.features.sync import LocalFileSystemGateway, ReplicationService, SyncStatusResolver


@pytest.fixture
def cache() -> FingerprintCache:
    return FingerprintCache()


@pytest.fixture
def resolver(cache: FingerprintCache) -> SyncStatusResolver:
    engine = FingerprintEngine(cache=cache, lister=LocalDirectoryLister())
    return SyncStatusResolver(fingerprints=engine, filesystem=LocalFileSystemGateway())


@pytest.fixture
def replication() -> ReplicationService:
    return ReplicationService(filesystem=LocalFileSystemGateway())


@pytest.fixture
def test_album(tmp_path: Path) -> Path:
    """Source album ``TestAlbum`` with two tracks and a cover."""
    album = tmp_path / "source" / "TestAlbum"
    album.mkdir(parents=True)
    for name in ("track1.mp3", "track2.mp3", "cover.jpg"):
        _ = (album / name).write_bytes(f"data for {name}".encode())
    return album


@pytest.fixture
def target_dir(tmp_path: Path) -> Path:
    target = tmp_path / "target"
    target.mkdir()
    return target
