"""Fixtures building an isolated API app per test."""

from __future__ import annotations

from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from albumsync.application.services import AlbumSyncService, SettingsStore
from albumsync.web import create_app


class _NoTags:
    def read_artist(self, path: str) -> str | None:
        return None


@pytest.fixture
def service() -> AlbumSyncService:
    return AlbumSyncService(tag_reader=_NoTags())


@pytest.fixture
def settings_store(tmp_path: Path) -> SettingsStore:
    return SettingsStore(tmp_path / "data" / "settings.json")


@pytest.fixture
def client(service: AlbumSyncService, settings_store: SettingsStore) -> TestClient:
    app = create_app(service, settings_store, allowed_origins=["http://localhost:5173"])
    return TestClient(app)


@pytest.fixture
def library(tmp_path: Path) -> Path:
    root = tmp_path / "Music"
    album = root / "The Beatles" / "Abbey Road"
    album.mkdir(parents=True)
    for name in ("01 Come Together.mp3", "02 Something.mp3"):
        _ = (album / name).write_bytes(b"audio")
    _ = (album / "cover.jpg").write_bytes(b"\xff\xd8\xff\xe0jpeg")
    return root


@pytest.fixture
def target(tmp_path: Path) -> Path:
    folder = tmp_path / "Player"
    folder.mkdir()
    return folder
