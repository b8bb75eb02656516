"""Tests for the settings endpoints."""

from __future__ import annotations

from fastapi.testclient import TestClient
from pytest_mock import MockerFixture

from albumsync.application.services import SettingsError, SettingsStore


def test_get_defaults(client: TestClient) -> None:
    response = client.get("/api/settings")
    assert response.status_code == 200
    assert response.json() == {"lastSourceDirectory": "", "lastTargetDirectory": ""}


def test_save_and_reload(client: TestClient, settings_store: SettingsStore) -> None:
    payload = {"lastSourceDirectory": "/music", "lastTargetDirectory": "/media/player"}

    response = client.post("/api/settings", json=payload)

    assert response.status_code == 200
    assert response.json() == {"status": "saved"}
    assert settings_store.path.exists()
    assert client.get("/api/settings").json() == payload


def test_save_failure_is_500(
    client: TestClient, settings_store: SettingsStore, mocker: MockerFixture
) -> None:
    _ = mocker.patch.object(settings_store, "save", side_effect=SettingsError("disk full"))
    response = client.post("/api/settings", json={"lastSourceDirectory": "/music"})
    assert response.status_code == 500
    assert response.json()["detail"] == "disk full"
