"""Remembered directory endpoints."""

from fastapi import APIRouter, Depends, HTTPException

from albumsync.application.services import SettingsError, SettingsStore
from albumsync.web.deps import get_settings_store
from albumsync.web.schemas import SaveSettingsResponse, SettingsBody

router = APIRouter()


@router.get("/settings", response_model=SettingsBody)
def get_settings(store: SettingsStore = Depends(get_settings_store)) -> SettingsBody:
    return SettingsBody.from_settings(store.load())


@router.post("/settings", response_model=SaveSettingsResponse)
def save_settings(
    body: SettingsBody,
    store: SettingsStore = Depends(get_settings_store),
) -> SaveSettingsResponse:
    try:
        store.save(body.to_settings())
    except SettingsError as e:
        raise HTTPException(status_code=500, detail=str(e))
    return SaveSettingsResponse(status="saved")
