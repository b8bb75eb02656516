"""Sync status, copy, removal and cache endpoints."""

from fastapi import APIRouter, Depends, HTTPException

from albumsync.application.services import AlbumSyncService
from albumsync.features.sync import AlbumNotFoundError, ReplicationError
from albumsync.web.deps import get_service
from albumsync.web.schemas import (
    CacheClearedResponse,
    ResultResponse,
    SyncRequest,
    SyncStatusResponse,
    UnsyncRequest,
)

router = APIRouter()


@router.post("/check-sync", response_model=SyncStatusResponse)
def check_sync(
    request: SyncRequest,
    service: AlbumSyncService = Depends(get_service),
) -> SyncStatusResponse:
    synced = service.check_sync(request.source_path, request.target_directory)
    return SyncStatusResponse(synced=synced)


@router.post("/sync", response_model=ResultResponse)
def sync_album(
    request: SyncRequest,
    service: AlbumSyncService = Depends(get_service),
) -> ResultResponse:
    """Copy a source album folder into the target directory."""
    try:
        outcome = service.sync(request.source_path, request.target_directory)
    except ReplicationError as e:
        raise HTTPException(status_code=500, detail=str(e))
    return ResultResponse(result=outcome.message)


@router.post("/unsync", response_model=ResultResponse)
def unsync_album(
    request: UnsyncRequest,
    service: AlbumSyncService = Depends(get_service),
) -> ResultResponse:
    """Remove an album folder from the target directory."""
    try:
        outcome = service.unsync(request.target_directory, request.album_name)
    except AlbumNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except ReplicationError as e:
        raise HTTPException(status_code=500, detail=str(e))
    return ResultResponse(result=outcome.message)


@router.delete("/cache", response_model=CacheClearedResponse)
def clear_cache(service: AlbumSyncService = Depends(get_service)) -> CacheClearedResponse:
    return CacheClearedResponse(cleared=service.clear_cache())
