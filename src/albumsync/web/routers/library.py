"""Library scanning, browsing and cover endpoints."""

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import FileResponse

from albumsync.application.services import AlbumSyncService
from albumsync.features.library import BrowseError
from albumsync.web.deps import get_service
from albumsync.web.schemas import (
    AlbumFolderResponse,
    BrowseRequest,
    DirectoryItemResponse,
    ScanRequest,
)

router = APIRouter()


@router.post("/scan", response_model=list[AlbumFolderResponse])
def scan_library(
    request: ScanRequest,
    service: AlbumSyncService = Depends(get_service),
) -> list[AlbumFolderResponse]:
    """Scan a directory tree for album folders."""
    albums = service.scan(request.directory)
    return [AlbumFolderResponse.from_record(album) for album in albums]


@router.get("/drives", response_model=list[str])
def get_drives(service: AlbumSyncService = Depends(get_service)) -> list[str]:
    return service.drives()


@router.post("/browse", response_model=list[DirectoryItemResponse])
def browse(
    request: BrowseRequest,
    service: AlbumSyncService = Depends(get_service),
) -> list[DirectoryItemResponse]:
    try:
        items = service.browse(request.path)
    except BrowseError as e:
        raise HTTPException(status_code=500, detail=str(e))
    return [DirectoryItemResponse.from_record(item) for item in items]


@router.get("/cover/{album_path:path}")
def get_cover(
    album_path: str,
    service: AlbumSyncService = Depends(get_service),
) -> FileResponse:
    """Serve an album's cover.jpg, or the one in its parent folder."""
    cover = service.find_cover(album_path)
    if cover is None:
        raise HTTPException(status_code=404, detail="Cover not found")
    return FileResponse(cover, media_type="image/jpeg")
