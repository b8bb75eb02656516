"""Application factory for the JSON API.

One ``AlbumSyncService`` lives on ``app.state`` for the whole process so
every request shares the same fingerprint cache. Routes are plain ``def``
functions; the server runs each on a worker thread.
"""

from __future__ import annotations

from collections.abc import Iterable

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from albumsync import __version__
from albumsync.application.services import AlbumSyncService, SettingsStore
from albumsync.config.settings import ALLOWED_ORIGINS
from albumsync.web.routers import library, settings, sync


def create_app(
    service: AlbumSyncService | None = None,
    settings_store: SettingsStore | None = None,
    *,
    allowed_origins: Iterable[str] | None = None,
) -> FastAPI:
    app = FastAPI(title="AlbumSync API", version=__version__)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(allowed_origins if allowed_origins is not None else ALLOWED_ORIGINS),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.state.service = service or AlbumSyncService()
    app.state.settings_store = settings_store or SettingsStore()

    app.include_router(library.router, prefix="/api", tags=["library"])
    app.include_router(sync.router, prefix="/api", tags=["sync"])
    app.include_router(settings.router, prefix="/api", tags=["settings"])

    @app.get("/health")
    def health_check() -> dict[str, str]:
        return {"status": "healthy"}

    return app


__all__ = ["create_app"]
