"""Request and response bodies of the JSON API.

Field aliases keep the camelCase keys the browser client sends.
"""

from pydantic import BaseModel, ConfigDict, Field

from albumsync.application.services import AppSettings
from albumsync.features.library import AlbumFolder, DirectoryItem


class _CamelModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class ScanRequest(BaseModel):
    directory: str


class BrowseRequest(BaseModel):
    path: str


class SyncRequest(_CamelModel):
    source_path: str = Field(alias="sourcePath")
    target_directory: str = Field(alias="targetDirectory")


class UnsyncRequest(_CamelModel):
    target_directory: str = Field(alias="targetDirectory")
    album_name: str = Field(alias="albumName")


class AlbumFolderResponse(BaseModel):
    path: str
    name: str
    artist: str
    album: str
    mp3_count: int
    audio_count: int
    has_cover: bool
    size_mb: float
    is_synced: bool
    fingerprint: str

    @classmethod
    def from_record(cls, album: AlbumFolder) -> "AlbumFolderResponse":
        return cls(
            path=album.path,
            name=album.name,
            artist=album.artist,
            album=album.album,
            mp3_count=album.mp3_count,
            audio_count=album.audio_count,
            has_cover=album.has_cover,
            size_mb=album.size_mb,
            is_synced=album.is_synced,
            fingerprint=album.fingerprint,
        )


class DirectoryItemResponse(_CamelModel):
    name: str
    path: str
    is_directory: bool = Field(alias="isDirectory")

    @classmethod
    def from_record(cls, item: DirectoryItem) -> "DirectoryItemResponse":
        return cls(name=item.name, path=item.path, is_directory=item.is_directory)


class SyncStatusResponse(BaseModel):
    synced: bool


class ResultResponse(BaseModel):
    result: str


class SettingsBody(_CamelModel):
    last_source_directory: str = Field(default="", alias="lastSourceDirectory")
    last_target_directory: str = Field(default="", alias="lastTargetDirectory")

    @classmethod
    def from_settings(cls, settings: AppSettings) -> "SettingsBody":
        return cls(
            last_source_directory=settings.last_source_directory,
            last_target_directory=settings.last_target_directory,
        )

    def to_settings(self) -> AppSettings:
        return AppSettings(
            last_source_directory=self.last_source_directory,
            last_target_directory=self.last_target_directory,
        )


class SaveSettingsResponse(BaseModel):
    status: str


class CacheClearedResponse(BaseModel):
    cleared: int
