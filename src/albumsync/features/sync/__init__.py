"""Public surface for the sync feature."""

from .adapters.filesystem.local import LocalFileSystemGateway
from .domain.errors import AlbumNotFoundError, ReplicationError
from .domain.models import SyncOutcome, UnsyncOutcome
from .usecases.ports import FileSystemGateway, FingerprintPort
from .usecases.replication import ReplicationService
from .usecases.status import SyncStatusResolver

__all__ = [
    "AlbumNotFoundError",
    "FileSystemGateway",
    "FingerprintPort",
    "LocalFileSystemGateway",
    "ReplicationError",
    "ReplicationService",
    "SyncOutcome",
    "SyncStatusResolver",
    "UnsyncOutcome",
]
