# Where: albumsync.features.library.__init__
# What: Expose library scanning, browsing and naming helpers.
# Why: Provide a cohesive import surface for the application and UI layers.

from .adapters.tags import MutagenTagReader
from .domain.errors import BrowseError
from .domain.models import AlbumFolder, DirectoryItem
from .domain.naming import is_root_level_folder, parse_artist_and_album
from .usecases.browser import browse_directory, find_cover_image, list_drives
from .usecases.ports import TagReaderPort
from .usecases.scanner import LibraryScanner, calculate_folder_size

__all__ = [
    "AlbumFolder",
    "BrowseError",
    "DirectoryItem",
    "LibraryScanner",
    "MutagenTagReader",
    "TagReaderPort",
    "browse_directory",
    "calculate_folder_size",
    "find_cover_image",
    "is_root_level_folder",
    "list_drives",
    "parse_artist_and_album",
]
