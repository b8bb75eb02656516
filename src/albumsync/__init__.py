"""AlbumSync: mirror album folders from a music library onto a portable drive."""

__version__ = "0.1.0"
