"""User interfaces for AlbumSync."""
