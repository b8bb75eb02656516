"""Tests for directory browsing, drive listing and cover lookup."""

from __future__ import annotations

from pathlib import Path

import pytest

from albumsync.features.library import BrowseError, browse_directory, find_cover_image, list_drives


def test_browse_lists_folders_first_and_hides_dotfiles(tmp_path: Path) -> None:
    (tmp_path / "zeta").mkdir()
    (tmp_path / "Alpha").mkdir()
    _ = (tmp_path / "b.mp3").write_bytes(b"")
    _ = (tmp_path / "A.txt").write_text("x")
    _ = (tmp_path / ".hidden").write_text("x")
    (tmp_path / ".git").mkdir()

    items = browse_directory(str(tmp_path))

    assert [item.name for item in items] == ["Alpha", "zeta", "A.txt", "b.mp3"]
    assert [item.is_directory for item in items] == [True, True, False, False]
    assert items[0].path == str(tmp_path / "Alpha")


def test_browse_missing_directory_raises(tmp_path: Path) -> None:
    with pytest.raises(BrowseError) as excinfo:
        _ = browse_directory(str(tmp_path / "missing"))
    assert excinfo.value.path == str(tmp_path / "missing")


def test_browse_nul_byte_path_raises_browse_error(tmp_path: Path) -> None:
    with pytest.raises(BrowseError):
        _ = browse_directory(str(tmp_path) + "/bad\x00dir")


def test_list_drives_on_windows() -> None:
    present = {"C:\\", "E:\\"}
    assert list_drives(platform="win32", exists=present.__contains__) == ["C:\\", "E:\\"]


def test_list_drives_on_unix_includes_existing_mount_roots() -> None:
    present = {"/media", "/mnt"}
    assert list_drives(platform="linux", exists=present.__contains__) == ["/", "/media", "/mnt"]


def test_list_drives_on_macos() -> None:
    assert list_drives(platform="darwin", exists=lambda p: p == "/Volumes") == ["/", "/Volumes"]


def test_find_cover_prefers_album_folder(tmp_path: Path) -> None:
    album = tmp_path / "Artist" / "Album"
    album.mkdir(parents=True)
    _ = (album / "cover.jpg").write_bytes(b"a")
    _ = (album.parent / "cover.jpg").write_bytes(b"p")

    assert find_cover_image(album) == str(album / "cover.jpg")


def test_find_cover_falls_back_to_parent(tmp_path: Path) -> None:
    album = tmp_path / "Artist" / "Album"
    album.mkdir(parents=True)
    _ = (album.parent / "cover.jpg").write_bytes(b"p")

    assert find_cover_image(str(album)) == str(album.parent / "cover.jpg")


def test_find_cover_returns_none_when_absent(tmp_path: Path) -> None:
    (tmp_path / "Album").mkdir()
    assert find_cover_image(tmp_path / "Album") is None


def test_find_cover_ignores_directory_named_like_cover(tmp_path: Path) -> None:
    album = tmp_path / "Album"
    (album / "cover.jpg").mkdir(parents=True)
    assert find_cover_image(album, "cover.jpg") is None
