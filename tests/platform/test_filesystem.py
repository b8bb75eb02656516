"""Tests for shared filesystem helpers."""

from __future__ import annotations

import os
from pathlib import Path

import pytest

from albumsync.platform import base_name, ensure_directory, ensure_parent_directory, join_path


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("/music/Album", "Album"),
        ("/music/Album/", "Album"),
        ("/music/Album//", "Album"),
        ("Album", "Album"),
        ("", "."),
        ("/", "/"),
        ("///", "/"),
    ],
)
def test_base_name(raw: str, expected: str) -> None:
    assert base_name(raw) == expected


def test_join_path_normalizes() -> None:
    assert join_path("/music/", "Album") == os.path.normpath("/music/Album")
    assert join_path("/music/./sub/..", "Album") == os.path.normpath("/music/Album")


def test_ensure_directory_creates_nested(tmp_path: Path) -> None:
    target = tmp_path / "a" / "b"
    assert ensure_directory(target) == target
    assert target.is_dir()


def test_ensure_directory_rejects_file(tmp_path: Path) -> None:
    file_path = tmp_path / "file"
    _ = file_path.write_text("x")
    with pytest.raises(NotADirectoryError):
        _ = ensure_directory(file_path)


def test_ensure_parent_directory(tmp_path: Path) -> None:
    target = tmp_path / "x" / "settings.json"
    _ = ensure_parent_directory(target)
    assert (tmp_path / "x").is_dir()
