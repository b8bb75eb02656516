"""Tests for the scandir-backed directory lister."""

from __future__ import annotations

import os
from pathlib import Path

import pytest

from albumsync.features.fingerprint import FingerprintReadError, LocalDirectoryLister


def test_lists_only_immediate_files(tmp_path: Path) -> None:
    _ = (tmp_path / "a.mp3").write_bytes(b"")
    _ = (tmp_path / ".hidden").write_bytes(b"")
    (tmp_path / "sub").mkdir()
    _ = (tmp_path / "sub" / "nested.mp3").write_bytes(b"")

    names = LocalDirectoryLister().list_file_names(str(tmp_path))

    assert sorted(names) == [".hidden", "a.mp3"]


@pytest.mark.skipif(not hasattr(os, "symlink") or os.name == "nt", reason="symlinks unavailable")
def test_symlinked_directory_counts_as_file(tmp_path: Path) -> None:
    target = tmp_path / "real"
    target.mkdir()
    album = tmp_path / "album"
    album.mkdir()
    (album / "link").symlink_to(target, target_is_directory=True)

    assert LocalDirectoryLister().list_file_names(str(album)) == ["link"]


def test_missing_directory_raises(tmp_path: Path) -> None:
    with pytest.raises(FingerprintReadError) as excinfo:
        _ = LocalDirectoryLister().list_file_names(str(tmp_path / "missing"))
    assert excinfo.value.path == str(tmp_path / "missing")
