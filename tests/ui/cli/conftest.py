"""Shared fixtures for CLI tests."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import MagicMock

import pytest
from pytest_mock import MockerFixture


@pytest.fixture
def mock_setup_logger(mocker: MockerFixture) -> MagicMock:
    """Keep argument parsing from reconfiguring the real application logger."""

    mock_config = mocker.patch("albumsync.ui.cli.args.parser.Config")
    mock_config.load.return_value.log_file = None
    return mocker.patch("albumsync.ui.cli.args.parser.setup_logger")


@pytest.fixture
def music_layout(tmp_path: Path) -> tuple[Path, Path]:
    """A library with one album and an empty target directory."""

    library = tmp_path / "Music"
    album = library / "Artist" / "Album"
    album.mkdir(parents=True)
    _ = (album / "01.mp3").write_bytes(b"")
    target = tmp_path / "Player"
    target.mkdir()
    return library, target
