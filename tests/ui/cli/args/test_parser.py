"""Tests for command line argument parser."""

import logging
from argparse import Namespace
from pathlib import Path
from unittest.mock import MagicMock

import pytest
from pytest_mock import MockerFixture

from albumsync.platform.logging import DEFAULT_LOG_FILE
from albumsync.ui.cli.args import (
    ArgumentParser,
    CheckArgs,
    ScanArgs,
    ServeArgs,
    SyncArgs,
    UnsyncArgs,
)


def test_create_parser() -> None:
    """Argument parser should expose expected subcommands and options."""

    parser = ArgumentParser.create_parser()

    scan_args: Namespace = parser.parse_args(["scan", "music", "--target", "player"])
    assert scan_args.command == "scan"
    assert scan_args.directory == "music"
    assert scan_args.target == "player"

    unsync_args: Namespace = parser.parse_args(["unsync", "player", "Album"])
    assert unsync_args.target_directory == "player"
    assert unsync_args.album_name == "Album"

    serve_args: Namespace = parser.parse_args(["serve", "--port", "9000", "--no-browser"])
    assert serve_args.port == 9000
    assert serve_args.no_browser


def test_subcommand_is_required() -> None:
    with pytest.raises(SystemExit):
        _ = ArgumentParser.create_parser().parse_args([])


def test_process_args_scan(music_layout: tuple[Path, Path], mock_setup_logger: MagicMock) -> None:
    library, target = music_layout

    args = ArgumentParser.process_args(["scan", str(library), "--target", str(target)])

    assert isinstance(args, ScanArgs)
    assert args.directory == library
    assert args.target_directory == target
    assert mock_setup_logger.call_args.kwargs["console_level"] == logging.INFO
    assert mock_setup_logger.call_args.kwargs["log_file"] == DEFAULT_LOG_FILE


def test_process_args_expands_configured_log_file(
    music_layout: tuple[Path, Path],
    mock_setup_logger: MagicMock,
    mocker: MockerFixture,
    monkeypatch: pytest.MonkeyPatch,
    tmp_path: Path,
) -> None:
    library, _ = music_layout
    monkeypatch.setenv("HOME", str(tmp_path))
    parser_config = mocker.patch("albumsync.ui.cli.args.parser.Config")
    parser_config.load.return_value.log_file = Path("~/logs/albumsync.log")

    _ = ArgumentParser.process_args(["scan", str(library)])

    assert mock_setup_logger.call_args.kwargs["log_file"] == (tmp_path / "logs" / "albumsync.log").resolve()


def test_process_args_scan_missing_directory(tmp_path: Path, mock_setup_logger: MagicMock) -> None:
    _ = mock_setup_logger
    with pytest.raises(SystemExit) as excinfo:
        _ = ArgumentParser.process_args(["scan", str(tmp_path / "missing")])
    assert excinfo.value.code == 1


def test_process_args_check_and_sync(music_layout: tuple[Path, Path], mock_setup_logger: MagicMock) -> None:
    library, target = music_layout
    album = library / "Artist" / "Album"

    check = ArgumentParser.process_args(["check", str(album), str(target), "--quiet"])
    assert isinstance(check, CheckArgs)
    assert check.quiet
    assert mock_setup_logger.call_args.kwargs["console_level"] == logging.ERROR

    sync = ArgumentParser.process_args(["sync", str(album), str(target), "--verbose"])
    assert isinstance(sync, SyncArgs)
    assert sync.source_path == album
    assert sync.target_directory == target
    assert mock_setup_logger.call_args.kwargs["console_level"] == logging.DEBUG


def test_process_args_sync_missing_source(tmp_path: Path, mock_setup_logger: MagicMock) -> None:
    _ = mock_setup_logger
    with pytest.raises(SystemExit):
        _ = ArgumentParser.process_args(["sync", str(tmp_path / "missing"), str(tmp_path)])


def test_process_args_unsync(tmp_path: Path, mock_setup_logger: MagicMock) -> None:
    _ = mock_setup_logger
    args = ArgumentParser.process_args(["unsync", str(tmp_path), "Album"])
    assert isinstance(args, UnsyncArgs)
    assert args.album_name == "Album"


def test_process_args_serve(mock_setup_logger: MagicMock, mocker: MockerFixture) -> None:
    _ = mock_setup_logger
    _ = mocker.patch("albumsync.ui.cli.args.parser.OPEN_BROWSER", True)

    args = ArgumentParser.process_args(["serve", "--host", "0.0.0.0", "--port", "9000"])
    assert isinstance(args, ServeArgs)
    assert (args.host, args.port, args.open_browser) == ("0.0.0.0", 9000, True)

    args = ArgumentParser.process_args(["serve", "--no-browser"])
    assert isinstance(args, ServeArgs)
    assert args.open_browser is False


def test_process_args_serve_rejects_bad_port(mock_setup_logger: MagicMock) -> None:
    _ = mock_setup_logger
    with pytest.raises(SystemExit):
        _ = ArgumentParser.process_args(["serve", "--port", "0"])


def test_custom_log_file_from_config(tmp_path: Path, mocker: MockerFixture) -> None:
    mock_config = mocker.patch("albumsync.ui.cli.args.parser.Config")
    mock_setup_logger = mocker.patch("albumsync.ui.cli.args.parser.setup_logger")
    custom_log_path = tmp_path / "custom.log"
    mock_config.load.return_value.log_file = custom_log_path

    _ = ArgumentParser.process_args(["unsync", str(tmp_path), "Album"])

    assert mock_setup_logger.call_args.kwargs["log_file"] == custom_log_path
    mock_config.load.assert_called_once()
