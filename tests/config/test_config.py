"""Test configuration management."""

import tomllib
from pathlib import Path

import pytest

from albumsync.config.config import (
    DEFAULT_AUDIO_EXTENSIONS,
    DEFAULT_HOST,
    DEFAULT_PORT,
    Config,
)
from albumsync.config.paths import default_config_path


@pytest.fixture
def repo_root(portable_repo_root: Path) -> Path:
    """Force portable repo root to a temporary directory and reset the singleton."""
    Config._instance = None  # pyright: ignore[reportPrivateUsage] - reset singleton for test
    Config._loaded_from = None  # pyright: ignore[reportPrivateUsage]
    return portable_repo_root


def test_default_config(repo_root: Path) -> None:
    """Test default configuration creation at portable repo location."""
    _ = repo_root
    config = Config()
    assert config.log_file is None
    assert config.data_dir is None
    assert config.host == DEFAULT_HOST
    assert config.port == DEFAULT_PORT
    assert config.open_browser is True
    assert tuple(config.audio_extensions) == DEFAULT_AUDIO_EXTENSIONS
    assert config.cover_file_name == "cover.jpg"

    config.save()
    assert default_config_path().exists()


def test_saved_file_is_valid_toml(repo_root: Path) -> None:
    _ = repo_root
    Config(port=9000, allowed_origins=["http://a", "http://b"]).save()

    with open(default_config_path(), "rb") as f:
        data = tomllib.load(f)

    assert data["port"] == 9000
    assert data["allowed_origins"] == ["http://a", "http://b"]
    assert "log_file" not in data


def test_save_load_toml(repo_root: Path) -> None:
    """Test saving and loading configuration in TOML format at repo path."""
    _ = repo_root
    original_config = Config(
        log_file=Path("/test/logs/albumsync.log"),
        data_dir=Path("/test/data"),
        host="0.0.0.0",
        port=9090,
        open_browser=False,
        audio_extensions=[".mp3", ".flac"],
    )
    original_config.save()

    Config._instance = None  # pyright: ignore[reportPrivateUsage] - reset singleton for test
    loaded_config = Config.load()

    assert loaded_config.log_file == Path("/test/logs/albumsync.log")
    assert loaded_config.data_dir == Path("/test/data")
    assert loaded_config.host == "0.0.0.0"
    assert loaded_config.port == 9090
    assert loaded_config.open_browser is False
    assert loaded_config.audio_extensions == [".mp3", ".flac"]


def test_load_creates_default_file(repo_root: Path) -> None:
    _ = repo_root
    assert not default_config_path().exists()

    loaded = Config.load()

    assert default_config_path().exists()
    assert loaded.port == DEFAULT_PORT


def test_load_ignores_unknown_keys(repo_root: Path, caplog: pytest.LogCaptureFixture) -> None:
    _ = repo_root
    path = default_config_path()
    path.parent.mkdir(parents=True, exist_ok=True)
    _ = path.write_text('port = 8181\nlegacy_option = "x"\n', encoding="utf-8")

    caplog.set_level("WARNING", logger="albumsync")
    loaded = Config.load()

    assert loaded.port == 8181
    assert not hasattr(loaded, "legacy_option")
    assert "legacy_option" in caplog.text


def test_empty_path_string_becomes_none(repo_root: Path) -> None:
    _ = repo_root
    config = Config(log_file="   ")  # pyright: ignore[reportArgumentType]
    assert config.log_file is None


def test_singleton_behavior(repo_root: Path) -> None:
    """Repeated loads without an explicit file share one instance."""
    _ = repo_root
    config1 = Config.load()
    config2 = Config.load()
    assert config1 is config2


def test_explicit_file_bypasses_cached_instance(repo_root: Path, tmp_path: Path) -> None:
    _ = repo_root
    first = Config.load()
    other_file = tmp_path / "other.toml"
    _ = other_file.write_text("port = 7000\n", encoding="utf-8")

    second = Config.load(other_file)

    assert second is not first
    assert second.port == 7000
