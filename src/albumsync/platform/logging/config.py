"""Where: platform/logging/config.py
What: Build the ``albumsync`` logger: Rich console output plus a rotating log file.
Why: Commands and the web server share one logger whose levels the CLI flags control.
"""

from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Final

from rich.console import Console

from albumsync.config.paths import default_log_file
from albumsync.platform.filesystem import ensure_parent_directory

from .handlers import SyncRichHandler


DEFAULT_LOG_FILE: Final[Path] = default_log_file()
LOGGER_NAME: Final[str] = "albumsync"

_FILE_FORMAT: Final[str] = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
_MAX_LOG_BYTES: Final[int] = 10 * 1024 * 1024
_LOG_BACKUPS: Final[int] = 5


def _rotating_file_handler(log_file: Path, level: int) -> RotatingFileHandler:
    path = log_file.expanduser().resolve()
    _ = ensure_parent_directory(path)
    handler = RotatingFileHandler(path, maxBytes=_MAX_LOG_BYTES, backupCount=_LOG_BACKUPS, encoding="utf-8")
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(_FILE_FORMAT))
    return handler


def setup_logger(
    log_file: Path | None = None,
    console_level: int = logging.INFO,
    file_level: int = logging.DEBUG,
) -> logging.Logger:
    """(Re)configure the application logger.

    Existing handlers are closed first, so calling this again only changes
    levels and destinations. Without ``log_file`` logging stays on stderr.
    A log file that cannot be opened is reported and skipped.
    """
    app_logger = logging.getLogger(LOGGER_NAME)
    app_logger.setLevel(logging.DEBUG)

    for handler in list(app_logger.handlers):
        handler.close()
        app_logger.removeHandler(handler)

    console_handler = SyncRichHandler(console=Console(stderr=True, soft_wrap=True))
    console_handler.setLevel(console_level)
    app_logger.addHandler(console_handler)

    if log_file is not None:
        try:
            app_logger.addHandler(_rotating_file_handler(Path(log_file), file_level))
        except OSError as exc:
            app_logger.warning("File logging disabled (%s): %s", log_file, exc)

    return app_logger


logger: Final[logging.Logger] = setup_logger(log_file=DEFAULT_LOG_FILE)


__all__ = ["DEFAULT_LOG_FILE", "LOGGER_NAME", "setup_logger", "logger"]
