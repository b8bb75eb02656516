"""Command line argument options."""

from dataclasses import dataclass
from pathlib import Path
from typing import Literal, final


@final
@dataclass(slots=True)
class ScanArgs:
    """Command line arguments for the ``scan`` subcommand."""

    command: Literal["scan"]
    directory: Path
    target_directory: Path | None
    verbose: bool
    quiet: bool


@final
@dataclass(slots=True)
class CheckArgs:
    """Command line arguments for the ``check`` subcommand."""

    command: Literal["check"]
    source_path: Path
    target_directory: Path
    verbose: bool
    quiet: bool


@final
@dataclass(slots=True)
class SyncArgs:
    """Command line arguments for the ``sync`` subcommand."""

    command: Literal["sync"]
    source_path: Path
    target_directory: Path
    verbose: bool
    quiet: bool


@final
@dataclass(slots=True)
class UnsyncArgs:
    """Command line arguments for the ``unsync`` subcommand."""

    command: Literal["unsync"]
    target_directory: Path
    album_name: str
    verbose: bool
    quiet: bool


@final
@dataclass(slots=True)
class ServeArgs:
    """Command line arguments for the ``serve`` subcommand."""

    command: Literal["serve"]
    host: str
    port: int
    open_browser: bool
    verbose: bool
    quiet: bool


CLIArgs = ScanArgs | CheckArgs | SyncArgs | UnsyncArgs | ServeArgs

__all__ = ["CLIArgs", "CheckArgs", "ScanArgs", "ServeArgs", "SyncArgs", "UnsyncArgs"]
