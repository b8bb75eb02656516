"""Command line argument parser."""

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import final

from albumsync.config.config import Config
from albumsync.config.settings import OPEN_BROWSER, SERVER_HOST, SERVER_PORT, resolve_log_file
from albumsync.platform.logging import logger, setup_logger
from albumsync.ui.cli.args.options import (
    CheckArgs,
    CLIArgs,
    ScanArgs,
    ServeArgs,
    SyncArgs,
    UnsyncArgs,
)


@final
class ArgumentParser:
    """Command line argument parser."""

    @staticmethod
    def create_parser() -> argparse.ArgumentParser:
        """Create argument parser.

        Returns:
            argparse.ArgumentParser: Configured argument parser.
        """
        parser = argparse.ArgumentParser(
            description="AlbumSync - Mirror album folders from a music library onto a target drive.",
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )

        subparsers = parser.add_subparsers(dest="command", required=True)

        scan_parser = subparsers.add_parser(
            "scan",
            help="List album folders found under a library directory",
        )
        _ = scan_parser.add_argument(
            "directory",
            type=str,
            help="Library directory to scan",
            metavar="DIRECTORY",
        )
        _ = scan_parser.add_argument(
            "--target",
            type=str,
            help="Target directory used to flag albums that are already synced",
            metavar="TARGET_DIR",
        )
        ArgumentParser._add_verbosity_flags(scan_parser)

        check_parser = subparsers.add_parser(
            "check",
            help="Report whether an album folder already exists in a target directory",
        )
        ArgumentParser._add_source_and_target(check_parser)
        ArgumentParser._add_verbosity_flags(check_parser)

        sync_parser = subparsers.add_parser(
            "sync",
            help="Copy an album folder into a target directory",
        )
        ArgumentParser._add_source_and_target(sync_parser)
        ArgumentParser._add_verbosity_flags(sync_parser)

        unsync_parser = subparsers.add_parser(
            "unsync",
            help="Remove an album folder from a target directory",
        )
        _ = unsync_parser.add_argument(
            "target_directory",
            type=str,
            help="Directory holding the synced album",
            metavar="TARGET_DIR",
        )
        _ = unsync_parser.add_argument(
            "album_name",
            type=str,
            help="Folder name of the album to remove",
            metavar="ALBUM_NAME",
        )
        ArgumentParser._add_verbosity_flags(unsync_parser)

        serve_parser = subparsers.add_parser(
            "serve",
            help="Start the web interface",
        )
        _ = serve_parser.add_argument(
            "--host",
            type=str,
            default=SERVER_HOST,
            help=f"Interface to bind (default: {SERVER_HOST})",
        )
        _ = serve_parser.add_argument(
            "--port",
            type=int,
            default=SERVER_PORT,
            help=f"Port to listen on (default: {SERVER_PORT})",
        )
        _ = serve_parser.add_argument(
            "--no-browser",
            action="store_true",
            help="Do not open the web interface in a browser",
        )
        ArgumentParser._add_verbosity_flags(serve_parser)

        return parser

    @staticmethod
    def process_args(args_list: Sequence[str] | None = None) -> CLIArgs:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).

        Returns:
            CLIArgs: Processed command line arguments.

        Raises:
            SystemExit: If required paths don't exist or other validation fails.
        """
        parser = ArgumentParser.create_parser()
        parsed_args = parser.parse_args(args_list)

        # Set log level based on verbosity flags
        if parsed_args.quiet:
            log_level = logging.ERROR
        elif parsed_args.verbose:
            log_level = logging.DEBUG
        else:
            log_level = logging.INFO

        configuration = Config.load()
        log_file_path = resolve_log_file(configuration.log_file)
        _ = setup_logger(log_file=log_file_path, console_level=log_level)

        command: str = parsed_args.command

        if command == "scan":
            return ArgumentParser._process_scan(parsed_args)

        if command in {"check", "sync"}:
            return ArgumentParser._process_source_and_target(parsed_args)

        if command == "unsync":
            return ArgumentParser._process_unsync(parsed_args)

        if command == "serve":
            return ArgumentParser._process_serve(parsed_args)

        logger.error("Unsupported command: %s", command)
        sys.exit(2)

    @staticmethod
    def _add_source_and_target(parser: argparse.ArgumentParser) -> None:
        _ = parser.add_argument(
            "source_path",
            type=str,
            help="Album folder in the music library",
            metavar="SOURCE",
        )
        _ = parser.add_argument(
            "target_directory",
            type=str,
            help="Directory on the target drive",
            metavar="TARGET_DIR",
        )

    @staticmethod
    def _add_verbosity_flags(parser: argparse.ArgumentParser) -> None:
        _ = parser.add_argument(
            "--verbose",
            action="store_true",
            help="Show detailed processing information",
        )
        _ = parser.add_argument(
            "--quiet",
            action="store_true",
            help="Suppress all output except errors",
        )

    @staticmethod
    def _require_directory(path: Path, label: str) -> None:
        if not path.is_dir():
            logger.error("%s does not exist or is not a directory: %s", label, path)
            sys.exit(1)

    @staticmethod
    def _process_scan(parsed_args: argparse.Namespace) -> ScanArgs:
        directory = Path(parsed_args.directory)
        ArgumentParser._require_directory(directory, "Library directory")
        target = Path(parsed_args.target) if parsed_args.target else None

        return ScanArgs(
            command="scan",
            directory=directory,
            target_directory=target,
            verbose=parsed_args.verbose,
            quiet=parsed_args.quiet,
        )

    @staticmethod
    def _process_source_and_target(parsed_args: argparse.Namespace) -> CheckArgs | SyncArgs:
        source_path = Path(parsed_args.source_path)
        target_directory = Path(parsed_args.target_directory)

        if parsed_args.command == "check":
            return CheckArgs(
                command="check",
                source_path=source_path,
                target_directory=target_directory,
                verbose=parsed_args.verbose,
                quiet=parsed_args.quiet,
            )

        ArgumentParser._require_directory(source_path, "Source album")
        return SyncArgs(
            command="sync",
            source_path=source_path,
            target_directory=target_directory,
            verbose=parsed_args.verbose,
            quiet=parsed_args.quiet,
        )

    @staticmethod
    def _process_unsync(parsed_args: argparse.Namespace) -> UnsyncArgs:
        return UnsyncArgs(
            command="unsync",
            target_directory=Path(parsed_args.target_directory),
            album_name=parsed_args.album_name,
            verbose=parsed_args.verbose,
            quiet=parsed_args.quiet,
        )

    @staticmethod
    def _process_serve(parsed_args: argparse.Namespace) -> ServeArgs:
        port: int = parsed_args.port
        if not 0 < port < 65536:
            logger.error("Port must be between 1 and 65535; received %s", port)
            sys.exit(1)

        return ServeArgs(
            command="serve",
            host=parsed_args.host,
            port=port,
            open_browser=OPEN_BROWSER and not parsed_args.no_browser,
            verbose=parsed_args.verbose,
            quiet=parsed_args.quiet,
        )
