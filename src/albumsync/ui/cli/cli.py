"""Command line interface for AlbumSync."""

import sys
from typing import final

from albumsync.platform.logging import logger
from albumsync.ui.cli.args import ArgumentParser
from albumsync.ui.cli.args.options import (
    CheckArgs,
    CLIArgs,
    ScanArgs,
    ServeArgs,
    SyncArgs,
    UnsyncArgs,
)
from albumsync.ui.cli.commands import (
    CheckCommand,
    ScanCommand,
    ServeCommand,
    SyncCommand,
    UnsyncCommand,
)


@final
class CommandProcessor:
    """Command line interface processor."""

    @staticmethod
    def process_command(args_list: list[str] | None = None) -> None:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).
        """
        try:
            args: CLIArgs = ArgumentParser.process_args(args_list)

            if isinstance(args, ScanArgs):
                _ = ScanCommand(args).execute()
                return

            if isinstance(args, CheckArgs):
                _ = CheckCommand(args).execute()
                return

            if isinstance(args, SyncArgs):
                if not SyncCommand(args).execute():
                    sys.exit(1)
                return

            if isinstance(args, UnsyncArgs):
                if not UnsyncCommand(args).execute():
                    sys.exit(1)
                return

            assert isinstance(args, ServeArgs)
            ServeCommand(args).execute()
            return

        except KeyboardInterrupt:
            logger.info("\nOperation cancelled by user")
            sys.exit(130)
        except Exception as e:
            logger.error("An unexpected error occurred: %s", str(e))
            sys.exit(1)


def main() -> int:
    """Main entry point.

    Returns:
        int: Process exit code (0 on success). Failures exit through
        ``sys.exit`` inside ``CommandProcessor``.
    """
    CommandProcessor.process_command()
    return 0
