"""Allow ``python -m albumsync``."""

import sys

from albumsync.ui.cli.cli import main

if __name__ == "__main__":
    sys.exit(main())
