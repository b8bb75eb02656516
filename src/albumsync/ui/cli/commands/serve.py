"""Serve command: run the JSON API under uvicorn."""

from __future__ import annotations

import threading
import webbrowser
from typing import final

import uvicorn

from albumsync.platform.logging import logger
from albumsync.ui.cli.args.options import ServeArgs
from albumsync.web import create_app

# Seconds to wait before opening the browser so the server is listening.
BROWSER_DELAY = 1.0


@final
class ServeCommand:
    """Start the web server and optionally open it in the default browser."""

    def __init__(self, args: ServeArgs) -> None:
        self.args = args

    @property
    def url(self) -> str:
        host = "localhost" if self.args.host in {"0.0.0.0", "127.0.0.1", "::"} else self.args.host
        return f"http://{host}:{self.args.port}"

    def execute(self) -> None:
        app = create_app()
        logger.info("Server starting on %s", self.url)

        if self.args.open_browser:
            timer = threading.Timer(BROWSER_DELAY, webbrowser.open, args=(self.url,))
            timer.daemon = True
            timer.start()

        uvicorn.run(
            app,
            host=self.args.host,
            port=self.args.port,
            log_level="debug" if self.args.verbose else "warning" if self.args.quiet else "info",
        )
