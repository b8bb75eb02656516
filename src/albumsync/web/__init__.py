"""HTTP JSON API served to the browser client."""

from .app import create_app

__all__ = ["create_app"]
