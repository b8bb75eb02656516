"""Sync use cases and their ports."""
