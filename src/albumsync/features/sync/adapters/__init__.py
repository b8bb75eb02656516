"""Adapters backing the sync ports."""
