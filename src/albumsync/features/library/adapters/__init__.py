"""Adapters backing the library ports."""
