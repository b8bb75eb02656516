"""Adapters backing the fingerprint ports."""
