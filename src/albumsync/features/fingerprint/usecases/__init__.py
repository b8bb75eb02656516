"""Fingerprint use cases and their ports."""
