"""Sync domain models and errors."""
