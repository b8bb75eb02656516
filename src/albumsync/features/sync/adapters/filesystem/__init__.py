"""Local filesystem adapter."""
