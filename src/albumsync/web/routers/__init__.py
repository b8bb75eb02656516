"""API routers grouped by feature."""
