"""Library use cases and their ports."""
