"""Core pipeline, configuration and path handling."""
