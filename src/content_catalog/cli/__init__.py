"""Command-line interface for content-catalog."""
