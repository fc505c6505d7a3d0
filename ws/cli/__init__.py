"""Command-line entry point for ws."""
