"""Configuration for ws."""
