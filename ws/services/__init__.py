"""Service layer for session switching."""
