"""Data models for version records."""
