"""Environment-variable-based configuration."""

import os
from pathlib import Path

STORE_BACKENDS = ("file", "memory")


def get_data_path() -> Path:
    """Return the version history file path from AT_DATA_PATH."""
    raw = os.environ.get("AT_DATA_PATH", "~/.local/share/audit_trail/versions.json")
    return Path(raw).expanduser()


def get_store_backend() -> str:
    """Return the store backend name from AT_STORE_BACKEND ("file" or "memory")."""
    return os.environ.get("AT_STORE_BACKEND", "file").strip().lower()


def get_log_level() -> str:
    """Return the logging level from AT_LOG_LEVEL."""
    return os.environ.get("AT_LOG_LEVEL", "WARNING").upper()
