"""Version record construction and storage."""

import logging
from pathlib import Path

from audit_trail.config import get_data_path
from audit_trail.store.backend import VersionStore
from audit_trail.store.builder import build_version
from audit_trail.store.file_store import FileVersionStore
from audit_trail.store.memory_store import MemoryVersionStore

logger = logging.getLogger(__name__)


def create_store(path: Path | str | None = None) -> VersionStore:
    """Create a version store.

    Pass ":memory:" for an ephemeral store; anything else is the history
    file path, defaulting to AT_DATA_PATH.
    """
    if path == ":memory:":
        logger.warning("Using in-memory version store — history is lost on restart")
        return MemoryVersionStore()
    return FileVersionStore(path or get_data_path())


__all__ = [
    "FileVersionStore",
    "MemoryVersionStore",
    "VersionStore",
    "build_version",
    "create_store",
]
