"""Shared test fixtures."""

import pytest
import pytest_asyncio

from audit_trail.recorder import VersionRecorder
from audit_trail.store.file_store import FileVersionStore
from audit_trail.store.memory_store import MemoryVersionStore


@pytest.fixture
def data_path(tmp_path):
    """Path of a history file that does not exist yet."""
    return tmp_path / "data" / "versions.json"


@pytest_asyncio.fixture
async def store(data_path):
    """File-backed version store in a temp directory."""
    s = FileVersionStore(data_path)
    yield s
    await s.close()


@pytest_asyncio.fixture
async def memory_store():
    """Ephemeral in-memory version store."""
    s = MemoryVersionStore()
    yield s
    await s.close()


@pytest_asyncio.fixture
async def recorder(store):
    """Recorder backed by the file store."""
    return VersionRecorder(store)
