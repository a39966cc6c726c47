"""Durable version history kept as a single JSON file."""

from __future__ import annotations

import asyncio
import logging
import os
import tempfile
from pathlib import Path

from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError
from pydantic_core import PydanticSerializationError

from audit_trail.errors import StorageError
from audit_trail.models.version import Version

logger = logging.getLogger(__name__)

_HISTORY = TypeAdapter(list[Version])


class FileVersionStore:
    """Append-only version history persisted as a JSON array.

    The file is read once, on first access. Every append rewrites the whole
    history to a temporary file in the same directory and swaps it into
    place with ``os.replace``, so a failed write never truncates what was
    already saved. Appends are serialized through a single lock; the cached
    history only changes after the new file is durably in place.
    """

    def __init__(self, path: Path | str):
        """Initialize with the history file path. Nothing is read yet."""
        self.path = Path(path)
        self._versions: list[Version] | None = None
        self._lock = asyncio.Lock()

    @property
    def is_loaded(self) -> bool:
        """Whether the persisted history has been read."""
        return self._versions is not None

    async def append(self, version: Version) -> None:
        """Append a record and durably rewrite the history file."""
        async with self._lock:
            versions = await self._load_locked()
            updated = [*versions, version]
            try:
                payload = _HISTORY.dump_json(updated, by_alias=True, indent=2)
            except (PydanticSerializationError, ValueError) as e:
                raise StorageError(f"Could not serialize version {version.id}: {e}") from e
            try:
                cancelled = await _write_settled(self.path, payload)
            except OSError as e:
                logger.error("Failed to persist version %s to %s", version.id, self.path)
                raise StorageError(f"Could not write {self.path}: {e}") from e
            self._versions = updated
            logger.info("Appended version %s (%d total)", version.id, len(updated))
            if cancelled:
                raise asyncio.CancelledError

    async def list(self) -> list[Version]:
        """Return all records, most-recent-first."""
        versions = await self._ensure_loaded()
        return versions[::-1]

    async def latest(self) -> Version | None:
        """Return the most recently appended record, or None."""
        versions = await self._ensure_loaded()
        return versions[-1] if versions else None

    async def close(self) -> None:
        """Nothing to release; the file is closed after every write."""

    async def _ensure_loaded(self) -> list[Version]:
        if self._versions is not None:
            return self._versions
        async with self._lock:
            return await self._load_locked()

    async def _load_locked(self) -> list[Version]:
        """Load the history file. Caller must hold the lock."""
        if self._versions is not None:
            return self._versions
        try:
            raw = await asyncio.to_thread(self.path.read_bytes)
        except FileNotFoundError:
            logger.info("No history at %s, starting empty", self.path)
            try:
                cancelled = await _write_settled(self.path, b"[]")
            except OSError as e:
                raise StorageError(f"Could not create {self.path}: {e}") from e
            self._versions = []
            if cancelled:
                raise asyncio.CancelledError
            return self._versions
        except OSError as e:
            logger.error("Failed to read history from %s", self.path, exc_info=True)
            raise StorageError(f"Could not read {self.path}: {e}") from e

        if not raw.strip():
            raw = b"[]"
        try:
            self._versions = _HISTORY.validate_json(raw)
        except PydanticValidationError as e:
            raise StorageError(f"Corrupt history in {self.path}: {e}") from e
        logger.info("Loaded %d versions from %s", len(self._versions), self.path)
        return self._versions


async def _write_settled(path: Path, payload: bytes) -> bool:
    """Run _write_atomic in a worker thread and wait for it to finish.

    The thread cannot be interrupted, so cancelling the caller does not stop
    the write. Cancellation is held off until the thread is done and reported
    through the return value; the caller records the outcome, then re-raises.
    Write errors propagate as usual.
    """
    write = asyncio.ensure_future(asyncio.to_thread(_write_atomic, path, payload))
    cancelled = False
    while not write.done():
        try:
            await asyncio.wait({write})
        except asyncio.CancelledError:
            cancelled = True
    write.result()
    return cancelled


def _write_atomic(path: Path, payload: bytes) -> None:
    """Write payload to a sibling temp file, fsync it, then replace path."""
    path.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", suffix=".tmp", dir=path.parent)
    try:
        with os.fdopen(fd, "wb") as f:
            f.write(payload)
            f.flush()
            os.fsync(f.fileno())
        os.replace(tmp_name, path)
    except BaseException:
        try:
            os.unlink(tmp_name)
        except FileNotFoundError:
            pass
        raise

