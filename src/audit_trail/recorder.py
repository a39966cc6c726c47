"""Save and list versions against an injected store."""

from __future__ import annotations

import asyncio
import logging

from audit_trail.models.version import Version
from audit_trail.store.backend import VersionStore
from audit_trail.store.builder import build_version, validate_content

logger = logging.getLogger(__name__)


class VersionRecorder:
    """Records content snapshots with their word diff against the previous one."""

    def __init__(self, store: VersionStore):
        """Initialize with the store that owns the history."""
        self.store = store
        self._lock = asyncio.Lock()

    async def save(self, content: object) -> Version:
        """Diff content against the latest version and append the new record.

        Raises ValidationError for content that cannot be saved, without
        touching the store, and StorageError if the record could not be persisted.
        """
        text = validate_content(content)
        # Held across read-build-append so each diff is against the true predecessor
        async with self._lock:
            previous = await self.store.latest()
            version = build_version(previous.content if previous else None, text)
            await self.store.append(version)
        logger.info(
            "Saved version %s (+%d/-%d words)",
            version.id,
            len(version.added_words),
            len(version.removed_words),
        )
        return version

    async def list(self) -> list[Version]:
        """Return all versions, most-recent-first."""
        return await self.store.list()
