"""Ephemeral in-process version history."""

from __future__ import annotations

import asyncio
import logging

from audit_trail.models.version import Version

logger = logging.getLogger(__name__)


class MemoryVersionStore:
    """Version history held only in this instance; lost when the process exits."""

    def __init__(self) -> None:
        """Initialize an empty history."""
        self._versions: list[Version] = []
        self._lock = asyncio.Lock()

    async def append(self, version: Version) -> None:
        """Append a record."""
        async with self._lock:
            self._versions.append(version)
            logger.debug("Appended version %s (%d total)", version.id, len(self._versions))

    async def list(self) -> list[Version]:
        """Return all records, most-recent-first."""
        return self._versions[::-1]

    async def latest(self) -> Version | None:
        """Return the most recently appended record, or None."""
        return self._versions[-1] if self._versions else None

    async def close(self) -> None:
        """Nothing to release; the history lives as long as the instance."""
