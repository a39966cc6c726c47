"""Version store protocol.

Consumers program against this protocol and receive a concrete store
instance explicitly; there is no process-wide history.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from audit_trail.models.version import Version


@runtime_checkable
class VersionStore(Protocol):
    """Append-only, ordered history of version records."""

    async def append(self, version: Version) -> None:
        """Append a record and persist the full history before returning."""
        ...

    async def list(self) -> list[Version]:
        """Return all records, most-recent-first, as a fresh list."""
        ...

    async def latest(self) -> Version | None:
        """Return the most recently appended record, or None if empty."""
        ...

    async def close(self) -> None:
        """Release any resources held by the store."""
        ...
