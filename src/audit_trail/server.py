"""FastMCP server with lifespan management and tool registration."""

import logging
import sys
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any

from fastmcp import FastMCP

from audit_trail.config import STORE_BACKENDS, get_data_path, get_log_level, get_store_backend
from audit_trail.recorder import VersionRecorder
from audit_trail.store import VersionStore, create_store
from audit_trail.tools.list_versions import register_list_versions
from audit_trail.tools.save_version import register_save_version

logger = logging.getLogger(__name__)


def _create_store(backend: str) -> VersionStore:
    """Create the version store for the given backend name."""
    if backend not in STORE_BACKENDS:
        logger.warning("Unknown store backend %r, using file store", backend)
        backend = "file"
    if backend == "memory":
        return create_store(":memory:")
    return create_store(get_data_path())


@asynccontextmanager
async def lifespan(server: FastMCP) -> AsyncIterator[dict[str, Any]]:
    """Manage the version store lifecycle."""
    # Configure logging to stderr (stdout is MCP stdio transport)
    logging.basicConfig(
        level=getattr(logging, get_log_level(), logging.WARNING),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
        stream=sys.stderr,
    )

    store = _create_store(get_store_backend())
    recorder = VersionRecorder(store)
    logger.info("Version store ready: %s", type(store).__name__)

    try:
        yield {"store": store, "recorder": recorder}
    finally:
        await store.close()
        logger.info("Version store closed")


_INSTRUCTIONS = """\
This server keeps an audit trail of edits to a single text document.

- save_version: Submit the full current text. The server stores the snapshot \
and records which distinct words were added or removed since the previous \
version, plus word and character totals.
- list_versions: Show the history, newest first. Use include_content to see \
each snapshot's full text.

Diffs are over distinct words only: a word that appears more or fewer times \
is not reported. Word matching ignores case and diacritics.
"""


def create_server() -> FastMCP:
    """Create and configure the MCP server with all tools."""
    mcp = FastMCP(
        "audit-trail",
        instructions=_INSTRUCTIONS,
        lifespan=lifespan,
    )

    register_save_version(mcp)
    register_list_versions(mcp)

    return mcp
