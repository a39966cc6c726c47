"""save_version MCP tool — record a new content snapshot."""

import logging
from typing import Annotated

from fastmcp import FastMCP
from fastmcp.server.context import Context
from pydantic import Field

from audit_trail.errors import AuditTrailError, StorageError
from audit_trail.recorder import VersionRecorder
from audit_trail.tools.formatters import format_save_result

logger = logging.getLogger(__name__)


async def save_and_format(recorder: VersionRecorder, content: object) -> str:
    """Save content and render the result, turning failures into an error line."""
    try:
        version = await recorder.save(content)
    except StorageError as e:
        logger.warning("Save failed: %s", e)
        return f"Error: {e}"
    except AuditTrailError as e:
        return f"Error: {e}"
    return format_save_result(version)


def register_save_version(mcp: FastMCP) -> None:
    """Register the save_version tool with the MCP server."""

    @mcp.tool()
    async def save_version(
        content: Annotated[str, Field(description="Full text of the document as it is now")],
        ctx: Context | None = None,
    ) -> str:
        """Save a new snapshot of the document.

        The snapshot is compared with the previous one and the distinct words
        that appeared or disappeared are recorded alongside it. Word frequency
        changes are not reported; only words entering or leaving the
        vocabulary are. Returns the new version's id, timestamp, added and
        removed words, and word/character totals.
        """
        if ctx is None:
            raise RuntimeError("Context not injected")
        recorder: VersionRecorder = ctx.lifespan_context["recorder"]
        return await save_and_format(recorder, content)
