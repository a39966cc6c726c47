"""list_versions MCP tool — browse the version history."""

import logging
from typing import Annotated

from fastmcp import FastMCP
from fastmcp.server.context import Context
from pydantic import Field

from audit_trail.errors import StorageError
from audit_trail.recorder import VersionRecorder
from audit_trail.tools.formatters import format_version, format_version_list

logger = logging.getLogger(__name__)


async def list_and_format(
    recorder: VersionRecorder,
    limit: int | None = None,
    include_content: bool = False,
) -> str:
    """Render the history most-recent-first, optionally capped at limit entries."""
    if limit is not None and limit < 1:
        return "Error: limit must be at least 1."
    try:
        versions = await recorder.list()
    except StorageError as e:
        logger.warning("Listing versions failed: %s", e)
        return f"Error: {e}"
    shown = versions if limit is None else versions[:limit]
    formatted = [format_version(v, include_content=include_content) for v in shown]
    return format_version_list(formatted, total=len(versions))


def register_list_versions(mcp: FastMCP) -> None:
    """Register the list_versions tool with the MCP server."""

    @mcp.tool()
    async def list_versions(
        limit: Annotated[
            int | None, Field(description="Maximum number of versions to return (newest first)")
        ] = None,
        include_content: Annotated[
            bool, Field(description="Include the full text of each snapshot")
        ] = False,
        ctx: Context | None = None,
    ) -> str:
        """List saved versions, most recent first.

        Each version shows its timestamp, word and character totals, and the
        words added and removed relative to the version before it.
        """
        if ctx is None:
            raise RuntimeError("Context not injected")
        recorder: VersionRecorder = ctx.lifespan_context["recorder"]
        return await list_and_format(recorder, limit=limit, include_content=include_content)
