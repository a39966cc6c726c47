"""Entry point for the audit-trail MCP server."""

from audit_trail.server import create_server


def main() -> None:
    """Run the audit-trail MCP server."""
    server = create_server()
    server.run(transport="stdio")


if __name__ == "__main__":
    main()
