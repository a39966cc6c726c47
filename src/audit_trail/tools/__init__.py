"""MCP tool registrations and response formatters."""
