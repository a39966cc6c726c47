"""Word-level audit trail of document versions, served over MCP."""
