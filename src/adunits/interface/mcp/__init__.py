"""MCP server surface."""
