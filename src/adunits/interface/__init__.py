"""External surfaces: CLI and MCP server."""
