"""MCP entrypoint.

Usage:
    python -m adunits.interface.mcp_server
    # or via the script entrypoint:
    adunits-mcp
"""

from __future__ import annotations

from ..config.runtime import get_settings
from ..observability import configure_logging
from .mcp.server import create_server


def main() -> None:
    configure_logging(get_settings().log_level)
    server = create_server()
    server.run(transport="stdio")


if __name__ == "__main__":
    main()
