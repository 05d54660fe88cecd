"""FastMCP server initialization for the site schedule MCP server."""

import logging
import sys

from mcp.server.fastmcp import FastMCP

from site_schedule_mcp.config import settings

# Initialize the MCP server
mcp = FastMCP("site_schedule_mcp")


def run() -> None:
    """Run the MCP server."""
    # stdout carries the stdio transport
    logging.basicConfig(
        level=settings.log_level,
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    mcp.run()


if __name__ == "__main__":
    run()
