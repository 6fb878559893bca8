"""FastMCP server initialization for Sprintdesk MCP."""

import logging
import sys

from mcp.server.fastmcp import FastMCP

from sprintdesk_mcp.config import get_settings
from sprintdesk_mcp.services import configure_services

# Initialize the MCP server
mcp = FastMCP("sprintdesk_mcp")


def configure_logging(level: str) -> None:
    # stdout carries the MCP stdio protocol, so logs go to stderr.
    logging.basicConfig(
        level=level.upper(),
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def run() -> None:
    """Run the MCP server."""
    settings = get_settings()
    configure_logging(settings.log_level)
    configure_services(settings=settings)
    mcp.run()
