"""Allow ``python -m sprintdesk_mcp``."""

from sprintdesk_mcp.server import run

run()
