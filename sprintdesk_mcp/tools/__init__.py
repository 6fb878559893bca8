"""MCP tool definitions for Sprintdesk."""

# Import all tools to register them with the MCP server
from sprintdesk_mcp.tools.tasks import (
    sprintdesk_task_rollup,
    sprintdesk_task_set_status,
    sprintdesk_task_split,
)
from sprintdesk_mcp.tools.users import (
    sprintdesk_user_delete,
    sprintdesk_user_find,
    sprintdesk_user_provision,
    sprintdesk_user_reconcile,
    sprintdesk_user_reconcile_all,
    sprintdesk_user_update_profile,
)

__all__ = [
    # Task tools
    "sprintdesk_task_rollup",
    "sprintdesk_task_set_status",
    "sprintdesk_task_split",
    # User tools
    "sprintdesk_user_find",
    "sprintdesk_user_reconcile",
    "sprintdesk_user_reconcile_all",
    "sprintdesk_user_update_profile",
    "sprintdesk_user_delete",
    "sprintdesk_user_provision",
]
