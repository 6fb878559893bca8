"""Utility functions for Sprintdesk MCP."""

from sprintdesk_mcp.utils.formatters import (
    _format_summary_markdown,
    _format_task_tree_concise,
    _format_task_tree_markdown,
    _format_user_concise,
    _format_user_markdown,
)

__all__ = [
    "_format_task_tree_concise",
    "_format_task_tree_markdown",
    "_format_user_concise",
    "_format_user_markdown",
    "_format_summary_markdown",
]
