"""Formatting utilities for tool output."""

from sprintdesk_mcp.hierarchy.components import TaskComponent, walk
from sprintdesk_mcp.models.user import ReconcileSummary, UserModel


def _format_hours(hours: float) -> str:
    return f"{hours:g}h"


def _format_task_line(component: TaskComponent) -> str:
    task_id = component.get_id() if component.get_id() is not None else "?"
    title = component.get_title() or "Untitled"
    status = component.get_status().value
    return f"#{task_id}: {title} [{status}] {_format_hours(component.get_estimated_hours())}"


def _format_task_tree_concise(component: TaskComponent) -> str:
    """
    Format a task tree in concise format.

    Output: "#5: Ship release [IN_PROGRESS] 12h | 3 subtask(s) | 42%"
    """
    line = _format_task_line(component)
    subtasks = sum(1 for _ in walk(component)) - 1
    progress = round(component.get_progress() * 100)
    return f"{line} | {subtasks} subtask(s) | {progress}%"


def _format_task_tree_markdown(component: TaskComponent) -> str:
    """Format a task and its subtasks as a markdown outline."""
    task = component.task
    title = component.get_title() or "Untitled"
    lines = [f"# {title}"]

    details = [
        f"**Status**: {component.get_status().value}",
        f"**Estimated**: {_format_hours(component.get_estimated_hours())}",
        f"**Progress**: {component.get_progress():.0%}",
    ]
    if task.due_date:
        details.append(f"**Due**: {task.due_date}")
    details.append(f"**Priority**: {task.priority.name.title()}")
    lines.append(" | ".join(details))

    children = list(walk(component))[1:]
    if children:
        lines.append("")
        lines.append("**Subtasks:**")
        for depth, child in children:
            lines.append(f"{'  ' * (depth - 1)}- {_format_task_line(child)}")

    return "\n".join(lines)


def _format_user_concise(user: UserModel) -> str:
    """
    Format a user in concise format.

    Output: "#3: jdoe <jdoe@example.com> (DEVELOPER, REMOTE)"
    """
    flags = [user.role.value, user.work_mode.value]
    if not user.active:
        flags.append("inactive")
    return f"#{user.id if user.id is not None else '?'}: {user.username} <{user.email}> ({', '.join(flags)})"


def _format_user_markdown(user: UserModel) -> str:
    lines = [f"### [{user.id if user.id is not None else '?'}] {user.full_name or user.username}"]

    details = [
        f"**Username**: {user.username}",
        f"**Email**: {user.email}",
        f"**Role**: {user.role.value}",
        f"**Work mode**: {user.work_mode.value}",
        f"**Active**: {'yes' if user.active else 'no'}",
    ]
    if user.last_login:
        details.append(f"**Last login**: {user.last_login}")
    lines.append(" | ".join(details))

    return "\n".join(lines)


def _format_summary_markdown(summary: ReconcileSummary, title: str) -> str:
    return "\n".join(
        [
            f"# {title}",
            "",
            f"- Created: {summary.created}",
            f"- Existing: {summary.existing}",
            f"- Failed: {summary.failed}",
        ]
    )
