"""MCP tool definitions for task hierarchies."""

import json

from mcp.types import ToolAnnotations

from sprintdesk_mcp.enums import Priority, ResponseFormat
from sprintdesk_mcp.hierarchy.components import build_component
from sprintdesk_mcp.hierarchy.factory import TaskFactory
from sprintdesk_mcp.models.inputs import SetTaskStatusInput, SplitTaskInput, TaskRollupInput
from sprintdesk_mcp.server import mcp
from sprintdesk_mcp.services import get_services
from sprintdesk_mcp.utils.formatters import _format_task_tree_concise, _format_task_tree_markdown


@mcp.tool(
    name="sprintdesk_task_rollup",
    annotations=ToolAnnotations(
        title="Roll Up Task",
        readOnlyHint=True,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=False,
    ),
)
async def sprintdesk_task_rollup(params: TaskRollupInput) -> str:
    """
    Compute a task's effective status, effort and progress from its subtasks.

    USE THIS WHEN:
    - You have a task record with subtasks and need its overall status
    - You want the total estimated hours of a task tree
    - You want a readable outline of a task and its subtasks

    DO NOT USE WHEN:
    - You want to change a task's status → use sprintdesk_task_set_status instead

    STATUS RULES (first match wins):
    - No subtasks → the task's own status
    - All subtasks COMPLETED → COMPLETED
    - Any subtask IN_PROGRESS → IN_PROGRESS
    - Any subtask BLOCKED → BLOCKED
    - Otherwise → TODO

    Args:
        params: TaskRollupInput containing the task record and response_format

    Returns:
        Task summary (markdown, concise or JSON)

    Examples:
        - Roll up a task: params with task={"id": 1, "title": "Release", "estimated_hours": 8,
          "subtasks": [{"id": 2, "title": "Build", "status": "COMPLETED"}]}
    """
    component = build_component(params.task)

    if params.response_format == ResponseFormat.JSON:
        return json.dumps(
            {
                "id": component.get_id(),
                "kind": component.kind,
                "status": component.get_status().value,
                "estimated_hours": component.get_estimated_hours(),
                "progress": component.get_progress(),
                "task": component.serialize(),
            },
            indent=2,
        )

    if params.response_format == ResponseFormat.CONCISE:
        return _format_task_tree_concise(component)

    return _format_task_tree_markdown(component)


@mcp.tool(
    name="sprintdesk_task_set_status",
    annotations=ToolAnnotations(
        title="Set Task Status",
        readOnlyHint=False,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=True,
    ),
)
async def sprintdesk_task_set_status(params: SetTaskStatusInput) -> str:
    """
    Force a status onto a task and every one of its subtasks.

    The status is written to the task and cascaded down the whole tree. When a
    recipient is given, they are notified if the task's overall status changed.

    Args:
        params: SetTaskStatusInput containing the task record, status and optional notify recipient

    Returns:
        JSON with the updated task record (in its persisted shape) and the notifications sent;
        a failed send adds "notification_error" and the record is still returned

    Examples:
        - Complete a task and its subtasks: params with task={...}, status="COMPLETED"
        - Block a task and tell its owner: params with task={...}, status="BLOCKED", notify="dev@example.com"
    """
    component = build_component(params.task)
    notifier = get_services().status_notifier

    result: dict = {}
    try:
        result["notifications"] = await notifier.apply_status(component, params.status, params.notify)
    except Exception as e:
        result["notifications"] = []
        result["notification_error"] = f"{type(e).__name__}: {str(e)}"

    result["status"] = component.get_status().value
    result["task"] = component.serialize()
    return json.dumps(result, indent=2)


@mcp.tool(
    name="sprintdesk_task_split",
    annotations=ToolAnnotations(
        title="Create Split Task",
        readOnlyHint=True,
        destructiveHint=False,
        idempotentHint=False,
        openWorldHint=False,
    ),
)
async def sprintdesk_task_split(params: SplitTaskInput) -> str:
    """
    Build a new task record, splitting it into parts when it is large.

    Tasks estimated above the configured threshold (4 hours by default) get one
    TODO subtask per threshold-sized part. Bugs default to 3 hours, documentation
    to 6 hours, and features are created with HIGH priority.

    Args:
        params: SplitTaskInput containing title, kind and optional attributes

    Returns:
        JSON task record ready to be stored

    Examples:
        - Split a 10h task: params with title="Migrate DB", estimated_hours=10
        - Create a bug: params with title="Login fails", kind="bug", priority=3
    """
    factory = TaskFactory(get_services().settings.task_split_threshold_hours)
    common = {"description": params.description, "due_date": params.due_date, "project_id": params.project_id}

    if params.kind == "bug":
        task = factory.create_bug_task(params.title, priority=params.priority or Priority.MEDIUM, **common)
    elif params.kind == "feature":
        task = factory.create_feature_task(params.title, estimated_hours=params.estimated_hours or 0.0, **common)
    elif params.kind == "documentation":
        task = factory.create_documentation_task(params.title, **common)
    else:
        task = factory.create_task(
            params.title,
            priority=params.priority or Priority.MEDIUM,
            estimated_hours=params.estimated_hours or 0.0,
            **common,
        )

    return json.dumps(task.model_dump(mode="json"), indent=2)
