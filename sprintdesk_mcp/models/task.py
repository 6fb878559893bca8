"""Task record models for Sprintdesk MCP."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from sprintdesk_mcp.enums import Priority, TaskStatus

# Keys of the persisted subtask shape, in wire order.
SUBTASK_FIELDS = ("id", "title", "description", "created_at", "updated_at", "status", "task_id")


class SubtaskModel(BaseModel):
    """Persisted subtask record.

    This is the reduced shape stored under a task's ``subtasks`` list: it has no
    due date, priority or effort of its own and points back to its parent via
    ``task_id``.
    """

    id: int | None = None
    title: str = ""
    description: str = ""
    created_at: str | None = None
    updated_at: str | None = None
    status: TaskStatus = TaskStatus.TODO
    task_id: int | None = None


class TaskModel(BaseModel):
    """Model representing a task with all its attributes."""

    model_config = ConfigDict(extra="allow")

    id: int | None = None
    title: str = ""
    description: str = ""
    due_date: str | None = None
    priority: Priority = Priority.MEDIUM
    status: TaskStatus = TaskStatus.TODO
    estimated_hours: float = Field(default=0.0, ge=0)
    created_at: str | None = None
    updated_at: str | None = None
    project_id: int | None = None
    sprint_id: int | None = None
    subtasks: list[SubtaskModel] = Field(default_factory=list)
