"""Task hierarchy aggregation and task creation."""

from sprintdesk_mcp.hierarchy.components import (
    CompositeTask,
    LeafTask,
    TaskComponent,
    attach_subtask,
    build_component,
    detach_subtask,
    walk,
)
from sprintdesk_mcp.hierarchy.factory import TaskFactory

__all__ = [
    "LeafTask",
    "CompositeTask",
    "TaskComponent",
    "build_component",
    "attach_subtask",
    "detach_subtask",
    "walk",
    "TaskFactory",
]
