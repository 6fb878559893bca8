"""Task hierarchy aggregation.

A task is either a leaf, whose status and effort are stored on its record, or a
composite, whose status and effort are derived from its subtasks. Both variants
expose the same operations, so callers can hold a ``TaskComponent`` without
caring which one they have.

Components own their children exclusively and keep no reference to their
parent. Trees are assumed to be acyclic; nothing here raises.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, ClassVar, Union

from sprintdesk_mcp.enums import TaskStatus
from sprintdesk_mcp.models.task import SubtaskModel, TaskModel

_PROGRESS_BY_STATUS = {
    TaskStatus.TODO: 0.0,
    TaskStatus.IN_PROGRESS: 0.5,
    TaskStatus.BLOCKED: 0.25,
    TaskStatus.COMPLETED: 1.0,
}


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


def _project(component: TaskComponent, parent_id: int | None) -> dict[str, Any]:
    """Reduce a child component to the persisted subtask shape."""
    task = component.task
    subtask = SubtaskModel(
        id=task.id,
        title=task.title,
        description=task.description,
        created_at=task.created_at,
        updated_at=task.updated_at,
        status=component.get_status(),
        task_id=parent_id,
    )
    return subtask.model_dump(mode="json")


@dataclass
class LeafTask:
    """A task without subtasks. Status and effort are read from the record."""

    kind: ClassVar[str] = "leaf"

    task: TaskModel

    def get_id(self) -> int | None:
        return self.task.id

    def get_title(self) -> str:
        return self.task.title

    def get_status(self) -> TaskStatus:
        return self.task.status

    def set_status(self, status: TaskStatus) -> None:
        self.task.status = status
        self.task.updated_at = _now()

    def get_estimated_hours(self) -> float:
        return self.task.estimated_hours

    def is_completed(self) -> bool:
        return self.task.status == TaskStatus.COMPLETED

    def get_progress(self) -> float:
        return _PROGRESS_BY_STATUS.get(self.task.status, 0.0)

    def serialize(self) -> dict[str, Any]:
        """Return a copy of the record; mutating it does not affect the leaf."""
        return self.task.model_dump(mode="json")

    def project(self, parent_id: int | None) -> dict[str, Any]:
        return _project(self, parent_id)


@dataclass
class CompositeTask:
    """A task whose status and effort are derived from its subtasks."""

    kind: ClassVar[str] = "composite"

    task: TaskModel
    children: list[TaskComponent] = field(default_factory=list)

    @classmethod
    def from_task(cls, task: TaskModel) -> CompositeTask:
        """
        Build a composite from a record and its stored subtasks.

        Each stored subtask becomes a leaf carrying an even share of the
        parent's estimated hours, plus the parent's due date and priority.
        The composite keeps a copy of the record without the stored subtasks;
        from here on the children are the source of truth.

        Args:
            task: Task record, usually with a non-empty ``subtasks`` list

        Returns:
            CompositeTask owning one LeafTask per stored subtask
        """
        subtasks = task.subtasks
        share = task.estimated_hours / len(subtasks) if subtasks else 0.0
        children: list[TaskComponent] = [LeafTask(_subtask_to_task(s, task, share)) for s in subtasks]
        return cls(task=task.model_copy(update={"subtasks": []}), children=children)

    def get_id(self) -> int | None:
        return self.task.id

    def get_title(self) -> str:
        return self.task.title

    def add_subtask(self, component: TaskComponent) -> None:
        # Existing children keep their effort; nothing is re-split.
        self.children.append(component)

    def remove_subtask(self, component_id: int | None) -> None:
        if component_id is None:
            return
        self.children = [child for child in self.children if child.get_id() != component_id]

    def get_children(self) -> list[TaskComponent]:
        return list(self.children)

    def get_status(self) -> TaskStatus:
        if not self.children:
            return self.task.status

        statuses = [child.get_status() for child in self.children]
        if all(s == TaskStatus.COMPLETED for s in statuses):
            return TaskStatus.COMPLETED
        if TaskStatus.IN_PROGRESS in statuses:
            return TaskStatus.IN_PROGRESS
        if TaskStatus.BLOCKED in statuses:
            return TaskStatus.BLOCKED
        return TaskStatus.TODO

    def set_status(self, status: TaskStatus) -> None:
        """Store ``status`` on this task and force it onto every descendant."""
        self.task.status = status
        self.task.updated_at = _now()
        for child in self.children:
            child.set_status(status)

    def get_estimated_hours(self) -> float:
        if not self.children:
            return self.task.estimated_hours
        return sum(child.get_estimated_hours() for child in self.children)

    def is_completed(self) -> bool:
        return self.get_status() == TaskStatus.COMPLETED

    def get_progress(self) -> float:
        """Mean progress of the children, between 0.0 and 1.0."""
        if not self.children:
            return 1.0 if self.task.status == TaskStatus.COMPLETED else 0.0
        return sum(child.get_progress() for child in self.children) / len(self.children)

    def serialize(self) -> dict[str, Any]:
        """
        Return the full record with ``subtasks`` rebuilt from the children.

        The root keeps every task attribute; each child is reduced to the
        persisted subtask shape with ``task_id`` pointing at this task.
        """
        record = self.task.model_dump(mode="json")
        record["subtasks"] = [child.project(self.task.id) for child in self.children]
        return record

    def project(self, parent_id: int | None) -> dict[str, Any]:
        return _project(self, parent_id)


TaskComponent = Union[LeafTask, CompositeTask]


def _subtask_to_task(subtask: SubtaskModel, parent: TaskModel, hours: float) -> TaskModel:
    return TaskModel(
        id=subtask.id,
        title=subtask.title,
        description=subtask.description,
        created_at=subtask.created_at,
        updated_at=subtask.updated_at,
        status=subtask.status,
        due_date=parent.due_date,
        priority=parent.priority,
        estimated_hours=hours,
    )


def build_component(task: TaskModel) -> TaskComponent:
    """Wrap a record as a leaf, or as a composite when it has stored subtasks."""
    if task.subtasks:
        return CompositeTask.from_task(task)
    return LeafTask(task)


def attach_subtask(component: TaskComponent, child: TaskComponent) -> CompositeTask:
    """Add ``child`` under ``component``, promoting a leaf to a composite."""
    if isinstance(component, LeafTask):
        component = CompositeTask(task=component.task)
    component.add_subtask(child)
    return component


def detach_subtask(component: TaskComponent, component_id: int | None) -> TaskComponent:
    """Remove a child by id, demoting the composite to a leaf once it is empty."""
    if isinstance(component, LeafTask):
        return component
    component.remove_subtask(component_id)
    if not component.children:
        return LeafTask(component.task)
    return component


def walk(component: TaskComponent, depth: int = 0) -> Iterator[tuple[int, TaskComponent]]:
    """Yield ``(depth, component)`` pairs in pre-order."""
    yield depth, component
    if isinstance(component, CompositeTask):
        for child in component.children:
            yield from walk(child, depth + 1)
