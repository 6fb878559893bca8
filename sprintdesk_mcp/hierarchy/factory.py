"""Task creation helpers that split large tasks into parts."""

import math
from datetime import datetime, timezone

from sprintdesk_mcp.enums import Priority, TaskStatus
from sprintdesk_mcp.models.task import SubtaskModel, TaskModel

BUG_ESTIMATED_HOURS = 3.0
DOCUMENTATION_ESTIMATED_HOURS = 6.0


class TaskFactory:
    """Create task records, splitting any task estimated above a threshold."""

    def __init__(self, threshold_hours: float = 4.0) -> None:
        self.threshold_hours = threshold_hours

    def create_simple_task(
        self,
        title: str,
        description: str = "",
        due_date: str | None = None,
        priority: Priority = Priority.MEDIUM,
        estimated_hours: float = 0.0,
        project_id: int | None = None,
    ) -> TaskModel:
        """Create a task that is never split."""
        now = datetime.now(timezone.utc).isoformat()
        return TaskModel(
            title=title,
            description=description,
            due_date=due_date,
            priority=priority,
            status=TaskStatus.TODO,
            estimated_hours=estimated_hours,
            project_id=project_id,
            created_at=now,
            updated_at=now,
        )

    def create_task(
        self,
        title: str,
        description: str = "",
        due_date: str | None = None,
        priority: Priority = Priority.MEDIUM,
        estimated_hours: float = 0.0,
        project_id: int | None = None,
        subtasks: list[SubtaskModel] | None = None,
    ) -> TaskModel:
        """
        Create a task, splitting it into parts when it is too large.

        A task estimated above ``threshold_hours`` that has no subtasks of its
        own gets ``ceil(hours / threshold)`` TODO subtasks named
        "<title> - Part <n>". Effort is not stored on the parts; it is shared
        out when the task is wrapped as a composite.

        Args:
            title: Task title
            description: Task description
            due_date: Optional due date
            priority: Task priority
            estimated_hours: Estimated effort in hours
            project_id: Optional owning project
            subtasks: Pre-existing subtasks; when given the task is not split

        Returns:
            The new TaskModel
        """
        task = self.create_simple_task(
            title,
            description=description,
            due_date=due_date,
            priority=priority,
            estimated_hours=estimated_hours,
            project_id=project_id,
        )
        if subtasks:
            task.subtasks = list(subtasks)
            return task

        if estimated_hours > self.threshold_hours:
            parts = math.ceil(estimated_hours / self.threshold_hours)
            task.subtasks = [
                SubtaskModel(
                    title=f"{title} - Part {i}",
                    description=f"Subtask {i} of {parts} for task: {description}",
                    status=TaskStatus.TODO,
                    created_at=task.created_at,
                    updated_at=task.created_at,
                )
                for i in range(1, parts + 1)
            ]
        return task

    def create_bug_task(
        self,
        title: str,
        description: str = "",
        priority: Priority = Priority.MEDIUM,
        due_date: str | None = None,
        project_id: int | None = None,
    ) -> TaskModel:
        return self.create_task(
            f"[BUG] {title}",
            description=description,
            due_date=due_date,
            priority=priority,
            estimated_hours=BUG_ESTIMATED_HOURS,
            project_id=project_id,
        )

    def create_feature_task(
        self,
        title: str,
        description: str = "",
        estimated_hours: float = 0.0,
        due_date: str | None = None,
        project_id: int | None = None,
    ) -> TaskModel:
        return self.create_task(
            f"[FEATURE] {title}",
            description=description,
            due_date=due_date,
            priority=Priority.HIGH,
            estimated_hours=estimated_hours,
            project_id=project_id,
        )

    def create_documentation_task(
        self,
        title: str,
        description: str = "",
        due_date: str | None = None,
        project_id: int | None = None,
    ) -> TaskModel:
        return self.create_task(
            title,
            description=description,
            due_date=due_date,
            priority=Priority.MEDIUM,
            estimated_hours=DOCUMENTATION_ESTIMATED_HOURS,
            project_id=project_id,
        )
