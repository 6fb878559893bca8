"""Status observer that notifies when a task's derived status changes."""

import logging

from sprintdesk_mcp.enums import TaskStatus
from sprintdesk_mcp.hierarchy.components import TaskComponent
from sprintdesk_mcp.notifications.senders import NotificationManager

logger = logging.getLogger(__name__)


class TaskStatusNotifier:
    """Applies status writes to a task tree and reports what changed."""

    def __init__(self, manager: NotificationManager) -> None:
        self.manager = manager

    async def apply_status(self, component: TaskComponent, status: TaskStatus, recipient: str | None) -> list[str]:
        """
        Force ``status`` onto a task tree and notify ``recipient``.

        An "updated" message is sent when the derived status changed, and a
        "completed" message when it became COMPLETED. With no recipient the
        write still happens and nothing is sent.

        Args:
            component: Root of the task tree
            status: Status to cascade
            recipient: Address or handle to notify, if any

        Returns:
            Kinds of notifications that were delivered ("updated", "completed")
        """
        before = component.get_status()
        component.set_status(status)
        after = component.get_status()

        if recipient is None or before == after:
            return []

        title = component.get_title()
        delivered = []
        if await self.manager.notify_task_updated(title, recipient):
            delivered.append("updated")
        if after == TaskStatus.COMPLETED and await self.manager.notify_task_completed(title, recipient):
            delivered.append("completed")

        if len(delivered) < (2 if after == TaskStatus.COMPLETED else 1):
            logger.warning("Some notifications for task %r were not delivered to %s", title, recipient)
        return delivered
