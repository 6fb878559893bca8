"""Notification senders and the manager that composes task messages.

The manager only builds messages; delivery is left to a ``NotificationSender``
chosen from configuration. Senders here hand the message to the log, which is
where a real channel adapter would be plugged in.
"""

import logging
from typing import Protocol

from sprintdesk_mcp.enums import NotificationChannel

logger = logging.getLogger(__name__)


class NotificationSender(Protocol):
    """Delivers a message to a recipient over some channel."""

    async def send(self, message: str, recipient: str) -> bool: ...


class EmailNotification:
    channel = NotificationChannel.EMAIL

    async def send(self, message: str, recipient: str) -> bool:
        logger.info("Sending email to %s: %s", recipient, message)
        return True


class DirectMessageNotification:
    channel = NotificationChannel.DIRECT_MESSAGE

    async def send(self, message: str, recipient: str) -> bool:
        logger.info("Sending direct message to %s: %s", recipient, message)
        return True


class PushNotification:
    channel = NotificationChannel.PUSH

    async def send(self, message: str, recipient: str) -> bool:
        logger.info("Sending push notification to %s: %s", recipient, message)
        return True


_SENDERS = {
    NotificationChannel.EMAIL: EmailNotification,
    NotificationChannel.DIRECT_MESSAGE: DirectMessageNotification,
    NotificationChannel.PUSH: PushNotification,
}


def sender_for_channel(channel: NotificationChannel) -> NotificationSender:
    """Return a fresh sender for the configured channel."""
    return _SENDERS[NotificationChannel(channel)]()


class NotificationManager:
    """Builds task and sprint messages and hands them to the current sender."""

    def __init__(self, sender: NotificationSender) -> None:
        self.sender = sender

    def change_sender(self, sender: NotificationSender) -> None:
        self.sender = sender

    async def notify_task_created(self, title: str, recipient: str) -> bool:
        return await self.sender.send(f"New task created: {title}", recipient)

    async def notify_task_updated(self, title: str, recipient: str) -> bool:
        return await self.sender.send(f"Task updated: {title}", recipient)

    async def notify_task_completed(self, title: str, recipient: str) -> bool:
        return await self.sender.send(f"Task completed: {title}", recipient)

    async def notify_sprint_started(self, name: str, recipient: str) -> bool:
        return await self.sender.send(f"Sprint started: {name}", recipient)

    async def notify_sprint_ended(self, name: str, recipient: str) -> bool:
        return await self.sender.send(f"Sprint ended: {name}", recipient)

    async def notify_comment_added(self, title: str, recipient: str) -> bool:
        return await self.sender.send(f"New comment on task: {title}", recipient)
