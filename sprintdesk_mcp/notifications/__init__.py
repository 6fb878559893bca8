"""Task notifications."""

from sprintdesk_mcp.notifications.observer import TaskStatusNotifier
from sprintdesk_mcp.notifications.senders import (
    DirectMessageNotification,
    EmailNotification,
    NotificationManager,
    NotificationSender,
    PushNotification,
    sender_for_channel,
)

__all__ = [
    "NotificationSender",
    "EmailNotification",
    "DirectMessageNotification",
    "PushNotification",
    "NotificationManager",
    "sender_for_channel",
    "TaskStatusNotifier",
]
