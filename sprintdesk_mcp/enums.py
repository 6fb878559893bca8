"""Enums for Sprintdesk MCP."""

from enum import Enum, IntEnum


class ResponseFormat(str, Enum):
    """Output format for tool responses."""

    CONCISE = "concise"  # One line per record, for chaining
    MARKDOWN = "markdown"  # Human-readable (default)
    JSON = "json"  # Machine-readable with all fields


class TaskStatus(str, Enum):
    """Lifecycle status of a task or subtask."""

    TODO = "TODO"
    IN_PROGRESS = "IN_PROGRESS"
    BLOCKED = "BLOCKED"
    COMPLETED = "COMPLETED"


class Priority(IntEnum):
    """Task priority levels, ordered from lowest to highest."""

    LOW = 1
    MEDIUM = 2
    HIGH = 3


class UserRole(str, Enum):
    """Role of a local user account."""

    ADMIN = "ADMIN"
    MANAGER = "MANAGER"
    DEVELOPER = "DEVELOPER"
    TESTER = "TESTER"


class WorkMode(str, Enum):
    """Where a user usually works from."""

    OFFICE = "OFFICE"
    REMOTE = "REMOTE"
    HYBRID = "HYBRID"


class NotificationChannel(str, Enum):
    """Delivery channel used by the notification manager."""

    EMAIL = "email"
    DIRECT_MESSAGE = "direct_message"
    PUSH = "push"
