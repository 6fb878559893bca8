"""Input models for Sprintdesk MCP tools."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from sprintdesk_mcp.enums import Priority, ResponseFormat, TaskStatus, UserRole, WorkMode
from sprintdesk_mcp.models.task import TaskModel
from sprintdesk_mcp.models.user import FederatedIdentity

# ============================================================================
# Task Hierarchy Tool Input Models
# ============================================================================


class TaskRollupInput(BaseModel):
    """Input model for rolling up a task's status and effort."""

    model_config = ConfigDict(str_strip_whitespace=True)

    task: TaskModel = Field(..., description="Task record, optionally with its stored subtasks")
    response_format: ResponseFormat = Field(
        default=ResponseFormat.MARKDOWN,
        description="Output format: 'markdown', 'concise' or 'json'",
    )


class SetTaskStatusInput(BaseModel):
    """Input model for forcing a status onto a task and all of its subtasks."""

    model_config = ConfigDict(str_strip_whitespace=True)

    task: TaskModel = Field(..., description="Task record, optionally with its stored subtasks")
    status: TaskStatus = Field(..., description="Status to apply: TODO, IN_PROGRESS, BLOCKED or COMPLETED")
    notify: str | None = Field(
        default=None,
        description="Recipient to notify about the change (email address or handle)",
    )


class SplitTaskInput(BaseModel):
    """Input model for creating a task that is split into parts when large."""

    model_config = ConfigDict(str_strip_whitespace=True)

    title: str = Field(..., description="Task title (required)", min_length=1, max_length=200)
    description: str = Field(default="", description="Task description", max_length=2000)
    kind: Literal["task", "bug", "feature", "documentation"] = Field(
        default="task",
        description="Kind of task: 'task', 'bug', 'feature' or 'documentation'",
    )
    estimated_hours: float | None = Field(
        default=None,
        ge=0,
        description="Estimated effort in hours (kinds other than 'task' have a default)",
    )
    due_date: str | None = Field(default=None, description="Due date (e.g., '2025-03-31')")
    priority: Priority | None = Field(default=None, description="Priority: 1 (low), 2 (medium), 3 (high)")
    project_id: int | None = Field(default=None, description="Project the task belongs to")

    @field_validator("title")
    @classmethod
    def validate_title(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Title cannot be empty")
        return v.strip()


# ============================================================================
# User Tool Input Models
# ============================================================================


class FindUserInput(BaseModel):
    """Input model for looking up a local user by email."""

    model_config = ConfigDict(str_strip_whitespace=True)

    email: str = Field(..., description="Email address to look up (case-insensitive)", min_length=3)
    response_format: ResponseFormat = Field(
        default=ResponseFormat.MARKDOWN,
        description="Output format: 'markdown', 'concise' or 'json'",
    )


class ReconcileUserInput(BaseModel):
    """Input model for reconciling one federated identity with the local store."""

    model_config = ConfigDict(str_strip_whitespace=True)

    uid: str = Field(..., description="External id of the federated identity", min_length=1)
    email: str | None = Field(default=None, description="Email of the federated identity")
    display_name: str | None = Field(default=None, description="Display name of the federated identity")
    response_format: ResponseFormat = Field(
        default=ResponseFormat.MARKDOWN,
        description="Output format: 'markdown', 'concise' or 'json'",
    )

    def to_identity(self) -> FederatedIdentity:
        return FederatedIdentity(uid=self.uid, email=self.email, display_name=self.display_name)


class ReconcileAllInput(BaseModel):
    """Input model for reconciling a batch of federated identities."""

    model_config = ConfigDict(str_strip_whitespace=True)

    identities: list[FederatedIdentity] = Field(
        ..., description="Federated identities to reconcile", min_length=1, max_length=500
    )


class UpdateProfileInput(BaseModel):
    """Input model for a partial profile update."""

    model_config = ConfigDict(str_strip_whitespace=True)

    user_id: int = Field(..., description="Local user id", ge=1)
    uid: str = Field(..., description="External id of the user's federated identity", min_length=1)
    email: str | None = Field(default=None, description="Email of the federated identity")
    full_name: str | None = Field(default=None, description="New full name (also mirrored as display name)")
    work_mode: WorkMode | None = Field(default=None, description="New work mode: OFFICE, REMOTE or HYBRID")
    role: UserRole | None = Field(default=None, description="New role: ADMIN, MANAGER, DEVELOPER or TESTER")

    @field_validator("full_name")
    @classmethod
    def validate_full_name(cls, v: str | None) -> str | None:
        if v is not None and not v.strip():
            raise ValueError("Full name cannot be empty")
        return v


class DeleteUserInput(BaseModel):
    """Input model for deleting a user from both stores."""

    model_config = ConfigDict(str_strip_whitespace=True)

    user_id: int = Field(..., description="Local user id", ge=1)
    uid: str = Field(..., description="External id of the user's federated identity", min_length=1)
    email: str | None = Field(default=None, description="Email of the federated identity")


class ProvisionUserInput(BaseModel):
    """Input model for creating federated accounts for local users."""

    model_config = ConfigDict(str_strip_whitespace=True)

    user_id: int | None = Field(
        default=None,
        description="Local user id to provision, or None to provision every local user",
        ge=1,
    )
    send_password_reset: bool = Field(
        default=True,
        description="Send a password reset email to each newly created account",
    )
