"""Pydantic models for Sprintdesk MCP."""

from sprintdesk_mcp.models.inputs import (
    DeleteUserInput,
    FindUserInput,
    ProvisionUserInput,
    ReconcileAllInput,
    ReconcileUserInput,
    SetTaskStatusInput,
    SplitTaskInput,
    TaskRollupInput,
    UpdateProfileInput,
)
from sprintdesk_mcp.models.task import SUBTASK_FIELDS, SubtaskModel, TaskModel
from sprintdesk_mcp.models.user import FederatedIdentity, ProfileUpdate, ReconcileSummary, UserModel

__all__ = [
    # Task models
    "SUBTASK_FIELDS",
    "SubtaskModel",
    "TaskModel",
    # User models
    "UserModel",
    "FederatedIdentity",
    "ProfileUpdate",
    "ReconcileSummary",
    # Task tool input models
    "TaskRollupInput",
    "SetTaskStatusInput",
    "SplitTaskInput",
    # User tool input models
    "FindUserInput",
    "ReconcileUserInput",
    "ReconcileAllInput",
    "UpdateProfileInput",
    "DeleteUserInput",
    "ProvisionUserInput",
]
