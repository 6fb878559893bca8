"""
MCP Server for Sprintdesk.

This server exposes the task hierarchy engine (status and effort roll-up over
tasks and their subtasks) and the identity reconciler that keeps local user
records in step with a federated identity provider.
"""

# Re-export enums
from sprintdesk_mcp.enums import NotificationChannel, Priority, ResponseFormat, TaskStatus, UserRole, WorkMode

# Re-export errors
from sprintdesk_mcp.errors import IdentityError, ProviderError, SprintdeskError

# Re-export task hierarchy
from sprintdesk_mcp.hierarchy import (
    CompositeTask,
    LeafTask,
    TaskComponent,
    TaskFactory,
    attach_subtask,
    build_component,
    detach_subtask,
)

# Re-export identity services
from sprintdesk_mcp.identity import FederatedProvisioner, IdentityReconciler

# Re-export models
from sprintdesk_mcp.models import (
    DeleteUserInput,
    FederatedIdentity,
    FindUserInput,
    ProfileUpdate,
    ProvisionUserInput,
    ReconcileAllInput,
    ReconcileSummary,
    ReconcileUserInput,
    SetTaskStatusInput,
    SplitTaskInput,
    SubtaskModel,
    TaskModel,
    TaskRollupInput,
    UpdateProfileInput,
    UserModel,
)

# Re-export MCP server instance
from sprintdesk_mcp.server import mcp

# Re-export tools
from sprintdesk_mcp.tools import (
    sprintdesk_task_rollup,
    sprintdesk_task_set_status,
    sprintdesk_task_split,
    sprintdesk_user_delete,
    sprintdesk_user_find,
    sprintdesk_user_provision,
    sprintdesk_user_reconcile,
    sprintdesk_user_reconcile_all,
    sprintdesk_user_update_profile,
)

__all__ = [
    # Enums
    "ResponseFormat",
    "TaskStatus",
    "Priority",
    "UserRole",
    "WorkMode",
    "NotificationChannel",
    # Errors
    "SprintdeskError",
    "IdentityError",
    "ProviderError",
    # Task hierarchy
    "LeafTask",
    "CompositeTask",
    "TaskComponent",
    "TaskFactory",
    "build_component",
    "attach_subtask",
    "detach_subtask",
    # Identity services
    "IdentityReconciler",
    "FederatedProvisioner",
    # Models
    "TaskModel",
    "SubtaskModel",
    "UserModel",
    "FederatedIdentity",
    "ProfileUpdate",
    "ReconcileSummary",
    # Tool input models
    "TaskRollupInput",
    "SetTaskStatusInput",
    "SplitTaskInput",
    "FindUserInput",
    "ReconcileUserInput",
    "ReconcileAllInput",
    "UpdateProfileInput",
    "DeleteUserInput",
    "ProvisionUserInput",
    # Tools
    "sprintdesk_task_rollup",
    "sprintdesk_task_set_status",
    "sprintdesk_task_split",
    "sprintdesk_user_find",
    "sprintdesk_user_reconcile",
    "sprintdesk_user_reconcile_all",
    "sprintdesk_user_update_profile",
    "sprintdesk_user_delete",
    "sprintdesk_user_provision",
    # MCP server instance
    "mcp",
]
