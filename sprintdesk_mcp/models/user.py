"""User and identity models for Sprintdesk MCP."""

from pydantic import BaseModel, ConfigDict

from sprintdesk_mcp.enums import UserRole, WorkMode


class UserModel(BaseModel):
    """A local user account as held by the record store."""

    model_config = ConfigDict(extra="allow")

    id: int | None = None
    username: str
    email: str
    full_name: str = ""
    role: UserRole = UserRole.DEVELOPER
    work_mode: WorkMode = WorkMode.REMOTE
    active: bool = True
    last_login: str | None = None
    created_at: str | None = None
    updated_at: str | None = None


class FederatedIdentity(BaseModel):
    """An account held by the external identity provider."""

    uid: str
    email: str | None = None
    display_name: str | None = None


class ProfileUpdate(BaseModel):
    """Partial profile change. Fields left as ``None`` are not touched."""

    full_name: str | None = None
    work_mode: WorkMode | None = None
    role: UserRole | None = None


class ReconcileSummary(BaseModel):
    """Outcome counters of a bulk reconciliation or provisioning run."""

    created: int = 0
    existing: int = 0
    failed: int = 0

    @property
    def total(self) -> int:
        return self.created + self.existing + self.failed
