"""Configuration management for Sprintdesk MCP."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from sprintdesk_mcp.enums import NotificationChannel, UserRole, WorkMode


class Settings(BaseSettings):
    """Runtime settings, read from ``SPRINTDESK_*`` environment variables."""

    model_config = SettingsConfigDict(env_prefix="SPRINTDESK_", env_file=".env", extra="ignore")

    log_level: str = Field(default="INFO", description="Root log level for the server process")
    notification_channel: NotificationChannel = Field(
        default=NotificationChannel.EMAIL,
        description="Channel used to deliver task notifications",
    )
    default_role: UserRole = Field(
        default=UserRole.DEVELOPER,
        description="Role given to users created from a federated identity",
    )
    default_work_mode: WorkMode = Field(
        default=WorkMode.REMOTE,
        description="Work mode given to users created from a federated identity",
    )
    task_split_threshold_hours: float = Field(
        default=4.0,
        gt=0,
        description="Tasks estimated above this many hours are split into parts",
    )
    temp_password_prefix: str = Field(
        default="Temp",
        min_length=1,
        description="Prefix of temporary passwords for provisioned federated accounts",
    )


@lru_cache
def get_settings() -> Settings:
    """Return the process-wide settings instance."""
    return Settings()
