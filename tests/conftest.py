"""Pytest configuration and fixtures for sprintdesk-mcp tests."""

from unittest.mock import AsyncMock

import pytest

from sprintdesk_mcp.config import Settings
from sprintdesk_mcp.enums import Priority, TaskStatus, UserRole, WorkMode
from sprintdesk_mcp.identity.provisioning import FederatedProvisioner
from sprintdesk_mcp.identity.reconciler import IdentityReconciler
from sprintdesk_mcp.models.task import SubtaskModel, TaskModel
from sprintdesk_mcp.models.user import FederatedIdentity, UserModel
from sprintdesk_mcp.services import configure_services, reset_services
from sprintdesk_mcp.storage.memory import InMemoryRecordStore


@pytest.fixture(autouse=True)
def clean_services():
    """Make sure no tool test leaks its collaborators into another."""
    reset_services()
    yield
    reset_services()


@pytest.fixture
def settings():
    return Settings()


@pytest.fixture
def sample_users():
    """Local users as held by the record store."""
    return [
        UserModel(
            id=1,
            username="janet",
            email="Janet@Example.com",
            full_name="Janet D.",
            role=UserRole.MANAGER,
            work_mode=WorkMode.OFFICE,
            active=False,
        ),
        UserModel(
            id=2,
            username="bob",
            email="bob@example.com",
            full_name="",
            role=UserRole.TESTER,
            work_mode=WorkMode.HYBRID,
        ),
    ]


@pytest.fixture
def record_store(sample_users):
    return InMemoryRecordStore(sample_users)


@pytest.fixture
def identity_provider():
    """Identity provider mock; every method is awaitable."""
    provider = AsyncMock()
    provider.exists_by_email.return_value = False
    provider.create_with_password.return_value = FederatedIdentity(uid="fed-new", email="new@example.com")
    provider.update_display_name.return_value = None
    provider.send_password_reset.return_value = None
    provider.delete.return_value = None
    return provider


@pytest.fixture
def reconciler(record_store, identity_provider, settings):
    return IdentityReconciler(record_store, identity_provider, settings)


@pytest.fixture
def provisioner(record_store, identity_provider, settings):
    return FederatedProvisioner(record_store, identity_provider, settings)


@pytest.fixture
def services(record_store, identity_provider, settings):
    """Install test collaborators as the process-wide services."""
    return configure_services(record_store=record_store, identity_provider=identity_provider, settings=settings)


@pytest.fixture
def parent_task():
    """A task with three stored subtasks."""
    return TaskModel(
        id=10,
        title="Release 1.0",
        description="Ship it",
        due_date="2025-03-31",
        priority=Priority.HIGH,
        status=TaskStatus.TODO,
        estimated_hours=9,
        created_at="2025-01-01T00:00:00+00:00",
        updated_at="2025-01-01T00:00:00+00:00",
        project_id=4,
        subtasks=[
            SubtaskModel(id=11, title="Build", status=TaskStatus.COMPLETED, task_id=10),
            SubtaskModel(id=12, title="Test", status=TaskStatus.IN_PROGRESS, task_id=10),
            SubtaskModel(id=13, title="Announce", status=TaskStatus.TODO, task_id=10),
        ],
    )
