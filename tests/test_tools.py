"""Tests for the MCP tools."""

import json
from unittest.mock import AsyncMock

import pytest

from sprintdesk_mcp import (
    DeleteUserInput,
    FederatedIdentity,
    FindUserInput,
    ProviderError,
    ProvisionUserInput,
    ReconcileAllInput,
    ReconcileUserInput,
    ResponseFormat,
    SetTaskStatusInput,
    SplitTaskInput,
    TaskRollupInput,
    UpdateProfileInput,
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
from sprintdesk_mcp.services import configure_services


@pytest.fixture
def task_record():
    return {
        "id": 10,
        "title": "Release 1.0",
        "estimated_hours": 6,
        "due_date": "2025-03-31",
        "subtasks": [
            {"id": 11, "title": "Build", "status": "COMPLETED"},
            {"id": 12, "title": "Test", "status": "BLOCKED"},
        ],
    }


# ============================================================================
# Task Tool Tests
# ============================================================================


class TestTaskRollup:
    """Tests for the sprintdesk_task_rollup tool."""

    @pytest.mark.asyncio
    async def test_rollup_json(self, task_record):
        """Test the JSON roll-up of a composite."""
        params = TaskRollupInput(task=task_record, response_format=ResponseFormat.JSON)
        data = json.loads(await sprintdesk_task_rollup(params))
        assert data["kind"] == "composite"
        assert data["status"] == "BLOCKED"
        assert data["estimated_hours"] == 6
        assert data["progress"] == pytest.approx(0.625)
        assert [s["task_id"] for s in data["task"]["subtasks"]] == [10, 10]

    @pytest.mark.asyncio
    async def test_rollup_markdown(self, task_record):
        """Test the markdown outline."""
        result = await sprintdesk_task_rollup(TaskRollupInput(task=task_record))
        assert "# Release 1.0" in result
        assert "**Status**: BLOCKED" in result
        assert "**Due**: 2025-03-31" in result
        assert "- #11: Build [COMPLETED] 3h" in result

    @pytest.mark.asyncio
    async def test_rollup_concise(self, task_record):
        """Test the concise single line."""
        params = TaskRollupInput(task=task_record, response_format=ResponseFormat.CONCISE)
        result = await sprintdesk_task_rollup(params)
        assert result == "#10: Release 1.0 [BLOCKED] 6h | 2 subtask(s) | 62%"

    @pytest.mark.asyncio
    async def test_rollup_leaf(self):
        """Test a task without subtasks."""
        params = TaskRollupInput(
            task={"id": 1, "title": "Solo", "status": "IN_PROGRESS", "estimated_hours": 2.5},
            response_format=ResponseFormat.JSON,
        )
        data = json.loads(await sprintdesk_task_rollup(params))
        assert data["kind"] == "leaf"
        assert data["status"] == "IN_PROGRESS"
        assert data["estimated_hours"] == 2.5


class TestTaskSetStatus:
    """Tests for the sprintdesk_task_set_status tool."""

    @pytest.mark.asyncio
    async def test_cascade_and_notify(self, task_record):
        """Test that the status cascades and the recipient is notified."""
        sender = AsyncMock()
        sender.send.return_value = True
        configure_services(sender=sender)

        params = SetTaskStatusInput(task=task_record, status="COMPLETED", notify="lead@example.com")
        data = json.loads(await sprintdesk_task_set_status(params))

        assert data["status"] == "COMPLETED"
        assert data["notifications"] == ["updated", "completed"]
        assert data["task"]["status"] == "COMPLETED"
        assert {s["status"] for s in data["task"]["subtasks"]} == {"COMPLETED"}

    @pytest.mark.asyncio
    async def test_without_recipient(self, task_record):
        """Test that no notifications go out without a recipient."""
        params = SetTaskStatusInput(task=task_record, status="TODO")
        data = json.loads(await sprintdesk_task_set_status(params))
        assert data["status"] == "TODO"
        assert data["notifications"] == []

    @pytest.mark.asyncio
    async def test_sender_failure(self, task_record):
        """Test that a broken sender is reported alongside the updated record."""
        sender = AsyncMock()
        sender.send.side_effect = ConnectionError("smtp down")
        configure_services(sender=sender)

        params = SetTaskStatusInput(task=task_record, status="COMPLETED", notify="lead@example.com")
        data = json.loads(await sprintdesk_task_set_status(params))

        assert data["notifications"] == []
        assert data["notification_error"] == "ConnectionError: smtp down"
        assert data["status"] == "COMPLETED"

    @pytest.mark.asyncio
    async def test_sender_failure_keeps_cascaded_record(self, task_record):
        """Test that the cascaded subtasks survive a failed notification."""
        sender = AsyncMock()
        sender.send.side_effect = RuntimeError("smtp down")
        configure_services(sender=sender)

        params = SetTaskStatusInput(task=task_record, status="COMPLETED", notify="lead@example.com")
        data = json.loads(await sprintdesk_task_set_status(params))

        subtasks = data["task"]["subtasks"]
        assert [s["id"] for s in subtasks] == [11, 12]
        assert {s["status"] for s in subtasks} == {"COMPLETED"}
        assert data["task"]["status"] == "COMPLETED"


class TestTaskSplit:
    """Tests for the sprintdesk_task_split tool."""

    @pytest.mark.asyncio
    async def test_split_large_task(self):
        """Test that a large task comes back with parts."""
        data = json.loads(await sprintdesk_task_split(SplitTaskInput(title="Migrate", estimated_hours=10)))
        assert data["title"] == "Migrate"
        assert len(data["subtasks"]) == 3
        assert data["priority"] == 2

    @pytest.mark.asyncio
    async def test_bug(self):
        """Test the bug kind."""
        data = json.loads(await sprintdesk_task_split(SplitTaskInput(title="Crash", kind="bug", priority=3)))
        assert data["title"] == "[BUG] Crash"
        assert data["estimated_hours"] == 3
        assert data["priority"] == 3

    @pytest.mark.asyncio
    async def test_feature_and_documentation(self):
        """Test the feature and documentation kinds."""
        feature = json.loads(await sprintdesk_task_split(SplitTaskInput(title="Export", kind="feature")))
        docs = json.loads(await sprintdesk_task_split(SplitTaskInput(title="Guide", kind="documentation")))
        assert feature["title"] == "[FEATURE] Export"
        assert feature["priority"] == 3
        assert docs["estimated_hours"] == 6
        assert len(docs["subtasks"]) == 2


# ============================================================================
# User Tool Tests
# ============================================================================


class TestUserFind:
    """Tests for the sprintdesk_user_find tool."""

    @pytest.mark.asyncio
    async def test_found_json(self, services):
        """Test a successful lookup."""
        result = await sprintdesk_user_find(FindUserInput(email="BOB@example.com", response_format=ResponseFormat.JSON))
        assert json.loads(result)["id"] == 2

    @pytest.mark.asyncio
    async def test_found_concise(self, services):
        """Test the concise format."""
        result = await sprintdesk_user_find(FindUserInput(email="janet@example.com", response_format="concise"))
        assert result == "#1: janet <Janet@Example.com> (MANAGER, OFFICE, inactive)"

    @pytest.mark.asyncio
    async def test_not_found(self, services):
        """Test a miss."""
        result = await sprintdesk_user_find(FindUserInput(email="nobody@example.com"))
        assert "No user found" in result


class TestUserReconcile:
    """Tests for the sprintdesk_user_reconcile tool."""

    @pytest.mark.asyncio
    async def test_creates_user(self, services):
        """Test reconciling a new identity."""
        params = ReconcileUserInput(uid="fed-1", email="carol@example.com", display_name="Carol King")
        result = await sprintdesk_user_reconcile(params)
        assert "Carol King" in result
        assert "**Username**: carol" in result

    @pytest.mark.asyncio
    async def test_missing_email(self, services):
        """Test that an identity without email is an error."""
        result = await sprintdesk_user_reconcile(ReconcileUserInput(uid="fed-1"))
        assert result.startswith("Error:")
        assert "no email" in result

    @pytest.mark.asyncio
    async def test_rejected_write(self, services, record_store):
        """Test reporting a rejected write."""
        record_store.create = AsyncMock(return_value=None)
        result = await sprintdesk_user_reconcile(ReconcileUserInput(uid="fed-1", email="eve@example.com"))
        assert "rejected" in result

    @pytest.mark.asyncio
    async def test_reconcile_all(self, services):
        """Test the batch summary."""
        params = ReconcileAllInput(
            identities=[
                FederatedIdentity(uid="a", email="bob@example.com"),
                FederatedIdentity(uid="b", email="new@example.com"),
                FederatedIdentity(uid="c"),
            ]
        )
        result = await sprintdesk_user_reconcile_all(params)
        assert "- Created: 1" in result
        assert "- Existing: 1" in result
        assert "- Failed: 1" in result


class TestUserUpdateProfile:
    """Tests for the sprintdesk_user_update_profile tool."""

    @pytest.mark.asyncio
    async def test_update(self, services, identity_provider):
        """Test a profile update with a mirrored name."""
        params = UpdateProfileInput(user_id=2, uid="fed-2", full_name="Bob Stone", work_mode="OFFICE")
        result = await sprintdesk_user_update_profile(params)
        assert "User 2 updated" in result
        assert "**Work mode**: OFFICE" in result
        identity_provider.update_display_name.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_unknown_user(self, services):
        """Test updating a missing user."""
        result = await sprintdesk_user_update_profile(UpdateProfileInput(user_id=99, uid="x", role="ADMIN"))
        assert "Error" in result

    @pytest.mark.asyncio
    async def test_without_provider_local_update_stands(self, record_store):
        """Test that a missing provider does not block the local update."""
        configure_services(record_store=record_store)
        result = await sprintdesk_user_update_profile(UpdateProfileInput(user_id=2, uid="fed-2", full_name="Bob"))
        assert "User 2 updated" in result
        assert (await record_store.get_by_id(2)).full_name == "Bob"


class TestUserDelete:
    """Tests for the sprintdesk_user_delete tool."""

    @pytest.mark.asyncio
    async def test_delete(self, services, identity_provider):
        """Test deleting from both stores."""
        result = await sprintdesk_user_delete(DeleteUserInput(user_id=2, uid="fed-2"))
        assert "deleted" in result
        identity_provider.delete.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_local_failure(self, services, identity_provider):
        """Test that a failed local delete leaves the provider alone."""
        result = await sprintdesk_user_delete(DeleteUserInput(user_id=99, uid="fed-9"))
        assert result.startswith("Error:")
        assert identity_provider.delete.await_count == 0

    @pytest.mark.asyncio
    async def test_store_error_is_not_reported_as_deleted(self, record_store, identity_provider):
        """Test that a raising record store reports a failed delete."""
        record_store.delete = AsyncMock(side_effect=ConnectionError("backend down"))
        configure_services(record_store=record_store, identity_provider=identity_provider)

        result = await sprintdesk_user_delete(DeleteUserInput(user_id=1, uid="fed-1"))

        assert result == "Error: Could not delete user 1; the federated account was left untouched."
        assert identity_provider.delete.await_count == 0
        assert await record_store.get_by_id(1) is not None

    @pytest.mark.asyncio
    async def test_provider_failure(self, services, identity_provider):
        """Test reporting a provider failure after the local delete."""
        identity_provider.delete.side_effect = ProviderError("auth/user-not-found", "No such account")
        result = await sprintdesk_user_delete(DeleteUserInput(user_id=2, uid="fed-2"))
        assert "deleted locally" in result
        assert "auth/user-not-found" in result


class TestUserProvision:
    """Tests for the sprintdesk_user_provision tool."""

    @pytest.mark.asyncio
    async def test_single_user(self, services):
        """Test provisioning one user."""
        result = await sprintdesk_user_provision(ProvisionUserInput(user_id=1))
        assert result == "User 1 has a federated account."

    @pytest.mark.asyncio
    async def test_all_users(self, services, identity_provider):
        """Test provisioning everyone."""
        identity_provider.exists_by_email.return_value = True
        result = await sprintdesk_user_provision(ProvisionUserInput())
        assert "# Provisioning Summary" in result
        assert "- Existing: 2" in result

    @pytest.mark.asyncio
    async def test_without_provider(self):
        """Test that an unconfigured provider is reported."""
        configure_services()
        result = await sprintdesk_user_provision(ProvisionUserInput(user_id=1))
        assert "Error" in result

    @pytest.mark.asyncio
    async def test_provider_rejection(self, services, identity_provider):
        """Test that provider error codes reach the caller."""
        identity_provider.exists_by_email.side_effect = ProviderError("auth/too-many-requests")
        result = await sprintdesk_user_provision(ProvisionUserInput(user_id=1))
        assert "auth/too-many-requests" in result
