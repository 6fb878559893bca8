"""MCP tool definitions for user and identity reconciliation."""

import json

from mcp.types import ToolAnnotations

from sprintdesk_mcp.enums import ResponseFormat
from sprintdesk_mcp.errors import IdentityError, ProviderError
from sprintdesk_mcp.models.inputs import (
    DeleteUserInput,
    FindUserInput,
    ProvisionUserInput,
    ReconcileAllInput,
    ReconcileUserInput,
    UpdateProfileInput,
)
from sprintdesk_mcp.models.user import FederatedIdentity, ProfileUpdate, UserModel
from sprintdesk_mcp.server import mcp
from sprintdesk_mcp.services import get_services
from sprintdesk_mcp.utils.formatters import _format_summary_markdown, _format_user_concise, _format_user_markdown


def _format_user(user: UserModel, response_format: ResponseFormat) -> str:
    if response_format == ResponseFormat.JSON:
        return json.dumps(user.model_dump(mode="json"), indent=2)
    if response_format == ResponseFormat.CONCISE:
        return _format_user_concise(user)
    return _format_user_markdown(user)


def _format_error(e: Exception) -> str:
    if isinstance(e, ProviderError):
        return f"Error: Identity provider rejected the request ({e.code}) - {e.message}"
    if isinstance(e, IdentityError):
        return f"Error: {str(e)}"
    return f"Error: Unexpected error - {type(e).__name__}: {str(e)}"


@mcp.tool(
    name="sprintdesk_user_find",
    annotations=ToolAnnotations(
        title="Find User By Email",
        readOnlyHint=True,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=False,
    ),
)
async def sprintdesk_user_find(params: FindUserInput) -> str:
    """
    Look up a local user by email address (case-insensitive).

    Args:
        params: FindUserInput containing email and response_format

    Returns:
        User details, or a not-found message

    Examples:
        - Find a user: params with email="jane@example.com"
    """
    try:
        user = await get_services().reconciler.find_local_user_by_email(params.email)
    except Exception as e:
        return _format_error(e)

    if user is None:
        return f"No user found with email '{params.email}'."
    return _format_user(user, params.response_format)


@mcp.tool(
    name="sprintdesk_user_reconcile",
    annotations=ToolAnnotations(
        title="Reconcile Federated Identity",
        readOnlyHint=False,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=False,
    ),
)
async def sprintdesk_user_reconcile(params: ReconcileUserInput) -> str:
    """
    Create or refresh the local user that matches a federated identity.

    USE THIS WHEN:
    - A user signed in through the identity provider and needs a local account
    - You want to refresh a user's last login

    Matching is by email. An existing user keeps their role, work mode and full
    name (the display name only fills an empty full name). A new user gets the
    default role and work mode, and a username taken from the email.

    Args:
        params: ReconcileUserInput containing uid, email, display_name and response_format

    Returns:
        The reconciled user, or an error message

    Examples:
        - params with uid="x7Gq2", email="jane@example.com", display_name="Jane Doe"
    """
    try:
        user = await get_services().reconciler.reconcile(params.to_identity())
    except Exception as e:
        return _format_error(e)

    if user is None:
        return f"Error: The record store rejected the user for '{params.email}'."
    return _format_user(user, params.response_format)


@mcp.tool(
    name="sprintdesk_user_reconcile_all",
    annotations=ToolAnnotations(
        title="Reconcile Federated Identities",
        readOnlyHint=False,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=False,
    ),
)
async def sprintdesk_user_reconcile_all(params: ReconcileAllInput) -> str:
    """
    Reconcile a batch of federated identities, continuing past failures.

    Args:
        params: ReconcileAllInput containing the identities

    Returns:
        Markdown summary with created, existing and failed counts
    """
    summary = await get_services().reconciler.reconcile_all(params.identities)
    return _format_summary_markdown(summary, "Reconciliation Summary")


@mcp.tool(
    name="sprintdesk_user_update_profile",
    annotations=ToolAnnotations(
        title="Update User Profile",
        readOnlyHint=False,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=True,
    ),
)
async def sprintdesk_user_update_profile(params: UpdateProfileInput) -> str:
    """
    Change a user's full name, work mode or role.

    Only the given fields change. A new full name is also sent to the identity
    provider as the display name; if that fails, the local change still stands.

    Args:
        params: UpdateProfileInput containing user_id, uid and the fields to change

    Returns:
        The updated user, or an error message

    Examples:
        - Go hybrid: params with user_id=3, uid="x7Gq2", work_mode="HYBRID"
        - Rename: params with user_id=3, uid="x7Gq2", full_name="Jane Doe"
    """
    identity = FederatedIdentity(uid=params.uid, email=params.email)
    patch = ProfileUpdate(full_name=params.full_name, work_mode=params.work_mode, role=params.role)

    try:
        user = await get_services().reconciler.update_profile(params.user_id, identity, patch)
    except Exception as e:
        return _format_error(e)

    if user is None:
        return f"Error: User {params.user_id} not found or the update was rejected."
    return f"User {params.user_id} updated.\n{_format_user_markdown(user)}"


@mcp.tool(
    name="sprintdesk_user_delete",
    annotations=ToolAnnotations(
        title="Delete User",
        readOnlyHint=False,
        destructiveHint=True,
        idempotentHint=False,
        openWorldHint=True,
    ),
)
async def sprintdesk_user_delete(params: DeleteUserInput) -> str:
    """
    Delete a user locally and then at the identity provider.

    The federated account is only deleted once the local record is gone.

    Args:
        params: DeleteUserInput containing user_id and uid

    Returns:
        Confirmation message, or an error message
    """
    identity = FederatedIdentity(uid=params.uid, email=params.email)

    try:
        deleted = await get_services().reconciler.delete_user(params.user_id, identity)
    except Exception as e:
        return f"User {params.user_id} deleted locally, but the federated account was not.\n{_format_error(e)}"

    if not deleted:
        return f"Error: Could not delete user {params.user_id}; the federated account was left untouched."
    return f"User {params.user_id} and federated account {params.uid} deleted."


@mcp.tool(
    name="sprintdesk_user_provision",
    annotations=ToolAnnotations(
        title="Provision Federated Accounts",
        readOnlyHint=False,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=True,
    ),
)
async def sprintdesk_user_provision(params: ProvisionUserInput) -> str:
    """
    Create identity provider accounts for local users that lack one.

    New accounts get a temporary password; a password reset email lets the
    user pick their own.

    Args:
        params: ProvisionUserInput containing an optional user_id and send_password_reset

    Returns:
        Confirmation for one user, or a summary when provisioning everyone

    Examples:
        - One user: params with user_id=3
        - Everyone: params with user_id=None, send_password_reset=False
    """
    provisioner = get_services().provisioner

    if params.user_id is None:
        summary = await provisioner.provision_all(params.send_password_reset)
        return _format_summary_markdown(summary, "Provisioning Summary")

    try:
        ok = await provisioner.provision_user(params.user_id, params.send_password_reset)
    except Exception as e:
        return _format_error(e)

    if ok:
        return f"User {params.user_id} has a federated account."
    return f"Error: Could not provision user {params.user_id}."
