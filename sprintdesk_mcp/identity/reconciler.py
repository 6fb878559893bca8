"""Keep the local user store in step with the federated identity provider.

The local record store is the source of truth. The two stores are updated one
after the other, never atomically:

- profile changes are written locally first and mirrored to the provider on a
  best-effort basis;
- deletions remove the local record first and only then the federated
  account, so a local record is never left without its identity.

Concurrent ``reconcile`` calls for the same email are not deduplicated and can
race to create two local records.
"""

import logging
from collections.abc import Iterable
from datetime import datetime, timezone
from typing import Any

from sprintdesk_mcp.config import Settings, get_settings
from sprintdesk_mcp.errors import IdentityError
from sprintdesk_mcp.identity.protocols import IdentityProvider, RecordStore
from sprintdesk_mcp.models.user import FederatedIdentity, ProfileUpdate, ReconcileSummary, UserModel

logger = logging.getLogger(__name__)


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


def derive_username(identity: FederatedIdentity) -> str:
    """Email local-part, or the first 8 characters of the external id."""
    local_part = identity.email.split("@")[0] if identity.email else ""
    return local_part or identity.uid[:8]


class IdentityReconciler:
    """Reconciles federated identities with local user records by email."""

    def __init__(
        self,
        record_store: RecordStore,
        identity_provider: IdentityProvider,
        settings: Settings | None = None,
    ) -> None:
        self.record_store = record_store
        self.identity_provider = identity_provider
        self.settings = settings or get_settings()

    async def find_local_user_by_email(self, email: str) -> UserModel | None:
        """Return the first local user whose email matches, ignoring case."""
        wanted = email.casefold()
        for user in await self.record_store.get_all():
            if user.email.casefold() == wanted:
                return user
        return None

    async def reconcile(self, identity: FederatedIdentity) -> UserModel | None:
        """
        Create or refresh the local user matching a federated identity.

        An existing user gets a fresh ``last_login``/``updated_at`` and is
        re-activated; its full name is only filled from the display name when
        empty, and role and work mode are left alone. Otherwise a new user is
        created with the configured default role and work mode.

        Args:
            identity: Federated identity to reconcile

        Returns:
            The stored user, or None if the record store rejected the write

        Raises:
            IdentityError: If the identity has no email
        """
        user, _ = await self._reconcile(identity)
        return user

    async def _reconcile(self, identity: FederatedIdentity) -> tuple[UserModel | None, bool]:
        """Reconcile one identity; the flag tells whether a local user already existed."""
        if not identity.email:
            raise IdentityError(f"Federated identity {identity.uid} has no email")

        existing = await self.find_local_user_by_email(identity.email)
        if existing is not None:
            return await self._refresh_existing(existing, identity), True
        return await self._create_from_identity(identity), False

    async def _refresh_existing(self, user: UserModel, identity: FederatedIdentity) -> UserModel | None:
        now = _now()
        updates: dict[str, Any] = {"last_login": now, "updated_at": now, "active": True}
        if identity.display_name and not user.full_name:
            updates["full_name"] = identity.display_name

        if user.id is None:
            logger.warning("Matched user %s has no id; refresh for %s not persisted", user.username, identity.uid)
            return user.model_copy(update=updates)

        updated = await self.record_store.update(user.id, updates)
        if updated is None:
            logger.warning("Record store rejected refresh of user %s", user.id)
        return updated

    async def _create_from_identity(self, identity: FederatedIdentity) -> UserModel | None:
        username = derive_username(identity)
        data = {
            "username": username,
            "email": identity.email,
            "full_name": identity.display_name or username,
            "role": self.settings.default_role,
            "work_mode": self.settings.default_work_mode,
            "active": True,
            "last_login": _now(),
        }
        created = await self.record_store.create(data)
        if created is None:
            logger.warning("Record store rejected new user for %s", identity.email)
        else:
            logger.info("Created local user %s for %s", created.id, identity.email)
        return created

    async def update_profile(
        self,
        user_id: int,
        identity: FederatedIdentity,
        patch: ProfileUpdate,
    ) -> UserModel | None:
        """
        Apply a partial profile change locally and mirror the name.

        Only fields set on ``patch`` are written. When ``full_name`` is set and
        the local write succeeded, the provider's display name is updated too;
        a failure there is logged and does not undo the local change.

        Args:
            user_id: Local user id
            identity: The user's federated identity
            patch: Fields to change

        Returns:
            The updated user, or None if the record store rejected the write
        """
        updates: dict[str, Any] = patch.model_dump(exclude_none=True)
        updates["updated_at"] = _now()

        updated = await self.record_store.update(user_id, updates)
        if updated is None:
            logger.warning("Record store rejected profile update of user %s", user_id)
            return None

        if patch.full_name:
            try:
                await self.identity_provider.update_display_name(identity, patch.full_name)
            except Exception:
                logger.warning(
                    "Could not mirror display name of user %s to identity %s",
                    user_id,
                    identity.uid,
                    exc_info=True,
                )
        return updated

    async def delete_user(self, user_id: int, identity: FederatedIdentity) -> bool:
        """
        Delete the local user, then its federated identity.

        The federated identity is only deleted once the local delete has
        succeeded. A record store that raises counts as a failed local
        delete. Provider errors propagate to the caller.

        Returns:
            True if the local record was deleted, False otherwise
        """
        try:
            deleted = await self.record_store.delete(user_id)
        except Exception:
            logger.warning("Local delete of user %s raised; identity %s left untouched", user_id, identity.uid, exc_info=True)
            return False

        if not deleted:
            logger.warning("Local delete of user %s failed; identity %s left untouched", user_id, identity.uid)
            return False

        await self.identity_provider.delete(identity)
        logger.info("Deleted user %s and identity %s", user_id, identity.uid)
        return True

    async def reconcile_all(self, identities: Iterable[FederatedIdentity]) -> ReconcileSummary:
        """
        Reconcile every identity, counting outcomes instead of raising.

        Identities that already had a local user count as ``existing``, new
        local users as ``created``, and anything that raised or was rejected by
        the store as ``failed``.
        """
        summary = ReconcileSummary()
        for identity in identities:
            try:
                user, existed = await self._reconcile(identity)
            except Exception:
                logger.warning("Failed to reconcile identity %s", identity.uid, exc_info=True)
                summary.failed += 1
                continue

            if user is None:
                summary.failed += 1
            elif existed:
                summary.existing += 1
            else:
                summary.created += 1

        logger.info(
            "Reconciled %d identities: %d created, %d existing, %d failed",
            summary.total,
            summary.created,
            summary.existing,
            summary.failed,
        )
        return summary
