"""Create federated accounts for local users that do not have one yet."""

import logging
import secrets

from sprintdesk_mcp.config import Settings, get_settings
from sprintdesk_mcp.identity.protocols import IdentityProvider, RecordStore
from sprintdesk_mcp.models.user import FederatedIdentity, ReconcileSummary, UserModel

logger = logging.getLogger(__name__)


class FederatedProvisioner:
    """Pushes local users to the identity provider."""

    def __init__(
        self,
        record_store: RecordStore,
        identity_provider: IdentityProvider,
        settings: Settings | None = None,
    ) -> None:
        self.record_store = record_store
        self.identity_provider = identity_provider
        self.settings = settings or get_settings()

    def temporary_password(self) -> str:
        return f"{self.settings.temp_password_prefix}{secrets.token_urlsafe(8)}!"

    async def create_federated_account(self, user: UserModel, send_password_reset: bool = True) -> FederatedIdentity | None:
        """
        Create a federated account for ``user`` with a temporary password.

        The account's display name is set to the user's full name (or
        username). A password reset is sent so the user can choose their own
        password.

        Returns:
            The new identity, or None if the provider returned nothing

        Raises:
            ProviderError: If the provider rejects the account, e.g. on a
                duplicate email
        """
        identity = await self.identity_provider.create_with_password(user, self.temporary_password())
        if identity is None:
            return None

        await self.identity_provider.update_display_name(identity, user.full_name or user.username)
        if send_password_reset:
            await self.identity_provider.send_password_reset(user.email)
        logger.info("Created federated account for %s", user.email)
        return identity

    async def provision_user(self, user_id: int, send_password_reset: bool = True) -> bool:
        """Make sure one local user has a federated account."""
        user = await self.record_store.get_by_id(user_id)
        if user is None or not user.email:
            logger.warning("User %s not found or has no email", user_id)
            return False

        if await self.identity_provider.exists_by_email(user.email):
            logger.info("User %s already has a federated account", user.email)
            return True

        return await self.create_federated_account(user, send_password_reset) is not None

    async def provision_all(self, send_password_reset: bool = False) -> ReconcileSummary:
        """
        Make sure every local user has a federated account.

        Users without an email are skipped. Per-user failures are counted in
        ``failed`` and the run carries on; nothing is raised.
        """
        summary = ReconcileSummary()
        try:
            users = await self.record_store.get_all()
        except Exception:
            logger.error("Could not list local users for provisioning", exc_info=True)
            return summary

        for user in users:
            if not user.email:
                logger.warning("User %s has no email, skipping", user.id)
                continue
            try:
                if await self.identity_provider.exists_by_email(user.email):
                    summary.existing += 1
                    continue
                identity = await self.create_federated_account(user, send_password_reset)
            except Exception:
                logger.warning("Failed to provision federated account for %s", user.email, exc_info=True)
                summary.failed += 1
                continue

            if identity is None:
                summary.failed += 1
            else:
                summary.created += 1

        return summary
