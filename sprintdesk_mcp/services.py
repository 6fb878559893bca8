"""Process-wide collaborator handle.

``configure_services`` is called once at process start (tests call it with
fakes); tools fetch collaborators through ``get_services``.
"""

import logging
from dataclasses import dataclass

from sprintdesk_mcp.config import Settings, get_settings
from sprintdesk_mcp.identity.protocols import DisabledIdentityProvider, IdentityProvider, RecordStore
from sprintdesk_mcp.identity.provisioning import FederatedProvisioner
from sprintdesk_mcp.identity.reconciler import IdentityReconciler
from sprintdesk_mcp.notifications.observer import TaskStatusNotifier
from sprintdesk_mcp.notifications.senders import NotificationManager, NotificationSender, sender_for_channel
from sprintdesk_mcp.storage.memory import InMemoryRecordStore

logger = logging.getLogger(__name__)


@dataclass
class Services:
    """Collaborators shared by every tool call."""

    settings: Settings
    record_store: RecordStore
    identity_provider: IdentityProvider
    notifications: NotificationManager

    @property
    def reconciler(self) -> IdentityReconciler:
        return IdentityReconciler(self.record_store, self.identity_provider, self.settings)

    @property
    def provisioner(self) -> FederatedProvisioner:
        return FederatedProvisioner(self.record_store, self.identity_provider, self.settings)

    @property
    def status_notifier(self) -> TaskStatusNotifier:
        return TaskStatusNotifier(self.notifications)


_services: Services | None = None


def configure_services(
    record_store: RecordStore | None = None,
    identity_provider: IdentityProvider | None = None,
    sender: NotificationSender | None = None,
    settings: Settings | None = None,
) -> Services:
    """Build and install the process-wide services, filling in defaults."""
    global _services

    settings = settings or get_settings()
    if identity_provider is None:
        logger.info("No identity provider configured; federated operations will be rejected")

    _services = Services(
        settings=settings,
        record_store=record_store or InMemoryRecordStore(),
        identity_provider=identity_provider or DisabledIdentityProvider(),
        notifications=NotificationManager(sender or sender_for_channel(settings.notification_channel)),
    )
    return _services


def get_services() -> Services:
    if _services is None:
        return configure_services()
    return _services


def reset_services() -> None:
    global _services
    _services = None
