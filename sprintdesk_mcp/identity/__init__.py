"""Federated identity reconciliation."""

from sprintdesk_mcp.identity.protocols import DisabledIdentityProvider, IdentityProvider, RecordStore
from sprintdesk_mcp.identity.provisioning import FederatedProvisioner
from sprintdesk_mcp.identity.reconciler import IdentityReconciler, derive_username

__all__ = [
    "RecordStore",
    "IdentityProvider",
    "DisabledIdentityProvider",
    "IdentityReconciler",
    "FederatedProvisioner",
    "derive_username",
]
