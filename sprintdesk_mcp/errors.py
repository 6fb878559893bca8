"""Exception types for Sprintdesk MCP.

Lookups that miss are not errors: record store reads return ``None`` and the
reconciler passes that through. Only the conditions below raise.
"""


class SprintdeskError(Exception):
    """Base class for all Sprintdesk errors."""


class IdentityError(SprintdeskError):
    """A federated identity cannot be reconciled (e.g. it has no email)."""


class ProviderError(SprintdeskError):
    """The federated identity provider rejected an operation.

    ``code`` carries the provider's own error code (for example
    ``auth/email-already-in-use``) so callers can branch on it.
    """

    def __init__(self, code: str, message: str = "") -> None:
        self.code = code
        self.message = message or code
        super().__init__(f"{code}: {self.message}")
