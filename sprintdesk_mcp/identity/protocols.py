"""Collaborator interfaces consumed by the identity services."""

from typing import Any, Protocol

from sprintdesk_mcp.errors import ProviderError
from sprintdesk_mcp.models.user import FederatedIdentity, UserModel


class RecordStore(Protocol):
    """Local user store. Misses and rejected writes return ``None``/``False``."""

    async def get_all(self) -> list[UserModel]: ...

    async def get_by_id(self, user_id: int) -> UserModel | None: ...

    async def create(self, data: dict[str, Any]) -> UserModel | None: ...

    async def update(self, user_id: int, data: dict[str, Any]) -> UserModel | None: ...

    async def delete(self, user_id: int) -> bool: ...


class IdentityProvider(Protocol):
    """External identity provider. Rejections raise ``ProviderError``."""

    async def exists_by_email(self, email: str) -> bool: ...

    async def create_with_password(self, user: UserModel, password: str) -> FederatedIdentity | None: ...

    async def update_display_name(self, identity: FederatedIdentity, name: str) -> None: ...

    async def send_password_reset(self, email: str) -> None: ...

    async def delete(self, identity: FederatedIdentity) -> None: ...


class DisabledIdentityProvider:
    """Provider used when none is configured; every call is rejected."""

    code = "provider/not-configured"

    def _reject(self) -> ProviderError:
        return ProviderError(self.code, "No identity provider is configured")

    async def exists_by_email(self, email: str) -> bool:
        raise self._reject()

    async def create_with_password(self, user: UserModel, password: str) -> FederatedIdentity | None:
        raise self._reject()

    async def update_display_name(self, identity: FederatedIdentity, name: str) -> None:
        raise self._reject()

    async def send_password_reset(self, email: str) -> None:
        raise self._reject()

    async def delete(self, identity: FederatedIdentity) -> None:
        raise self._reject()
