"""In-memory user record store."""

import logging
from datetime import datetime, timezone
from typing import Any

from pydantic import ValidationError

from sprintdesk_mcp.models.user import UserModel

logger = logging.getLogger(__name__)


class InMemoryRecordStore:
    """
    Record store kept in process memory.

    Ids are assigned incrementally. Writes that would break uniqueness of
    username or email (case-insensitive), change a username, or fail
    validation are rejected by returning None.
    """

    def __init__(self, users: list[UserModel] | None = None) -> None:
        self._users: dict[int, UserModel] = {}
        self._next_id = 1
        for user in users or []:
            self._insert(user)

    def _insert(self, user: UserModel) -> UserModel:
        if user.id is None:
            user = user.model_copy(update={"id": self._next_id})
        self._users[user.id] = user
        self._next_id = max(self._next_id, user.id + 1)
        return user

    def _conflicts(self, data: dict[str, Any], ignore_id: int | None = None) -> bool:
        username = data.get("username")
        email = data.get("email")
        for user in self._users.values():
            if user.id == ignore_id:
                continue
            if username is not None and user.username == username:
                return True
            if email is not None and user.email.casefold() == str(email).casefold():
                return True
        return False

    async def get_all(self) -> list[UserModel]:
        return [user.model_copy() for user in self._users.values()]

    async def get_by_id(self, user_id: int) -> UserModel | None:
        user = self._users.get(user_id)
        return user.model_copy() if user else None

    async def create(self, data: dict[str, Any]) -> UserModel | None:
        if self._conflicts(data):
            logger.warning("Rejected user create: username or email already taken")
            return None

        now = datetime.now(timezone.utc).isoformat()
        payload = {**data, "created_at": now, "updated_at": now}
        payload.pop("id", None)
        try:
            user = UserModel.model_validate(payload)
        except ValidationError as e:
            logger.warning("Rejected user create: %s", e)
            return None
        return self._insert(user).model_copy()

    async def update(self, user_id: int, data: dict[str, Any]) -> UserModel | None:
        current = self._users.get(user_id)
        if current is None:
            return None
        if "username" in data and data["username"] != current.username:
            logger.warning("Rejected update of user %s: username is immutable", user_id)
            return None
        if self._conflicts({"email": data.get("email")}, ignore_id=user_id):
            logger.warning("Rejected update of user %s: email already taken", user_id)
            return None

        payload = {**current.model_dump(), **data, "id": user_id}
        if "updated_at" not in data:
            payload["updated_at"] = datetime.now(timezone.utc).isoformat()
        try:
            user = UserModel.model_validate(payload)
        except ValidationError as e:
            logger.warning("Rejected update of user %s: %s", user_id, e)
            return None
        self._users[user_id] = user
        return user.model_copy()

    async def delete(self, user_id: int) -> bool:
        return self._users.pop(user_id, None) is not None
