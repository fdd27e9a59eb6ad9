"""
Business logic for users.

The ``UserService`` keeps users in the in‑memory store and provides
the basic CRUD operations.  Lookups are linear scans over the list.

New ids are ``len(users) + 1``.  After a delete this can hand out an
id that is still in use; lookups then return the first match.
"""

import logging
import re
from typing import List, Optional

from rest_basics_api.app.core.errors import UserNotFoundError
from rest_basics_api.app.core.store import get_store
from rest_basics_api.app.schemas.user import UserCreate, UserRead, UserUpdate

logger = logging.getLogger(__name__)

_LEADING_INT = re.compile(r"\s*([+-]?\d+)", re.ASCII)


def parse_user_id(raw: str) -> Optional[int]:
    """Read a user id from a path segment.

    Only the leading integer counts: ``"1abc"`` and ``"2.0"`` give 1 and
    2, surrounding whitespace and a sign are allowed.  Returns ``None``
    when the segment does not start with ASCII digits; such an id can
    never match a stored user.
    """
    match = _LEADING_INT.match(raw)
    if match is None:
        return None
    return int(match.group(1))


class UserService:
    """Service for the in‑memory user directory."""

    @classmethod
    def _find(cls, user_id: Optional[int]) -> Optional[dict]:
        if user_id is None:
            return None
        return next((u for u in get_store().users if u["id"] == user_id), None)

    @classmethod
    async def list_users(cls) -> List[UserRead]:
        """Return all users in insertion order."""
        return [UserRead(**user) for user in get_store().users]

    @classmethod
    async def get_user(cls, user_id: Optional[int]) -> UserRead:
        """Return the user with ``user_id`` or raise ``UserNotFoundError``."""
        user = cls._find(user_id)
        if user is None:
            raise UserNotFoundError()
        return UserRead(**user)

    @classmethod
    async def create_user(cls, data: UserCreate) -> UserRead:
        """Append a new user and return it."""
        users = get_store().users
        user = {"id": len(users) + 1, "name": data.name}
        users.append(user)
        logger.info("Created user %s (%s)", user["id"], user["name"])
        return UserRead(**user)

    @classmethod
    async def update_user(cls, user_id: Optional[int], data: UserUpdate) -> UserRead:
        """Rename an existing user.

        Raises ``UserNotFoundError`` if no user has ``user_id``.
        """
        user = cls._find(user_id)
        if user is None:
            logger.warning("Update of unknown user %s", user_id)
            raise UserNotFoundError()
        user["name"] = data.name
        logger.info("Renamed user %s to %s", user_id, data.name)
        return UserRead(**user)

    @classmethod
    async def delete_user(cls, user_id: Optional[int]) -> int:
        """Remove every user with ``user_id``.

        Deleting an unknown id is not an error.  Returns the number of
        removed records.
        """
        store = get_store()
        before = len(store.users)
        store.users = [u for u in store.users if u["id"] != user_id]
        removed = before - len(store.users)
        logger.info("Deleted user %s (%d record(s) removed)", user_id, removed)
        return removed
