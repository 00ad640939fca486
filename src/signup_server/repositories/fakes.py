"""In-memory fake repositories for testing.

Dict-backed implementation of the repository protocol.
No SQLAlchemy, no I/O — instant operations for unit tests.
"""

from __future__ import annotations

import uuid

from signup_server.constants import USER_ID_HEX_LENGTH
from signup_server.models.user import User


class FakeUserRepository:
    """Dict-backed UserRepository for testing."""

    def __init__(self) -> None:
        self._store: dict[str, User] = {}

    async def save(self, user: User) -> User:
        if not user.id:
            user.id = uuid.uuid4().hex[:USER_ID_HEX_LENGTH]
        self._store[user.id] = user
        return user

    async def count(self) -> int:
        return len(self._store)

    @property
    def users(self) -> list[User]:
        return list(self._store.values())


class FailingUserRepository:
    """UserRepository whose writes always fail with ``error``."""

    def __init__(self, error: Exception) -> None:
        self._error = error

    async def save(self, user: User) -> User:
        raise self._error

    async def count(self) -> int:
        return 0
