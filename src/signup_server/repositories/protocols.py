"""Protocol-based repository interfaces.

SQL implementations satisfy these protocols structurally (no inheritance).
Test doubles can be plain classes or mocks matching the same signature.
"""

from typing import Protocol

from signup_server.models.user import User


class UserRepository(Protocol):
    async def save(self, user: User) -> User: ...
    async def count(self) -> int: ...
