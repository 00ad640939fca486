"""SQL implementation of UserRepository."""

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from signup_server.models.user import User


class SqlUserRepository:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def save(self, user: User) -> User:
        self._session.add(user)
        await self._session.flush()
        return user

    async def count(self) -> int:
        result = await self._session.execute(
            select(func.count()).select_from(User)
        )
        return int(result.scalar_one())
