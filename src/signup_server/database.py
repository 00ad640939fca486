"""Database connection bootstrap.

connect() is the startup gate: the HTTP listener is only built once
it has returned a Database.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
)

from signup_server.config import Settings, create_app_engine
from signup_server.errors import DatabaseConnectionError
from signup_server.models.base import Base

logger = logging.getLogger(__name__)


@dataclass
class Database:
    """Connected engine plus the per-request session factory."""

    engine: AsyncEngine
    session_factory: async_sessionmaker[AsyncSession]

    async def dispose(self) -> None:
        await self.engine.dispose()


class DatabaseConnector:
    def __init__(self, settings: Settings) -> None:
        self._settings = settings

    async def connect(self) -> Database:
        """Open the database and make sure the users table exists.

        Raises DatabaseConnectionError with the driver's message on
        any failure; the engine is disposed before raising.
        """
        try:
            engine = create_app_engine(
                self._settings.database_url,
                echo=self._settings.debug_mode,
            )
        except (SQLAlchemyError, ImportError) as exc:
            raise DatabaseConnectionError(str(exc)) from exc

        try:
            async with engine.begin() as conn:
                await conn.run_sync(Base.metadata.create_all)
        except (SQLAlchemyError, OSError) as exc:
            await engine.dispose()
            raise DatabaseConnectionError(str(exc)) from exc

        logger.info(
            "event=db_connected url=%s",
            engine.url.render_as_string(hide_password=True),
        )
        return Database(
            engine=engine,
            session_factory=async_sessionmaker(
                engine, expire_on_commit=False
            ),
        )
