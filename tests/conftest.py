"""Shared test fixtures — settings, databases and HTTP clients."""

from collections.abc import AsyncIterator
from pathlib import Path
from unittest.mock import MagicMock

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine

from signup_server.api.dependencies import get_user_service
from signup_server.config import Settings
from signup_server.database import Database, DatabaseConnector
from signup_server.main import create_app
from signup_server.models.base import Base
from signup_server.repositories.fakes import FakeUserRepository
from signup_server.services.user_service import UserService


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    """Settings pointing at a throwaway SQLite file."""
    return Settings(database_url=f"sqlite:///{tmp_path / 'users.db'}")


@pytest.fixture
async def database(settings: Settings) -> AsyncIterator[Database]:
    """A real connected database under tmp_path."""
    db = await DatabaseConnector(settings).connect()
    yield db
    await db.dispose()


@pytest.fixture
def fake_repo() -> FakeUserRepository:
    return FakeUserRepository()


@pytest.fixture
def fake_app_factory(settings: Settings):
    """Build apps whose user service is backed by a given repo."""

    def _build(repo: object, app_settings: Settings | None = None) -> FastAPI:
        app = create_app(app_settings or settings, MagicMock(spec=Database))
        app.dependency_overrides[get_user_service] = lambda: UserService(
            repo  # type: ignore[arg-type]
        )
        return app

    return _build


@pytest.fixture
async def client(
    fake_app_factory, fake_repo: FakeUserRepository
) -> AsyncIterator[AsyncClient]:
    """Test client with a fake repository (no database)."""
    app = fake_app_factory(fake_repo)
    transport = ASGITransport(app=app)
    async with AsyncClient(
        transport=transport, base_url="http://test"
    ) as c:
        yield c


@pytest.fixture
async def db_client(
    settings: Settings, database: Database
) -> AsyncIterator[AsyncClient]:
    """Test client wired to a real SQLite database."""
    app = create_app(settings, database)
    transport = ASGITransport(app=app)
    async with AsyncClient(
        transport=transport, base_url="http://test"
    ) as c:
        yield c


@pytest.fixture
async def engine():
    """In-memory engine with the schema created."""
    engine = create_async_engine("sqlite+aiosqlite:///:memory:")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
async def session(engine):
    """Session with connection-level rollback.

    Wraps each test in a connection-level transaction so that
    even ``session.commit()`` calls inside tests are rolled
    back at teardown.
    """
    async with engine.connect() as connection:
        transaction = await connection.begin()
        session = AsyncSession(
            bind=connection, expire_on_commit=False
        )
        yield session
        await session.close()
        await transaction.rollback()
