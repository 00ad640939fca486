"""FastAPI dependency injection for service access."""

from __future__ import annotations

from collections.abc import AsyncIterator

from fastapi import Request

from signup_server.api.app_state import AppState
from signup_server.config import Settings
from signup_server.repositories.user_repo import SqlUserRepository
from signup_server.services.user_service import UserService


def get_app_state(request: Request) -> AppState:
    return request.app.state.typed  # type: ignore[no-any-return]


def get_settings(request: Request) -> Settings:
    return get_app_state(request).settings


async def get_user_service(
    request: Request,
) -> AsyncIterator[UserService]:
    """Generator dep — session lives for entire request."""
    session_factory = get_app_state(request).database.session_factory
    async with session_factory() as session:
        yield UserService(
            SqlUserRepository(session), commit=session.commit
        )
