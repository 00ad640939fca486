"""User signup service."""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable
from typing import Any

from sqlalchemy.exc import SQLAlchemyError

from signup_server.constants import SAMPLE_USER
from signup_server.errors import PersistenceError
from signup_server.models.user import User
from signup_server.repositories.protocols import UserRepository

logger = logging.getLogger(__name__)


class UserService:
    def __init__(
        self,
        repo: UserRepository,
        commit: Callable[[], Awaitable[None]] | None = None,
    ) -> None:
        self._repo = repo
        self._commit = commit

    async def signup(
        self, payload: dict[str, Any] | None = None
    ) -> User:
        """Persist one user built from the sample record.

        Non-null ``payload`` fields replace the sample values. The
        write is committed before returning; driver errors are
        re-raised as PersistenceError carrying their text.
        """
        doc = dict(SAMPLE_USER)
        if payload:
            doc.update(
                {k: v for k, v in payload.items() if v is not None}
            )
        user = User.from_document(doc)
        try:
            saved = await self._repo.save(user)
            if self._commit is not None:
                await self._commit()
        except SQLAlchemyError as exc:
            logger.warning(
                "event=signup_failed error=%s", exc.__class__.__name__
            )
            raise PersistenceError(str(exc)) from exc
        logger.info("event=user_created id=%s", saved.id)
        return saved
