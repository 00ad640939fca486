"""Environment-based configuration and engine construction."""

from __future__ import annotations

import logging

from pydantic import field_validator
from pydantic_settings import BaseSettings
from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine

from signup_server.constants import DEFAULT_PORT, SignupSource

logger = logging.getLogger(__name__)

_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class Settings(BaseSettings):
    """Reads from .env file and environment variables."""

    # Database
    database_url: str = "sqlite:///signup_server.db"

    # Listener
    host: str = "0.0.0.0"
    port: int = DEFAULT_PORT

    # Logging
    log_level: str = "INFO"
    debug_mode: bool = False

    # Signup
    signup_source: SignupSource = SignupSource.FIXED

    @field_validator("port")
    @classmethod
    def _validate_port(cls, v: int) -> int:
        if not 0 < v < 65536:
            raise ValueError("port must be between 1 and 65535")
        return v

    @field_validator("log_level")
    @classmethod
    def _validate_log_level(cls, v: str) -> str:
        level = v.strip().upper()
        if level not in _LOG_LEVELS:
            raise ValueError(
                f"log_level must be one of {', '.join(_LOG_LEVELS)}"
            )
        return level

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "env_prefix": "",
        "extra": "ignore",
    }


def create_app_engine(
    url: str, *, echo: bool = False
) -> AsyncEngine:
    """Create the async engine for ``url``.

    ``sqlite:///`` URLs are rewritten to ``sqlite+aiosqlite:///``.
    File-backed SQLite databases get WAL journal mode through a
    pool-connect listener, so it fires once per DBAPI connection.
    """
    if url.startswith("sqlite:///"):
        db_url = "sqlite+aiosqlite:///" + url[len("sqlite:///"):]
    else:
        db_url = url
    engine = create_async_engine(db_url, echo=echo)

    if engine.dialect.name == "sqlite" and ":memory:" not in db_url:

        @event.listens_for(engine.sync_engine, "connect")
        def _set_wal_mode(
            dbapi_conn: object,
            _connection_record: object,
        ) -> None:
            cursor = dbapi_conn.cursor()  # type: ignore[attr-defined]
            cursor.execute("PRAGMA journal_mode=WAL")
            cursor.close()

    return engine
