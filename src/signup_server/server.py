"""Connect-then-serve process lifecycle."""

from __future__ import annotations

import logging

import uvicorn

from signup_server.config import Settings
from signup_server.database import DatabaseConnector
from signup_server.errors import DatabaseConnectionError
from signup_server.main import create_app

logger = logging.getLogger(__name__)


class ListeningServer(uvicorn.Server):
    """uvicorn server that reports once its sockets are bound."""

    async def startup(self, sockets=None) -> None:  # type: ignore[no-untyped-def]
        await super().startup(sockets=sockets)
        if self.started:
            logger.info(
                "Server is running on port %d", self.config.port
            )


def build_server(app: object, settings: Settings) -> ListeningServer:
    config = uvicorn.Config(
        app,  # type: ignore[arg-type]
        host=settings.host,
        port=settings.port,
        log_config=None,
        log_level=settings.log_level.lower(),
    )
    return ListeningServer(config)


async def serve(
    settings: Settings,
    *,
    connector: DatabaseConnector | None = None,
) -> int:
    """Connect to the database, then listen until shutdown.

    Returns the process exit code: 1 when the connection fails, in
    which case no listener is created.
    """
    connector = connector or DatabaseConnector(settings)
    try:
        database = await connector.connect()
    except DatabaseConnectionError as exc:
        logger.error("event=db_connect_failed error=%s", exc)
        return 1

    try:
        app = create_app(settings, database)
        server = build_server(app, settings)
        await server.serve()
    finally:
        await database.dispose()
    return 0
