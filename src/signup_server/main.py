"""FastAPI application factory."""

from fastapi import FastAPI

from signup_server import __version__
from signup_server.api.app_state import AppState
from signup_server.api.routes import pages, signup
from signup_server.config import Settings
from signup_server.database import Database


def create_app(settings: Settings, database: Database) -> FastAPI:
    """Build an application bound to an already connected database.

    Each call returns an independent app, so tests can run isolated
    instances side by side.
    """
    # Docs routes are disabled: every unmatched path belongs to the
    # root catch-all.
    app = FastAPI(
        title="signup-server",
        version=__version__,
        openapi_url=None,
        docs_url=None,
        redoc_url=None,
    )
    app.state.typed = AppState(settings=settings, database=database)

    # Registration order is match order: signup and the specific
    # prefixes come before the "/" catch-all inside pages.
    app.include_router(signup.router)
    app.include_router(pages.router)
    return app
