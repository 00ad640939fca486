"""Typed application state — replaces untyped getattr() access."""

from __future__ import annotations

from dataclasses import dataclass

from signup_server.config import Settings
from signup_server.database import Database


@dataclass
class AppState:
    """Typed container for app.state attributes."""

    settings: Settings
    database: Database
