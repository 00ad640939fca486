"""SQLAlchemy ORM models."""

from signup_server.models.base import Base
from signup_server.models.user import User

__all__ = [
    "Base",
    "User",
]
