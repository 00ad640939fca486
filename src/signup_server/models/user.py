"""User ORM model.

Mirrors a schemaless user document: every field is optional and
nothing but the identifier is unique or indexed. The password is
stored exactly as given (no hashing).
"""

import uuid
from typing import Any

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from signup_server.models.base import Base


class User(Base):
    __tablename__ = "users"

    id: Mapped[str] = mapped_column(
        String(32), primary_key=True, default=lambda: uuid.uuid4().hex
    )
    first_name: Mapped[str | None] = mapped_column(
        "firstName", String, nullable=True
    )
    last_name: Mapped[str | None] = mapped_column(
        "lastName", String, nullable=True
    )
    email_id: Mapped[str | None] = mapped_column(
        "emailId", String, nullable=True
    )
    password: Mapped[str | None] = mapped_column(String, nullable=True)
    age: Mapped[int | None] = mapped_column(Integer, nullable=True)
    gender: Mapped[str | None] = mapped_column(String, nullable=True)

    @classmethod
    def from_document(cls, doc: dict[str, Any]) -> "User":
        """Build a User from camelCase document fields."""
        return cls(
            first_name=doc.get("firstName"),
            last_name=doc.get("lastName"),
            email_id=doc.get("emailId"),
            password=doc.get("password"),
            age=doc.get("age"),
            gender=doc.get("gender"),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "firstName": self.first_name,
            "lastName": self.last_name,
            "emailId": self.email_id,
            "password": self.password,
            "age": self.age,
            "gender": self.gender,
        }
