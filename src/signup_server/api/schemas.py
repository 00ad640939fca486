"""Request schemas for the HTTP API."""

from pydantic import BaseModel, ConfigDict


class SignupPayload(BaseModel):
    """JSON body for POST /signup when signup_source is ``body``.

    Every field is optional; missing ones keep the sample values.
    """

    model_config = ConfigDict(extra="ignore")

    firstName: str | None = None
    lastName: str | None = None
    emailId: str | None = None
    password: str | None = None
    age: int | None = None
    gender: str | None = None
