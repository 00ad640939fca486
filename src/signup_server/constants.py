"""Shared constants — route texts, defaults and the sample signup record."""

from __future__ import annotations

from enum import StrEnum
from typing import Any

DEFAULT_PORT = 7777


class SignupSource(StrEnum):
    """Where POST /signup takes its field values from."""

    FIXED = "fixed"
    BODY = "body"


# ── Response texts ───────────────────────────────────────

TEST_ROUTE_TEXT = "responsing from test route"
HOME_ROUTE_TEXT = "Responding from home route"
ROOT_ROUTE_TEXT = "Responding from root route"
SIGNUP_OK_TEXT = "User created successfully"
SIGNUP_ERROR_PREFIX = "Error saving the user: "

# Every method a prefix route answers, like a mount with no verb filter.
ANY_METHOD = ("GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS")

# Record written by POST /signup when the request body is ignored.
SAMPLE_USER: dict[str, Any] = {
    "firstName": "Virat",
    "lastName": "Kohli",
    "emailId": "virat.kohli@gmail.com",
    "password": "12345678",
    "age": 35,
    "gender": "Male",
}

USER_ID_HEX_LENGTH = 32
