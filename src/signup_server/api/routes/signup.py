"""User signup route."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Request
from fastapi.responses import PlainTextResponse
from pydantic import ValidationError

from signup_server.api.dependencies import get_settings, get_user_service
from signup_server.api.routes.prefix import CaseInsensitiveRoute
from signup_server.api.schemas import SignupPayload
from signup_server.config import Settings
from signup_server.constants import (
    SIGNUP_ERROR_PREFIX,
    SIGNUP_OK_TEXT,
    SignupSource,
)
from signup_server.errors import PersistenceError
from signup_server.services.user_service import UserService

router = APIRouter(tags=["users"], route_class=CaseInsensitiveRoute)


@router.post("/signup", response_class=PlainTextResponse)
async def signup(
    request: Request,
    settings: Settings = Depends(get_settings),
    service: UserService = Depends(get_user_service),
) -> PlainTextResponse:
    """Create one user record.

    With the default ``fixed`` source the body is ignored and the
    sample record is written.
    """
    payload = None
    if settings.signup_source == SignupSource.BODY:
        raw = await request.body()
        if raw.strip():
            try:
                payload = SignupPayload.model_validate_json(
                    raw
                ).model_dump()
            except ValidationError as exc:
                return PlainTextResponse(
                    SIGNUP_ERROR_PREFIX + str(exc), status_code=400
                )

    try:
        await service.signup(payload)
    except PersistenceError as exc:
        return PlainTextResponse(
            SIGNUP_ERROR_PREFIX + str(exc), status_code=400
        )
    return PlainTextResponse(SIGNUP_OK_TEXT)
