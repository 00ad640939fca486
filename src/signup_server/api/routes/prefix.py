"""Prefix routes: one handler for a path and everything beneath it.

Starlette matches routes in registration order, so a catch-all
registered last never shadows the more specific prefixes before it.
"""

from __future__ import annotations

import re
from typing import Any

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse
from fastapi.routing import APIRoute

from signup_server.constants import ANY_METHOD


class CaseInsensitiveRoute(APIRoute):
    """APIRoute whose path matches regardless of letter case."""

    def __init__(self, path: str, endpoint: Any, **kwargs: Any) -> None:
        super().__init__(path, endpoint, **kwargs)
        self.path_regex = re.compile(
            self.path_regex.pattern, re.IGNORECASE
        )


def add_prefix_route(
    router: APIRouter, prefix: str, text: str
) -> None:
    """Answer ``text`` for ``prefix`` and any sub-path of it.

    Matching is on segment boundaries and ignores case: ``/test``
    covers ``/test``, ``/TEST`` and ``/test/a`` but not ``/testing``.
    Every method is accepted.
    """

    async def respond() -> PlainTextResponse:
        return PlainTextResponse(text)

    base = prefix.rstrip("/")
    name = base.strip("/") or "root"
    paths = [base] if base else []
    paths.append(base + "/{subpath:path}")
    for path in paths:
        router.add_api_route(
            path,
            respond,
            methods=list(ANY_METHOD),
            response_class=PlainTextResponse,
            name=f"{name}_prefix",
            route_class_override=CaseInsensitiveRoute,
        )
