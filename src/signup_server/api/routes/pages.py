"""Fixed text routes."""

from fastapi import APIRouter

from signup_server.api.routes.prefix import add_prefix_route
from signup_server.constants import (
    HOME_ROUTE_TEXT,
    ROOT_ROUTE_TEXT,
    TEST_ROUTE_TEXT,
)

router = APIRouter(tags=["pages"])

# Declared order is match order; "/" must stay last.
add_prefix_route(router, "/test", TEST_ROUTE_TEXT)
add_prefix_route(router, "/home", HOME_ROUTE_TEXT)
add_prefix_route(router, "/", ROOT_ROUTE_TEXT)
