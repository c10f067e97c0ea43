# FastAPI application serving the static greeting routes
from types import MappingProxyType
from typing import Mapping, Tuple

from fastapi import FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import PlainTextResponse
from pydantic import BaseModel, ConfigDict
from starlette.exceptions import HTTPException as StarletteHTTPException

from greeter.utils.logging_utils import get_logger

logger = get_logger(__name__)


class StaticRoute(BaseModel):
    """A fixed response served for one (method, path) pair."""

    model_config = ConfigDict(frozen=True)

    method: str
    path: str
    body: str
    media_type: str = "text/plain"


def _route_table(*routes: StaticRoute) -> Mapping[Tuple[str, str], StaticRoute]:
    return MappingProxyType({(route.method, route.path): route for route in routes})


ROUTES = _route_table(
    StaticRoute(method="GET", path="/", body="Hello, World!\n"),
    StaticRoute(method="GET", path="/hello", body="Hello, World!\n"),
    StaticRoute(method="GET", path="/evening", body="Good evening"),
)


def _make_handler(route: StaticRoute):
    async def handler() -> PlainTextResponse:
        return PlainTextResponse(route.body, media_type=route.media_type)

    handler.__name__ = f"{route.method.lower()}_{route.path.strip('/') or 'root'}"
    return handler


async def _not_found_for_unregistered_method(
    request: Request, exc: StarletteHTTPException
):
    """Answer a known path with an unregistered method like an unknown path."""
    if exc.status_code == 405:
        exc = StarletteHTTPException(status_code=404)
    return await http_exception_handler(request, exc)


def create_app(routes: Mapping[Tuple[str, str], StaticRoute] = ROUTES) -> FastAPI:
    """Build the application with one handler per route table entry."""
    # Paths match exactly: no generated docs, no trailing-slash redirects
    app = FastAPI(
        title="Greeter",
        description="Serves fixed plain-text greetings",
        version="0.1.0",
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
        redirect_slashes=False,
    )

    for (method, path), route in routes.items():
        app.add_api_route(
            path,
            _make_handler(route),
            methods=[method],
            response_class=PlainTextResponse,
        )
        logger.debug(f"Registered {method} {path}")

    app.add_exception_handler(StarletteHTTPException, _not_found_for_unregistered_method)
    return app


app = create_app()
