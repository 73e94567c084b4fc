"""
Cache-Control headers
Public content may be cached by the edge; everything else must not be.
"""
from fastapi import FastAPI, Request

from portfolio_api import config
from portfolio_api.apps.resources.registry import PUBLIC_RESOURCES

PUBLIC_CACHE = "public, s-maxage=3600, stale-while-revalidate=600"
NO_STORE = "no-store, max-age=0, must-revalidate"
UNCACHED_ACTIONS = frozenset({"comments", "like", "view"})


def cache_control_for(request: Request, status_code: int = 200) -> str:
    """Header value for a response, using the route the router resolved; errors are never cached"""
    route = getattr(request.state, "route", None)
    if (
        route is not None
        and request.method == "GET"
        and status_code < 400
        and route.resource in PUBLIC_RESOURCES
        and config.is_production()
        and "authorization" not in request.headers
        and route.action not in UNCACHED_ACTIONS
    ):
        return PUBLIC_CACHE
    return NO_STORE


def setup_cache_headers(app: FastAPI):

    @app.middleware("http")
    async def cache_control_middleware(request: Request, call_next):
        response = await call_next(request)
        response.headers["Cache-Control"] = cache_control_for(request, response.status_code)
        return response
