"""
CORS middleware configuration
"""
from fastapi import FastAPI, Request, Response

from portfolio_api import config


def cors_headers() -> dict:
    return {
        "Access-Control-Allow-Origin": config.CORS_ALLOW_ORIGIN,
        "Access-Control-Allow-Methods": ",".join(config.CORS_ALLOW_METHODS),
        "Access-Control-Allow-Headers": ", ".join(config.CORS_ALLOW_HEADERS),
    }


def setup_cors(app: FastAPI):
    """
    Setup CORS handling for the FastAPI app

    Every response gets the CORS headers, whether or not the request sent an
    Origin header, and OPTIONS is answered with an empty 200 without reaching
    a route.

    Usage:
        from portfolio_api.middleware.cors import setup_cors
        setup_cors(app)
    """

    @app.middleware("http")
    async def cors_middleware(request: Request, call_next):
        if request.method == "OPTIONS":
            response = Response(status_code=200)
        else:
            response = await call_next(request)
        response.headers.update(cors_headers())
        return response
