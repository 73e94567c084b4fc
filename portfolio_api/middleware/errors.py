"""
Last-resort error handling
Anything a handler didn't turn into an HTTP error becomes a JSON 500.
"""
import logging
import traceback

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from portfolio_api import config

logger = logging.getLogger(__name__)


def internal_error_response(exc: Exception) -> JSONResponse:
    content = {"error": "Internal Server Error", "details": str(exc)}
    if config.DEBUG:
        content["stack"] = "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))
    return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content=content)


def setup_error_handling(app: FastAPI):

    @app.middleware("http")
    async def error_middleware(request: Request, call_next):
        try:
            return await call_next(request)
        except Exception as e:
            logger.error(f"Unhandled error on {request.method} {request.url.path}: {str(e)}", exc_info=True)
            return internal_error_response(e)
