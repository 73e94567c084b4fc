"""
Shared dependencies for FastAPI routes
"""
import json
import logging
from typing import Any, Dict

from fastapi import Request

from portfolio_api.database import get_async_session

logger = logging.getLogger(__name__)

# Database dependency (already defined in database.py)
# Just re-export it for convenience
get_db = get_async_session


async def read_json_body(request: Request) -> Dict[str, Any]:
    """
    Request body as a JSON object.
    An empty, malformed or non-object body reads as {}.
    """
    raw = await request.body()
    if not raw:
        return {}
    try:
        body = json.loads(raw)
    except (ValueError, UnicodeDecodeError):
        logger.debug(f"Ignoring malformed JSON body on {request.method} {request.url.path}")
        return {}
    return body if isinstance(body, dict) else {}


def get_client_ip(request: Request) -> str:
    """First address of X-Forwarded-For, then the socket peer, else "unknown" """
    forwarded = request.headers.get("x-forwarded-for")
    if forwarded:
        first = forwarded.split(",")[0].strip()
        if first:
            return first
    if request.client and request.client.host:
        return request.client.host
    return "unknown"
