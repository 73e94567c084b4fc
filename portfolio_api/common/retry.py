"""
Retry helper for database reads
"""
import asyncio
import logging
from typing import Any, Awaitable, Callable, Optional

from portfolio_api import config

logger = logging.getLogger(__name__)

# PostgreSQL admin_shutdown (server restarted or connection terminated)
ADMIN_SHUTDOWN_SQLSTATE = "57P01"


def _sqlstate(error: BaseException) -> Optional[str]:
    # SQLAlchemy wraps the driver error in .orig; asyncpg exposes sqlstate, psycopg pgcode
    for candidate in (getattr(error, "orig", None), getattr(error, "__cause__", None), error):
        if candidate is None:
            continue
        for attr in ("sqlstate", "pgcode"):
            code = getattr(candidate, attr, None)
            if isinstance(code, str):
                return code
    return None


def is_transient_db_error(error: BaseException) -> bool:
    """Connection drops, timeouts and admin shutdowns are worth retrying."""
    message = str(error).lower()
    if "timeout" in message or "connection" in message:
        return True
    return _sqlstate(error) == ADMIN_SHUTDOWN_SQLSTATE


async def with_retry(
    func: Callable[[], Awaitable[Any]],
    retries: Optional[int] = None,
    delay: Optional[float] = None,
) -> Any:
    """
    Run an async read with bounded retries and linear backoff.

    Only transient connection failures are retried (delay * attempt seconds
    between attempts); every other error propagates immediately. Never wrap
    writes with this: a retried mutation may apply twice.
    """
    retries = config.DB_RETRY_ATTEMPTS if retries is None else retries
    delay = config.DB_RETRY_DELAY if delay is None else delay

    for attempt in range(1, retries + 1):
        try:
            return await func()
        except Exception as e:
            if not is_transient_db_error(e) or attempt >= retries:
                raise
            wait = delay * attempt
            logger.warning(
                f"Database operation failed (attempt {attempt}/{retries}): {e}. "
                f"Retrying in {wait:.1f} seconds..."
            )
            await asyncio.sleep(wait)

    # retries < 1
    return await func()
