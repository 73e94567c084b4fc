"""
Database connection and session management
Using SQLModel with an async SQLAlchemy engine (asyncpg for PostgreSQL, aiosqlite for SQLite)
"""
from sqlmodel import SQLModel
from sqlalchemy import event, text
from sqlalchemy.engine import make_url, URL
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, create_async_engine, async_sessionmaker
from typing import AsyncGenerator, Any, Dict
import logging

from portfolio_api import config

logger = logging.getLogger(__name__)


def build_async_url(database_url: str) -> URL:
    """
    Convert postgresql:// to postgresql+asyncpg:// for async operations.
    asyncpg does not understand libpq's sslmode, so it is removed from the URL
    and handed to the driver through connect_args instead.
    """
    url = make_url(database_url)
    if url.drivername in ("postgres", "postgresql", "postgresql+psycopg2"):
        url = url.set(drivername="postgresql+asyncpg")
    if url.drivername == "sqlite":
        url = url.set(drivername="sqlite+aiosqlite")
    if "sslmode" in url.query:
        url = url.difference_update_query(["sslmode"])
    return url


def enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    """SQLite leaves FK enforcement off per connection; ON DELETE rules depend on it"""
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def build_connect_args(database_url: str) -> Dict[str, Any]:
    url = make_url(database_url)
    if url.get_backend_name() != "postgresql":
        return {}

    connect_args: Dict[str, Any] = {
        "timeout": config.DB_CONNECT_TIMEOUT,  # generous, absorbs cold starts of a managed database
        "server_settings": {
            "application_name": "portfolio_api"
        }
    }

    sslmode = url.query.get("sslmode", "require")
    if sslmode != "disable":
        connect_args["ssl"] = "require"

    # Poolers (pgbouncer / Neon "-pooler" hosts) don't support prepared statements
    host = url.host or ""
    if "pooler" in host or url.port == 6543:
        logger.warning("Using a connection pooler - prepared statements will be disabled")
        connect_args["statement_cache_size"] = 0

    return connect_args


class Database:
    """
    Engine and session factory for the application.
    Built once at import time, before the server accepts traffic.
    """

    def __init__(self, database_url: str, echo: bool = False):
        self.url = build_async_url(database_url)
        engine_kwargs: Dict[str, Any] = {
            "echo": echo,
            "connect_args": build_connect_args(database_url),
        }
        if self.url.get_backend_name() == "postgresql":
            engine_kwargs.update(
                pool_pre_ping=True,
                pool_size=config.DB_POOL_SIZE,
                max_overflow=0,
                pool_timeout=config.DB_POOL_TIMEOUT,
                pool_recycle=config.DB_POOL_RECYCLE,
            )

        self.engine: AsyncEngine = create_async_engine(self.url, **engine_kwargs)
        if self.url.get_backend_name() == "sqlite":
            event.listen(self.engine.sync_engine, "connect", enable_sqlite_foreign_keys)
        self.session_factory = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
            autoflush=False,
        )
        logger.info(f"Database engine created (backend: {self.url.get_backend_name()}, mode: {config.MODE})")

    async def create_all(self):
        # Import all models so SQLModel knows every table
        import portfolio_api.models  # noqa: F401

        async with self.engine.begin() as conn:
            await conn.run_sync(SQLModel.metadata.create_all)

    async def dispose(self):
        await self.engine.dispose()

    async def ping(self) -> bool:
        try:
            async with self.session_factory() as session:
                result = await session.execute(text("SELECT 1"))
                logger.info(f"Database connection test successful: {result.scalar()}")
                return True
        except Exception as e:
            logger.error(f"Database connection test failed: {e}", exc_info=True)
            return False


database = Database(config.DATABASE_URL, echo=config.DEBUG)


async def get_async_session() -> AsyncGenerator[AsyncSession, None]:
    """
    Dependency to get async database session
    Usage: async def endpoint(session: AsyncSession = Depends(get_async_session))
    """
    async with database.session_factory() as session:
        try:
            yield session
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()


async def init_db():
    """
    Initialize database on application startup.
    Tables are only created here for local development; deployments run `alembic upgrade head`.
    """
    if config.AUTO_CREATE_TABLES:
        logger.info("AUTO_CREATE_TABLES enabled, creating missing tables")
        await database.create_all()


async def close_db():
    """
    Close database connections
    Call this on application shutdown
    """
    await database.dispose()
    logger.info("Database connections closed")
