import asyncio
from logging.config import fileConfig
from sqlalchemy.engine import Connection

from alembic import context

# Import your models and database config
import sys
from pathlib import Path

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from portfolio_api.database import database
from sqlmodel import SQLModel

# Import all models so Alembic can detect them
import portfolio_api.models  # noqa: F401

# this is the Alembic Config object
config = context.config

# Use the application's database URL (already rewritten for the async driver)
config.set_main_option(
    "sqlalchemy.url",
    database.url.render_as_string(hide_password=False).replace("%", "%%"),
)

# Interpret the config file for Python logging
if config.config_file_name is not None:
    fileConfig(config.config_file_name)

# Add your model's MetaData object here for 'autogenerate' support
target_metadata = SQLModel.metadata


def run_migrations_offline() -> None:
    """Run migrations in 'offline' mode."""
    url = config.get_main_option("sqlalchemy.url")
    context.configure(
        url=url,
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
    )

    with context.begin_transaction():
        context.run_migrations()


def do_run_migrations(connection: Connection) -> None:
    context.configure(
        connection=connection,
        target_metadata=target_metadata,
        render_as_batch=connection.dialect.name == "sqlite",
    )

    with context.begin_transaction():
        context.run_migrations()


async def run_async_migrations() -> None:
    """Run migrations through the application's async engine."""
    async with database.engine.connect() as connection:
        await connection.run_sync(do_run_migrations)

    await database.dispose()


def run_migrations_online() -> None:
    """Run migrations in 'online' mode."""
    asyncio.run(run_async_migrations())


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
