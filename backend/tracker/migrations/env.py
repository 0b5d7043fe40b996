"""
Alembic migration environment — async variant.

Key design:
  • DB URL comes from tracker.core.config (single source of truth),
    NOT from alembic.ini, so secrets aren't duplicated.
  • target_metadata points to Base.metadata so `alembic revision
    --autogenerate` can diff the ORM models against the live schema.
  • The app's schema manager runs migrations programmatically and hands
    over its own connection via config.attributes["connection"]; the CLI
    path builds an async engine (asyncpg or aiosqlite) instead.
"""

import asyncio
from logging.config import fileConfig

from alembic import context
from sqlalchemy import pool
from sqlalchemy.ext.asyncio import async_engine_from_config

from tracker.core.config import settings
from tracker.core.database import Base

# Import all models so Base.metadata is fully populated
import tracker.models.project  # noqa: F401
import tracker.models.lookups  # noqa: F401

# ── Alembic Config object ──────────────────────────────────
config = context.config

# Interpret the config file for Python logging
if config.config_file_name is not None:
    fileConfig(config.config_file_name, disable_existing_loggers=False)

# MetaData for autogenerate support
target_metadata = Base.metadata


# ── Offline mode (generates SQL script, no DB connection) ──
def run_migrations_offline() -> None:
    """Run migrations in 'offline' mode."""
    context.configure(
        url=settings.DATABASE_URL,
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
    )

    with context.begin_transaction():
        context.run_migrations()


# ── Online mode ────────────────────────────────────────────
def do_run_migrations(connection) -> None:  # type: ignore[no-untyped-def]
    """Configure context with a live connection and run."""
    context.configure(
        connection=connection,
        target_metadata=target_metadata,
        # SQLite can only ALTER via table rebuilds
        render_as_batch=connection.dialect.name == "sqlite",
    )

    with context.begin_transaction():
        context.run_migrations()


async def run_async_migrations() -> None:
    """Create an async engine and run migrations."""
    # Escape % so ConfigParser interpolation leaves passwords alone
    config.set_main_option("sqlalchemy.url", settings.DATABASE_URL.replace("%", "%%"))
    connectable = async_engine_from_config(
        config.get_section(config.config_ini_section, {}),
        prefix="sqlalchemy.",
        poolclass=pool.NullPool,
    )

    async with connectable.connect() as connection:
        await connection.run_sync(do_run_migrations)

    await connectable.dispose()


def run_migrations_online() -> None:
    """Run migrations in 'online' mode."""
    connection = config.attributes.get("connection")
    if connection is not None:
        # Programmatic run from tracker.services.schema
        do_run_migrations(connection)
    else:
        asyncio.run(run_async_migrations())


# ── Entrypoint ──────────────────────────────────────────────
if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
