"""
Schema manager — bring the database to the current schema and seed lookups.

Called once from the FastAPI lifespan, before the app accepts requests.

STEP 1 — MIGRATE (fatal on failure):
  Runs the Alembic revision chain to head over a single connection shared
  with tracker/migrations/env.py. Each revision mirrors one historical
  iteration of the service and is written to tolerate databases those
  iterations created without Alembic (tables/columns are only added when
  absent), so a legacy projects.db is reconciled in place.

STEP 2 — SEED (best effort, per name):
  Every enabled lookup set gets its default names with
  INSERT … ON CONFLICT (name) DO NOTHING. Each name is its own unit of
  work: one failing name is logged and the rest are still seeded.

IDEMPOTENCY:
  Applied revisions are skipped and present names are left alone, so
  running ensure_schema() any number of times is safe.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from importlib import resources
from typing import Any

from alembic import command
from alembic.config import Config
from sqlalchemy import Connection
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from tracker.core.database import build_session_factory
from tracker.core.errors import SchemaInitError
from tracker.repositories.lookups import LookupSet

logger = logging.getLogger(__name__)

# Alembic script directory, shipped as package data
MIGRATIONS_DIR = resources.files("tracker") / "migrations"

# Dialect-specific INSERT constructs that support ON CONFLICT DO NOTHING
_INSERT_IF_ABSENT: dict[str, Callable[[Any], Any]] = {
    "postgresql": pg_insert,
    "sqlite": sqlite_insert,
}


def build_alembic_config() -> Config:
    """Alembic config for programmatic use — no alembic.ini required."""
    config = Config()
    config.set_main_option("script_location", str(MIGRATIONS_DIR))
    return config


def _upgrade_to_head(connection: Connection, config: Config) -> None:
    # env.py picks the connection up from config.attributes
    config.attributes["connection"] = connection
    command.upgrade(config, "head")


async def migrate(engine: AsyncEngine) -> None:
    """Run every pending revision. Raises SchemaInitError on any failure."""
    try:
        async with engine.begin() as conn:
            await conn.run_sync(_upgrade_to_head, build_alembic_config())
    except Exception as exc:
        logger.exception("Schema migration failed")
        raise SchemaInitError(f"Schema migration failed: {exc}") from exc
    logger.info("Schema is at head revision ✓")


async def seed_lookup_set(
    session_factory: async_sessionmaker[AsyncSession],
    lookup: LookupSet,
    dialect_name: str,
) -> int:
    """
    Insert each default name of one lookup set if it is not there yet.

    Returns the number of names actually inserted.
    """
    insert = _INSERT_IF_ABSENT.get(dialect_name)
    if insert is None:
        raise SchemaInitError(f"Cannot seed lookup sets on dialect {dialect_name!r}")

    inserted = 0
    for name in lookup.defaults:
        stmt = (
            insert(lookup.model)
            .values(name=name)
            .on_conflict_do_nothing(index_elements=["name"])
        )
        try:
            async with session_factory() as session:
                rowcount = (await session.execute(stmt)).rowcount
                await session.commit()
        except SQLAlchemyError:
            logger.warning(
                "Could not seed %s %r — continuing", lookup.label, name, exc_info=True,
            )
            continue
        inserted += max(rowcount, 0)

    logger.info(
        "Seeded %s: %d new of %d default(s)",
        lookup.table_name, inserted, len(lookup.defaults),
    )
    return inserted


async def ensure_schema(engine: AsyncEngine, lookup_sets: Sequence[LookupSet]) -> None:
    """Migrate to head, then seed every lookup set. Safe to call repeatedly."""
    await migrate(engine)

    session_factory = build_session_factory(engine)
    for lookup in lookup_sets:
        await seed_lookup_set(session_factory, lookup, engine.dialect.name)
