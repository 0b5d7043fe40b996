"""
Async database engine, session factory, and ORM base.

Rules enforced:
  • The engine is owned by the application: built once here, disposed by
    the lifespan handler on shutdown.
  • Repositories receive the session factory at construction and open one
    AsyncSession per operation, so connections go back to the pool on
    every exit path.
  • The declarative Base is shared across all models so Alembic can
    auto-detect schema changes from a single metadata object.
"""

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from tracker.core.config import settings


def create_engine_from_url(url: str, *, echo: bool = False) -> AsyncEngine:
    """Build an async engine for either the SQLite file store or Postgres."""
    # pool_pre_ping: drop stale connections before reuse
    return create_async_engine(url, echo=echo, pool_pre_ping=True)


def build_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        bind=engine,
        class_=AsyncSession,
        expire_on_commit=False,  # avoid lazy-load issues after commit
    )


# ── Engine ──────────────────────────────────────────────────
# echo: SQL logging — only in debug mode
engine = create_engine_from_url(settings.DATABASE_URL, echo=settings.DEBUG)

# ── Session factory ─────────────────────────────────────────
async_session_factory = build_session_factory(engine)


# ── ORM Base ────────────────────────────────────────────────
class Base(DeclarativeBase):
    """Shared declarative base for all SQLAlchemy models."""


# ── Dependency ──────────────────────────────────────────────
def get_session_factory() -> async_sessionmaker[AsyncSession]:
    """
    Hand the shared session factory to request handlers.

    Repositories open and close their own sessions; tests override this
    dependency to point the API at a throwaway database.
    """
    return async_session_factory
