from __future__ import annotations

import os
import tempfile
from collections.abc import AsyncIterator
from pathlib import Path

# The module-level engine is built at import time; point it at a scratch
# file before anything from tracker is imported.
_SCRATCH_DIR = Path(tempfile.mkdtemp(prefix="tracker-tests-"))
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{_SCRATCH_DIR / 'app.db'}"
os.environ["STATIC_DIR"] = str(_SCRATCH_DIR / "public")

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from tracker.core.config import settings
from tracker.core.database import build_session_factory, create_engine_from_url, get_session_factory
from tracker.main import app
from tracker.repositories.lookups import LookupRepository, get_lookup_sets
from tracker.repositories.projects import ProjectRepository
from tracker.schemas.project import ProjectCreate
from tracker.services.schema import ensure_schema


def sqlite_url(path: Path) -> str:
    return f"sqlite+aiosqlite:///{path}"


def make_project(**overrides: object) -> ProjectCreate:
    fields: dict[str, object] = {
        "name": "Site Survey",
        "client": "Acme",
        "status": "active",
        "start_date": "2024-01-01",
        "end_date": "2024-06-01",
        "leader": "Austin Chai",
    }
    fields.update(overrides)
    return ProjectCreate.model_validate(fields)


@pytest.fixture()
async def engine(tmp_path: Path) -> AsyncIterator[AsyncEngine]:
    """A fresh, empty SQLite file per test."""
    engine = create_engine_from_url(sqlite_url(tmp_path / "projects.db"))
    yield engine
    await engine.dispose()


@pytest.fixture()
async def ready_engine(engine: AsyncEngine) -> AsyncEngine:
    await ensure_schema(engine, get_lookup_sets(settings))
    return engine


@pytest.fixture()
def session_factory(ready_engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return build_session_factory(ready_engine)


@pytest.fixture()
def project_repo(session_factory: async_sessionmaker[AsyncSession]) -> ProjectRepository:
    return ProjectRepository(session_factory)


@pytest.fixture()
def team_members(session_factory: async_sessionmaker[AsyncSession]) -> LookupRepository:
    return LookupRepository(session_factory, get_lookup_sets(settings)[0])


@pytest.fixture()
async def client(session_factory: async_sessionmaker[AsyncSession]) -> AsyncIterator[AsyncClient]:
    app.dependency_overrides[get_session_factory] = lambda: session_factory
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as http:
        yield http
    app.dependency_overrides.clear()
