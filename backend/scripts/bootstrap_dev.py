"""
Dev bootstrap script — prepare a local database with a sample project.

Usage:
    python -m scripts.bootstrap_dev

This will:
  1. Migrate the database at DATABASE_URL to the current schema
  2. Seed the default team members (and sales reps, if enabled)
  3. Create a "Site Survey" sample project if no project exists yet
"""

import asyncio
import sys

# Ensure the project root is on the path
sys.path.insert(0, ".")

from sqlalchemy.ext.asyncio import AsyncEngine

from tracker.core.config import settings
from tracker.core.database import build_session_factory, engine
from tracker.repositories.lookups import get_lookup_sets
from tracker.repositories.projects import ProjectRepository
from tracker.schemas.project import ProjectCreate
from tracker.services.schema import ensure_schema

SAMPLE_PROJECT = ProjectCreate(
    name="Site Survey",
    client="Acme",
    status="active",
    start_date="2024-01-01",
    end_date="2024-06-01",
    leader="Austin Chai",
    participants=["Austin Chai", "Xi Liu"],
)


async def bootstrap(target: AsyncEngine) -> int | None:
    """
    Bring `target` up to date and add the sample project to an empty table.

    Returns the new project id, or None when projects already existed.
    """
    await ensure_schema(target, get_lookup_sets(settings))

    repo = ProjectRepository(build_session_factory(target))
    if await repo.list_projects():
        return None
    return await repo.create_project(SAMPLE_PROJECT)


async def main() -> None:
    project_id = await bootstrap(engine)

    # ── Print results ───────────────────────────────────────
    print()
    print("=" * 60)
    print("  Dev Bootstrap Complete")
    print("=" * 60)
    print()
    print(f"  Database:   {engine.url.render_as_string(hide_password=True)}")
    if project_id is None:
        print("  Projects already present — sample not created.")
    else:
        print(f"  Sample project ID: {project_id}")
    print("=" * 60)
    print()

    await engine.dispose()


if __name__ == "__main__":
    asyncio.run(main())
