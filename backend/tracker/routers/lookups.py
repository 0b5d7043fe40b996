"""
Lookup routers — one pair of endpoints per enabled lookup set.

GET  /api/<key>  — names in creation order
POST /api/<key>  — append a name; 409 if it already exists

The routers are built from LookupSet descriptors, so team members and
sales reps share one implementation.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from tracker.core.database import get_session_factory
from tracker.repositories.lookups import LookupRepository, LookupSet
from tracker.schemas.lookup import LookupEntryCreate, LookupEntryCreated

SessionFactory = Annotated[async_sessionmaker[AsyncSession], Depends(get_session_factory)]


def build_lookup_router(lookup: LookupSet) -> APIRouter:
    """Create the list/add router for one lookup set."""
    router = APIRouter(tags=["Lookups"])

    def get_repository(session_factory: SessionFactory) -> LookupRepository:
        return LookupRepository(session_factory, lookup)

    Repository = Annotated[LookupRepository, Depends(get_repository)]

    @router.get(
        "",
        response_model=list[str],
        summary=f"List {lookup.label}s",
        name=f"list_{lookup.table_name}",
    )
    async def list_names(repo: Repository) -> list[str]:
        return await repo.list_names()

    @router.post(
        "",
        response_model=LookupEntryCreated,
        status_code=status.HTTP_201_CREATED,
        summary=f"Add a {lookup.label}",
        name=f"add_{lookup.table_name}",
    )
    async def add_name(payload: LookupEntryCreate, repo: Repository) -> LookupEntryCreated:
        entry_id = await repo.add_name(payload.name)
        return LookupEntryCreated(id=entry_id, message=f"{lookup.label.capitalize()} added")

    return router
