from __future__ import annotations

import pytest
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from tracker.core.config import Settings, settings
from tracker.core.errors import DuplicateName, StorageError, ValidationError
from tracker.models.lookups import SalesRep, TeamMember
from tracker.repositories.lookups import LookupRepository, LookupSet, get_lookup_sets

DEFAULT_MEMBERS = ["Austin Chai", "Keming Zhu", "Sophia Wu", "Tao Shi", "Xi Liu"]


async def test_defaults_listed_in_creation_order(team_members: LookupRepository) -> None:
    assert await team_members.list_names() == DEFAULT_MEMBERS


async def test_add_appends_with_new_id(team_members: LookupRepository) -> None:
    new_id = await team_members.add_name("Mina Park")

    assert new_id > len(DEFAULT_MEMBERS)
    assert (await team_members.list_names())[-1] == "Mina Park"


async def test_adding_same_name_twice_raises_duplicate(team_members: LookupRepository) -> None:
    await team_members.add_name("Mina Park")

    with pytest.raises(DuplicateName) as excinfo:
        await team_members.add_name("Mina Park")

    assert excinfo.value.code == "duplicate_name"
    assert excinfo.value.name == "Mina Park"
    assert (await team_members.list_names()).count("Mina Park") == 1


async def test_seeded_name_is_also_a_duplicate(team_members: LookupRepository) -> None:
    with pytest.raises(DuplicateName):
        await team_members.add_name("Xi Liu")


async def test_uniqueness_is_case_sensitive(team_members: LookupRepository) -> None:
    await team_members.add_name("xi liu")

    names = await team_members.list_names()
    assert "xi liu" in names
    assert "Xi Liu" in names


async def test_blank_name_is_rejected(team_members: LookupRepository) -> None:
    with pytest.raises(ValidationError):
        await team_members.add_name("   ")
    assert await team_members.list_names() == DEFAULT_MEMBERS


async def test_sales_reps_are_a_separate_set(
    session_factory: async_sessionmaker[AsyncSession],
) -> None:
    sales_reps = LookupRepository(session_factory, get_lookup_sets(settings)[1])

    assert await sales_reps.list_names() == []
    await sales_reps.add_name("Xi Liu")
    assert await sales_reps.list_names() == ["Xi Liu"]


async def test_storage_failure_is_not_reported_as_duplicate(
    team_members: LookupRepository, ready_engine: AsyncEngine,
) -> None:
    async with ready_engine.begin() as conn:
        await conn.execute(text("DROP TABLE team_members"))

    with pytest.raises(StorageError):
        await team_members.add_name("Mina Park")
    with pytest.raises(StorageError):
        await team_members.list_names()


def test_lookup_sets_follow_configuration() -> None:
    enabled = get_lookup_sets(Settings(DEFAULT_SALES_REPS=["Dana"]))
    assert [(s.key, s.model, s.defaults) for s in enabled] == [
        ("team-members", TeamMember, tuple(DEFAULT_MEMBERS)),
        ("sales-reps", SalesRep, ("Dana",)),
    ]

    disabled = get_lookup_sets(Settings(SALES_REPS_ENABLED=False))
    assert [s.key for s in disabled] == ["team-members"]


def test_lookup_set_exposes_table_name() -> None:
    lookup = LookupSet(key="sales-reps", model=SalesRep, label="sales rep")
    assert lookup.table_name == "sales_reps"
