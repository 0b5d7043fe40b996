"""
Lookup repository — append-only named vocabularies.

Each lookup set (team members, sales reps) is described by a LookupSet:
its URL key, its ORM model (table + unique `name` column) and the default
names seeded at startup. One repository class serves every set.

Uniqueness is enforced by the database constraint, not by an in-process
check: the insert is attempted, and a constraint violation is confirmed
against the table and reported as DuplicateName. No update or delete
operations exist for lookup sets.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from tracker.core.config import Settings
from tracker.core.errors import DuplicateName, StorageError, ValidationError
from tracker.models.lookups import LookupEntry, SalesRep, TeamMember

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class LookupSet:
    """
    One lookup vocabulary.

    Attributes:
        key:      URL slug, e.g. "team-members" → /api/team-members.
        model:    ORM class owning the table and its unique name column.
        label:    Human-readable singular used in messages.
        defaults: Names inserted at startup if absent.
    """

    key: str
    model: type[LookupEntry]
    label: str
    defaults: tuple[str, ...] = ()

    @property
    def table_name(self) -> str:
        return self.model.__tablename__


def get_lookup_sets(config: Settings) -> list[LookupSet]:
    """Lookup sets enabled by configuration, team members first."""
    lookup_sets = [
        LookupSet(
            key="team-members",
            model=TeamMember,
            label="team member",
            defaults=tuple(config.DEFAULT_TEAM_MEMBERS),
        ),
    ]
    if config.SALES_REPS_ENABLED:
        lookup_sets.append(
            LookupSet(
                key="sales-reps",
                model=SalesRep,
                label="sales rep",
                defaults=tuple(config.DEFAULT_SALES_REPS),
            )
        )
    return lookup_sets


class LookupRepository:
    """Create + list over one lookup set."""

    def __init__(
        self,
        session_factory: async_sessionmaker[AsyncSession],
        lookup_set: LookupSet,
    ) -> None:
        self._session_factory = session_factory
        self._lookup = lookup_set

    async def list_names(self) -> list[str]:
        """All names in creation order."""
        model = self._lookup.model
        stmt = select(model.name).order_by(model.id.asc())

        async with self._session_factory() as session:
            try:
                return list((await session.execute(stmt)).scalars().all())
            except SQLAlchemyError as exc:
                logger.exception("Failed to list %s", self._lookup.table_name)
                raise StorageError.from_exception(exc) from exc

    async def add_name(self, name: str) -> int:
        """
        Append a name and return its id.

        Raises:
            ValidationError: name is blank.
            DuplicateName:   the exact name is already in the set.
            StorageError:    any other database failure.
        """
        if not name.strip():
            raise ValidationError(["name"])

        entry = self._lookup.model(name=name)

        async with self._session_factory() as session:
            session.add(entry)
            try:
                await session.commit()
            except IntegrityError as exc:
                await session.rollback()
                if await self._exists(session, name):
                    logger.info("Rejected duplicate %s %r", self._lookup.label, name)
                    raise DuplicateName(self._lookup.label, name) from exc
                logger.exception("Failed to add %s %r", self._lookup.label, name)
                raise StorageError.from_exception(exc) from exc
            except SQLAlchemyError as exc:
                await session.rollback()
                logger.exception("Failed to add %s %r", self._lookup.label, name)
                raise StorageError.from_exception(exc) from exc

        logger.info("Added %s id=%s name=%r", self._lookup.label, entry.id, name)
        return entry.id

    async def _exists(self, session: AsyncSession, name: str) -> bool:
        model = self._lookup.model
        stmt = select(model.id).where(model.name == name)
        return (await session.execute(stmt)).first() is not None
