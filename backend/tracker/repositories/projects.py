"""
Project repository — CRUD over the projects table.

Rules enforced:
  • This is the only place participants are encoded (on write) and
    decoded (on read).
  • Required fields are checked before any storage call.
  • Update is a full overwrite of every mutable field and refreshes
    updatedAt. Update and delete of a missing id are silent no-ops: the
    affected row count is returned, never raised.
  • Storage failures are rolled back, logged, and re-raised as
    StorageError. Nothing is retried.
"""

from __future__ import annotations

import logging
from typing import Any

from pydantic.alias_generators import to_camel
from sqlalchemy import delete, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker
from sqlalchemy.sql import func

from tracker.core.errors import StorageError, ValidationError
from tracker.models.project import Project
from tracker.schemas.project import ProjectFields, ProjectOut
from tracker.services.participants import decode_participants, encode_participants

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("name", "client", "status", "start_date", "end_date", "leader")


def _require_fields(data: ProjectFields) -> None:
    """Raise ValidationError listing every blank required field (camelCase)."""
    missing = [
        to_camel(field)
        for field in REQUIRED_FIELDS
        if not (getattr(data, field) or "").strip()
    ]
    if missing:
        raise ValidationError(missing)


def _column_values(data: ProjectFields) -> dict[str, Any]:
    return {
        "name": data.name,
        "project_number": data.project_number,
        "client": data.client,
        "status": data.status,
        "start_date": data.start_date,
        "end_date": data.end_date,
        "leader": data.leader,
        "sales_rep": data.sales_rep,
        "participants": encode_participants(data.participants),
        "notes": data.notes,
    }


def _to_record(row: Project) -> ProjectOut:
    return ProjectOut(
        id=row.id,
        name=row.name,
        project_number=row.project_number or "",
        client=row.client,
        status=row.status,
        start_date=row.start_date,
        end_date=row.end_date,
        leader=row.leader,
        sales_rep=row.sales_rep or "",
        participants=decode_participants(row.participants),
        notes=row.notes or "",
        created_at=row.created_at,
        updated_at=row.updated_at,
    )


class ProjectRepository:
    """Project persistence over an injected session factory."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        self._session_factory = session_factory

    async def list_projects(self) -> list[ProjectOut]:
        """All projects, most recently created first."""
        # No secondary sort key: equal createdAt values keep the engine's order.
        stmt = select(Project).order_by(Project.created_at.desc())

        async with self._session_factory() as session:
            try:
                rows = (await session.execute(stmt)).scalars().all()
            except SQLAlchemyError as exc:
                logger.exception("Failed to list projects")
                raise StorageError.from_exception(exc) from exc

        return [_to_record(row) for row in rows]

    async def create_project(self, data: ProjectFields) -> int:
        """Insert a project and return its storage-assigned id."""
        _require_fields(data)
        project = Project(**_column_values(data))

        async with self._session_factory() as session:
            try:
                session.add(project)
                await session.commit()
            except SQLAlchemyError as exc:
                await session.rollback()
                logger.exception("Failed to create project %r", data.name)
                raise StorageError.from_exception(exc) from exc

        logger.info("Created project id=%s name=%r", project.id, project.name)
        return project.id

    async def update_project(self, project_id: int, data: ProjectFields) -> int:
        """
        Overwrite every mutable field of one project.

        Returns the number of rows touched; 0 means the id does not exist,
        which callers treat as success.
        """
        _require_fields(data)
        values = {getattr(Project, key): value for key, value in _column_values(data).items()}
        values[Project.updated_at] = func.current_timestamp()
        stmt = (
            update(Project)
            .where(Project.id == project_id)
            .values(values)
            .execution_options(synchronize_session=False)
        )
        affected = await self._execute(stmt, f"update project id={project_id}")
        if affected == 0:
            logger.debug("Update of missing project id=%s was a no-op", project_id)
        return affected

    async def delete_project(self, project_id: int) -> int:
        """Delete one project. Deleting a missing id is not an error."""
        stmt = (
            delete(Project)
            .where(Project.id == project_id)
            .execution_options(synchronize_session=False)
        )
        return await self._execute(stmt, f"delete project id={project_id}")

    async def _execute(self, stmt: Any, action: str) -> int:
        async with self._session_factory() as session:
            try:
                affected = (await session.execute(stmt)).rowcount
                await session.commit()
            except SQLAlchemyError as exc:
                await session.rollback()
                logger.exception("Failed to %s", action)
                raise StorageError.from_exception(exc) from exc

        logger.info("%s affected %d row(s)", action.capitalize(), affected)
        return affected
