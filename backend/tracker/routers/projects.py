"""
Projects router — CRUD over tracked engagements.

GET    /api/projects       — all projects, newest first
POST   /api/projects       — create, returns the new id
PUT    /api/projects/{id}  — full replacement of one project
DELETE /api/projects/{id}  — remove one project

Update and delete answer 200 even when the id does not exist; the
repository reports 0 affected rows and that is not treated as an error.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from tracker.core.database import get_session_factory
from tracker.repositories.projects import ProjectRepository
from tracker.schemas.project import (
    MessageOut,
    ProjectCreate,
    ProjectCreated,
    ProjectOut,
    ProjectUpdate,
)

router = APIRouter(tags=["Projects"])


def get_project_repository(
    session_factory: Annotated[
        async_sessionmaker[AsyncSession], Depends(get_session_factory)
    ],
) -> ProjectRepository:
    return ProjectRepository(session_factory)


# Type alias for cleaner signatures
Projects = Annotated[ProjectRepository, Depends(get_project_repository)]


@router.get(
    "",
    response_model=list[ProjectOut],
    summary="List all projects",
    description="Most recently created first. Participants are decoded to a list.",
)
async def list_projects(repo: Projects) -> list[ProjectOut]:
    return await repo.list_projects()


@router.post(
    "",
    response_model=ProjectCreated,
    status_code=status.HTTP_201_CREATED,
    summary="Create a project",
)
async def create_project(payload: ProjectCreate, repo: Projects) -> ProjectCreated:
    """Optional fields default to "" and participants to []."""
    project_id = await repo.create_project(payload)
    return ProjectCreated(id=project_id)


@router.put(
    "/{project_id}",
    response_model=MessageOut,
    summary="Replace a project",
    description="Every field is overwritten; omitted optional fields are reset to their defaults.",
)
async def update_project(
    project_id: int,
    payload: ProjectUpdate,
    repo: Projects,
) -> MessageOut:
    await repo.update_project(project_id, payload)
    return MessageOut(message="Project updated")


@router.delete(
    "/{project_id}",
    response_model=MessageOut,
    summary="Delete a project",
)
async def delete_project(project_id: int, repo: Projects) -> MessageOut:
    await repo.delete_project(project_id)
    return MessageOut(message="Project deleted")
