"""
Pydantic v2 schemas for the projects resource.

Separation:
  • ProjectCreate / ProjectUpdate — what the CLIENT sends. Both carry the
    full record: an update overwrites every mutable field, there is no
    partial patch.
  • ProjectOut — what the SERVER returns, with participants decoded to a
    list and the storage-assigned id and timestamps.

JSON keys are camelCase (startDate, projectNumber, …) to match the
persisted column names and the browser front-end; snake_case names are
accepted on input as well.
"""

from __future__ import annotations

import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ── Request schemas ─────────────────────────────────────────
class ProjectFields(_CamelModel):
    """
    Every mutable project field.

    Required fields must be present here; blank values are rejected by the
    repository before anything reaches the database. Optional fields
    default to "" and participants to [] — an explicit null is treated the
    same as an absent key.
    """

    name: str = Field(..., examples=["Site Survey"])
    client: str = Field(..., examples=["Acme"])
    status: str = Field(..., examples=["active"])
    start_date: str = Field(..., examples=["2024-01-01"])
    end_date: str = Field(..., examples=["2024-06-01"])
    leader: str = Field(..., examples=["Austin Chai"])

    project_number: str = Field(default="", examples=["P-2024-001"])
    sales_rep: str = Field(default="", examples=[""])
    notes: str = Field(default="")
    participants: list[str] = Field(
        default_factory=list,
        examples=[["Austin Chai", "Xi Liu"]],
        description="Team member names in display order. Duplicates are kept.",
    )

    @field_validator("project_number", "sales_rep", "notes", mode="before")
    @classmethod
    def _null_to_empty(cls, value: object) -> object:
        return "" if value is None else value

    @field_validator("participants", mode="before")
    @classmethod
    def _null_to_list(cls, value: object) -> object:
        return [] if value is None else value


class ProjectCreate(ProjectFields):
    """Payload accepted by POST /api/projects."""


class ProjectUpdate(ProjectFields):
    """Payload accepted by PUT /api/projects/{id} — a full replacement."""


# ── Response schemas ────────────────────────────────────────
class ProjectOut(_CamelModel):
    """A stored project as returned by the list endpoint."""

    id: int
    name: str
    project_number: str
    client: str
    status: str
    start_date: str
    end_date: str
    leader: str
    sales_rep: str
    participants: list[str]
    notes: str
    created_at: datetime.datetime | None
    updated_at: datetime.datetime | None = None


class ProjectCreated(BaseModel):
    id: int
    message: str = "Project created"


class MessageOut(BaseModel):
    message: str
