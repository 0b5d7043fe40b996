"""Pydantic v2 schemas for lookup-set endpoints."""

from __future__ import annotations

from pydantic import BaseModel, Field


class LookupEntryCreate(BaseModel):
    """Payload accepted by POST /api/<lookup-set>."""

    name: str = Field(..., examples=["Keming Zhu"])


class LookupEntryCreated(BaseModel):
    id: int
    message: str
