"""
Project model — one tracked client engagement.

Column names stay camelCase (`startDate`, `createdAt`, …) so databases
written by every earlier iteration of the service keep working; the Python
attributes are snake_case, mapped onto those names.

Design notes:
  • participants is JSON array text in a single column. Encoding and
    decoding happen only in the project repository.
  • createdAt is stamped by the database on insert and never touched again.
  • updatedAt is stamped on insert and refreshed on every update. Rows that
    predate revision 0003 were backfilled from createdAt.
"""

import datetime

from sqlalchemy import DateTime, Integer, Text
from sqlalchemy.sql import func
from sqlalchemy.orm import Mapped, mapped_column

from tracker.core.database import Base


class Project(Base):
    """A tracked engagement with its leader and participants."""

    __tablename__ = "projects"
    __table_args__ = {"sqlite_autoincrement": True}

    # ── Primary key ─────────────────────────────────────────
    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )

    # ── Required ────────────────────────────────────────────
    name: Mapped[str] = mapped_column(Text, nullable=False)
    client: Mapped[str] = mapped_column(Text, nullable=False)
    status: Mapped[str] = mapped_column(Text, nullable=False)
    start_date: Mapped[str] = mapped_column("startDate", Text, nullable=False)
    end_date: Mapped[str] = mapped_column("endDate", Text, nullable=False)
    leader: Mapped[str] = mapped_column(Text, nullable=False)

    # ── Optional ────────────────────────────────────────────
    project_number: Mapped[str] = mapped_column(
        "projectNumber", Text, nullable=False, server_default="",
    )
    sales_rep: Mapped[str] = mapped_column(
        "salesRep", Text, nullable=False, server_default="",
    )
    participants: Mapped[str] = mapped_column(
        Text, nullable=False, server_default="[]",
    )
    notes: Mapped[str | None] = mapped_column(
        Text, nullable=True, server_default="",
    )

    # ── Timestamps ──────────────────────────────────────────
    created_at: Mapped[datetime.datetime | None] = mapped_column(
        "createdAt",
        DateTime(timezone=True),
        nullable=True,
        server_default=func.current_timestamp(),
    )
    updated_at: Mapped[datetime.datetime | None] = mapped_column(
        "updatedAt",
        DateTime(timezone=True),
        nullable=True,
        default=func.current_timestamp(),
        onupdate=func.current_timestamp(),
    )

    def __repr__(self) -> str:
        return f"<Project id={self.id} name={self.name!r} status={self.status!r}>"
