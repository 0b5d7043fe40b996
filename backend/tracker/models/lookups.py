"""
Lookup-set models — closed vocabularies of selectable names.

Every lookup table has the same shape: an integer surrogate key and a
unique, case-sensitive `name`. Rows are appended by seeding or by explicit
insert; nothing updates or deletes them.
"""

from sqlalchemy import Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from tracker.core.database import Base


class LookupEntry:
    """Columns shared by every lookup table."""

    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    name: Mapped[str] = mapped_column(
        Text, nullable=False, unique=True,
    )

    def __repr__(self) -> str:
        return f"<{type(self).__name__} id={self.id} name={self.name!r}>"


class TeamMember(LookupEntry, Base):
    """Someone who can lead or participate in a project."""

    __tablename__ = "team_members"


class SalesRep(LookupEntry, Base):
    """Sales owner selectable on a project (optional extension)."""

    __tablename__ = "sales_reps"
