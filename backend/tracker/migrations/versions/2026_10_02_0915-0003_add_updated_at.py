"""add projects.updatedAt

Revision ID: 0003
Revises: 0002
Create Date: 2026-10-02

Tracks the last modification time of a project.

SQLite cannot ADD COLUMN with a non-constant default, so the column is
added without one and existing rows are backfilled from createdAt. New
rows get their value from the ORM (insert default + onupdate).
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "0003"
down_revision: Union[str, None] = "0002"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _has_column(table: str, column: str) -> bool:
    columns = sa.inspect(op.get_bind()).get_columns(table)
    return any(c["name"] == column for c in columns)


def upgrade() -> None:
    if _has_column("projects", "updatedAt"):
        return

    op.add_column(
        "projects",
        sa.Column("updatedAt", sa.DateTime(timezone=True), nullable=True),
    )

    # Backfill: a never-updated project was last touched when created
    projects = sa.table(
        "projects",
        sa.column("createdAt", sa.DateTime(timezone=True)),
        sa.column("updatedAt", sa.DateTime(timezone=True)),
    )
    op.execute(
        projects.update()
        .where(projects.c.updatedAt.is_(None))
        .values(updatedAt=projects.c.createdAt)
    )


def downgrade() -> None:
    with op.batch_alter_table("projects") as batch_op:
        batch_op.drop_column("updatedAt")
