"""create projects and team_members tables

Revision ID: 0001
Revises:
Create Date: 2026-09-14

First iteration of the tracker schema. Databases created by the
unversioned service already hold both tables; they are left untouched
and simply stamped at this revision.
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = "0001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _has_table(name: str) -> bool:
    return sa.inspect(op.get_bind()).has_table(name)


def upgrade() -> None:
    # ── projects ────────────────────────────────────────────
    if not _has_table("projects"):
        op.create_table(
            "projects",
            sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
            sa.Column("name", sa.Text(), nullable=False),
            sa.Column("client", sa.Text(), nullable=False),
            sa.Column("status", sa.Text(), nullable=False),
            sa.Column("startDate", sa.Text(), nullable=False),
            sa.Column("endDate", sa.Text(), nullable=False),
            sa.Column("leader", sa.Text(), nullable=False),
            sa.Column("participants", sa.Text(), server_default="[]", nullable=False),
            sa.Column("notes", sa.Text(), server_default="", nullable=True),
            sa.Column(
                "createdAt",
                sa.DateTime(timezone=True),
                server_default=sa.func.current_timestamp(),
                nullable=True,
            ),
            sa.PrimaryKeyConstraint("id"),
            sqlite_autoincrement=True,
        )

    # ── team_members ────────────────────────────────────────
    if not _has_table("team_members"):
        op.create_table(
            "team_members",
            sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
            sa.Column("name", sa.Text(), nullable=False),
            sa.PrimaryKeyConstraint("id"),
            sa.UniqueConstraint("name"),
            sqlite_autoincrement=True,
        )


def downgrade() -> None:
    op.drop_table("team_members")
    op.drop_table("projects")
