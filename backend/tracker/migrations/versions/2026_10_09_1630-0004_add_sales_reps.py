"""add projects.salesRep and sales_reps lookup table

Revision ID: 0004
Revises: 0003
Create Date: 2026-10-09

Sales-rep extension. The column and table always exist from this revision
on; whether the lookup set is seeded and served is a runtime setting
(SALES_REPS_ENABLED).
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "0004"
down_revision: Union[str, None] = "0003"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    inspector = sa.inspect(op.get_bind())

    # ── 1. projects.salesRep ────────────────────────────────
    columns = {c["name"] for c in inspector.get_columns("projects")}
    if "salesRep" not in columns:
        op.add_column(
            "projects",
            sa.Column("salesRep", sa.Text(), server_default="", nullable=False),
        )

    # ── 2. sales_reps lookup table ──────────────────────────
    if not inspector.has_table("sales_reps"):
        op.create_table(
            "sales_reps",
            sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
            sa.Column("name", sa.Text(), nullable=False),
            sa.PrimaryKeyConstraint("id"),
            sa.UniqueConstraint("name"),
            sqlite_autoincrement=True,
        )


def downgrade() -> None:
    op.drop_table("sales_reps")
    with op.batch_alter_table("projects") as batch_op:
        batch_op.drop_column("salesRep")
