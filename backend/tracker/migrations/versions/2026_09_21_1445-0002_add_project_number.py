"""add projects.projectNumber

Revision ID: 0002
Revises: 0001
Create Date: 2026-09-21

Optional internal reference number. Existing rows read back as "".
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "0002"
down_revision: Union[str, None] = "0001"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _has_column(table: str, column: str) -> bool:
    columns = sa.inspect(op.get_bind()).get_columns(table)
    return any(c["name"] == column for c in columns)


def upgrade() -> None:
    if not _has_column("projects", "projectNumber"):
        op.add_column(
            "projects",
            sa.Column("projectNumber", sa.Text(), server_default="", nullable=False),
        )


def downgrade() -> None:
    with op.batch_alter_table("projects") as batch_op:
        batch_op.drop_column("projectNumber")
