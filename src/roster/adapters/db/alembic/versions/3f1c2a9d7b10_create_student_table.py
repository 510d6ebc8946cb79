"""Create student table

Revision ID: 3f1c2a9d7b10
Revises:
Create Date: 2026-10-19

"""

from collections.abc import Sequence

import sqlalchemy as sa
from alembic import op

# deal with alembic stuff
# pylint: disable=no-member

# revision identifiers, used by Alembic.
revision: str = "3f1c2a9d7b10"
down_revision: str | Sequence[str] | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        "student",
        sa.Column("id", sa.Integer(), autoincrement=False, nullable=False),
        sa.Column("name", sa.String(length=100), server_default="", nullable=False),
        sa.Column("age", sa.Integer(), server_default="0", nullable=False),
        sa.Column(
            "dob",
            sa.Text(),
            server_default="",
            nullable=False,
            comment="Date of birth.",
        ),
        sa.Column("course", sa.Text(), server_default="", nullable=False),
        sa.Column("city", sa.Text(), server_default="", nullable=False),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_student")),
        comment="Student records looked up by id.",
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_table("student")
