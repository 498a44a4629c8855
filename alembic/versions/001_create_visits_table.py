"""Create visits table.

Revision ID: 001
Revises:
Create Date: 2026-10-19 00:00:00.000000

"""

from typing import Sequence, Union

import sqlalchemy as sa

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade database schema."""
    op.create_table(
        "visits",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("patient_name", sa.Text(), nullable=False),
        sa.Column("visit_date", sa.Date(), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("attendee", sa.Text(), nullable=False),
        sa.Column("dtstart", sa.Text(), nullable=False),
        sa.Column("dtstamp", sa.DateTime(timezone=True), nullable=False),
        sa.Column("method", sa.Text(), server_default="REQUEST", nullable=False),
        sa.Column("status", sa.Text(), server_default="CONFIRMED", nullable=False),
        sa.Column("uid", sa.Text(), nullable=False),
        sa.CheckConstraint(
            "status IN ('CONFIRMED', 'CANCELLED')",
            name="visits_status_check",
        ),
        sa.PrimaryKeyConstraint("id"),
    )

    op.create_index("ux_visits_uid", "visits", ["uid"], unique=True)
    op.create_index("ix_visits_attendee", "visits", ["attendee"])
    op.create_index("ix_visits_visit_date", "visits", ["visit_date"])


def downgrade() -> None:
    """Downgrade database schema."""
    op.drop_index("ix_visits_visit_date", table_name="visits")
    op.drop_index("ix_visits_attendee", table_name="visits")
    op.drop_index("ux_visits_uid", table_name="visits")
    op.drop_table("visits")
