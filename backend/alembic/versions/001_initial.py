"""Initial schema: time_entries, sleep_settings

Revision ID: 001
Revises:
Create Date: 2025-03-10

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "time_entries",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("type", sa.String(16), nullable=False),
        sa.Column("time", sa.String(5), nullable=False),
        sa.Column("date", sa.Date(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=True),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_time_entries_date", "time_entries", ["date"], unique=False)

    op.create_table(
        "sleep_settings",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("required_sleep_minutes", sa.Integer(), nullable=False, server_default="720"),
        sa.Column("scheduled_nap_time", sa.String(5), nullable=True),
        sa.Column("scheduled_bedtime", sa.String(5), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=True),
        sa.PrimaryKeyConstraint("id"),
    )


def downgrade() -> None:
    op.drop_table("sleep_settings")
    op.drop_index("ix_time_entries_date", table_name="time_entries")
    op.drop_table("time_entries")
