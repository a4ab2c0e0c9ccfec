"""Create weekly agenda, daily check-in and weekly review document tables.

Revision ID: 202610010900
Revises:
Create Date: 2026-10-01 09:00:00.000000
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "202610010900"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _json_type() -> sa.types.TypeEngine:
    return sa.JSON().with_variant(postgresql.JSONB(astext_type=sa.Text()), "postgresql")


def upgrade() -> None:
    op.create_table(
        "weekly_agendas",
        sa.Column("week_of", sa.Date(), primary_key=True),
        sa.Column("data", _json_type(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )
    op.create_table(
        "daily_ops",
        sa.Column("date", sa.Date(), primary_key=True),
        sa.Column("week_of", sa.Date(), nullable=False),
        sa.Column("data", _json_type(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )
    op.create_index("ix_daily_ops_week_of", "daily_ops", ["week_of"])
    op.create_table(
        "weekly_reviews",
        sa.Column("week_of", sa.Date(), primary_key=True),
        sa.Column("data", _json_type(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )


def downgrade() -> None:
    op.drop_table("weekly_reviews")
    op.drop_index("ix_daily_ops_week_of", table_name="daily_ops")
    op.drop_table("daily_ops")
    op.drop_table("weekly_agendas")
