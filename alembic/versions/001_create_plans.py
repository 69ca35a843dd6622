"""Create plans table.

Revision ID: 001
Revises:
Create Date: 2026-10-19

Changes:
- Create plans table (start date, length in working days, meals per day, closed flag)
- Index on (closed, start_date) for the open-plan scan
"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "plans",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("start_date", sa.Date(), nullable=False),
        sa.Column("total_days", sa.Integer(), nullable=False),
        sa.Column("meals_per_day", sa.Integer(), nullable=False),
        sa.Column("closed", sa.Boolean(), server_default=sa.false(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.CheckConstraint("total_days > 0", name="positive_total_days"),
        sa.CheckConstraint("meals_per_day > 0", name="positive_meals_per_day"),
    )

    op.create_index(
        "idx_plans_closed_start",
        "plans",
        ["closed", "start_date"],
    )


def downgrade() -> None:
    op.drop_index("idx_plans_closed_start", table_name="plans")
    op.drop_table("plans")
