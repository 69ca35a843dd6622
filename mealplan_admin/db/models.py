"""
SQLAlchemy 2.0 Models for the meal plan admin backend.

Uses modern declarative syntax with Mapped[] type annotations.
"""

from datetime import date, datetime

from sqlalchemy import Boolean, CheckConstraint, DateTime, Index, Integer, false, func
from sqlalchemy.orm import Mapped, mapped_column

from mealplan_admin.db.base import Base


class Plan(Base):
    """
    Date-bounded meal plan.

    A plan is "closed" only when explicitly marked so. A plan whose computed
    end date has passed but which was never marked is "expired" and gets
    closed by the next creation request.
    """

    __tablename__ = "plans"
    __table_args__ = (
        CheckConstraint("total_days > 0", name="positive_total_days"),
        CheckConstraint("meals_per_day > 0", name="positive_meals_per_day"),
        Index("idx_plans_closed_start", "closed", "start_date"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    start_date: Mapped[date] = mapped_column(nullable=False)
    total_days: Mapped[int] = mapped_column(Integer, nullable=False)
    meals_per_day: Mapped[int] = mapped_column(Integer, nullable=False)
    closed: Mapped[bool] = mapped_column(Boolean, server_default=false(), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False
    )

    @classmethod
    def new(cls, start_date: date, total_days: int, meals_per_day: int) -> "Plan":
        """Build an unsaved, open plan. The id is assigned by the database on insert."""
        return cls(
            start_date=start_date,
            total_days=total_days,
            meals_per_day=meals_per_day,
            closed=False,
        )

    def __repr__(self) -> str:
        return (
            f"Plan(id={self.id!r}, start_date={self.start_date!r}, total_days={self.total_days!r}, "
            f"meals_per_day={self.meals_per_day!r}, closed={self.closed!r})"
        )
