"""Plan schemas."""

from datetime import date

from pydantic import Field

from mealplan_admin.schemas.base import BaseSchema


class PlanBase(BaseSchema):
    """Base plan schema."""

    total_days: int = Field(..., gt=0)
    meals_per_day: int = Field(..., gt=0)


class PlanCreate(PlanBase):
    """Schema for creating a plan.

    When start_date is omitted the service picks one: the first working day
    after the currently open plan ends, or today if nothing is open.
    Omitting start_date while another plan is already queued to start later
    is rejected with 409, since the new plan would queue behind it.
    """

    start_date: date | None = None


class PlanRead(PlanBase):
    """Schema for reading a plan together with its computed end date."""

    id: int
    start_date: date
    closed: bool
    end_date: date
