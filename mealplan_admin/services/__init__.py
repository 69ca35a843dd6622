"""Business services."""

from mealplan_admin.services.dates import WorkingDayCalculator
from mealplan_admin.services.plans import PlanService

__all__ = ["WorkingDayCalculator", "PlanService"]
