"""
FastAPI dependencies.

The plan service is composed per request from explicit parts:
a session-bound PlanRepository and a WorkingDayCalculator built from
settings. No module-level service instances.
"""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from mealplan_admin.config import Settings, get_settings
from mealplan_admin.db.session import get_db
from mealplan_admin.repositories.plans import PlanRepository
from mealplan_admin.services.dates import WorkingDayCalculator
from mealplan_admin.services.plans import PlanService


def get_calculator(
    settings: Annotated[Settings, Depends(get_settings)],
) -> WorkingDayCalculator:
    """Build the date calculator from the configured holidays."""
    return WorkingDayCalculator(settings.holidays)


def get_plan_service(
    db: Annotated[AsyncSession, Depends(get_db)],
    calculator: Annotated[WorkingDayCalculator, Depends(get_calculator)],
) -> PlanService:
    """Compose a PlanService for the current request's session."""
    return PlanService(PlanRepository(db), calculator)


# Type alias for dependency injection
PlanServiceDep = Annotated[PlanService, Depends(get_plan_service)]
