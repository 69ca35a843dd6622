"""Pydantic schemas for API request/response validation."""

from mealplan_admin.schemas.plans import PlanCreate, PlanRead

__all__ = [
    "PlanCreate",
    "PlanRead",
]
