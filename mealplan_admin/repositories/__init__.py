"""Persistence adapters."""

from mealplan_admin.repositories.plans import PlanRepository

__all__ = ["PlanRepository"]
