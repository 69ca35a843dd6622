"""API routes package."""

from mealplan_admin.api.routes import plans

__all__ = [
    "plans",
]
