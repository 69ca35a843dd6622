"""Meal plan administration backend."""
