"""Error taxonomy for catalog loading, generation and grid edits.

Every error carries a human-readable ``message`` that the caller can show to the
user as-is (API responses, alerts).
"""
from __future__ import annotations
from typing import Optional


class MealPlannerError(Exception):
    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class EmptyCatalog(MealPlannerError):
    def __init__(self, message: str = "No recipes found."):
        super().__init__(message)


class NoEligibleRecipes(MealPlannerError):
    def __init__(self, meal_type: str):
        super().__init__(f"No recipes are marked for {meal_type}. Tick the {meal_type} column for at least one recipe.")
        self.meal_type = meal_type


class ValidationError(MealPlannerError):
    """A recipe row that could not be turned into a Recipe. Collected, never fatal."""

    def __init__(self, row_index: int, reason: str, name: Optional[str] = None):
        label = f"Row {row_index}" + (f" ({name})" if name else "")
        super().__init__(f"{label}: {reason}")
        self.row_index = row_index
        self.reason = reason
        self.name = name


class InvalidSelection(MealPlannerError):
    """A grid edit tried to place a value that is not in the allowed list."""

    def __init__(self, value: str, allowed: str):
        super().__init__(f"'{value}' is not a valid {allowed}.")
        self.value = value
        self.allowed = allowed


class DuplicateRecipe(MealPlannerError):
    def __init__(self, name: str):
        super().__init__("Recipe with this name already exists")
        self.name = name


__all__ = [
    'MealPlannerError', 'EmptyCatalog', 'NoEligibleRecipes', 'ValidationError', 'InvalidSelection', 'DuplicateRecipe'
]
