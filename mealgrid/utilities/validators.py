"""
Input validation schemas using Pydantic for recipe rows and grid edits.
"""
from pydantic import BaseModel, Field, field_validator
from typing import Optional

from mealgrid.utilities.constants import DAYS_PER_WEEK, MEAL_TYPES, WEEKS


def _cell_text(v) -> str:
    """Grid cells may hold any scalar; text columns are read as trimmed strings."""
    if v is None:
        return ""
    return str(v).strip()


def coerce_flag(v) -> bool:
    """Checkbox cell -> bool. Accepts real booleans and case-insensitive 'true'/'false' text."""
    if isinstance(v, bool):
        return v
    text = _cell_text(v).lower()
    if text == "true":
        return True
    if text in ("false", ""):
        return False
    raise ValueError(f"expected TRUE or FALSE, got {v!r}")


class RecipeRowInput(BaseModel):
    """Schema for one row of the Recipes sheet."""
    name: str = Field(..., min_length=1, max_length=200)
    category: str = ""
    breakfast: bool = False
    lunch: bool = False
    dinner: bool = False
    snacks: bool = False
    side: bool = False

    @field_validator('name', 'category', mode='before')
    @classmethod
    def strip_whitespace(cls, v):
        """Remove leading/trailing whitespace."""
        return _cell_text(v)

    @field_validator('breakfast', 'lunch', 'dinner', 'snacks', 'side', mode='before')
    @classmethod
    def validate_flag(cls, v):
        return coerce_flag(v)


class RecipeInput(RecipeRowInput):
    """Schema for a recipe added through the API."""

    @field_validator('name')
    @classmethod
    def validate_name(cls, v):
        """Validate recipe name."""
        if not v.strip():
            raise ValueError('Recipe name cannot be empty')
        return v.strip()


class _SlotInput(BaseModel):
    meal_type: str = Field(..., pattern=r'^(' + '|'.join(MEAL_TYPES) + r')$')
    week: int = Field(..., ge=0, le=WEEKS - 1)
    day: int = Field(..., ge=0, le=DAYS_PER_WEEK - 1)


class MealUpdateInput(_SlotInput):
    """Schema for overriding one generated meal."""
    recipe_name: str = Field(..., min_length=1)

    @field_validator('recipe_name')
    @classmethod
    def strip_name(cls, v):
        v = v.strip()
        if not v:
            raise ValueError('Recipe name cannot be empty')
        return v


class SideUpdateInput(_SlotInput):
    """Schema for choosing (or clearing, with null/blank) the side of one meal."""
    side_name: Optional[str] = None

    @field_validator('side_name')
    @classmethod
    def blank_to_none(cls, v):
        if v is None:
            return None
        return v.strip() or None
