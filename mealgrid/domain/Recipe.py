"""Recipe domain entity: name, category and meal-type / side flags."""
from typing import List

from mealgrid.utilities.constants import MEAL_TYPE_FLAGS


class Recipe:
    def __init__(self, name: str, category: str = "", breakfast: bool = False, lunch: bool = False,
                 dinner: bool = False, snacks: bool = False, side: bool = False):
        self.name = name
        self.category = category
        self.breakfast = breakfast
        self.lunch = lunch
        self.dinner = dinner
        self.snacks = snacks
        self.side = side

    def __str__(self) -> str:
        tags = [meal for meal, flag in MEAL_TYPE_FLAGS.items() if getattr(self, flag)]
        if self.side:
            tags.append("Side")
        return f"{self.name} ({self.category or '-'}) - {', '.join(tags) or 'unassigned'}"

    __repr__ = __str__

    def __eq__(self, other):
        if not isinstance(other, Recipe):
            return NotImplemented
        return self.to_row() == other.to_row()

    def is_eligible(self, meal_type: str) -> bool:
        """True when the recipe may be assigned to ``meal_type`` (KeyError for unknown types)."""
        return bool(getattr(self, MEAL_TYPE_FLAGS[meal_type]))

    def meal_types(self) -> List[str]:
        return [meal for meal in MEAL_TYPE_FLAGS if self.is_eligible(meal)]

    def to_dict(self):
        return {
            "name": self.name,
            "category": self.category,
            "breakfast": self.breakfast,
            "lunch": self.lunch,
            "dinner": self.dinner,
            "snacks": self.snacks,
            "side": self.side,
        }

    def to_row(self) -> list:
        """Recipes-sheet row: name, category, breakfast, lunch, dinner, snacks, side."""
        return [self.name, self.category, self.breakfast, self.lunch, self.dinner, self.snacks, self.side]
