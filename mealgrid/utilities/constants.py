from typing import Final

MEAL_TYPES: Final[tuple[str, ...]] = ("Breakfast", "Lunch", "Snacks", "Dinner")
DAYS: Final[tuple[str, ...]] = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
WEEKS: Final[int] = 4
DAYS_PER_WEEK: Final[int] = len(DAYS)

# Recipe flag attribute that makes a recipe eligible for each meal type
MEAL_TYPE_FLAGS: Final[dict[str, str]] = {
    "Breakfast": "breakfast",
    "Lunch": "lunch",
    "Snacks": "snacks",
    "Dinner": "dinner",
}

# Sheet layout (1-based rows/columns, like the spreadsheet it replaces)
RECIPES_SHEET: Final[str] = "Recipes"
CALENDAR_SHEET: Final[str] = "Calendar"
RECIPE_HEADER: Final[list[str]] = ["Recipe Name", "Category", "Breakfast", "Lunch", "Dinner", "Snacks", "Side"]
RECIPE_COLUMNS: Final[int] = len(RECIPE_HEADER)
RECIPE_FIRST_ROW: Final[int] = 2
DAY_FIRST_COL: Final[int] = 2
DAY_HEADER_ROW: Final[int] = 2
FIRST_MEAL_ROW: Final[int] = 3
SIDES_LABEL: Final[str] = "Sides"

SPECIAL_RECIPES: Final[list[list]] = [
    ["MYO", "MYO", True, False, True, False, False],
    ["Eat Out", "Eat Out", False, False, True, False, False],
    ["Leftovers", "Leftovers", False, False, False, False, False],
]

CATEGORIES: Final[list[str]] = [
    "Chicken", "Beef", "Vegetarian", "Tacos", "MYO", "Eat Out", "Leftovers", "Pasta", "Soup",
    "Breakfast", "Seafood", "Pork", "Salads", "Asian", "Sandwiches", "Pizza", "Snacks", "Sides",
]

# Color scheme
WEEK_COLORS: Final[tuple[str, ...]] = ("#5A8CB8", "#6BA587", "#D4845C", "#C97BA4")
MEAL_TYPE_COLORS: Final[dict[str, str]] = {
    "Breakfast": "#D4845C",
    "Lunch": "#6BA587",
    "Snacks": "#C97BA4",
    "Dinner": "#5A8CB8",
}
LIGHT_FACTOR: Final[float] = 0.4
SIDE_LABEL_FACTOR: Final[float] = 0.5
SIDE_CELL_FACTOR: Final[float] = 0.8


def meal_row(week: int) -> int:
    """Grid row holding the meals of ``week`` (0-based) on a meal sheet."""
    return FIRST_MEAL_ROW + week * 2


def sides_row(week: int) -> int:
    """Grid row holding the side selections of ``week`` (0-based) on a meal sheet."""
    return FIRST_MEAL_ROW + 1 + week * 2
