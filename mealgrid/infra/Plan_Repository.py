import logging
from typing import Dict, List, Optional, Sequence, Tuple

from mealgrid.domain.Plan import MealPlan
from mealgrid.infra.Grid_Store import GridRange, GridStore
from mealgrid.infra.Recipe_Repository import RecipeRepository
from mealgrid.utilities.constants import (
    CALENDAR_SHEET, DAY_FIRST_COL, DAY_HEADER_ROW, DAYS, DAYS_PER_WEEK, MEAL_TYPES, SIDES_LABEL, WEEKS,
    meal_row, sides_row
)

logger = logging.getLogger(__name__)

SideSelections = Dict[Tuple[int, int, str], str]


def _check_slot(meal_type: str, week: int, day: int) -> None:
    if meal_type not in MEAL_TYPES:
        raise KeyError(f"Unknown meal type: {meal_type}")
    if not 0 <= week < WEEKS or not 0 <= day < DAYS_PER_WEEK:
        raise IndexError(f"week/day out of range: week={week} day={day}")


class PlanRepository:
    """Meal sheets (one per meal type) and the Calendar sheet.

    Layout of a meal sheet: title in row 1, day headers in row 2 (columns B..H),
    then for each week a meal row labelled "Week N" followed by a "Sides" row.
    """

    def __init__(self, store: GridStore):
        self.store = store
        self.recipes = RecipeRepository(store)

    def ensure_sheets(self) -> None:
        """Create missing sheets and rebuild the meal-sheet skeleton (previous meals and sides are cleared)."""
        self.recipes.ensure_sheet()
        for meal_type in MEAL_TYPES:
            self.store.clear(meal_type)
            self.store.write_row(meal_type, 1, 1, [meal_type])
            self.store.write_row(meal_type, DAY_HEADER_ROW, DAY_FIRST_COL, list(DAYS))
            for w in range(WEEKS):
                self.store.write_row(meal_type, meal_row(w), 1, [f"Week {w + 1}"])
                self.store.write_row(meal_type, sides_row(w), 1, [SIDES_LABEL])
        if not self.store.has_sheet(CALENDAR_SHEET):
            self.store.clear(CALENDAR_SHEET)

    # ---- assignments ----
    def write_assignments(self, plan: MealPlan) -> None:
        for meal_type, weeks in plan.assignments.items():
            for wa in weeks:
                self.store.write_row(meal_type, meal_row(wa.week), DAY_FIRST_COL, list(wa.names))
        logger.info(f"Wrote assignments for {', '.join(plan.assignments) or 'no meal types'}")

    def read_assignments(self, meal_types: Sequence[str] = MEAL_TYPES) -> Dict[str, List[List[str]]]:
        """Meal rows per meal type as stored (user overrides included); absent sheets are left out."""
        result = {}
        for meal_type in meal_types:
            if not self.store.has_sheet(meal_type):
                continue
            result[meal_type] = [
                self.store.read_row(meal_type, meal_row(w), DAY_FIRST_COL, DAYS_PER_WEEK) for w in range(WEEKS)
            ]
        return result

    def read_side_selections(self, meal_types: Sequence[str] = MEAL_TYPES) -> SideSelections:
        sides: SideSelections = {}
        for meal_type in meal_types:
            if not self.store.has_sheet(meal_type):
                continue
            for w in range(WEEKS):
                row = self.store.read_row(meal_type, sides_row(w), DAY_FIRST_COL, DAYS_PER_WEEK)
                for d, value in enumerate(row):
                    text = str(value).strip()
                    if text:
                        sides[(w, d, meal_type)] = text
        return sides

    def read_meal(self, meal_type: str, week: int, day: int) -> str:
        _check_slot(meal_type, week, day)
        return self.store.read_row(meal_type, meal_row(week), DAY_FIRST_COL + day, 1)[0]

    def write_meal(self, meal_type: str, week: int, day: int, name: str) -> None:
        _check_slot(meal_type, week, day)
        self.store.write_row(meal_type, meal_row(week), DAY_FIRST_COL + day, [name])

    def write_side(self, meal_type: str, week: int, day: int, name: Optional[str]) -> None:
        _check_slot(meal_type, week, day)
        self.store.write_row(meal_type, sides_row(week), DAY_FIRST_COL + day, [name or ""])

    # ---- calendar ----
    def write_calendar(self, rows: List[list]) -> None:
        self.store.clear(CALENDAR_SHEET)
        if rows:
            self.store.write(GridRange(CALENDAR_SHEET, 1, 1, len(rows), len(rows[0])), rows)

    def read_calendar(self) -> List[list]:
        last = self.store.last_row(CALENDAR_SHEET)
        if not last:
            return []
        return self.store.read(GridRange(CALENDAR_SHEET, 1, 1, last, DAYS_PER_WEEK + 1))
