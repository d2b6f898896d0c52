"""The "Generate Meal Plan" command and the grid edits that follow it.

Ordering matters for generate_meal_plan: the catalog is validated and every meal
type is generated before anything is written to the meal sheets, so a failed run
leaves the previous plan untouched.
"""
from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from typing import List, Optional

from mealgrid.domain.CalendarEntry import CalendarEntry, CalendarWeek
from mealgrid.domain.Plan import MealPlan
from mealgrid.domain.errors import InvalidSelection
from mealgrid.events.Event_Bus import EventBus
from mealgrid.events.event_helpers import publish_grid_updated, publish_plan_generated
from mealgrid.infra.Grid_Store import GridStore
from mealgrid.infra.Plan_Repository import PlanRepository
from mealgrid.logic.assign.assigner import generate_plan
from mealgrid.logic.calendar.layout import build_calendar, calendar_rows
from mealgrid.logic.calendar.projector import project
from mealgrid.logic.catalog.loader import RecipeCatalog
from mealgrid.logic.sides.picker import list_sides
from mealgrid.utilities.config import EMPTY_POOL_POLICY, PLAN_SEED

logger = logging.getLogger(__name__)


@dataclass
class GenerationResult:
    plan: MealPlan
    catalog: RecipeCatalog
    sides: List[str] = field(default_factory=list)
    calendar: List[CalendarWeek] = field(default_factory=list)


def default_rng() -> random.Random:
    """Seeded from PLAN_SEED when configured, otherwise fresh randomness."""
    return random.Random(PLAN_SEED) if PLAN_SEED is not None else random.Random()


def project_store(store: GridStore) -> List[CalendarEntry]:
    """Calendar entries for the current grid state (assignments and sides as stored)."""
    plans = PlanRepository(store)
    return project(plans.read_assignments(), plans.read_side_selections())


def refresh_calendar(store: GridStore) -> List[CalendarWeek]:
    """Re-project the calendar from the grid and write it to the Calendar sheet."""
    blocks = build_calendar(project_store(store))
    with store.batch():
        PlanRepository(store).write_calendar(calendar_rows(blocks))
    return blocks


def generate_meal_plan(store: GridStore, rng: Optional[random.Random] = None, on_empty: Optional[str] = None,
                       bus: Optional[EventBus] = None) -> GenerationResult:
    plans = PlanRepository(store)
    # A brand-new grid gets its Recipes sheet (header + specials) before reading it
    plans.recipes.ensure_sheet()
    catalog = plans.recipes.load_catalog()
    plan = generate_plan(catalog, rng or default_rng(), on_empty=on_empty or EMPTY_POOL_POLICY)

    with store.batch():
        plans.ensure_sheets()
        plans.write_assignments(plan)
        calendar = refresh_calendar(store)
    sides = list_sides(catalog)
    logger.info(f"Meal plan generated from {len(catalog)} recipes"
                + (f" (skipped: {', '.join(plan.skipped)})" if plan.skipped else ""))
    publish_plan_generated(store, plan.assignments.keys(), plan.skipped, len(catalog), bus=bus)
    return GenerationResult(plan=plan, catalog=catalog, sides=sides, calendar=calendar)


def update_meal(store: GridStore, meal_type: str, week: int, day: int, name: str,
                bus: Optional[EventBus] = None) -> None:
    """Override one generated meal. The name must be a recipe of the catalog."""
    plans = PlanRepository(store)
    catalog = plans.recipes.load_catalog()
    if name not in catalog:
        raise InvalidSelection(name, "recipe")
    plans.write_meal(meal_type, week, day, name)
    publish_grid_updated(store, meal_type, bus=bus)


def update_side(store: GridStore, meal_type: str, week: int, day: int, name: Optional[str],
                bus: Optional[EventBus] = None) -> None:
    """Choose the side for one meal; None or blank clears it."""
    plans = PlanRepository(store)
    name = (name or "").strip() or None
    if name is not None and name not in list_sides(plans.recipes.load_catalog()):
        raise InvalidSelection(name, "side")
    plans.write_side(meal_type, week, day, name)
    publish_grid_updated(store, meal_type, bus=bus)
