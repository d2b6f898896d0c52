"""Meal assignment: fill every (week, day) slot of a meal type with a recipe name.

Per week the pool is shuffled, slot ``d`` takes ``shuffled[d % n]`` and, when that
name is already used this week, the shuffled order is probed forward for the first
unused name. A pool with at least ``days_per_week`` recipes therefore never repeats
within a week; a smaller pool repeats in round-robin order. Weeks are independent,
so the same recipe may come back in a later week.
"""
from __future__ import annotations

import logging
import random
from typing import List, Optional, Sequence

from mealgrid.domain.Plan import MealPlan, WeekAssignment
from mealgrid.domain.Recipe import Recipe
from mealgrid.domain.errors import NoEligibleRecipes
from mealgrid.logic.catalog.loader import RecipeCatalog
from mealgrid.utilities.constants import DAYS_PER_WEEK, MEAL_TYPES, WEEKS

logger = logging.getLogger(__name__)


def _fill_week(names: List[str], days_per_week: int) -> List[str]:
    n = len(names)
    used = set()
    week = []
    for d in range(days_per_week):
        name = names[d % n]
        attempts = 0
        while name in used and attempts < n:
            attempts += 1
            name = names[(d + attempts) % n]
        used.add(name)
        week.append(name)
    return week


def generate(pool: Sequence[Recipe], meal_type: str, weeks: int = WEEKS, days_per_week: int = DAYS_PER_WEEK,
             rng: Optional[random.Random] = None) -> List[WeekAssignment]:
    """Return ``weeks`` WeekAssignments of ``days_per_week`` names for ``meal_type``.

    Raises NoEligibleRecipes when the pool is empty. Pass a seeded ``random.Random``
    to make the result reproducible.
    """
    if weeks < 1 or days_per_week < 1:
        raise ValueError("weeks and days_per_week must be positive")
    if not pool:
        raise NoEligibleRecipes(meal_type)
    rng = rng or random.Random()
    if len(pool) < days_per_week:
        logger.info(f"{meal_type}: only {len(pool)} recipes for {days_per_week} days, meals will repeat")

    result = []
    for w in range(weeks):
        shuffled = [r.name for r in pool]
        rng.shuffle(shuffled)
        result.append(WeekAssignment(meal_type, w, tuple(_fill_week(shuffled, days_per_week))))
    return result


def generate_plan(catalog: RecipeCatalog, rng: Optional[random.Random] = None, weeks: int = WEEKS,
                  days_per_week: int = DAYS_PER_WEEK, on_empty: str = "abort",
                  meal_types: Sequence[str] = MEAL_TYPES) -> MealPlan:
    """Generate every meal type from one random source.

    on_empty="abort" lets NoEligibleRecipes propagate; "skip" leaves the meal type
    out of the plan and records it in ``MealPlan.skipped``.
    """
    if on_empty not in ("abort", "skip"):
        raise ValueError(f"on_empty must be 'abort' or 'skip', got {on_empty!r}")
    rng = rng or random.Random()
    plan = MealPlan()
    for meal_type in meal_types:
        try:
            plan.assignments[meal_type] = generate(catalog.pool(meal_type), meal_type, weeks, days_per_week, rng)
        except NoEligibleRecipes:
            if on_empty == "abort":
                raise
            logger.warning(f"No recipes for {meal_type}; leaving it empty")
            plan.skipped.append(meal_type)
    return plan
