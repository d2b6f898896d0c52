import os
import random
import tempfile
import unittest
from mealgrid.domain.Recipe import Recipe
from mealgrid.domain.errors import DuplicateRecipe, EmptyCatalog, InvalidSelection, NoEligibleRecipes
from mealgrid.infra.Grid_Store import GridRange, InMemoryGridStore, JsonGridStore
from mealgrid.infra.Plan_Repository import PlanRepository
from mealgrid.logic.planning.pipeline import generate_meal_plan, project_store, update_meal, update_side
from mealgrid.utilities.constants import RECIPE_HEADER, meal_row, sides_row

RECIPE_ROWS = (
    [[f"Breakfast {i}", "Breakfast", True, False, False, False, False] for i in range(8)]
    + [[f"Lunch {i}", "Sandwiches", False, True, False, False, False] for i in range(7)]
    + [[f"Snack {i}", "Snacks", False, False, False, True, False] for i in range(3)]
    + [[f"Dinner {i}", "Chicken", False, False, True, False, False] for i in range(9)]
    + [["Rice", "Sides", False, False, False, False, True], ["Salad", "Sides", False, True, False, False, True]]
)


def make_store(rows=RECIPE_ROWS):
    store = InMemoryGridStore()
    store.write(GridRange("Recipes", 1, 1, len(rows) + 1, 7), [RECIPE_HEADER] + [list(r) for r in rows])
    return store


class CountingGridStore(JsonGridStore):
    """JSON store that counts how often the file is rewritten."""

    def __init__(self, path):
        super().__init__(path)
        self.saves = 0

    def _persist(self):
        self.saves += 1
        super()._persist()


class TestGenerateMealPlan(unittest.TestCase):

    def setUp(self):
        self.store = make_store()
        self.plans = PlanRepository(self.store)

    def test_writes_assignments_to_meal_sheets(self):
        result = generate_meal_plan(self.store, rng=random.Random(1))
        self.assertEqual(result.plan.skipped, [])
        self.assertEqual(result.sides, ["Rice", "Salad"])
        stored = self.plans.read_assignments()
        for meal_type, weeks in result.plan.assignments.items():
            self.assertEqual(stored[meal_type], [list(wa.names) for wa in weeks])
        self.assertEqual(self.store.read_row("Dinner", 1, 1, 1), ["Dinner"])
        self.assertEqual(self.store.read_row("Dinner", 2, 2, 7), ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"])
        self.assertEqual(self.store.read_row("Dinner", meal_row(3), 1, 1), ["Week 4"])
        self.assertEqual(self.store.read_row("Dinner", sides_row(3), 1, 1), ["Sides"])

    def test_no_repeats_within_a_week(self):
        generate_meal_plan(self.store, rng=random.Random(2))
        for meal_type in ("Breakfast", "Lunch", "Dinner"):
            for week in self.plans.read_assignments()[meal_type]:
                self.assertEqual(len(set(week)), 7, week)

    def test_calendar_sheet_is_written(self):
        result = generate_meal_plan(self.store, rng=random.Random(3))
        calendar = self.plans.read_calendar()
        self.assertEqual(calendar[0][0], "Week 1")
        self.assertEqual(calendar[2][1:], list(result.plan.week("Breakfast", 0).names))
        self.assertEqual(calendar[3], ["Sides"] + [""] * 7)
        self.assertEqual(len(result.calendar), 4)

    def test_same_seed_same_plan(self):
        first = generate_meal_plan(make_store(), rng=random.Random(8))
        second = generate_meal_plan(make_store(), rng=random.Random(8))
        self.assertEqual(first.plan.to_dict(), second.plan.to_dict())

    def test_regeneration_clears_sides(self):
        generate_meal_plan(self.store, rng=random.Random(1))
        update_side(self.store, "Lunch", 0, 0, "Salad")
        generate_meal_plan(self.store, rng=random.Random(2))
        self.assertEqual(self.plans.read_side_selections(), {})

    def test_new_grid_gets_default_recipes(self):
        store = InMemoryGridStore()
        with self.assertRaises(NoEligibleRecipes) as ctx:
            generate_meal_plan(store, rng=random.Random(0), on_empty="abort")
        self.assertEqual(ctx.exception.meal_type, "Lunch")
        names = [row[0] for row in PlanRepository(store).recipes.read_rows()]
        self.assertEqual(names, ["MYO", "Eat Out", "Leftovers"])
        # validation failed before any meal sheet was touched
        self.assertFalse(store.has_sheet("Breakfast"))

    def test_failed_run_keeps_previous_plan(self):
        generate_meal_plan(self.store, rng=random.Random(5))
        before = self.plans.read_assignments()
        last = self.store.last_row("Recipes")
        for row in range(2, last + 1):
            self.store.write_row("Recipes", row, 5, [False])
        with self.assertRaises(NoEligibleRecipes):
            generate_meal_plan(self.store, rng=random.Random(6), on_empty="abort")
        self.assertEqual(self.plans.read_assignments(), before)

    def test_skip_policy_leaves_meal_type_blank(self):
        rows = [r for r in RECIPE_ROWS if r[1] != "Chicken"]
        store = make_store(rows)
        result = generate_meal_plan(store, rng=random.Random(0), on_empty="skip")
        self.assertEqual(result.plan.skipped, ["Dinner"])
        entries = project_store(store)
        self.assertEqual(len(entries), 112)
        dinner = [e for e in entries if e.meal_type == "Dinner"]
        self.assertEqual(len(dinner), 28)
        self.assertTrue(all(e.meal_name is None for e in dinner))

    def test_empty_catalog(self):
        store = make_store([["", "", False, False, False, False, False]])
        with self.assertRaises(EmptyCatalog):
            generate_meal_plan(store)


class TestRecipeRepository(unittest.TestCase):

    def test_add_to_new_grid_checks_default_recipes(self):
        recipes = PlanRepository(InMemoryGridStore()).recipes
        with self.assertRaises(DuplicateRecipe):
            recipes.add_recipe(Recipe("myo", "MYO", breakfast=True))
        self.assertEqual([row[0] for row in recipes.read_rows()], ["MYO", "Eat Out", "Leftovers"])

    def test_add_to_new_grid_appends_after_defaults(self):
        recipes = PlanRepository(InMemoryGridStore()).recipes
        self.assertEqual(recipes.add_recipe(Recipe("Pancakes", "Breakfast", breakfast=True)), 5)
        self.assertEqual([row[0] for row in recipes.read_rows()], ["MYO", "Eat Out", "Leftovers", "Pancakes"])


class TestPersistence(unittest.TestCase):

    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.store = CountingGridStore(os.path.join(self.tmp.name, "grid.json"))
        self.store.write(GridRange("Recipes", 1, 1, len(RECIPE_ROWS) + 1, 7),
                         [RECIPE_HEADER] + [list(r) for r in RECIPE_ROWS])
        self.store.saves = 0

    def tearDown(self):
        self.tmp.cleanup()

    def test_generation_saves_the_grid_once(self):
        generate_meal_plan(self.store, rng=random.Random(3))
        self.assertEqual(self.store.saves, 1)
        reopened = JsonGridStore(self.store.path)
        self.assertEqual(PlanRepository(reopened).read_assignments(), PlanRepository(self.store).read_assignments())

    def test_new_grid_bootstrap_saves_once(self):
        store = CountingGridStore(os.path.join(self.tmp.name, "fresh.json"))
        self.assertTrue(PlanRepository(store).recipes.ensure_sheet())
        self.assertEqual(store.saves, 1)


class TestGridEdits(unittest.TestCase):

    def setUp(self):
        self.store = make_store()
        self.plans = PlanRepository(self.store)
        generate_meal_plan(self.store, rng=random.Random(7))

    def test_update_meal(self):
        update_meal(self.store, "Dinner", 1, 4, "Lunch 3")
        self.assertEqual(self.plans.read_meal("Dinner", 1, 4), "Lunch 3")
        entries = project_store(self.store)
        match = [e for e in entries if (e.week, e.day, e.meal_type) == (1, 4, "Dinner")]
        self.assertEqual(match[0].meal_name, "Lunch 3")

    def test_update_meal_rejects_unknown_recipe(self):
        before = self.plans.read_meal("Dinner", 0, 0)
        with self.assertRaises(InvalidSelection):
            update_meal(self.store, "Dinner", 0, 0, "Moon Cheese")
        self.assertEqual(self.plans.read_meal("Dinner", 0, 0), before)

    def test_update_side(self):
        update_side(self.store, "Dinner", 2, 6, "Rice")
        self.assertEqual(self.plans.read_side_selections(), {(2, 6, "Dinner"): "Rice"})
        update_side(self.store, "Dinner", 2, 6, None)
        self.assertEqual(self.plans.read_side_selections(), {})

    def test_update_side_rejects_non_side(self):
        with self.assertRaises(InvalidSelection):
            update_side(self.store, "Dinner", 0, 0, "Dinner 1")

    def test_slot_bounds(self):
        with self.assertRaises(KeyError):
            update_meal(self.store, "Brunch", 0, 0, "Lunch 1")
        with self.assertRaises(IndexError):
            update_side(self.store, "Lunch", 4, 0, "Rice")


if __name__ == '__main__':
    unittest.main()
