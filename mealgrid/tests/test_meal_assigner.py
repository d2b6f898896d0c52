import random
import unittest
from collections import Counter
from mealgrid.domain.Recipe import Recipe
from mealgrid.domain.errors import NoEligibleRecipes
from mealgrid.logic.assign.assigner import generate, generate_plan
from mealgrid.logic.catalog.loader import RecipeCatalog


def _pool(names, meal="breakfast"):
    return [Recipe(name, "Test", **{meal: True}) for name in names]


class TestGenerate(unittest.TestCase):

    def test_large_pool_has_no_repeats_within_a_week(self):
        pool = _pool("ABCDEFGH")
        for seed in range(20):
            weeks = generate(pool, "Breakfast", rng=random.Random(seed))
            self.assertEqual(len(weeks), 4)
            for w, wa in enumerate(weeks):
                self.assertEqual(wa.week, w)
                self.assertEqual(wa.meal_type, "Breakfast")
                self.assertEqual(len(wa), 7)
                self.assertEqual(len(set(wa.names)), 7, wa.names)
                self.assertTrue(set(wa.names) <= set("ABCDEFGH"))

    def test_pool_of_exactly_seven_is_a_permutation(self):
        pool = _pool("ABCDEFG")
        for wa in generate(pool, "Breakfast", rng=random.Random(3)):
            self.assertEqual(sorted(wa.names), list("ABCDEFG"))

    def test_small_pool_repeats_round_robin(self):
        for size in range(1, 7):
            pool = _pool("UVWXYZ"[:size])
            for seed in range(10):
                for wa in generate(pool, "Breakfast", rng=random.Random(seed)):
                    # every member once before any member twice
                    self.assertEqual(len(set(wa.names[:size])), size, wa.names)
                    counts = Counter()
                    for name in wa.names:
                        counts[name] += 1
                        spread = [counts[r.name] for r in pool]
                        self.assertLessEqual(max(spread) - min(spread), 1, wa.names)

    def test_three_recipes_fill_a_week(self):
        pool = _pool("XYZ")
        wa = generate(pool, "Breakfast", rng=random.Random(11))[0]
        counts = Counter(wa.names)
        self.assertEqual(set(counts), {"X", "Y", "Z"})
        self.assertTrue(all(c >= 2 for c in counts.values()))
        self.assertEqual(sorted(counts.values()), [2, 2, 3])

    def test_same_seed_same_output(self):
        pool = _pool("ABCDEFGHIJ")
        first = generate(pool, "Breakfast", rng=random.Random(42))
        second = generate(pool, "Breakfast", rng=random.Random(42))
        self.assertEqual(first, second)

    def test_pool_is_not_reordered(self):
        pool = _pool("ABCDEFGH")
        before = [r.name for r in pool]
        generate(pool, "Breakfast", rng=random.Random(5))
        self.assertEqual([r.name for r in pool], before)

    def test_custom_shape(self):
        weeks = generate(_pool("ABC"), "Breakfast", weeks=2, days_per_week=5, rng=random.Random(1))
        self.assertEqual(len(weeks), 2)
        self.assertTrue(all(len(wa) == 5 for wa in weeks))

    def test_empty_pool(self):
        with self.assertRaises(NoEligibleRecipes) as ctx:
            generate([], "Dinner")
        self.assertEqual(ctx.exception.meal_type, "Dinner")
        self.assertIn("Dinner", ctx.exception.message)

    def test_invalid_shape(self):
        with self.assertRaises(ValueError):
            generate(_pool("AB"), "Breakfast", weeks=0)
        with self.assertRaises(ValueError):
            generate(_pool("AB"), "Breakfast", days_per_week=0)


class TestGeneratePlan(unittest.TestCase):

    def setUp(self):
        rows = [[f"B{i}", "Breakfast", True, False, False, False, False] for i in range(8)]
        rows += [[f"L{i}", "Lunch", False, True, False, True, False] for i in range(4)]
        self.catalog = RecipeCatalog.load(rows)

    def test_abort_on_missing_meal_type(self):
        with self.assertRaises(NoEligibleRecipes) as ctx:
            generate_plan(self.catalog, random.Random(0))
        self.assertEqual(ctx.exception.meal_type, "Dinner")

    def test_skip_missing_meal_type(self):
        plan = generate_plan(self.catalog, random.Random(0), on_empty="skip")
        self.assertEqual(list(plan.assignments), ["Breakfast", "Lunch", "Snacks"])
        self.assertEqual(plan.skipped, ["Dinner"])
        self.assertTrue(set(plan.week("Snacks", 0).names) <= {"L0", "L1", "L2", "L3"})

    def test_plan_is_reproducible(self):
        a = generate_plan(self.catalog, random.Random(9), on_empty="skip")
        b = generate_plan(self.catalog, random.Random(9), on_empty="skip")
        self.assertEqual(a.to_dict(), b.to_dict())

    def test_unknown_policy(self):
        with self.assertRaises(ValueError):
            generate_plan(self.catalog, on_empty="ignore")


if __name__ == '__main__':
    unittest.main()
