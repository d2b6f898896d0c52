import random
import unittest
from mealgrid.domain.Recipe import Recipe
from mealgrid.logic.assign.assigner import generate
from mealgrid.logic.calendar.projector import project


class TestCalendarProjector(unittest.TestCase):

    def setUp(self):
        pool = [Recipe(n, "Test", breakfast=True, lunch=True, snacks=True) for n in "ABCDEFGH"]
        rng = random.Random(4)
        self.assignments = {
            "Breakfast": generate(pool, "Breakfast", rng=rng),
            "Lunch": generate(pool, "Lunch", rng=rng),
            "Snacks": generate(pool, "Snacks", rng=rng),
        }

    def test_missing_meal_type_keeps_shape(self):
        entries = project(self.assignments, {})
        self.assertEqual(len(entries), 4 * 7 * 4)
        dinner = [e for e in entries if e.meal_type == "Dinner"]
        self.assertEqual(len(dinner), 28)
        self.assertTrue(all(e.meal_name is None for e in dinner))

    def test_entries_resolve_assignments(self):
        entries = project(self.assignments, {})
        lunch_w2 = [e.meal_name for e in entries if e.meal_type == "Lunch" and e.week == 2]
        self.assertEqual(tuple(lunch_w2), self.assignments["Lunch"][2].names)

    def test_order_is_week_then_meal_type_then_day(self):
        entries = project(self.assignments, {})
        first = entries[0]
        self.assertEqual((first.week, first.day, first.meal_type), (0, 0, "Breakfast"))
        self.assertEqual((entries[7].week, entries[7].day, entries[7].meal_type), (0, 0, "Lunch"))
        self.assertEqual(entries[28].week, 1)

    def test_sides_pass_through(self):
        sides = {(0, 0, "Breakfast"): "Fruit", (1, 6, "Lunch"): "Chips", (2, 3, "Snacks"): "  "}
        entries = project(self.assignments, sides)
        by_slot = {(e.week, e.day, e.meal_type): e.side_name for e in entries}
        self.assertEqual(by_slot[(0, 0, "Breakfast")], "Fruit")
        self.assertEqual(by_slot[(1, 6, "Lunch")], "Chips")
        self.assertIsNone(by_slot[(2, 3, "Snacks")])
        self.assertEqual(sum(1 for v in by_slot.values() if v), 2)

    def test_no_sides_means_null_sides(self):
        entries = project(self.assignments, None)
        self.assertTrue(all(e.side_name is None for e in entries))

    def test_plain_rows_from_the_grid(self):
        rows = {"Dinner": [["Pizza", "", "Tacos", "", "", "", ""]]}
        entries = project(rows, {})
        dinner_w0 = [e.meal_name for e in entries if e.meal_type == "Dinner" and e.week == 0]
        self.assertEqual(dinner_w0, ["Pizza", None, "Tacos", None, None, None, None])
        dinner_w3 = [e.meal_name for e in entries if e.meal_type == "Dinner" and e.week == 3]
        self.assertEqual(dinner_w3, [None] * 7)

    def test_custom_dimensions(self):
        entries = project({}, {}, weeks=2, days_per_week=3, meal_types=("Lunch",))
        self.assertEqual(len(entries), 6)


if __name__ == '__main__':
    unittest.main()
