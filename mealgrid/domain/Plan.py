"""Plan domain entities: one week of assignments for a meal type, and a whole generated plan."""
from dataclasses import dataclass, field
from typing import Dict, List, Tuple


@dataclass(frozen=True)
class WeekAssignment:
    meal_type: str
    week: int
    names: Tuple[str, ...]

    def __len__(self) -> int:
        return len(self.names)


@dataclass
class MealPlan:
    assignments: Dict[str, List[WeekAssignment]] = field(default_factory=dict)
    skipped: List[str] = field(default_factory=list)

    def week(self, meal_type: str, week: int) -> WeekAssignment:
        return self.assignments[meal_type][week]

    def to_dict(self):
        return {
            "assignments": {
                meal: [list(wa.names) for wa in weeks] for meal, weeks in self.assignments.items()
            },
            "skipped": list(self.skipped),
        }
