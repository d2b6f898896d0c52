"""Calendar domain entities: derived, read-only views over the plan."""
from dataclasses import dataclass, field
from typing import List, Optional


@dataclass(frozen=True)
class CalendarEntry:
    week: int
    day: int
    meal_type: str
    meal_name: Optional[str] = None
    side_name: Optional[str] = None

    def to_dict(self):
        return {
            "week": self.week,
            "day": self.day,
            "meal_type": self.meal_type,
            "meal_name": self.meal_name,
            "side_name": self.side_name,
        }


@dataclass
class CalendarRow:
    meal_type: str
    meals: List[str]
    sides: List[str]


@dataclass
class CalendarWeek:
    """One week block of the calendar view, with its computed colors."""
    week: int
    label: str
    color: str
    light_color: str
    side_label_color: str
    side_cell_color: str
    days: List[str]
    rows: List[CalendarRow] = field(default_factory=list)

    def to_dict(self):
        return {
            "week": self.week,
            "label": self.label,
            "color": self.color,
            "light_color": self.light_color,
            "side_label_color": self.side_label_color,
            "side_cell_color": self.side_cell_color,
            "days": list(self.days),
            "rows": [{"meal_type": r.meal_type, "meals": list(r.meals), "sides": list(r.sides)} for r in self.rows],
        }
