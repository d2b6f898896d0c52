"""Calendar projection: (week, day, meal type) -> resolved meal and side names.

The output is always rectangular, weeks x meal types x days, whatever is missing
upstream. A meal type without assignments (empty pool) gets ``meal_name=None``
and a missing or blank side selection gets ``side_name=None``.
"""
from __future__ import annotations

from typing import Dict, List, Mapping, Optional, Sequence, Tuple

from mealgrid.domain.CalendarEntry import CalendarEntry
from mealgrid.utilities.constants import DAYS_PER_WEEK, MEAL_TYPES, WEEKS

SideKey = Tuple[int, int, str]


def _cell(value) -> Optional[str]:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _meal_at(weeks: Sequence, week: int, day: int) -> Optional[str]:
    # Accepts WeekAssignment objects or plain rows read back from the grid
    if week >= len(weeks) or weeks[week] is None:
        return None
    names = getattr(weeks[week], "names", weeks[week])
    if day >= len(names):
        return None
    return _cell(names[day])


def project(assignments_by_meal_type: Mapping[str, Sequence],
            side_selections: Optional[Mapping[SideKey, Optional[str]]] = None,
            weeks: int = WEEKS, days_per_week: int = DAYS_PER_WEEK,
            meal_types: Sequence[str] = MEAL_TYPES) -> List[CalendarEntry]:
    """Ordered by week, then meal type, then day."""
    sides = side_selections or {}
    entries = []
    for w in range(weeks):
        for meal_type in meal_types:
            meal_weeks = assignments_by_meal_type.get(meal_type) or []
            for d in range(days_per_week):
                entries.append(CalendarEntry(
                    week=w,
                    day=d,
                    meal_type=meal_type,
                    meal_name=_meal_at(meal_weeks, w, d),
                    side_name=_cell(sides.get((w, d, meal_type))),
                ))
    return entries


def index_entries(entries: Sequence[CalendarEntry]) -> Dict[SideKey, CalendarEntry]:
    return {(e.week, e.day, e.meal_type): e for e in entries}
