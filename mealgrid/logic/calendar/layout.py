"""Calendar view: week blocks, labels and the color scheme derived from the week index."""
from __future__ import annotations

from typing import List, Sequence

from mealgrid.domain.CalendarEntry import CalendarEntry, CalendarRow, CalendarWeek
from mealgrid.logic.calendar.projector import index_entries
from mealgrid.utilities.constants import (
    DAYS, LIGHT_FACTOR, MEAL_TYPES, SIDE_CELL_FACTOR, SIDE_LABEL_FACTOR, SIDES_LABEL, WEEK_COLORS, WEEKS
)


def lighten(color: str, factor: float) -> str:
    """Move every RGB channel of a '#rrggbb' color towards white by ``factor`` (0..1)."""
    if not 0 <= factor <= 1:
        raise ValueError(f"factor must be between 0 and 1, got {factor}")
    hex_part = color.lstrip("#")
    if len(hex_part) != 6:
        raise ValueError(f"expected a #rrggbb color, got {color!r}")
    channels = [int(hex_part[i:i + 2], 16) for i in (0, 2, 4)]
    # Round half up, not Python's banker's rounding
    lifted = [int(c + (255 - c) * factor + 0.5) for c in channels]
    return "#" + "".join(f"{c:02x}" for c in lifted)


def week_label(week: int) -> str:
    return f"Week {week + 1}"


def build_calendar(entries: Sequence[CalendarEntry], weeks: int = WEEKS,
                   days: Sequence[str] = DAYS, meal_types: Sequence[str] = MEAL_TYPES) -> List[CalendarWeek]:
    by_slot = index_entries(entries)
    blocks = []
    for w in range(weeks):
        color = WEEK_COLORS[w % len(WEEK_COLORS)]
        light = lighten(color, LIGHT_FACTOR)
        block = CalendarWeek(
            week=w,
            label=week_label(w),
            color=color,
            light_color=light,
            side_label_color=lighten(light, SIDE_LABEL_FACTOR),
            side_cell_color=lighten(light, SIDE_CELL_FACTOR),
            days=list(days),
        )
        for meal_type in meal_types:
            slots = [by_slot.get((w, d, meal_type)) for d in range(len(days))]
            block.rows.append(CalendarRow(
                meal_type=meal_type,
                meals=[(e.meal_name or "") if e else "" for e in slots],
                sides=[(e.side_name or "") if e else "" for e in slots],
            ))
        blocks.append(block)
    return blocks


def calendar_rows(blocks: Sequence[CalendarWeek]) -> List[List[str]]:
    """Flatten week blocks into the rows of the Calendar sheet (8 columns each)."""
    rows = []
    for block in blocks:
        width = len(block.days) + 1
        rows.append([block.label] + [""] * (width - 1))
        rows.append([""] + list(block.days))
        for row in block.rows:
            rows.append([row.meal_type] + list(row.meals))
            rows.append([SIDES_LABEL] + list(row.sides))
        rows.append([""] * width)
    return rows
