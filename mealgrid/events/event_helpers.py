"""Event helper utilities.

Quick import:
    from mealgrid.events.event_helpers import publish_grid_updated, publish_plan_generated
"""
from __future__ import annotations
from typing import Any, Iterable, Optional
from .Event_Bus import EventBus, GLOBAL_EVENT_BUS, GRID_UPDATED, PLAN_GENERATED

__all__ = ['publish_grid_updated', 'publish_plan_generated', 'GRID_UPDATED', 'PLAN_GENERATED']


def publish_grid_updated(store: Any, sheet: str, bus: Optional[EventBus] = None):
    """Publish a grid.updated event for one sheet."""
    (bus or GLOBAL_EVENT_BUS).publish(GRID_UPDATED, {'sheet': sheet, 'store': store})


def publish_plan_generated(store: Any, meal_types: Iterable[str], skipped: Iterable[str], recipes: int,
                           bus: Optional[EventBus] = None):
    """Publish a plan.generated event summarising a finished run."""
    (bus or GLOBAL_EVENT_BUS).publish(PLAN_GENERATED, {
        'store': store,
        'meal_types': list(meal_types),
        'skipped': list(skipped),
        'recipes': recipes,
    })
