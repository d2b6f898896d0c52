"""Keeps the Calendar sheet in step with the meal sheets.

The calendar is a derived view: whenever a meal sheet changes (a meal override or
a side selection) it is projected again from the grid. ``start()`` registers the
handler on the global bus once; ``stop()`` removes it.
"""
from __future__ import annotations
import logging
from typing import Any, Optional

from .Event_Bus import EventBus, GLOBAL_EVENT_BUS, GRID_UPDATED
from mealgrid.utilities.constants import MEAL_TYPES

logger = logging.getLogger(__name__)


def _on_grid_updated(event_name: str, payload: Any):
	# Imported here: the pipeline publishes events from this package
	from mealgrid.logic.planning.pipeline import refresh_calendar
	sheet = payload.get('sheet') if isinstance(payload, dict) else None
	if sheet not in MEAL_TYPES:
		return
	store = payload.get('store')
	if store is None:
		logger.warning("grid.updated without a store; calendar not refreshed")
		return
	refresh_calendar(store)
	logger.debug(f"Calendar refreshed after change on {sheet}")


def start(bus: Optional[EventBus] = None):
	"""Subscribe the calendar refresh (idempotent)."""
	(bus or GLOBAL_EVENT_BUS).subscribe(GRID_UPDATED, _on_grid_updated)


def stop(bus: Optional[EventBus] = None):
	(bus or GLOBAL_EVENT_BUS).unsubscribe(GRID_UPDATED, _on_grid_updated)


def is_running(bus: Optional[EventBus] = None) -> bool:
	return _on_grid_updated in (bus or GLOBAL_EVENT_BUS).subscribers(GRID_UPDATED)
