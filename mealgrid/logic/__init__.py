"""Core business logic layer.

Subpackages:
- catalog: validating recipe rows into a catalog
- assign: random meal assignment per meal type and week
- sides: side-dish selection lists
- calendar: calendar projection and week layout
- planning: the generate / refresh / edit pipeline over the grid
"""
__all__ = ["catalog", "assign", "sides", "calendar", "planning"]
