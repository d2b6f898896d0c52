from pathlib import Path

from mealgrid.utilities.config import GRID_FILE

# Centralized paths (single source of truth)
TEMPLATES_DIR = (Path(__file__).parent.parent / 'templates').resolve()

__all__ = ['TEMPLATES_DIR', 'GRID_FILE']
