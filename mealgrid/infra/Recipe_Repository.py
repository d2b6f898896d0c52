import logging
from typing import List

from mealgrid.domain.Recipe import Recipe
from mealgrid.domain.errors import DuplicateRecipe
from mealgrid.infra.Grid_Store import GridRange, GridStore
from mealgrid.logic.catalog.loader import RecipeCatalog
from mealgrid.utilities.constants import (
    RECIPE_COLUMNS, RECIPE_FIRST_ROW, RECIPE_HEADER, RECIPES_SHEET, SPECIAL_RECIPES
)

logger = logging.getLogger(__name__)


class RecipeRepository:
    """Recipes sheet: header at row 1, one recipe per row from row 2, columns A..G."""

    def __init__(self, store: GridStore):
        self.store = store

    def ensure_sheet(self) -> bool:
        """Create the Recipes sheet with its header and the pre-filled specials. True if created."""
        if self.store.has_sheet(RECIPES_SHEET):
            return False
        with self.store.batch():
            self.store.write_row(RECIPES_SHEET, 1, 1, RECIPE_HEADER)
            self.store.write(GridRange(RECIPES_SHEET, RECIPE_FIRST_ROW, 1, len(SPECIAL_RECIPES), RECIPE_COLUMNS),
                             [list(r) for r in SPECIAL_RECIPES])
        logger.info("Created Recipes sheet with default entries")
        return True

    def read_rows(self) -> List[list]:
        """Raw data rows (header excluded), exactly as stored."""
        last = self.store.last_row(RECIPES_SHEET)
        if last < RECIPE_FIRST_ROW:
            return []
        return self.store.read(GridRange(RECIPES_SHEET, RECIPE_FIRST_ROW, 1, last - 1, RECIPE_COLUMNS))

    def load_catalog(self) -> RecipeCatalog:
        return RecipeCatalog.load(self.read_rows())

    def add_recipe(self, recipe: Recipe) -> int:
        """Append a recipe row; returns its grid row. Names are compared case-insensitively."""
        # A new grid gets its default recipes first so they take part in the duplicate check
        self.ensure_sheet()
        existing = {str(r[0]).strip().lower() for r in self.read_rows()}
        if recipe.name.strip().lower() in existing:
            raise DuplicateRecipe(recipe.name)
        row = max(self.store.last_row(RECIPES_SHEET) + 1, RECIPE_FIRST_ROW)
        self.store.write_row(RECIPES_SHEET, row, 1, recipe.to_row())
        logger.info(f"Added recipe {recipe.name!r} at row {row}")
        return row
