"""Recipe catalog: typed, validated view over the raw rows of the Recipes sheet."""
from __future__ import annotations

import logging
from collections import Counter
from typing import Iterable, Iterator, List, Optional, Sequence

from pydantic import ValidationError as PydanticValidationError

from mealgrid.domain.Recipe import Recipe
from mealgrid.domain.errors import EmptyCatalog, ValidationError
from mealgrid.utilities.constants import RECIPE_COLUMNS, RECIPE_FIRST_ROW
from mealgrid.utilities.validators import RecipeRowInput

logger = logging.getLogger(__name__)

_FIELDS = ("name", "category", "breakfast", "lunch", "dinner", "snacks", "side")


def _pad(row: Sequence) -> list:
    cells = list(row or [])[:RECIPE_COLUMNS]
    return cells + [""] * (RECIPE_COLUMNS - len(cells))


def _describe(exc: PydanticValidationError) -> str:
    parts = []
    for err in exc.errors():
        field = ".".join(str(p) for p in err.get("loc", ()))
        parts.append(f"{field}: {err.get('msg', 'invalid value')}")
    return "; ".join(parts)


class RecipeCatalog:
    """Recipes in sheet order, unique by name, plus the rows that were rejected."""

    def __init__(self, recipes: List[Recipe], rejected: Optional[List[ValidationError]] = None):
        self.recipes = list(recipes)
        self.rejected = list(rejected or [])
        self._by_name = {r.name: r for r in self.recipes}

    def __len__(self) -> int:
        return len(self.recipes)

    def __iter__(self) -> Iterator[Recipe]:
        return iter(self.recipes)

    def __contains__(self, name: str) -> bool:
        return name in self._by_name

    def get(self, name: str) -> Optional[Recipe]:
        return self._by_name.get(name)

    def names(self) -> List[str]:
        return [r.name for r in self.recipes]

    def pool(self, meal_type: str) -> List[Recipe]:
        """Recipes eligible for ``meal_type``, in catalog order."""
        return [r for r in self.recipes if r.is_eligible(meal_type)]

    @classmethod
    def load(cls, raw_rows: Iterable[Sequence], first_row: int = RECIPE_FIRST_ROW) -> "RecipeCatalog":
        """Validate raw recipe rows (header already removed).

        Blank-name rows are skipped silently. Malformed rows and every row sharing a
        duplicated name are skipped and kept in ``rejected``. Raises EmptyCatalog when
        nothing valid remains.
        """
        parsed = []
        rejected: List[ValidationError] = []
        for offset, raw in enumerate(raw_rows or []):
            row_index = first_row + offset
            cells = _pad(raw)
            name = "" if cells[0] is None else str(cells[0]).strip()
            if not name:
                continue
            try:
                row = RecipeRowInput(**dict(zip(_FIELDS, cells)))
            except PydanticValidationError as e:
                rejected.append(ValidationError(row_index, _describe(e), name))
                continue
            parsed.append((row_index, Recipe(**row.model_dump())))

        counts = Counter(recipe.name for _, recipe in parsed)
        recipes = []
        for row_index, recipe in parsed:
            if counts[recipe.name] > 1:
                rejected.append(ValidationError(
                    row_index, f"recipe name appears {counts[recipe.name]} times", recipe.name))
                continue
            recipes.append(recipe)

        rejected.sort(key=lambda issue: issue.row_index)
        for issue in rejected:
            logger.warning(f"Skipping recipe row: {issue.message}")
        if not recipes:
            raise EmptyCatalog()
        logger.info(f"Loaded {len(recipes)} recipes ({len(rejected)} rows skipped)")
        return cls(recipes, rejected)
