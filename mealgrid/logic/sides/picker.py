from typing import Iterable, List

from mealgrid.domain.Recipe import Recipe


def list_sides(recipes: Iterable[Recipe]) -> List[str]:
    """Names of side-flagged recipes, in catalog order.

    An empty list means side selection is disabled, not that something failed.
    """
    return [r.name for r in recipes if r.side]
