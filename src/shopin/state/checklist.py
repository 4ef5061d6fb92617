"""Per-view ingredient checklist for the recipe detail screen."""

from typing import List, Set, Tuple

from ..models import Recipe


class IngredientChecklist:
    """Transient "have it" marks for one recipe's ingredients.

    Marks are keyed by position so repeated labels stay independent. They live
    only as long as the view holding them and are never written to storage;
    the recipe's stored ``have_ingredient`` map is left untouched.
    """

    def __init__(self, recipe: Recipe):
        self.recipe = recipe
        self._checked: Set[int] = set()

    def _check_position(self, position: int) -> None:
        if not 0 <= position < len(self.recipe.ingredients):
            raise IndexError(f"Ingredient position {position} out of range")

    def toggle(self, position: int) -> bool:
        """Flip the mark at ``position`` and return the new state."""
        self._check_position(position)
        if position in self._checked:
            self._checked.remove(position)
            return False
        self._checked.add(position)
        return True

    def is_checked(self, position: int) -> bool:
        self._check_position(position)
        return position in self._checked

    @property
    def checked(self) -> List[int]:
        return sorted(self._checked)

    def items(self) -> List[Tuple[str, bool]]:
        return [(label, i in self._checked) for i, label in enumerate(self.recipe.ingredients)]

    def reset(self) -> None:
        self._checked.clear()
