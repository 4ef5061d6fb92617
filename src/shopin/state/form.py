"""State behind the new-recipe form."""

from dataclasses import dataclass, field
from typing import Iterable, List, Optional

from ..errors import IncompleteRecipeError
from ..models import Recipe
from .collection import RecordCollection


@dataclass
class RecipeForm:
    """Holds what the user has entered so far.

    The save action is enabled once a title and instructions are present; a
    photo is also needed before a recipe can actually be built.
    """

    title: str = ""
    instructions: str = ""
    image: Optional[bytes] = None
    ingredients: List[str] = field(default_factory=list)
    new_ingredient: str = ""

    @property
    def is_valid(self) -> bool:
        return bool(self.title) and bool(self.instructions)

    def missing_fields(self) -> List[str]:
        missing = []
        if not self.title:
            missing.append("title")
        if not self.instructions:
            missing.append("instructions")
        if not self.image:
            missing.append("image")
        return missing

    def add_ingredient(self) -> bool:
        """Move the pending entry into the ingredient list. Returns False if it was empty."""
        if not self.new_ingredient:
            return False
        self.ingredients.append(self.new_ingredient)
        self.new_ingredient = ""
        return True

    def remove_ingredients(self, positions: Iterable[int]) -> None:
        drop = set(positions)
        for position in drop:
            if not 0 <= position < len(self.ingredients):
                raise IndexError(f"Ingredient position {position} out of range")
        self.ingredients = [item for i, item in enumerate(self.ingredients) if i not in drop]

    def clear_image(self) -> None:
        self.image = None

    def build(self) -> Recipe:
        missing = self.missing_fields()
        if missing:
            raise IncompleteRecipeError(missing)
        return Recipe(
            title=self.title,
            image=self.image,
            instructions=self.instructions,
            ingredients=list(self.ingredients),
        )

    def submit(self, collection: RecordCollection) -> Recipe:
        """Build the recipe and add it to ``collection``."""
        recipe = self.build()
        collection.add(recipe)
        return recipe
