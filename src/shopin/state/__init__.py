"""View-state containers sitting between the record store and a front end."""

from .checklist import IngredientChecklist
from .collection import ChangeKind, CollectionChange, RecordCollection
from .form import RecipeForm

__all__ = [
    "ChangeKind",
    "CollectionChange",
    "IngredientChecklist",
    "RecipeForm",
    "RecordCollection",
]
