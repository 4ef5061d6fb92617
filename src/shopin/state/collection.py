"""In-memory recipe collection kept in step with the record store."""

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Iterable, Iterator, List, Optional, Tuple
from uuid import UUID

from ..errors import DuplicateRecipeError
from ..logger import get_logger
from ..models import Recipe
from ..storage.record_store import RecordStore

logger = get_logger("collection")


class ChangeKind(str, Enum):
    ADDED = "added"
    DELETED = "deleted"


@dataclass(frozen=True)
class CollectionChange:
    """Delivered to subscribers after a successful mutation.

    ``positions`` are indexes into the sequence *before* a delete, or the
    index of the appended recipe after an add.
    """

    kind: ChangeKind
    recipes: Tuple[Recipe, ...]
    positions: Tuple[int, ...]


Subscriber = Callable[[CollectionChange], None]


class RecordCollection:
    """Ordered working set of recipes, persisted in full after every mutation.

    Loaded once from the injected store at construction. Mutations either
    complete in memory *and* in storage, or roll back and raise.
    """

    def __init__(self, store: RecordStore, strict: bool = False):
        self.store = store
        self._recipes: List[Recipe] = store.load(strict=strict)
        self._subscribers: List[Subscriber] = []
        logger.debug(f"Collection initialized with {len(self._recipes)} recipe(s)")

    @property
    def recipes(self) -> Tuple[Recipe, ...]:
        """Snapshot of the current sequence."""
        return tuple(self._recipes)

    def __len__(self) -> int:
        return len(self._recipes)

    def __iter__(self) -> Iterator[Recipe]:
        return iter(tuple(self._recipes))

    def __getitem__(self, position: int) -> Recipe:
        return self._recipes[position]

    def get(self, recipe_id: UUID) -> Optional[Recipe]:
        for recipe in self._recipes:
            if recipe.id == recipe_id:
                return recipe
        return None

    def add(self, recipe: Recipe) -> None:
        """Append a recipe and persist the full sequence.

        Raises:
            DuplicateRecipeError: a recipe with the same id is already present.
            StorageError: the store could not encode or write the sequence;
                the append is undone. Any other save error also undoes it.
        """
        if self.get(recipe.id) is not None:
            raise DuplicateRecipeError(f"Recipe {recipe.id} is already in the collection")

        self._recipes.append(recipe)
        try:
            self.store.save(self._recipes)
        except Exception:
            self._recipes.pop()
            raise

        logger.info(f"Added recipe '{recipe.title}' ({recipe.id})")
        self._notify(ChangeKind.ADDED, (len(self._recipes) - 1,))

    def delete(self, positions: Iterable[int]) -> None:
        """Remove the recipes at ``positions`` and persist the remainder.

        Raises:
            IndexError: a position is outside the sequence; nothing changes.
            StorageError: the store could not encode or write the remainder;
                the removal is undone. Any other save error also undoes it.
        """
        targets = sorted(set(positions))
        if not targets:
            return

        size = len(self._recipes)
        for position in targets:
            if not 0 <= position < size:
                raise IndexError(f"Position {position} out of range for {size} recipe(s)")

        previous = list(self._recipes)
        drop = set(targets)
        self._recipes = [recipe for i, recipe in enumerate(previous) if i not in drop]
        try:
            self.store.save(self._recipes)
        except Exception:
            self._recipes = previous
            raise

        logger.info(f"Deleted {len(targets)} recipe(s) at positions {targets}")
        self._notify(ChangeKind.DELETED, tuple(targets))

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        """Register ``callback`` for changes. Returns a function that unsubscribes it."""
        self._subscribers.append(callback)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    def _notify(self, kind: ChangeKind, positions: Tuple[int, ...]) -> None:
        change = CollectionChange(kind=kind, recipes=self.recipes, positions=positions)
        for callback in list(self._subscribers):
            try:
                callback(change)
            except Exception as e:
                logger.exception(f"Subscriber {callback!r} failed on {kind.value}: {e}")
