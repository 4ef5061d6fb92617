"""Shopin - a local recipe book with a persisted, observable collection."""

from .errors import (
    DecodingFailure,
    DuplicateRecipeError,
    EncodingFailure,
    IncompleteRecipeError,
    ShopinError,
    StorageError,
    WriteFailure,
)
from .models import Recipe
from .runtime import RuntimeContext, get_runtime_context, set_runtime_context
from .state import ChangeKind, CollectionChange, IngredientChecklist, RecipeForm, RecordCollection
from .storage import FileKeyValueStore, KeyValueStore, LoadStatus, MemoryKeyValueStore, RecordStore

__version__ = "0.1.0"

__all__ = [
    # Data model
    "Recipe",

    # Persistence
    "KeyValueStore",
    "FileKeyValueStore",
    "MemoryKeyValueStore",
    "RecordStore",
    "LoadStatus",

    # View state
    "RecordCollection",
    "CollectionChange",
    "ChangeKind",
    "RecipeForm",
    "IngredientChecklist",

    # Runtime context
    "RuntimeContext",
    "get_runtime_context",
    "set_runtime_context",

    # Errors
    "ShopinError",
    "StorageError",
    "EncodingFailure",
    "DecodingFailure",
    "WriteFailure",
    "DuplicateRecipeError",
    "IncompleteRecipeError",
]
