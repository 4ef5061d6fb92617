"""Exceptions raised by shopin."""

from typing import List, Optional


class ShopinError(Exception):
    """Base class for shopin errors."""


class StorageError(ShopinError):
    """The recipe store could not be read or written."""

    def __init__(self, message: str, key: str):
        super().__init__(message)
        self.key = key


class EncodingFailure(StorageError):
    """Recipes could not be encoded; nothing was written."""


class WriteFailure(StorageError):
    """The encoded recipes could not be written to the key-value store."""


class DecodingFailure(StorageError):
    """A stored blob exists but does not decode as a recipe list."""

    def __init__(self, message: str, key: str, quarantine_key: Optional[str] = None):
        super().__init__(message, key)
        self.quarantine_key = quarantine_key


class DuplicateRecipeError(ShopinError):
    """A recipe with the same id is already in the collection."""


class IncompleteRecipeError(ShopinError):
    """The creation form is missing required fields."""

    def __init__(self, missing: List[str]):
        super().__init__(f"Missing required fields: {', '.join(missing)}")
        self.missing = missing
