"""Runtime context management for shopin.

Provides a lightweight dependency injection container so the front end gets
its profile, key-value store and recipe collection without module-level
singletons. The CLI builds a default context; tests construct their own with
an in-memory store and inject it explicitly.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from .profile import Profile
from .state.collection import RecordCollection
from .storage.kv import FileKeyValueStore, KeyValueStore
from .storage.record_store import RecordStore


@dataclass
class RuntimeContext:
    """Aggregates shared runtime services for shopin components."""

    profile: Profile = field(default_factory=Profile.current)
    kv: Optional[KeyValueStore] = None
    strict: bool = False
    _record_store: RecordStore | None = field(default=None, init=False, repr=False)
    _collection: RecordCollection | None = field(default=None, init=False, repr=False)

    def __post_init__(self) -> None:
        if self.kv is None:
            self.kv = FileKeyValueStore(self.profile.store_dir)

    @property
    def record_store(self) -> RecordStore:
        if self._record_store is None:
            self._record_store = RecordStore(self.kv)
        return self._record_store

    @property
    def collection(self) -> RecordCollection:
        """The collection, loaded from storage on first access."""
        if self._collection is None:
            self._collection = RecordCollection(self.record_store, strict=self.strict)
        return self._collection


_runtime_context: Optional[RuntimeContext] = None


def set_runtime_context(context: Optional[RuntimeContext]) -> None:
    """Replace the process-wide runtime context."""

    global _runtime_context
    _runtime_context = context


def get_runtime_context() -> RuntimeContext:
    """Return the active runtime context, creating a default if missing."""

    global _runtime_context
    if _runtime_context is None:
        _runtime_context = RuntimeContext()
    return _runtime_context


__all__ = [
    "RuntimeContext",
    "get_runtime_context",
    "set_runtime_context",
]
