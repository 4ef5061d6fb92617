"""Storage interfaces for shopin.

Provides the key-value port, its file and memory backends, and the recipe
record store built on top of them.
"""

from .kv import FileKeyValueStore, KeyValueStore, MemoryKeyValueStore
from .record_store import RECIPES_KEY, LoadStatus, RecordStore

__all__ = [
    "FileKeyValueStore",
    "KeyValueStore",
    "MemoryKeyValueStore",
    "RECIPES_KEY",
    "LoadStatus",
    "RecordStore",
]
