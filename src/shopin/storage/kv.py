"""Key-value persistence port and its implementations."""

import os
import re
from pathlib import Path
from typing import Dict, List, Optional, Protocol

from ..logger import get_logger

logger = get_logger("kv")

_KEY_PATTERN = re.compile(r'^[A-Za-z0-9_][A-Za-z0-9_.\-]*$')


def validate_key(key: str) -> str:
    """Reject keys that could escape the store or collide with temp files."""
    if not isinstance(key, str) or not _KEY_PATTERN.match(key) or ".." in key:
        raise ValueError(f"Invalid key: {key!r}. Must match [A-Za-z0-9_][A-Za-z0-9_.-]*")
    return key


class KeyValueStore(Protocol):
    """Protocol describing the storage the record store is injected with."""

    def get(self, key: str) -> Optional[bytes]:
        """Return the stored value or ``None`` when the key is absent."""

    def set(self, key: str, value: bytes) -> None:
        """Store ``value`` under ``key``, replacing any prior value."""

    def delete(self, key: str) -> None:
        """Remove ``key``; absent keys are ignored."""

    def exists(self, key: str) -> bool:
        """Check if a key holds a value."""

    def keys(self) -> List[str]:
        """List stored keys, sorted."""


class FileKeyValueStore:
    """Blob store keeping one file per key under a root directory.

    - Values are opaque bytes.
    - Writes go to a hidden temp file first and are moved into place with
      ``os.replace``, so readers see either the old or the new value.
    - Keys are validated against a conservative pattern; no separators, no
      traversal.
    """

    def __init__(self, root: Path):
        self.root = Path(root)
        self.root.mkdir(parents=True, exist_ok=True)

    def _path(self, key: str) -> Path:
        return self.root / validate_key(key)

    def get(self, key: str) -> Optional[bytes]:
        path = self._path(key)
        if not path.is_file():
            return None
        return path.read_bytes()

    def set(self, key: str, value: bytes) -> None:
        if not isinstance(value, (bytes, bytearray)):
            raise ValueError("Values must be bytes")
        path = self._path(key)
        tmp_path = path.with_name(f".{path.name}.tmp")
        tmp_path.write_bytes(bytes(value))
        os.replace(tmp_path, path)
        logger.debug(f"Wrote {len(value)} bytes to {path}")

    def delete(self, key: str) -> None:
        path = self._path(key)
        if path.is_file():
            path.unlink()
            logger.debug(f"Deleted {path}")

    def exists(self, key: str) -> bool:
        try:
            return self._path(key).is_file()
        except ValueError:
            return False

    def keys(self) -> List[str]:
        return sorted(
            item.name
            for item in self.root.iterdir()
            if item.is_file() and not item.name.startswith(".")
        )

    def __repr__(self) -> str:
        return f"FileKeyValueStore(root={self.root!s})"


class MemoryKeyValueStore:
    """Dict-backed store for tests and embedding."""

    def __init__(self, initial: Optional[Dict[str, bytes]] = None):
        self._data: Dict[str, bytes] = {}
        for key, value in (initial or {}).items():
            self.set(key, value)

    def get(self, key: str) -> Optional[bytes]:
        return self._data.get(validate_key(key))

    def set(self, key: str, value: bytes) -> None:
        if not isinstance(value, (bytes, bytearray)):
            raise ValueError("Values must be bytes")
        self._data[validate_key(key)] = bytes(value)

    def delete(self, key: str) -> None:
        self._data.pop(validate_key(key), None)

    def exists(self, key: str) -> bool:
        return key in self._data

    def keys(self) -> List[str]:
        return sorted(self._data)
