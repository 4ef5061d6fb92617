"""Recipe list persistence on top of a key-value store."""

from datetime import datetime, timezone
from enum import Enum
from typing import List, Optional, Sequence

from pydantic import ValidationError

from ..errors import DecodingFailure, EncodingFailure, WriteFailure
from ..logger import get_logger
from ..models import Recipe, RecipeList
from .kv import KeyValueStore, validate_key

logger = get_logger("record_store")

RECIPES_KEY = "recipes"


class LoadStatus(str, Enum):
    """Outcome of the most recent load."""

    NOT_LOADED = "not_loaded"
    ABSENT = "absent"
    LOADED = "loaded"
    CORRUPT = "corrupt"


class RecordStore:
    """Persist the whole recipe list as one JSON blob under a fixed key.

    Every save rewrites the full list; there are no deltas, no versions and no
    transactions beyond what the underlying store gives a single ``set``.
    """

    def __init__(self, kv: KeyValueStore, key: str = RECIPES_KEY):
        self.kv = kv
        self.key = validate_key(key)
        self.last_status = LoadStatus.NOT_LOADED
        self.last_quarantine_key: Optional[str] = None

    def save(self, records: Sequence[Recipe]) -> None:
        """Encode ``records`` and overwrite the stored blob.

        Raises:
            EncodingFailure: the records could not be encoded. Nothing is written.
            WriteFailure: the key-value store refused the write.
        """
        try:
            data = RecipeList.dump_json(list(records), by_alias=True)
        except (ValueError, TypeError) as e:
            logger.error(f"Error encoding recipes for '{self.key}': {e}")
            raise EncodingFailure(f"Could not encode recipes: {e}", self.key) from e

        try:
            self.kv.set(self.key, data)
        except OSError as e:
            logger.error(f"Error writing recipes under '{self.key}': {e}")
            raise WriteFailure(f"Could not write recipes: {e}", self.key) from e
        logger.info(f"Saved {len(records)} recipe(s) under '{self.key}'")

    def load(self, strict: bool = False) -> List[Recipe]:
        """Read and decode the stored list.

        An absent key is the first-run state and yields an empty list. A blob
        that is present but undecodable is copied aside under a quarantine key
        and, unless ``strict``, also yields an empty list.

        Raises:
            DecodingFailure: only when ``strict`` and the blob does not decode.
        """
        self.last_quarantine_key = None
        data = self.kv.get(self.key)
        if data is None:
            self.last_status = LoadStatus.ABSENT
            logger.debug(f"No stored recipes under '{self.key}'")
            return []

        try:
            records = RecipeList.validate_json(data)
        except ValidationError as e:
            self.last_status = LoadStatus.CORRUPT
            self.last_quarantine_key = self._quarantine(data)
            logger.warning(
                f"Error decoding recipes under '{self.key}' "
                f"({e.error_count()} error(s)); blob kept as '{self.last_quarantine_key}'"
            )
            if strict:
                raise DecodingFailure(
                    f"Stored recipes under '{self.key}' could not be decoded",
                    self.key,
                    quarantine_key=self.last_quarantine_key,
                ) from e
            return []

        self.last_status = LoadStatus.LOADED
        logger.info(f"Loaded {len(records)} recipe(s) from '{self.key}'")
        return records

    def _quarantine(self, data: bytes) -> str:
        """Copy an undecodable blob aside so the next save cannot destroy it.

        A blob already kept under an earlier quarantine key is not copied again.
        """
        for existing in self.quarantined_keys():
            if self.kv.get(existing) == data:
                return existing

        stamp = datetime.now(timezone.utc).strftime("%Y%m%dT%H%M%S%fZ")
        quarantine_key = f"{self.key}.corrupt-{stamp}"
        self.kv.set(quarantine_key, data)
        return quarantine_key

    def quarantined_keys(self) -> List[str]:
        """List blobs previously set aside by ``load``."""
        prefix = f"{self.key}.corrupt-"
        return [key for key in self.kv.keys() if key.startswith(prefix)]
