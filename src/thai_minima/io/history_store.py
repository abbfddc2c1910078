"""History Store - Bounded, persisted list of recent translations."""

import json
import logging
import time
from typing import Any, Callable, Iterator, Optional

from thai_minima.core import TranslationRecord
from thai_minima.io.key_value_storage import KeyValueStorage

logger = logging.getLogger(__name__)


class PersistenceParseError(Exception):
    """The persisted history slot could not be decoded."""


class HistoryStore:
    """
    Owns the most-recent-first collection of translation records.

    Every mutation is mirrored synchronously into a single storage slot.

    Format (version 1):
    {
        "version": 1,
        "records": [
            {"id": "...", "original": "...", "translated": "...", "timestamp": 1700000000000}
        ]
    }

    A bare JSON array of records (written before the version tag existed) is
    read as version 0.
    """

    FORMAT_VERSION = 1
    DEFAULT_STORAGE_KEY = "translationHistory"
    DEFAULT_MAX_ITEMS = 10

    def __init__(
        self,
        storage: KeyValueStorage,
        storage_key: str = DEFAULT_STORAGE_KEY,
        max_items: int = DEFAULT_MAX_ITEMS,
        clock: Optional[Callable[[], float]] = None,
    ):
        if max_items < 1:
            raise ValueError("max_items must be at least 1")
        self._storage = storage
        self._storage_key = storage_key
        self._max_items = max_items
        self._clock = clock or time.time
        self._records: list[TranslationRecord] = []

    @property
    def max_items(self) -> int:
        return self._max_items

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[TranslationRecord]:
        return iter(list(self._records))

    def all(self) -> list[TranslationRecord]:
        """Return the current records, most recent first."""
        return list(self._records)

    def record(self, original: str, translated: str) -> TranslationRecord:
        """Prepend a new record, drop anything past the bound and persist."""
        now_ms = int(self._clock() * 1000)
        new_record = TranslationRecord.create(original, translated, now_ms)
        self._records = [new_record, *self._records][: self._max_items]
        self._persist()
        return new_record

    def clear(self) -> None:
        """Empty the history and persist the empty state."""
        self._records = []
        self._persist()

    def load(self) -> list[TranslationRecord]:
        """
        Restore the history from storage.

        A missing slot or unreadable content yields an empty history; this
        method never raises.

        Returns:
            The loaded records, most recent first.
        """
        raw = self._storage.get(self._storage_key)
        if raw is None:
            self._records = []
            return []

        try:
            records = self._decode(raw)
        except PersistenceParseError as e:
            logger.warning("Discarding unreadable translation history: %s", e)
            records = []

        self._records = records[: self._max_items]
        logger.debug("Loaded %d history records", len(self._records))
        return list(self._records)

    def _persist(self) -> None:
        payload = {
            "version": self.FORMAT_VERSION,
            "records": [record.to_dict() for record in self._records],
        }
        self._storage.set(self._storage_key, json.dumps(payload, ensure_ascii=False))

    def _decode(self, raw: str) -> list[TranslationRecord]:
        try:
            data: Any = json.loads(raw)
        except (ValueError, RecursionError) as e:
            raise PersistenceParseError(f"invalid JSON: {e}") from e

        if isinstance(data, list):
            entries = data
        elif isinstance(data, dict):
            version = data.get("version", 0)
            if version not in (0, self.FORMAT_VERSION):
                raise PersistenceParseError(f"unsupported history version {version!r}")
            entries = data.get("records")
            if not isinstance(entries, list):
                raise PersistenceParseError("'records' must be a list")
        else:
            raise PersistenceParseError(f"unexpected top-level type {type(data).__name__}")

        records = []
        for entry in entries:
            if not isinstance(entry, dict):
                raise PersistenceParseError("history entries must be objects")
            try:
                records.append(TranslationRecord.from_dict(entry))
            except (KeyError, TypeError, ValueError) as e:
                raise PersistenceParseError(f"malformed history entry: {e}") from e
        return records
