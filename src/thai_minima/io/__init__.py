"""I/O layer - Persistence of history records."""

from .history_store import HistoryStore, PersistenceParseError
from .key_value_storage import FileKeyValueStorage, InMemoryKeyValueStorage, KeyValueStorage

__all__ = [
    "HistoryStore",
    "PersistenceParseError",
    "KeyValueStorage",
    "InMemoryKeyValueStorage",
    "FileKeyValueStorage",
]
