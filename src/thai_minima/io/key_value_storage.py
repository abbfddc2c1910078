"""Key/value storage port used to persist small application state."""

import logging
import os
import tempfile
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)


class KeyValueStorage(ABC):
    """
    Abstract string slot storage.

    Implementations (InMemoryKeyValueStorage, FileKeyValueStorage) handle the
    storage details so the history store can be tested without touching disk.
    """

    @abstractmethod
    def get(self, key: str) -> Optional[str]:
        """Return the value stored under key, or None if the slot is empty."""
        pass

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        """Store or overwrite the value under key."""
        pass


class InMemoryKeyValueStorage(KeyValueStorage):
    """Dict-backed storage for tests and session-only use. No persistence."""

    def __init__(self):
        self._store: dict[str, str] = {}

    def get(self, key: str) -> Optional[str]:
        return self._store.get(key)

    def set(self, key: str, value: str) -> None:
        self._store[key] = value


class FileKeyValueStorage(KeyValueStorage):
    """
    File-based storage keeping one `<key>.json` file per slot.

    The directory is created on first write. Writes go through a temporary
    file in the same directory that is then renamed over the target, so a
    crash mid-write never leaves a truncated slot behind.
    """

    FILE_SUFFIX = ".json"

    def __init__(self, directory: Path):
        self._directory = Path(directory)

    def get(self, key: str) -> Optional[str]:
        path = self._path_for(key)
        if not path.exists():
            return None
        try:
            return path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            logger.warning("Could not read storage slot %s: %s", path, e)
            return None

    def set(self, key: str, value: str) -> None:
        path = self._path_for(key)
        self._directory.mkdir(parents=True, exist_ok=True)

        fd, tmp_name = tempfile.mkstemp(dir=self._directory, prefix=f".{key}.", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                handle.write(value)
            os.replace(tmp_name, path)
        except OSError:
            Path(tmp_name).unlink(missing_ok=True)
            raise
        logger.debug("Wrote storage slot %s (%d chars)", path, len(value))

    def _path_for(self, key: str) -> Path:
        if not key or "/" in key or "\\" in key or key.startswith("."):
            raise ValueError(f"Invalid storage key: {key!r}")
        return self._directory / f"{key}{self.FILE_SUFFIX}"
