"""Domain entity for a single stored translation."""

import uuid
from dataclasses import dataclass
from datetime import datetime
from typing import Any


@dataclass(frozen=True)
class TranslationRecord:
    """One English→Thai translation kept in the history.

    Attributes:
        id: Opaque identifier generated at creation time.
        original: English source text (never blank).
        translated: Thai result text (may be empty if the API returned nothing).
        timestamp: Creation time in epoch milliseconds.
    """

    id: str
    original: str
    translated: str
    timestamp: int

    @classmethod
    def create(cls, original: str, translated: str, now_ms: int) -> "TranslationRecord":
        """Build a new record with a fresh id."""
        return cls(
            id=f"{now_ms}-{uuid.uuid4().hex[:8]}",
            original=original,
            translated=translated,
            timestamp=now_ms,
        )

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "TranslationRecord":
        """
        Rebuild a record from its persisted JSON object.

        Raises:
            KeyError: A required field is missing.
            TypeError: A field has the wrong type.
            ValueError: The timestamp is outside the representable date range.
        """
        record = cls(
            id=data["id"],
            original=data["original"],
            translated=data["translated"],
            timestamp=data["timestamp"],
        )
        for name in ("id", "original", "translated"):
            if not isinstance(getattr(record, name), str):
                raise TypeError(f"Field '{name}' must be a string")
        # bool is an int subclass
        if isinstance(record.timestamp, bool) or not isinstance(record.timestamp, int):
            raise TypeError("Field 'timestamp' must be an integer")
        try:
            record.created_at
        except (OverflowError, OSError, ValueError) as e:
            raise ValueError(f"Timestamp out of range: {record.timestamp}") from e
        return record

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "original": self.original,
            "translated": self.translated,
            "timestamp": self.timestamp,
        }

    @property
    def created_at(self) -> datetime:
        """Creation time as a local datetime."""
        return datetime.fromtimestamp(self.timestamp / 1000)

    def display_time(self) -> str:
        """Hour and minute shown on history cards."""
        return self.created_at.strftime("%H:%M")
