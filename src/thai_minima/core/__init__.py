"""Domain layer - Pure entities representing translations."""

from .translation_record import TranslationRecord

__all__ = ["TranslationRecord"]
