"""
Thai Minima - A small English→Thai translation widget.

This package provides a desktop application with:
- Gemini-backed translation
- A persisted list of the ten most recent translations
- One-click copy of the result
"""

__version__ = "0.1.0"

from thai_minima.core import TranslationRecord
from thai_minima.io import HistoryStore

__all__ = [
    "TranslationRecord",
    "HistoryStore",
]
