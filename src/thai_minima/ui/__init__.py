"""UI layer - PySide6 presentation components."""

from .main_window import MainWindow
from .translator_panel import TranslatorPanel

__all__ = ["MainWindow", "TranslatorPanel"]
