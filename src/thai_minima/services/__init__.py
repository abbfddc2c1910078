"""Services layer - business logic and external integrations."""

from thai_minima.services.settings_manager import SettingsManager

# Translation services
from thai_minima.services.translation import (
    AuthorizationError,
    ConfigurationError,
    ConnectivityError,
    GeminiTranslationService,
    TranslationError,
    TranslationService,
    TranslatorError,
)
from thai_minima.services.api_workers import TranslationWorker, WorkerSignals

__all__ = [
    "SettingsManager",
    "TranslationService",
    "GeminiTranslationService",
    "TranslatorError",
    "ConfigurationError",
    "AuthorizationError",
    "ConnectivityError",
    "TranslationError",
    "TranslationWorker",
    "WorkerSignals",
]
