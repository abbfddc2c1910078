"""Translation services - abstract interface and Gemini implementation."""

from thai_minima.services.translation.translation_service import (
    AuthorizationError,
    ConfigurationError,
    ConnectivityError,
    TranslationError,
    TranslationService,
    TranslatorError,
)
from thai_minima.services.translation.gemini_translation_service import GeminiTranslationService

__all__ = [
    "TranslationService",
    "GeminiTranslationService",
    "TranslatorError",
    "ConfigurationError",
    "AuthorizationError",
    "ConnectivityError",
    "TranslationError",
]
