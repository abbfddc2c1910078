"""Gemini Translation Service - Implements translation via Google Gemini API."""

import logging
from typing import Callable

import google.genai as genai
import httpx
from google.genai import errors, types

from thai_minima.services.settings_manager import SettingsManager
from thai_minima.services.translation.translation_service import (
    AuthorizationError,
    ConfigurationError,
    ConnectivityError,
    TranslationError,
    TranslationService,
)

logger = logging.getLogger(__name__)

_QUOTE_PAIRS = (('"', '"'), ("'", "'"), ("“", "”"), ("‘", "’"))


def strip_wrapping_quotes(text: str) -> str:
    """Remove one layer of quotes the model sometimes wraps its answer in."""
    text = text.strip()
    for opening, closing in _QUOTE_PAIRS:
        if len(text) >= 2 and text.startswith(opening) and text.endswith(closing):
            return text[1:-1].strip()
    return text


class GeminiTranslationService(TranslationService):
    """
    Translation service using Google Gemini API.

    One request per call, no retries and no caching. The API key is read
    from settings on every call so .env reloads take effect immediately.
    """

    TRANSLATION_PROMPT = """Translate the following English text to Thai.
Ensure the tone is natural, polite, and grammatically correct.
Return ONLY the translated Thai text without any explanations or quotation marks.

Text: "{text}"
"""

    def __init__(
        self,
        settings_manager: SettingsManager,
        client_factory: Callable[..., genai.Client] = genai.Client,
    ):
        self.settings_manager = settings_manager
        self._client_factory = client_factory

    @property
    def model_name(self) -> str:
        return self.settings_manager.get_gemini_model()

    def translate(self, text: str) -> str:
        """
        Translate English text to Thai using Gemini API.

        Args:
            text: English text to translate.

        Returns:
            Translated Thai text ("" for blank input or an empty response).

        Raises:
            ConfigurationError: No API key configured.
            AuthorizationError: The key was rejected.
            ConnectivityError: The API could not be reached.
            TranslationError: Any other failure.
        """
        if not text.strip():
            return ""

        api_key = self.settings_manager.get_gemini_api_key()
        if not api_key:
            raise ConfigurationError(
                "API key is missing. Set GEMINI_API_KEY in your environment or .env file."
            )

        model = self.model_name
        logger.debug("Requesting translation (model=%s, %d chars)", model, len(text))

        try:
            client = self._client_factory(api_key=api_key)
            response = client.models.generate_content(
                model=model,
                contents=self.TRANSLATION_PROMPT.format(text=text),
                config=types.GenerateContentConfig(temperature=0.3),
            )
        except errors.ClientError as e:
            if _is_auth_failure(e):
                logger.error("Gemini rejected the API key: %s", e)
                raise AuthorizationError("Invalid API key or permission denied.") from e
            logger.error("Gemini client error: %s", e)
            raise TranslationError(f"Translation failed: {e}") from e
        except errors.APIError as e:
            logger.error("Gemini API error: %s", e)
            raise TranslationError(f"Translation failed: {e}") from e
        except httpx.NetworkError as e:
            logger.error("Could not reach Gemini: %s", e)
            raise ConnectivityError("Connection failed. Please check your internet.") from e
        except httpx.TimeoutException as e:
            logger.error("Gemini request timed out: %s", e)
            raise TranslationError("Request timed out.") from e
        except Exception as e:
            logger.exception("Unexpected error during translation")
            raise TranslationError(f"Translation failed: {e}") from e

        try:
            raw_text = response.text
        except (AttributeError, ValueError) as e:
            raise TranslationError(f"Malformed response from API: {e}") from e

        if not raw_text:
            logger.warning("Gemini returned an empty translation")
            return ""

        translated = strip_wrapping_quotes(raw_text)
        logger.debug("Translation received (%d chars)", len(translated))
        return translated


def _is_auth_failure(error: errors.APIError) -> bool:
    if error.code in (401, 403):
        return True
    message = f"{error.status or ''} {error.message or ''}".lower()
    return "api key" in message or "api_key" in message or "permission_denied" in message
