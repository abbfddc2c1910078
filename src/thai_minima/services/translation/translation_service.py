"""Translation Service - Interface and failure taxonomy for EN→TH translation."""

from abc import ABC, abstractmethod


class TranslatorError(Exception):
    """Base class for every classified translation failure."""

    kind = "translation"


class ConfigurationError(TranslatorError):
    """No API key is configured. Raised before any network call."""

    kind = "configuration"


class AuthorizationError(TranslatorError):
    """The remote service rejected the credential."""

    kind = "authorization"


class ConnectivityError(TranslatorError):
    """The remote service could not be reached."""

    kind = "connectivity"


class TranslationError(TranslatorError):
    """Any other failure: malformed response, remote error, timeout."""

    kind = "translation"


class TranslationService(ABC):
    """
    Abstract service for translating English text to Thai.

    Implementations (e.g., GeminiTranslationService) handle API calls.
    """

    @abstractmethod
    def translate(self, text: str) -> str:
        """
        Translate English text to Thai.

        Blank input returns an empty string without contacting the service.

        Args:
            text: English text to translate.

        Returns:
            The translated text.

        Raises:
            TranslatorError: One of its subclasses, classifying the failure.
        """
        pass
