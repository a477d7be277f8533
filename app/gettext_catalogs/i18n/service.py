"""Translation service for dependency injection.

Provides a class-based interface to the i18n system for easier DI and testing.
"""

from typing import Dict, List, Optional

from gettext_catalogs.i18n.factory import create_translator
from gettext_catalogs.i18n.selector import LanguageSelector
from gettext_catalogs.i18n.translator import Translator


class TranslationService:
    """Class-based translation service.

    Wraps the Translator instance with a service interface to support
    dependency injection and easier testing with mocks.

    This is a thin facade - all actual work is delegated to the underlying
    Translator instance created by the factory.

    Usage:
        # Via dependency injection
        from gettext_catalogs.services import TranslationServiceDep

        @router.get("/greeting")
        def greeting(translation: TranslationServiceDep):
            return {"message": translation.translate("Welcome")}

        # Direct instantiation
        from gettext_catalogs.i18n import TranslationService

        service = TranslationService()
        service.set_locale("es_AR")
        message = service.translate("Welcome")
    """

    def __init__(self, translator: Optional[Translator] = None):
        """Initialize translation service.

        Args:
            translator: Optional pre-configured Translator instance.
                       If not provided, creates default via factory.
        """
        self._translator = translator or create_translator()

    def get_locale(self) -> str:
        return self._translator.get_locale()

    def set_locale(self, locale: str) -> "TranslationService":
        """Switch the current locale; switching to the current locale does nothing.

        Raises:
            LocaleNotSupportedError: If the locale is not supported.
            LocaleFileNotFoundError: If no catalog can be loaded for it.
        """
        if locale != self.get_locale():
            self._translator.set_locale(locale)
        return self

    def get_locale_language(self, locale: Optional[str] = None) -> str:
        """Return the language part of ``locale`` (current locale by default).

        Example:
            >>> service.get_locale_language("es_AR")
            'es'
        """
        return (locale or self.get_locale()).split("_")[0]

    def get_domain(self) -> str:
        return self._translator.get_domain()

    def set_domain(self, domain: str) -> "TranslationService":
        """Switch the current domain.

        Raises:
            UndefinedDomainError: If the domain is not configured.
        """
        self._translator.set_domain(domain)
        return self

    def get_encoding(self) -> str:
        return self._translator.get_encoding()

    def set_encoding(self, encoding: str) -> "TranslationService":
        self._translator.set_encoding(encoding)
        return self

    def translate(self, message: str) -> str:
        """Translate a message in the current locale and domain.

        Args:
            message: Message id, usually the source-language text.

        Returns:
            Translated message, or the message itself if untranslated.
        """
        return self._translator.translate(message)

    def translate_plural(self, singular: str, plural: str, count: int) -> str:
        return self._translator.translate_plural(singular, plural, count)

    def translate_plural_inline(self, message: str, count: int) -> str:
        """Translate a "singular|plural" message.

        Raises:
            PluralInlineNotSupportedError: With the gettext backend.
        """
        return self._translator.translate_plural_inline(message, count)

    def get_supported_locales(self) -> List[str]:
        return self._translator.supported_locales()

    def get_session_identifier(self) -> str:
        """Return the cookie or session key holding the chosen locale."""
        return self._translator.configuration.session_identifier

    def is_locale_supported(self, locale: Optional[str]) -> bool:
        return self._translator.is_locale_supported(locale)

    def get_selector(self, labels: Optional[Dict[str, str]] = None) -> LanguageSelector:
        """Build a language selector for the supported locales.

        Args:
            labels: Optional display labels by locale tag.
        """
        return LanguageSelector(self, labels)

    @property
    def translator(self) -> Translator:
        """Access underlying Translator instance.

        Provided for advanced use cases that need direct access
        to the Translator API.

        Returns:
            The underlying Translator instance
        """
        return self._translator

    def set_translator(self, translator: Translator) -> "TranslationService":
        """Replace the underlying translator (e.g., to switch backends)."""
        self._translator = translator
        return self
