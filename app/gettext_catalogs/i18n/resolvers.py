"""Locale resolution logic for determining a user's preferred locale.

Locale tags are configured with underscores ("es_AR") while HTTP headers
use hyphens ("es-AR"); both spellings are accepted everywhere here.
"""

from typing import Iterable, List, Optional, Tuple

from gettext_catalogs.logging import get_module_logger

logger = get_module_logger()


def normalize_tag(tag: str) -> str:
    """Normalize a locale tag for comparison ("es-ar" -> "es_ar")."""
    return tag.strip().replace("-", "_").lower()


def language_of(tag: str) -> str:
    """Return the language part of a locale tag ("es_AR" -> "es")."""
    return normalize_tag(tag).split("_")[0]


def parse_accept_language(accept_language: Optional[str]) -> List[Tuple[str, float]]:
    """Parse an Accept-Language header into (range, quality) pairs.

    Pairs are sorted by quality, highest first; ties keep header order.
    Ranges with q=0 are dropped.
    """
    if not accept_language:
        return []

    # "es-AR,es;q=0.9,en;q=0.8" -> [(es-AR, 1.0), (es, 0.9), (en, 0.8)]
    preferences = []
    for part in accept_language.split(","):
        lang_range = part.split(";")[0].strip()
        if not lang_range:
            continue

        quality = 1.0
        if ";" in part and "q=" in part:
            try:
                quality = float(part.split("q=")[1])
            except ValueError:
                quality = 1.0

        if quality > 0:
            preferences.append((lang_range, quality))

    return sorted(preferences, key=lambda x: x[1], reverse=True)


class LocaleResolver:
    """Resolves a supported locale from request data.

    Attributes:
        supported_locales: Configured locale tags, in preference order.
        default_locale: Locale returned when nothing matches.
    """

    def __init__(self, supported_locales: Iterable[str], default_locale: str):
        self.supported_locales = list(supported_locales)
        self.default_locale = default_locale
        self.log = logger.bind(default_locale=default_locale)

    def match(self, tag: Optional[str]) -> Optional[str]:
        """Return the configured spelling of ``tag``, or None if unsupported.

        Only exact matches count: "es-AR" matches "es_AR" but "es" does not.
        """
        if not tag:
            return None
        wanted = normalize_tag(tag)
        for locale in self.supported_locales:
            if normalize_tag(locale) == wanted:
                return locale
        return None

    def resolve_from_header(self, accept_language: Optional[str]) -> Optional[str]:
        """Resolve a locale from an HTTP Accept-Language header.

        Exact tags win; otherwise a language-only range ("es") picks the
        first supported locale of that language.

        Returns:
            Matching supported locale, or None if nothing matches.
        """
        for lang_range, _ in parse_accept_language(accept_language):
            if lang_range == "*":
                continue

            locale = self.match(lang_range)
            if locale is None:
                lang_code = language_of(lang_range)
                locale = next(
                    (s for s in self.supported_locales if language_of(s) == lang_code),
                    None,
                )

            if locale is not None:
                self.log.debug("resolved_from_header", locale=locale)
                return locale

        return None

    def resolve(
        self,
        requested: Optional[str] = None,
        stored: Optional[str] = None,
        accept_language: Optional[str] = None,
    ) -> str:
        """Resolve a locale through the fallback chain.

        1. Explicitly requested locale
        2. Stored choice (cookie or session)
        3. Accept-Language header
        4. Default locale
        """
        for candidate in (requested, stored):
            locale = self.match(candidate)
            if locale is not None:
                return locale

        return self.resolve_from_header(accept_language) or self.default_locale
