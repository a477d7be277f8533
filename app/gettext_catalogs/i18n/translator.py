"""Translators resolving messages for the current locale and domain.

Two backends implement the ``Translator`` contract:

- ``CatalogTranslator`` loads catalogs through a ``CatalogLoader`` (cached,
  fingerprint-validated) and supports inline plural messages.
- ``GettextTranslator`` relies on the standard library's GNU translations
  over compiled .mo files and does not support inline plurals.

Both keep their current locale and domain in a Storage and push locale
changes to the host Adapter.
"""

import gettext
from abc import ABC, abstractmethod
from typing import Dict, List, Optional, Tuple

from gettext_catalogs.i18n.adapters import Adapter
from gettext_catalogs.i18n.exceptions import (
    LocaleFileNotFoundError,
    LocaleNotSupportedError,
    PluralInlineNotSupportedError,
    UndefinedDomainError,
)
from gettext_catalogs.i18n.filesystem import CatalogFileSystem
from gettext_catalogs.i18n.loader import CatalogLoader
from gettext_catalogs.i18n.models import CatalogConfig, CatalogEntry, LoadedCatalog
from gettext_catalogs.i18n.storage import Storage
from gettext_catalogs.logging import get_module_logger

logger = get_module_logger()

COUNT_PLACEHOLDER = "%count%"


def plural_index(count: int) -> int:
    """Return the plural form index for ``count``: 1 above one, 0 otherwise."""
    return 1 if count > 1 else 0


def substitute_count(message: str, count: int) -> str:
    return message.replace(COUNT_PLACEHOLDER, str(count))


def ensure_locale_supported(configuration: CatalogConfig, locale: str) -> None:
    if not configuration.is_locale_supported(locale):
        logger.warning("locale_not_supported", locale=locale)
        raise LocaleNotSupportedError(f"Locale {locale} is not supported")


def ensure_domain_defined(configuration: CatalogConfig, domain: str) -> None:
    if domain not in configuration.get_all_domains():
        logger.warning("undefined_domain", domain=domain)
        raise UndefinedDomainError(f"Domain '{domain}' is not registered.")


class Translator(ABC):
    """Contract shared by every translator backend."""

    configuration: CatalogConfig

    @abstractmethod
    def get_locale(self) -> str:
        pass

    @abstractmethod
    def set_locale(self, locale: str) -> None:
        """Switch the current locale.

        Raises:
            LocaleNotSupportedError: If ``locale`` is not supported; the
                current locale is left unchanged.
        """
        pass

    @abstractmethod
    def is_locale_supported(self, locale: Optional[str]) -> bool:
        pass

    @abstractmethod
    def supported_locales(self) -> List[str]:
        pass

    @abstractmethod
    def get_encoding(self) -> str:
        pass

    @abstractmethod
    def set_encoding(self, encoding: str) -> None:
        pass

    @abstractmethod
    def get_domain(self) -> str:
        pass

    @abstractmethod
    def set_domain(self, domain: str) -> None:
        """Switch the current domain.

        Raises:
            UndefinedDomainError: If ``domain`` is not configured.
        """
        pass

    @abstractmethod
    def translate(self, message: str) -> str:
        """Return the translation of ``message``, or ``message`` itself."""
        pass

    @abstractmethod
    def translate_plural(self, singular: str, plural: str, count: int) -> str:
        pass

    @abstractmethod
    def translate_plural_inline(self, message: str, count: int) -> str:
        pass

    def __str__(self) -> str:
        return self.get_locale()


class CatalogTranslator(Translator):
    """Translator reading catalogs loaded through a CatalogLoader.

    Loaded catalogs are kept per (locale, domain) slot and never mutated;
    switching locale or domain only changes which slot lookups read.

    Attributes:
        configuration: Catalog configuration.
        adapter: Host adapter receiving locale changes.
        filesystem: Resolves catalog paths.
        storage: Holds the current locale, domain and encoding.
        loader: Loads catalogs (usually a CachedCatalogLoader).
        catalogs: Loaded catalogs by (locale, domain).
    """

    def __init__(
        self,
        configuration: CatalogConfig,
        adapter: Adapter,
        filesystem: CatalogFileSystem,
        storage: Storage,
        loader: CatalogLoader,
    ):
        self.configuration = configuration
        self.adapter = adapter
        self.filesystem = filesystem
        self.storage = storage
        self.loader = loader
        self.catalogs: Dict[Tuple[str, str], LoadedCatalog] = {}

        locale = self.storage.get_locale()
        domain = self.storage.get_domain()
        ensure_locale_supported(configuration, locale)
        try:
            self._prepare(locale, domain)
        except LocaleFileNotFoundError as e:
            logger.warning(
                "catalog_missing_at_boot", locale=locale, domain=domain, error=str(e)
            )
        self._sync_adapter(locale)

        logger.info(
            "initialized_translator",
            backend="catalog",
            locale=locale,
            domain=domain,
            fallback_locale=configuration.fallback_locale,
        )

    def get_locale(self) -> str:
        return self.storage.get_locale()

    def set_locale(self, locale: str) -> None:
        ensure_locale_supported(self.configuration, locale)

        domain = self.get_domain()
        if locale == self.get_locale() and (locale, domain) in self.catalogs:
            return

        self._prepare(locale, domain)
        self.storage.set_locale(locale)
        self._sync_adapter(locale)
        logger.info("locale_changed", locale=locale, domain=domain)

    def is_locale_supported(self, locale: Optional[str]) -> bool:
        return self.configuration.is_locale_supported(locale)

    def supported_locales(self) -> List[str]:
        return list(self.configuration.supported_locales)

    def get_encoding(self) -> str:
        return self.storage.get_encoding()

    def set_encoding(self, encoding: str) -> None:
        self.storage.set_encoding(encoding)

    def get_domain(self) -> str:
        return self.storage.get_domain()

    def set_domain(self, domain: str) -> None:
        ensure_domain_defined(self.configuration, domain)

        locale = self.get_locale()
        self._prepare(locale, domain)
        self.storage.set_domain(domain)
        logger.info("domain_changed", locale=locale, domain=domain)

    def translate(self, message: str) -> str:
        entry = self._lookup(message)
        return entry.text_for(message) if entry else message

    def translate_plural(self, singular: str, plural: str, count: int) -> str:
        message_id = plural if count > 1 else singular
        entry = self._lookup(message_id)
        text = entry.form(plural_index(count)) if entry else message_id
        return substitute_count(text, count)

    def translate_plural_inline(self, message: str, count: int) -> str:
        entry = self._lookup(message)
        forms = entry.forms if entry else (message,)
        if len(forms) == 1:
            # Inline catalogs store every form in one "singular|plural" string
            forms = tuple(forms[0].split("|"))
        text = forms[min(plural_index(count), len(forms) - 1)]
        return substitute_count(text, count)

    def get_catalog(
        self, locale: Optional[str] = None, domain: Optional[str] = None
    ) -> Optional[LoadedCatalog]:
        """Return the loaded catalog for a slot, the current one by default."""
        return self.catalogs.get((locale or self.get_locale(), domain or self.get_domain()))

    def _lookup(self, message_id: str) -> Optional[CatalogEntry]:
        domain = self.get_domain()
        for locale in (self.get_locale(), self.configuration.fallback_locale):
            catalog = self.catalogs.get((locale, domain))
            if catalog is None:
                continue
            entry = catalog.get_entry(message_id)
            if entry is not None:
                return entry
        return None

    def _load(self, locale: str, domain: str) -> LoadedCatalog:
        path = self.filesystem.resolve_catalog_path(locale, domain)
        catalog = self.loader.load(path, locale, domain)
        self.catalogs[(locale, domain)] = catalog
        return catalog

    def _prepare(self, locale: str, domain: str) -> None:
        """Load the catalogs a switch to ``(locale, domain)`` needs.

        Raises:
            LocaleFileNotFoundError: If neither the requested catalog nor the
                fallback locale's catalog for ``domain`` can be loaded.
        """
        fallback_locale = self.configuration.fallback_locale
        try:
            self._load(locale, domain)
        except LocaleFileNotFoundError:
            if locale == fallback_locale:
                raise
            if (fallback_locale, domain) not in self.catalogs:
                self._load(fallback_locale, domain)
            self.catalogs.pop((locale, domain), None)
            logger.warning(
                "using_fallback_catalog",
                locale=locale,
                domain=domain,
                fallback_locale=fallback_locale,
            )
            return

        if locale != fallback_locale and (fallback_locale, domain) not in self.catalogs:
            try:
                self._load(fallback_locale, domain)
            except LocaleFileNotFoundError:
                logger.debug(
                    "fallback_catalog_unavailable",
                    fallback_locale=fallback_locale,
                    domain=domain,
                )

    def _sync_adapter(self, locale: str) -> None:
        if self.configuration.sync_adapter and self.adapter.get_locale() != locale:
            self.adapter.set_locale(locale)


class GettextTranslator(Translator):
    """Translator backed by the standard library's GNU translations.

    Reads compiled .mo catalogs only. Plural selection follows the
    catalog's Plural-Forms header.

    Attributes:
        configuration: Catalog configuration.
        adapter: Host adapter receiving locale changes.
        filesystem: Resolves catalog paths.
        storage: Holds the current locale, domain and encoding.
        translations: GNU translations by (locale, domain).
    """

    def __init__(
        self,
        configuration: CatalogConfig,
        adapter: Adapter,
        filesystem: CatalogFileSystem,
        storage: Storage,
    ):
        self.configuration = configuration
        self.adapter = adapter
        self.filesystem = filesystem
        self.storage = storage
        self.translations: Dict[Tuple[str, str], gettext.NullTranslations] = {}

        locale = self.storage.get_locale()
        domain = self.storage.get_domain()
        ensure_locale_supported(configuration, locale)
        try:
            self._prepare(locale, domain)
        except LocaleFileNotFoundError as e:
            logger.warning(
                "catalog_missing_at_boot", locale=locale, domain=domain, error=str(e)
            )
        self._sync_adapter(locale)

        logger.info("initialized_translator", backend="gettext", locale=locale, domain=domain)

    def get_locale(self) -> str:
        return self.storage.get_locale()

    def set_locale(self, locale: str) -> None:
        ensure_locale_supported(self.configuration, locale)

        domain = self.get_domain()
        if locale == self.get_locale() and (locale, domain) in self.translations:
            return

        self._prepare(locale, domain)
        self.storage.set_locale(locale)
        self._sync_adapter(locale)
        logger.info("locale_changed", locale=locale, domain=domain)

    def is_locale_supported(self, locale: Optional[str]) -> bool:
        return self.configuration.is_locale_supported(locale)

    def supported_locales(self) -> List[str]:
        return list(self.configuration.supported_locales)

    def get_encoding(self) -> str:
        return self.storage.get_encoding()

    def set_encoding(self, encoding: str) -> None:
        self.storage.set_encoding(encoding)

    def get_domain(self) -> str:
        return self.storage.get_domain()

    def set_domain(self, domain: str) -> None:
        ensure_domain_defined(self.configuration, domain)

        locale = self.get_locale()
        self._prepare(locale, domain)
        self.storage.set_domain(domain)
        logger.info("domain_changed", locale=locale, domain=domain)

    def translate(self, message: str) -> str:
        translation = self._current()
        return translation.gettext(message) if translation else message

    def translate_plural(self, singular: str, plural: str, count: int) -> str:
        translation = self._current()
        if translation is None:
            text = singular if count == 1 else plural
        else:
            text = translation.ngettext(singular, plural, count)
        return substitute_count(text, count)

    def translate_plural_inline(self, message: str, count: int) -> str:
        raise PluralInlineNotSupportedError(
            "Inline plurals are not supported by the gettext backend, "
            "use the catalog backend"
        )

    def _current(self) -> Optional[gettext.NullTranslations]:
        return self.translations.get((self.get_locale(), self.get_domain()))

    def _open(self, locale: str, domain: str) -> Optional[gettext.GNUTranslations]:
        path = self.filesystem.make_file_path(locale, domain, "mo")
        try:
            with open(path, "rb") as fp:
                return gettext.GNUTranslations(fp)
        except FileNotFoundError:
            return None
        except OSError as e:
            raise LocaleFileNotFoundError(f"Failed to parse {path}: {e}") from e

    def _prepare(self, locale: str, domain: str) -> None:
        fallback_locale = self.configuration.fallback_locale
        translation = self._open(locale, domain)
        fallback = self._open(fallback_locale, domain) if locale != fallback_locale else None

        if translation is None and fallback is None:
            raise LocaleFileNotFoundError(
                f"No compiled catalog for {locale}/{domain} in {self.filesystem.domain_path()}"
            )

        if translation is None:
            logger.warning(
                "using_fallback_catalog",
                locale=locale,
                domain=domain,
                fallback_locale=fallback_locale,
            )
            translation = fallback
        elif fallback is not None:
            translation.add_fallback(fallback)

        self.translations[(locale, domain)] = translation

    def _sync_adapter(self, locale: str) -> None:
        if self.configuration.sync_adapter and self.adapter.get_locale() != locale:
            self.adapter.set_locale(locale)
