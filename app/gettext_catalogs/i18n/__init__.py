"""i18n system - gettext message catalog management.

Provides the catalog tree lifecycle, cached catalog loading and runtime
translation with hot-switching of locale and domain.

Main components:
- models: CatalogConfig, CatalogEntry, LoadedCatalog, Fingerprint
- filesystem: CatalogFileSystem (catalog tree and headers)
- loader: CatalogLoader, FileCatalogLoader, CachedCatalogLoader, CatalogCache
- translator: Translator, CatalogTranslator, GettextTranslator
- service: TranslationService facade
- provisioning: CatalogProvisioner for create / update batches
- resolvers: LocaleResolver for Accept-Language negotiation
"""

from gettext_catalogs.i18n.adapters import Adapter, MemoryAdapter
from gettext_catalogs.i18n.exceptions import (
    CatalogError,
    ConfigurationError,
    DirectoryNotFoundError,
    FileCreationError,
    LocaleFileNotFoundError,
    LocaleNotSupportedError,
    PluralInlineNotSupportedError,
    RequiredConfigurationKeyError,
    UndefinedDomainError,
)
from gettext_catalogs.i18n.factory import (
    config_from_settings,
    create_filesystem,
    create_translator,
    load_config_file,
)
from gettext_catalogs.i18n.filesystem import CatalogFileSystem
from gettext_catalogs.i18n.loader import (
    CachedCatalogLoader,
    CatalogCache,
    CatalogLoader,
    FileCatalogLoader,
)
from gettext_catalogs.i18n.models import (
    CatalogConfig,
    CatalogEntry,
    Fingerprint,
    LoadedCatalog,
)
from gettext_catalogs.i18n.provisioning import CatalogProvisioner, ProvisioningReport
from gettext_catalogs.i18n.resolvers import LocaleResolver
from gettext_catalogs.i18n.selector import LanguageSelector
from gettext_catalogs.i18n.service import TranslationService
from gettext_catalogs.i18n.storage import ContextStorage, MemoryStorage, Storage
from gettext_catalogs.i18n.translator import (
    CatalogTranslator,
    GettextTranslator,
    Translator,
)

__all__ = [
    "Adapter",
    "MemoryAdapter",
    "CatalogError",
    "ConfigurationError",
    "RequiredConfigurationKeyError",
    "DirectoryNotFoundError",
    "FileCreationError",
    "LocaleFileNotFoundError",
    "LocaleNotSupportedError",
    "UndefinedDomainError",
    "PluralInlineNotSupportedError",
    "config_from_settings",
    "create_filesystem",
    "create_translator",
    "load_config_file",
    "CatalogFileSystem",
    "CatalogLoader",
    "FileCatalogLoader",
    "CachedCatalogLoader",
    "CatalogCache",
    "CatalogConfig",
    "CatalogEntry",
    "Fingerprint",
    "LoadedCatalog",
    "CatalogProvisioner",
    "ProvisioningReport",
    "LocaleResolver",
    "LanguageSelector",
    "TranslationService",
    "Storage",
    "MemoryStorage",
    "ContextStorage",
    "Translator",
    "CatalogTranslator",
    "GettextTranslator",
]
