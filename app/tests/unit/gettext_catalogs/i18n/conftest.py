"""Feature-level fixtures for i18n system tests.

Provides translators built over the populated catalog tree:
- en_US/messages: English catalog (fallback locale)
- es_AR/messages: Spanish catalog with plural and fuzzy entries
- it_IT: no catalog
"""

import pytest

from tests.factories.i18n import ENGLISH_MESSAGES, SPANISH_MESSAGES, SPANISH_PLURALS, make_mo_file

from gettext_catalogs.i18n import (
    CachedCatalogLoader,
    CatalogCache,
    CatalogTranslator,
    FileCatalogLoader,
    GettextTranslator,
    MemoryStorage,
    TranslationService,
)


@pytest.fixture
def catalog_cache():
    return CatalogCache()


@pytest.fixture
def catalog_loader(catalog_cache):
    """Cached loader whose underlying loader can be inspected."""
    return CachedCatalogLoader(FileCatalogLoader(), catalog_cache)


@pytest.fixture
def translator(populated_filesystem, memory_adapter, catalog_loader):
    """CatalogTranslator booted on en_US/messages."""
    config = populated_filesystem.configuration
    return CatalogTranslator(
        config,
        memory_adapter,
        populated_filesystem,
        MemoryStorage(config),
        catalog_loader,
    )


@pytest.fixture
def compiled_filesystem(filesystem):
    """Filesystem holding compiled en_US and es_AR messages catalogs."""
    make_mo_file(
        filesystem.make_file_path("es_AR", "messages", "mo"),
        messages=SPANISH_MESSAGES,
        plurals=SPANISH_PLURALS,
    )
    make_mo_file(
        filesystem.make_file_path("en_US", "messages", "mo"),
        messages=ENGLISH_MESSAGES,
        locale="en_US",
    )
    return filesystem


@pytest.fixture
def gettext_translator(compiled_filesystem, memory_adapter):
    """GettextTranslator booted on en_US/messages."""
    config = compiled_filesystem.configuration
    return GettextTranslator(config, memory_adapter, compiled_filesystem, MemoryStorage(config))


@pytest.fixture
def translation_service(translator):
    return TranslationService(translator)
