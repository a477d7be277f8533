"""Shared fixtures for the catalog system test suite."""

from datetime import datetime, timedelta, timezone

import pytest

from tests.factories.i18n import (
    ENGLISH_MESSAGES,
    SPANISH_MESSAGES,
    SPANISH_PLURALS,
    make_catalog_config,
    make_multi_domain_config,
    make_po_file,
    make_view_tree,
)

from gettext_catalogs.i18n import CatalogFileSystem, MemoryAdapter, MemoryStorage

FIXED_NOW = datetime(2024, 3, 9, 14, 5, tzinfo=timezone(timedelta(hours=-3)))


@pytest.fixture
def fixed_clock():
    """Clock returning 2024-03-09 14:05 -0300."""
    return lambda: FIXED_NOW


@pytest.fixture
def catalog_config():
    """Single-domain configuration with en_US, es_AR and it_IT."""
    return make_catalog_config()


@pytest.fixture
def multi_domain_config():
    """Configuration with the messages, frontend and backend domains."""
    return make_multi_domain_config()


@pytest.fixture
def app_root(tmp_path):
    """Application base path holding every view source directory."""
    root = tmp_path / "app"
    root.mkdir()
    return make_view_tree(
        root,
        [
            "controllers",
            "views/frontend",
            "views/backend",
            "views/messages",
            "views/misc",
        ],
    )


@pytest.fixture
def make_filesystem(app_root, fixed_clock):
    """Build a CatalogFileSystem rooted at ``app_root`` for a configuration."""

    def _make(configuration):
        return CatalogFileSystem(
            configuration,
            base_path=app_root,
            storage_path=app_root / "storage",
            clock=fixed_clock,
        )

    return _make


@pytest.fixture
def filesystem(make_filesystem, catalog_config):
    return make_filesystem(catalog_config)


@pytest.fixture
def populated_filesystem(filesystem):
    """Filesystem whose en_US and es_AR messages catalogs hold translations.

    it_IT has no catalog at all.
    """
    make_po_file(
        filesystem.make_file_path("es_AR", "messages"),
        messages=SPANISH_MESSAGES,
        plurals=SPANISH_PLURALS,
        fuzzy={"Draft": "Borrador"},
    )
    make_po_file(
        filesystem.make_file_path("en_US", "messages"),
        messages=ENGLISH_MESSAGES,
        locale="en_US",
    )
    return filesystem


@pytest.fixture
def memory_adapter():
    return MemoryAdapter(locale="en_US")


@pytest.fixture
def memory_storage(catalog_config):
    return MemoryStorage(catalog_config)
