"""Tests for gettext_catalogs.i18n.loader module."""

import os
from unittest.mock import MagicMock

import pytest

from tests.factories.i18n import SPANISH_MESSAGES, make_mo_file, make_po_file

from gettext_catalogs.i18n import (
    CachedCatalogLoader,
    CatalogCache,
    FileCatalogLoader,
    Fingerprint,
    LoadedCatalog,
    LocaleFileNotFoundError,
)


@pytest.fixture
def po_path(tmp_path):
    path = make_po_file(tmp_path / "es_AR" / "LC_MESSAGES" / "messages.po", messages=SPANISH_MESSAGES)
    os.utime(path, (1700000000, 1700000000))
    return path


@pytest.mark.unit
class TestFileCatalogLoader:
    """Tests for FileCatalogLoader."""

    def test_load_po(self, po_path):
        catalog = FileCatalogLoader().load(po_path, "es_AR", "messages")

        assert isinstance(catalog, LoadedCatalog)
        assert catalog.locale == "es_AR"
        assert catalog.domain == "messages"
        assert catalog.path == str(po_path)
        assert catalog.get_message("Welcome") == "Bienvenido"
        assert catalog.fingerprint == Fingerprint.of(po_path)

    def test_load_mo(self, tmp_path):
        path = make_mo_file(tmp_path / "messages.mo", messages=SPANISH_MESSAGES)

        catalog = FileCatalogLoader().load(path, "es_AR", "messages")

        assert catalog.get_message("Goodbye") == "Adiós"

    def test_missing_file(self, tmp_path):
        with pytest.raises(LocaleFileNotFoundError, match="not found"):
            FileCatalogLoader().load(tmp_path / "missing.po")

    def test_unsupported_format(self, tmp_path):
        path = tmp_path / "messages.json"
        path.write_text("{}")
        with pytest.raises(LocaleFileNotFoundError, match="Unsupported"):
            FileCatalogLoader().load(path)

    def test_parse_error(self, tmp_path):
        path = tmp_path / "messages.mo"
        path.write_bytes(b"not a compiled catalog")
        with pytest.raises(LocaleFileNotFoundError, match="Failed to parse"):
            FileCatalogLoader().load(path)

    def test_custom_readers(self, tmp_path):
        """Readers are chosen by file suffix."""
        path = tmp_path / "messages.txt"
        path.write_text("")
        reader = MagicMock()
        reader.read.return_value = {}

        FileCatalogLoader(readers={".txt": reader}).load(path)

        reader.read.assert_called_once_with(path)


@pytest.mark.unit
class TestCatalogCache:
    """Tests for CatalogCache."""

    def test_get_matching_fingerprint(self):
        cache = CatalogCache()
        catalog = LoadedCatalog(locale="es_AR", domain="messages", path="a.po")
        cache.set("a.po", Fingerprint(1, 2), catalog)

        assert cache.get("a.po", Fingerprint(1, 2)) is catalog
        assert cache.get("a.po", Fingerprint(1, 3)) is None
        assert cache.get("b.po", Fingerprint(1, 2)) is None
        assert cache.get_stats() == {"entries": 1, "hits": 1, "misses": 2}

    def test_clear(self):
        cache = CatalogCache()
        cache.set("a.po", Fingerprint(1, 2), LoadedCatalog(locale=None, domain=None, path="a.po"))

        assert "a.po" in cache
        cache.clear()
        assert len(cache) == 0


@pytest.mark.unit
class TestCachedCatalogLoader:
    """Tests for CachedCatalogLoader."""

    @pytest.fixture
    def underlying(self):
        return MagicMock(wraps=FileCatalogLoader())

    def test_cache_hit_skips_reading(self, po_path, underlying):
        """A second load with an unchanged file is served from the cache."""
        loader = CachedCatalogLoader(underlying, CatalogCache())

        first = loader.load(po_path, "es_AR", "messages")
        second = loader.load(po_path, "es_AR", "messages")

        assert second is first
        assert underlying.load.call_count == 1

    def test_changed_file_is_reloaded(self, po_path, underlying):
        """A new fingerprint (mtime or size) forces a re-read."""
        cache = CatalogCache()
        loader = CachedCatalogLoader(underlying, cache)
        loader.load(po_path, "es_AR", "messages")

        make_po_file(po_path, messages={"Welcome": "¡Bienvenidos!"})
        os.utime(po_path, (1700000100, 1700000100))
        catalog = loader.load(po_path, "es_AR", "messages")

        assert catalog.get_message("Welcome") == "¡Bienvenidos!"
        assert underlying.load.call_count == 2
        assert len(cache) == 1

    def test_same_file_for_other_locale_is_retagged(self, po_path, underlying):
        loader = CachedCatalogLoader(underlying, CatalogCache())
        loader.load(po_path, "es_AR", "messages")

        catalog = loader.load(po_path, "es_UY", "messages")

        assert catalog.locale == "es_UY"
        assert underlying.load.call_count == 1

    def test_without_cache_always_reads(self, po_path, underlying):
        """Without a cache every load reads the file."""
        loader = CachedCatalogLoader(underlying)

        loader.load(po_path, "es_AR", "messages")
        loader.load(po_path, "es_AR", "messages")

        assert underlying.load.call_count == 2

    def test_missing_file(self, tmp_path, underlying):
        loader = CachedCatalogLoader(underlying, CatalogCache())
        with pytest.raises(LocaleFileNotFoundError):
            loader.load(tmp_path / "missing.po")
        underlying.load.assert_not_called()

    def test_shared_cache(self, po_path):
        """Two loaders sharing a cache parse the file once."""
        cache = CatalogCache()
        first = CachedCatalogLoader(FileCatalogLoader(), cache).load(po_path, "es_AR", "messages")
        second = CachedCatalogLoader(FileCatalogLoader(), cache).load(po_path, "es_AR", "messages")

        assert second is first
        assert cache.get_stats()["hits"] == 1
