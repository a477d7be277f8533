"""Tests for gettext_catalogs.i18n.factory module."""

import pytest
import yaml

from tests.factories.i18n import make_catalog_config, make_config_mapping

from gettext_catalogs.configuration import CatalogSettings
from gettext_catalogs.i18n import (
    CatalogTranslator,
    ConfigurationError,
    GettextTranslator,
    RequiredConfigurationKeyError,
    config_from_settings,
    create_filesystem,
    create_translator,
    load_config_file,
)
from gettext_catalogs.i18n.factory import create_loader


@pytest.fixture
def config_file(tmp_path):
    path = tmp_path / "gettext.yml"
    path.write_text(yaml.safe_dump(make_config_mapping(project="From YAML")), encoding="utf-8")
    return path


@pytest.mark.unit
class TestLoadConfigFile:
    """Tests for load_config_file()."""

    def test_load(self, config_file):
        config = load_config_file(config_file)

        assert config.project == "From YAML"
        assert config.get_all_domains() == ["messages", "frontend", "backend"]

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigurationError, match="Cannot read"):
            load_config_file(tmp_path / "missing.yml")

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "gettext.yml"
        path.write_text("locale: [unclosed", encoding="utf-8")
        with pytest.raises(ConfigurationError, match="Invalid YAML"):
            load_config_file(path)

    def test_not_a_mapping(self, tmp_path):
        path = tmp_path / "gettext.yml"
        path.write_text("- en_US\n- es_AR\n", encoding="utf-8")
        with pytest.raises(ConfigurationError, match="mapping"):
            load_config_file(path)

    def test_missing_required_key(self, tmp_path):
        path = tmp_path / "gettext.yml"
        path.write_text("locale: en_US\nencoding: UTF-8\n", encoding="utf-8")
        with pytest.raises(RequiredConfigurationKeyError, match="fallback-locale"):
            load_config_file(path)


@pytest.mark.unit
class TestConfigFromSettings:
    """Tests for config_from_settings()."""

    def test_from_environment(self, monkeypatch):
        monkeypatch.setenv("GETTEXT_LOCALE", "es_AR")
        monkeypatch.setenv("GETTEXT_SUPPORTED_LOCALES", '["en_US", "es_AR"]')
        monkeypatch.setenv("GETTEXT_SOURCE_PATHS", '[{"frontend": ["views/frontend"]}]')

        config = config_from_settings(CatalogSettings())

        assert config.locale == "es_AR"
        assert config.supported_locales == ("en_US", "es_AR")
        assert config.get_all_domains() == ["messages", "frontend"]

    def test_config_file_takes_precedence(self, monkeypatch, config_file):
        monkeypatch.setenv("GETTEXT_CONFIG_FILE", str(config_file))
        monkeypatch.setenv("GETTEXT_PROJECT", "From environment")

        config = config_from_settings(CatalogSettings())

        assert config.project == "From YAML"

    def test_inconsistent_settings(self, monkeypatch):
        monkeypatch.setenv("GETTEXT_LOCALE", "fr_FR")
        with pytest.raises(ConfigurationError):
            config_from_settings(CatalogSettings())


@pytest.mark.unit
class TestCreateFilesystem:
    """Tests for create_filesystem()."""

    def test_storage_relative_to_base(self, tmp_path):
        filesystem = create_filesystem(make_catalog_config(), base_path=tmp_path, storage_path="storage")

        assert filesystem.base_path == tmp_path
        assert filesystem.storage_path == tmp_path / "storage"

    def test_absolute_storage(self, tmp_path):
        storage = tmp_path / "elsewhere"
        filesystem = create_filesystem(make_catalog_config(), base_path=tmp_path, storage_path=storage)

        assert filesystem.storage_path == storage


@pytest.mark.unit
class TestCreateTranslator:
    """Tests for create_translator()."""

    def test_catalog_handler(self, populated_filesystem):
        translator = create_translator(
            configuration=populated_filesystem.configuration,
            filesystem=populated_filesystem,
        )

        assert isinstance(translator, CatalogTranslator)
        translator.set_locale("es_AR")
        assert translator.translate("Welcome") == "Bienvenido"

    def test_gettext_handler(self, make_filesystem):
        config = make_catalog_config(handler="gettext")

        translator = create_translator(configuration=config, filesystem=make_filesystem(config))

        assert isinstance(translator, GettextTranslator)

    def test_shared_cache(self, populated_filesystem, catalog_cache):
        create_translator(
            configuration=populated_filesystem.configuration,
            filesystem=populated_filesystem,
            cache=catalog_cache,
        )

        assert len(catalog_cache) == 1

    def test_create_loader_without_cache(self):
        assert create_loader(use_cache=False).cache is None
        assert create_loader().cache is not None
