"""Factory functions for creating i18n components.

Provides convenience functions for building the configuration, the
filesystem and a translator from the application settings.
"""

from pathlib import Path
from typing import Optional

import yaml

from gettext_catalogs.configuration import CatalogSettings, settings
from gettext_catalogs.i18n.adapters import Adapter, MemoryAdapter
from gettext_catalogs.i18n.compiler import ViewCompiler
from gettext_catalogs.i18n.exceptions import ConfigurationError
from gettext_catalogs.i18n.filesystem import CatalogFileSystem
from gettext_catalogs.i18n.loader import CachedCatalogLoader, CatalogCache, FileCatalogLoader
from gettext_catalogs.i18n.models import CatalogConfig
from gettext_catalogs.i18n.paths import PathLike
from gettext_catalogs.i18n.storage import MemoryStorage, Storage
from gettext_catalogs.i18n.translator import CatalogTranslator, GettextTranslator, Translator
from gettext_catalogs.logging import get_module_logger

logger = get_module_logger()


def load_config_file(path: PathLike) -> CatalogConfig:
    """Load a catalog configuration from a YAML file.

    Args:
        path: YAML file with dash-keyed settings (locale, fallback-locale, ...).

    Returns:
        CatalogConfig instance.

    Raises:
        ConfigurationError: If the file cannot be read or is not a mapping.
        RequiredConfigurationKeyError: If a required key is missing.
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except OSError as e:
        raise ConfigurationError(f"Cannot read configuration file {path}: {e}") from e
    except yaml.YAMLError as e:
        logger.error("config_file_parse_error", path=str(path), error=str(e))
        raise ConfigurationError(f"Invalid YAML in {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigurationError(f"Configuration file {path} must contain a mapping")

    logger.info("loaded_config_file", path=str(path))
    return CatalogConfig.from_mapping(data)


def config_from_settings(catalog_settings: Optional[CatalogSettings] = None) -> CatalogConfig:
    """Build the catalog configuration from settings.

    A configured ``GETTEXT_CONFIG_FILE`` takes precedence over the
    individual GETTEXT_* values.
    """
    catalog_settings = catalog_settings or settings.catalog
    if catalog_settings.config_file:
        return load_config_file(catalog_settings.config_file)
    return CatalogConfig.from_mapping(catalog_settings.as_mapping())


def create_filesystem(
    configuration: CatalogConfig,
    base_path: Optional[PathLike] = None,
    storage_path: Optional[PathLike] = None,
    compiler: Optional[ViewCompiler] = None,
) -> CatalogFileSystem:
    """Create a CatalogFileSystem.

    Args:
        configuration: Catalog configuration.
        base_path: Application base path (default: GETTEXT_BASE_PATH).
        storage_path: Root for generated files (default: GETTEXT_STORAGE_PATH,
            relative to the base path).
        compiler: Optional view compiler replacing the staging compiler.
    """
    base = Path(base_path if base_path is not None else settings.catalog.base_path)
    storage = Path(storage_path if storage_path is not None else settings.catalog.storage_path)
    if not storage.is_absolute():
        storage = base / storage
    return CatalogFileSystem(configuration, base, storage, compiler=compiler)


def create_loader(
    cache: Optional[CatalogCache] = None, use_cache: bool = True
) -> CachedCatalogLoader:
    """Create the catalog loader used by CatalogTranslator.

    Args:
        cache: Shared cache; a new one is created when None and caching is on.
        use_cache: Disable to read catalogs from disk on every load.
    """
    if use_cache and cache is None:
        cache = CatalogCache()
    return CachedCatalogLoader(FileCatalogLoader(), cache if use_cache else None)


def create_translator(
    configuration: Optional[CatalogConfig] = None,
    filesystem: Optional[CatalogFileSystem] = None,
    adapter: Optional[Adapter] = None,
    storage: Optional[Storage] = None,
    cache: Optional[CatalogCache] = None,
    use_cache: bool = True,
) -> Translator:
    """Create and configure a Translator instance.

    The backend is chosen by ``configuration.handler``.

    Returns:
        Translator: Configured translator instance

    Usage:
        # Use settings
        translator = create_translator()

        # Explicit configuration and shared cache
        translator = create_translator(configuration=config, cache=cache)
    """
    configuration = configuration or config_from_settings()
    filesystem = filesystem or create_filesystem(configuration)
    adapter = adapter or MemoryAdapter(configuration.locale)
    storage = storage or MemoryStorage(configuration)

    if configuration.handler == "gettext":
        translator: Translator = GettextTranslator(configuration, adapter, filesystem, storage)
    else:
        translator = CatalogTranslator(
            configuration,
            adapter,
            filesystem,
            storage,
            create_loader(cache, use_cache),
        )

    logger.info(
        "translator_created",
        handler=configuration.handler,
        domain_path=str(filesystem.domain_path()),
        cached=use_cache,
    )
    return translator
