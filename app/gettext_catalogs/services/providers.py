"""
Factory functions for dependency injection.

Provides application-scoped singleton providers for the catalog system.
"""

from functools import lru_cache

from gettext_catalogs.configuration import Settings
from gettext_catalogs.i18n.factory import (
    config_from_settings,
    create_filesystem,
    create_translator,
)
from gettext_catalogs.i18n.filesystem import CatalogFileSystem
from gettext_catalogs.i18n.loader import CatalogCache
from gettext_catalogs.i18n.models import CatalogConfig
from gettext_catalogs.i18n.provisioning import CatalogProvisioner
from gettext_catalogs.i18n.service import TranslationService
from gettext_catalogs.i18n.storage import ContextStorage


@lru_cache
def get_settings() -> Settings:
    """
    Get application-scoped settings singleton.

    The @lru_cache decorator ensures only ONE instance is created per process.

    Application code should use the DI type alias for testability:
        from gettext_catalogs.services import SettingsDep
        @router.get("/config")
        def get_config(settings: SettingsDep):
            return settings.catalog.supported_locales

    Returns:
        Settings: Cached settings instance loaded from environment.
    """
    return Settings()


@lru_cache
def get_catalog_config() -> CatalogConfig:
    """Get the application-scoped catalog configuration."""
    return config_from_settings(get_settings().catalog)


@lru_cache
def get_catalog_cache() -> CatalogCache:
    """
    Get the process-wide catalog cache.

    Shared by every translator created through the providers so a catalog
    is parsed once per process and re-read only when its file changes.
    """
    return CatalogCache()


@lru_cache
def get_filesystem() -> CatalogFileSystem:
    catalog_settings = get_settings().catalog
    return create_filesystem(
        get_catalog_config(),
        base_path=catalog_settings.base_path,
        storage_path=catalog_settings.storage_path,
    )


def get_provisioner() -> CatalogProvisioner:
    """Get a provisioner bound to the application catalog tree."""
    return CatalogProvisioner(get_filesystem())


@lru_cache
def get_translation_service() -> TranslationService:
    """
    Get application-scoped translation service singleton.

    The translator keeps its locale and domain in context variables, so
    concurrent requests sharing this service do not see each other's
    locale switches.

    Usage:
        @router.get("/greeting")
        def greeting(translation: TranslationServiceDep):
            return {"message": translation.translate("Welcome")}
    """
    configuration = get_catalog_config()
    translator = create_translator(
        configuration=configuration,
        filesystem=get_filesystem(),
        storage=ContextStorage(configuration),
        cache=get_catalog_cache(),
    )
    return TranslationService(translator)
