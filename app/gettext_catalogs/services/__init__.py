"""
Dependency injection services.

Provides type aliases and provider functions for FastAPI dependency injection.
"""

from gettext_catalogs.services.dependencies import (
    CatalogCacheDep,
    CatalogProvisionerDep,
    SettingsDep,
    TranslationServiceDep,
)
from gettext_catalogs.services.providers import (
    get_catalog_cache,
    get_catalog_config,
    get_filesystem,
    get_provisioner,
    get_settings,
    get_translation_service,
)

__all__ = [
    "SettingsDep",
    "TranslationServiceDep",
    "CatalogCacheDep",
    "CatalogProvisionerDep",
    "get_settings",
    "get_catalog_config",
    "get_catalog_cache",
    "get_filesystem",
    "get_provisioner",
    "get_translation_service",
]
