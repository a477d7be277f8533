"""
Type aliases for FastAPI dependency injection.

Provides annotated type hints for common catalog dependencies.
"""

from typing import Annotated

from fastapi import Depends

from gettext_catalogs.configuration import Settings
from gettext_catalogs.i18n.loader import CatalogCache
from gettext_catalogs.i18n.provisioning import CatalogProvisioner
from gettext_catalogs.i18n.service import TranslationService
from gettext_catalogs.services.providers import (
    get_catalog_cache,
    get_provisioner,
    get_settings,
    get_translation_service,
)

# Settings dependency
SettingsDep = Annotated[Settings, Depends(get_settings)]

# Translation service dependency
# Usage: translation.translate("Welcome"), translation.set_locale("es_AR"), etc.
TranslationServiceDep = Annotated[TranslationService, Depends(get_translation_service)]

# Shared catalog cache dependency
CatalogCacheDep = Annotated[CatalogCache, Depends(get_catalog_cache)]

# Provisioner dependency (maintenance endpoints)
CatalogProvisionerDep = Annotated[CatalogProvisioner, Depends(get_provisioner)]

__all__ = [
    "SettingsDep",
    "TranslationServiceDep",
    "CatalogCacheDep",
    "CatalogProvisionerDep",
]
