"""Configuration module - public API.

Centralized configuration management using Pydantic BaseSettings.

Exports:
    settings: Singleton Settings instance
    Settings: Main settings class (for testing/overrides)
    CatalogSettings: Catalog settings class (for testing)
"""

from gettext_catalogs.configuration.catalog import CatalogSettings
from gettext_catalogs.configuration.settings import Settings, settings

__all__ = ["Settings", "CatalogSettings", "settings"]
