"""gettext_catalogs - per-locale, per-domain gettext message catalogs.

Subpackages:
- configuration: Settings management (settings, CatalogSettings)
- logging: Structured logging (get_module_logger, bind_request_context)
- i18n: Catalog tree, cached loading and translators
- services: Dependency injection providers
- server: HTTP middleware
"""

__version__ = "1.0.0"
