"""HTTP integration for the catalog system."""

from gettext_catalogs.server.locale_middleware import LocaleMiddleware

__all__ = ["LocaleMiddleware"]
