"""Custom exceptions for the catalog system.

All exceptions inherit from ``CatalogError`` so callers can handle the
whole family in one place.
"""


class CatalogError(Exception):
    """Base exception for all catalog-related errors.

    Example:
        try:
            filesystem.generate_locales()
        except CatalogError as e:
            logger.error("catalog_error", error=str(e))
    """

    pass


class ConfigurationError(CatalogError):
    """Raised when the catalog configuration is inconsistent.

    Example:
        >>> CatalogConfig(locale="fr_FR", supported_locales=("en_US",))
        Traceback (most recent call last):
        ...
        ConfigurationError: Locale fr_FR is not in the supported locales
    """

    pass


class RequiredConfigurationKeyError(ConfigurationError):
    """Raised when a mandatory configuration key is missing.

    Example:
        >>> CatalogConfig.from_mapping({"locale": "en_US"})
        Traceback (most recent call last):
        ...
        RequiredConfigurationKeyError: Unconfigured required value: fallback-locale
    """

    pass


class DirectoryNotFoundError(CatalogError):
    """Raised when a required directory does not exist.

    Directories are never created implicitly at read time; run the
    provisioning step first.
    """

    pass


class FileCreationError(CatalogError):
    """Raised when a directory or catalog file cannot be created."""

    pass


class LocaleFileNotFoundError(CatalogError):
    """Raised when a catalog file is missing, empty or cannot be read or written."""

    pass


class LocaleNotSupportedError(CatalogError):
    """Raised when switching to a locale outside the supported locales.

    Example:
        >>> translator.set_locale("xx_XX")
        Traceback (most recent call last):
        ...
        LocaleNotSupportedError: Locale xx_XX is not supported
    """

    pass


class UndefinedDomainError(CatalogError):
    """Raised when switching to a domain that is not configured.

    Example:
        >>> translator.set_domain("missing")
        Traceback (most recent call last):
        ...
        UndefinedDomainError: Domain 'missing' is not registered.
    """

    pass


class PluralInlineNotSupportedError(CatalogError):
    """Raised by backends that only support catalog-managed plural keys."""

    pass
