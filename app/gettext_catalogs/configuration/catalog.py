"""Message catalog settings."""

from typing import Any, Dict, List, Optional, Union

from pydantic import Field

from gettext_catalogs.configuration.base import ComponentSettings


class CatalogSettings(ComponentSettings):
    """Catalog layout and translator configuration.

    Environment Variables:
        GETTEXT_CONFIG_FILE: Optional YAML file; when set it replaces every
            other GETTEXT_* value below
        GETTEXT_LOCALE: Default locale tag (default: en_US)
        GETTEXT_FALLBACK_LOCALE: Locale used when a catalog is missing
        GETTEXT_SUPPORTED_LOCALES: JSON list of locale tags
        GETTEXT_DOMAIN: Default domain name (default: messages)
        GETTEXT_SOURCE_PATHS: JSON list mixing plain paths (default domain)
            and {"domain": [paths]} objects
        GETTEXT_ENCODING: Catalog encoding (default: UTF-8)
        GETTEXT_TRANSLATIONS_PATH: Catalog root relative to the base path
        GETTEXT_BASE_PATH: Application base path (default: current directory)
        GETTEXT_STORAGE_PATH: Root for generated files such as compiled views
        GETTEXT_CUSTOM_LOCALE: Insert a "C" directory before LC_MESSAGES
        GETTEXT_HANDLER: Translator backend, 'catalog' or 'gettext'

    Example:
        ```python
        from gettext_catalogs.services import get_settings

        settings = get_settings()
        supported = settings.catalog.supported_locales
        ```
    """

    config_file: Optional[str] = Field(default=None, alias="GETTEXT_CONFIG_FILE")
    locale: str = Field(default="en_US", alias="GETTEXT_LOCALE")
    fallback_locale: str = Field(default="en_US", alias="GETTEXT_FALLBACK_LOCALE")
    supported_locales: List[str] = Field(
        default_factory=lambda: ["en_US"], alias="GETTEXT_SUPPORTED_LOCALES"
    )
    domain: str = Field(default="messages", alias="GETTEXT_DOMAIN")
    source_paths: List[Union[str, Dict[str, List[str]]]] = Field(
        default_factory=list, alias="GETTEXT_SOURCE_PATHS"
    )
    encoding: str = Field(default="UTF-8", alias="GETTEXT_ENCODING")
    translations_path: str = Field(
        default="../resources/lang", alias="GETTEXT_TRANSLATIONS_PATH"
    )
    base_path: str = Field(default=".", alias="GETTEXT_BASE_PATH")
    storage_path: str = Field(default="storage", alias="GETTEXT_STORAGE_PATH")
    project: str = Field(default="", alias="GETTEXT_PROJECT")
    translator: str = Field(default="", alias="GETTEXT_TRANSLATOR")
    keywords_list: List[str] = Field(
        default_factory=list, alias="GETTEXT_KEYWORDS_LIST"
    )
    relative_path: str = Field(
        default="../../../../../app", alias="GETTEXT_RELATIVE_PATH"
    )
    custom_locale: bool = Field(default=False, alias="GETTEXT_CUSTOM_LOCALE")
    session_identifier: str = Field(
        default="gettext-locale", alias="GETTEXT_SESSION_IDENTIFIER"
    )
    handler: str = Field(default="catalog", alias="GETTEXT_HANDLER")
    sync_adapter: bool = Field(default=True, alias="GETTEXT_SYNC_ADAPTER")

    def as_mapping(self) -> Dict[str, Any]:
        """Return the catalog configuration as a dash-keyed mapping.

        The keys match the ones accepted by ``CatalogConfig.from_mapping``
        and by YAML configuration files.
        """
        return {
            "locale": self.locale,
            "fallback-locale": self.fallback_locale,
            "supported-locales": list(self.supported_locales),
            "domain": self.domain,
            "source-paths": list(self.source_paths),
            "encoding": self.encoding,
            "translations-path": self.translations_path,
            "project": self.project,
            "translator": self.translator,
            "keywords-list": list(self.keywords_list),
            "relative-path": self.relative_path,
            "custom-locale": self.custom_locale,
            "session-identifier": self.session_identifier,
            "handler": self.handler,
            "sync-adapter": self.sync_adapter,
        }
