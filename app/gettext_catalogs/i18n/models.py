"""Catalog models for the i18n system.

Defines the configuration model shared by the filesystem and translator
layers, and the immutable structures produced when a catalog is loaded.
"""

import os
from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, NamedTuple, Optional, Tuple

from gettext_catalogs.i18n.exceptions import (
    ConfigurationError,
    RequiredConfigurationKeyError,
)

REQUIRED_KEYS = ("locale", "fallback-locale", "encoding")

HANDLERS = ("catalog", "gettext")


def _split_source_paths(
    source_paths: Any,
) -> Tuple[Tuple[str, ...], Dict[str, Tuple[str, ...]]]:
    """Separate default-domain paths from domain-keyed paths.

    Plain strings belong to the default domain. A list value under a key
    declares a domain. A string under a key is treated as a plain path.
    """
    defaults: List[str] = []
    domains: Dict[str, List[str]] = {}

    if isinstance(source_paths, Mapping):
        items = [source_paths]
    elif isinstance(source_paths, str):
        items = [source_paths]
    else:
        items = list(source_paths or [])

    for item in items:
        if isinstance(item, Mapping):
            for domain, paths in item.items():
                if isinstance(paths, (list, tuple)):
                    domains.setdefault(str(domain), []).extend(str(p) for p in paths)
                else:
                    defaults.append(str(paths))
        else:
            defaults.append(str(item))

    return tuple(defaults), {d: tuple(p) for d, p in domains.items()}


@dataclass(frozen=True)
class CatalogConfig:
    """Immutable catalog configuration.

    Built once at startup and shared by the filesystem and translator
    layers; nothing mutates it afterwards.

    Attributes:
        locale: Default locale tag (e.g., "en_US").
        fallback_locale: Locale whose catalog is used when one is missing.
        supported_locales: Ordered locale tags the application accepts.
        domain: Default domain; always part of the domain set.
        default_source_paths: Source paths not keyed by a domain.
        domain_source_paths: Source paths keyed by domain name.
        encoding: Catalog charset.
        translations_path: Catalog root, relative to the base path.
        project: Project id written in catalog headers.
        translator: Translator contact written in catalog headers.
        keywords: Extraction keywords; defaults to "_" when empty.
        custom_locale: Interpose a "C" directory before LC_MESSAGES.
        relative_path: Base path written in catalog headers.
        session_identifier: Cookie/session key holding the chosen locale.
        handler: Translator backend name ("catalog" or "gettext").
        sync_adapter: Push locale changes to the host adapter.
    """

    locale: str = "en_US"
    fallback_locale: str = "en_US"
    supported_locales: Tuple[str, ...] = ("en_US",)
    domain: str = "messages"
    default_source_paths: Tuple[str, ...] = ()
    domain_source_paths: Mapping[str, Tuple[str, ...]] = field(default_factory=dict)
    encoding: str = "UTF-8"
    translations_path: str = "../resources/lang"
    project: str = ""
    translator: str = ""
    keywords: Tuple[str, ...] = ()
    custom_locale: bool = False
    relative_path: str = "../../../../../app"
    session_identifier: str = "gettext-locale"
    handler: str = "catalog"
    sync_adapter: bool = True

    def __post_init__(self):
        object.__setattr__(self, "supported_locales", tuple(self.supported_locales))
        object.__setattr__(self, "default_source_paths", tuple(self.default_source_paths))
        object.__setattr__(self, "keywords", tuple(self.keywords))
        object.__setattr__(
            self,
            "domain_source_paths",
            MappingProxyType(
                {d: tuple(p) for d, p in dict(self.domain_source_paths).items()}
            ),
        )

        if self.locale not in self.supported_locales:
            raise ConfigurationError(
                f"Locale {self.locale} is not in the supported locales"
            )
        if self.fallback_locale not in self.supported_locales:
            raise ConfigurationError(
                f"Fallback locale {self.fallback_locale} is not in the supported locales"
            )
        if self.handler not in HANDLERS:
            raise ConfigurationError(
                f"Handler {self.handler} is not valid, use one of: {', '.join(HANDLERS)}"
            )

    @classmethod
    def from_mapping(cls, config: Mapping[str, Any]) -> "CatalogConfig":
        """Create a configuration from a dash-keyed mapping.

        Args:
            config: Mapping such as a parsed YAML file
                (e.g., {"locale": "en_US", "fallback-locale": "en_US", ...}).

        Returns:
            CatalogConfig instance.

        Raises:
            RequiredConfigurationKeyError: If a required key is missing.
            ConfigurationError: If the values are inconsistent.
        """
        for key in REQUIRED_KEYS:
            if key not in config:
                raise RequiredConfigurationKeyError(
                    f"Unconfigured required value: {key}"
                )

        locale = str(config["locale"])
        fallback_locale = str(config["fallback-locale"])
        supported = config.get("supported-locales")
        if not supported:
            supported = list(dict.fromkeys([locale, fallback_locale]))
        elif isinstance(supported, str):
            supported = [supported]

        default_paths, domain_paths = _split_source_paths(config.get("source-paths"))

        kwargs: Dict[str, Any] = {
            "locale": locale,
            "fallback_locale": fallback_locale,
            "encoding": str(config["encoding"]),
            "supported_locales": tuple(str(s) for s in supported),
            "default_source_paths": default_paths,
            "domain_source_paths": domain_paths,
        }

        optional = {
            "domain": ("domain", str),
            "translations-path": ("translations_path", str),
            "project": ("project", str),
            "translator": ("translator", str),
            "relative-path": ("relative_path", str),
            "session-identifier": ("session_identifier", str),
            "handler": ("handler", str),
            "custom-locale": ("custom_locale", bool),
            "sync-adapter": ("sync_adapter", bool),
        }
        for key, (attribute, cast) in optional.items():
            if config.get(key) is not None:
                kwargs[attribute] = cast(config[key])

        if config.get("keywords-list"):
            kwargs["keywords"] = tuple(str(k) for k in config["keywords-list"])

        return cls(**kwargs)

    def get_all_domains(self) -> List[str]:
        """Return the default domain followed by every keyed domain.

        Returns:
            Deduplicated domain names, default domain first.
        """
        return list(dict.fromkeys([self.domain, *self.domain_source_paths.keys()]))

    def get_sources_from_domain(self, domain: str) -> List[str]:
        """Return the source paths that feed a domain.

        The default domain also receives every path not keyed by a domain.

        Args:
            domain: Domain name.

        Returns:
            Explicit paths for the domain, then default paths when applicable.
        """
        paths = list(self.domain_source_paths.get(domain, ()))
        if domain != self.domain:
            return paths
        return paths + list(self.default_source_paths)

    def get_keywords_list(self) -> List[str]:
        """Return extraction keywords, "_" when none are configured."""
        return list(self.keywords) if self.keywords else ["_"]

    def is_locale_supported(self, locale: Optional[str]) -> bool:
        return bool(locale) and locale in self.supported_locales


class Fingerprint(NamedTuple):
    """Cheap file identity: modification time (seconds) and size (bytes)."""

    mtime: int
    size: int

    @classmethod
    def of(cls, path: "os.PathLike[str] | str") -> "Fingerprint":
        """Compute the fingerprint of ``path``.

        Raises:
            OSError: If the file cannot be stat'ed.
        """
        stat = os.stat(path)
        return cls(mtime=int(stat.st_mtime), size=stat.st_size)


@dataclass(frozen=True)
class CatalogEntry:
    """A translated message.

    Attributes:
        msgid: Singular message id.
        forms: Translated forms, index 0 is the singular form.
        msgid_plural: Plural message id, if the entry has plural forms.
    """

    msgid: str
    forms: Tuple[str, ...]
    msgid_plural: Optional[str] = None

    @property
    def singular(self) -> str:
        return self.forms[0] if self.forms else self.msgid

    def form(self, index: int) -> str:
        """Return the form at ``index``, clamped to the available forms."""
        if not self.forms:
            return self.msgid
        return self.forms[max(0, min(index, len(self.forms) - 1))]

    def text_for(self, key: str) -> str:
        """Return the translation matching the id used for the lookup."""
        if self.msgid_plural is not None and key == self.msgid_plural:
            return self.form(1)
        return self.singular


@dataclass(frozen=True)
class LoadedCatalog:
    """Parsed catalog for one (locale, domain) pair.

    Instances are never mutated once built; a reload produces a new one.

    Attributes:
        locale: Locale the catalog was loaded for.
        domain: Domain the catalog was loaded for.
        path: Source file path.
        messages: Read-only mapping of message id to CatalogEntry. Plural
            ids point to the same entry as their singular id.
        fingerprint: Source file fingerprint at load time.
    """

    locale: Optional[str]
    domain: Optional[str]
    path: str
    messages: Mapping[str, CatalogEntry] = field(default_factory=dict)
    fingerprint: Optional[Fingerprint] = None

    def __post_init__(self):
        object.__setattr__(self, "messages", MappingProxyType(dict(self.messages)))

    def __len__(self) -> int:
        return len(self.messages)

    def get_entry(self, message_id: str) -> Optional[CatalogEntry]:
        return self.messages.get(message_id)

    def has_message(self, message_id: str) -> bool:
        return message_id in self.messages

    def get_message(self, message_id: str) -> Optional[str]:
        """Retrieve a translation by message id.

        Returns:
            Translated string, or None if the id is not in the catalog.
        """
        entry = self.messages.get(message_id)
        return entry.text_for(message_id) if entry else None

    def tagged(self, locale: Optional[str], domain: Optional[str]) -> "LoadedCatalog":
        """Return this catalog tagged for ``(locale, domain)``."""
        if (locale, domain) == (self.locale, self.domain):
            return self
        return replace(self, locale=locale, domain=domain)
