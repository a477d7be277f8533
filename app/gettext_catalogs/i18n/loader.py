"""Catalog loading interface and implementations.

``FileCatalogLoader`` parses catalog files through a format reader.
``CachedCatalogLoader`` memoizes parsed catalogs in a ``CatalogCache``
and re-reads a file only when its fingerprint (mtime + size) changes.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

from gettext_catalogs.i18n.exceptions import LocaleFileNotFoundError
from gettext_catalogs.i18n.formats import CatalogReader, MoFileReader, PoFileReader
from gettext_catalogs.i18n.models import Fingerprint, LoadedCatalog
from gettext_catalogs.i18n.paths import PathLike
from gettext_catalogs.logging import get_module_logger

logger = get_module_logger()


class CatalogLoader(ABC):
    """Abstract base for catalog loaders."""

    @abstractmethod
    def load(
        self,
        resource: PathLike,
        locale: Optional[str] = None,
        domain: Optional[str] = None,
    ) -> LoadedCatalog:
        """Load the catalog stored at ``resource``.

        Args:
            resource: Catalog file path.
            locale: Locale the catalog is loaded for.
            domain: Domain the catalog is loaded for.

        Returns:
            LoadedCatalog with the parsed messages.

        Raises:
            LocaleFileNotFoundError: If the file is missing or cannot be parsed.
        """
        pass


class FileCatalogLoader(CatalogLoader):
    """Parses catalog files, choosing the reader from the file suffix.

    Attributes:
        readers: Mapping of file suffix (".po", ".mo") to reader.
    """

    def __init__(self, readers: Optional[Dict[str, CatalogReader]] = None):
        self.readers = readers or {".po": PoFileReader(), ".mo": MoFileReader()}

    def load(
        self,
        resource: PathLike,
        locale: Optional[str] = None,
        domain: Optional[str] = None,
    ) -> LoadedCatalog:
        path = Path(resource)
        if not path.is_file():
            raise LocaleFileNotFoundError(f"Catalog file not found: {path}")

        reader = self.readers.get(path.suffix)
        if reader is None:
            raise LocaleFileNotFoundError(f"Unsupported catalog format: {path.suffix}")

        try:
            fingerprint = Fingerprint.of(path)
            messages = reader.read(path)
        except (OSError, ValueError) as e:
            logger.error("catalog_parse_error", path=str(path), error=str(e))
            raise LocaleFileNotFoundError(f"Failed to parse {path}: {e}") from e

        logger.info(
            "loaded_catalog",
            path=str(path),
            locale=locale,
            domain=domain,
            message_count=len(messages),
        )
        return LoadedCatalog(
            locale=locale,
            domain=domain,
            path=str(path),
            messages=messages,
            fingerprint=fingerprint,
        )


class CatalogCache:
    """Process-wide store of parsed catalogs keyed by file path.

    Entries are replaced on reload, never mutated, so readers need no lock.
    Two concurrent misses for the same path may both parse the file; the
    last one to finish wins.
    """

    def __init__(self):
        self._entries: Dict[str, Tuple[Fingerprint, LoadedCatalog]] = {}
        self.hits = 0
        self.misses = 0

    def get(self, key: str, fingerprint: Fingerprint) -> Optional[LoadedCatalog]:
        """Return the catalog cached for ``key`` if its fingerprint matches."""
        entry = self._entries.get(key)
        if entry is not None and entry[0] == fingerprint:
            self.hits += 1
            return entry[1]
        self.misses += 1
        return None

    def set(self, key: str, fingerprint: Fingerprint, catalog: LoadedCatalog) -> None:
        self._entries[key] = (fingerprint, catalog)

    def clear(self) -> None:
        """Clear all cached catalogs."""
        self._entries.clear()
        logger.info("cleared_catalog_cache")

    def __contains__(self, key: str) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def get_stats(self) -> Dict[str, Any]:
        return {"entries": len(self._entries), "hits": self.hits, "misses": self.misses}


class CachedCatalogLoader(CatalogLoader):
    """Fingerprint-validated caching wrapper around another loader.

    Without a cache every call goes straight to the underlying loader.

    Attributes:
        underlying: Loader used on cache misses.
        cache: Shared CatalogCache, or None to disable caching.
    """

    def __init__(self, underlying: CatalogLoader, cache: Optional[CatalogCache] = None):
        self.underlying = underlying
        self.cache = cache

    def load(
        self,
        resource: PathLike,
        locale: Optional[str] = None,
        domain: Optional[str] = None,
    ) -> LoadedCatalog:
        if self.cache is None:
            return self.underlying.load(resource, locale, domain)

        key = str(resource)
        try:
            fingerprint = Fingerprint.of(resource)
        except OSError as e:
            raise LocaleFileNotFoundError(f"Catalog file not found: {resource}") from e

        cached = self.cache.get(key, fingerprint)
        if cached is not None:
            logger.debug("loaded_from_cache", path=key)
            return cached.tagged(locale, domain)

        catalog = self.underlying.load(resource, locale, domain)
        self.cache.set(key, fingerprint, catalog)
        return catalog
