"""Catalog format readers and writer.

Parsing of the gettext text (.po) and binary (.mo) formats is delegated to
polib; this module only turns polib entries into ``CatalogEntry`` objects.
"""

import os
from abc import ABC, abstractmethod
from typing import Dict, Iterable, Optional

import polib

from gettext_catalogs.i18n.models import CatalogEntry
from gettext_catalogs.i18n.paths import PathLike


def _to_entries(entries: Iterable) -> Dict[str, CatalogEntry]:
    """Index translated polib entries by singular and plural message ids."""
    messages: Dict[str, CatalogEntry] = {}
    for entry in entries:
        if not entry.msgid or entry.obsolete:
            continue

        if entry.msgid_plural:
            plurals = entry.msgstr_plural or {}
            forms = tuple(plurals[index] for index in sorted(plurals, key=int))
            if not any(forms):
                continue
            catalog_entry = CatalogEntry(
                msgid=entry.msgid, forms=forms, msgid_plural=entry.msgid_plural
            )
            messages[entry.msgid] = catalog_entry
            messages[entry.msgid_plural] = catalog_entry
        elif entry.msgstr:
            messages[entry.msgid] = CatalogEntry(msgid=entry.msgid, forms=(entry.msgstr,))

    return messages


class CatalogReader(ABC):
    """Contract for parsing a catalog file into message entries."""

    @abstractmethod
    def read(self, path: PathLike) -> Dict[str, CatalogEntry]:
        """Parse ``path``.

        Returns:
            Mapping of message id to CatalogEntry, in file order.

        Raises:
            OSError: If the file cannot be read or parsed.
        """
        pass


class PoFileReader(CatalogReader):
    """Reads .po catalogs; fuzzy, obsolete and untranslated entries are skipped."""

    def __init__(self, encoding: Optional[str] = None):
        self.encoding = encoding

    def read(self, path: PathLike) -> Dict[str, CatalogEntry]:
        kwargs = {"encoding": self.encoding} if self.encoding else {}
        catalog = polib.pofile(os.fspath(path), **kwargs)
        return _to_entries(catalog.translated_entries())


class MoFileReader(CatalogReader):
    """Reads compiled .mo catalogs."""

    def read(self, path: PathLike) -> Dict[str, CatalogEntry]:
        catalog = polib.mofile(os.fspath(path))
        return _to_entries(catalog.translated_entries())


class CatalogFileWriter:
    """Writes catalog text made of a header block and an optional body.

    The header and body are separated by one blank line. Line endings in
    the body are written untouched.
    """

    def __init__(self, encoding: str = "UTF-8"):
        self.encoding = encoding

    def write(self, path: PathLike, header: str, body: Optional[str] = None) -> int:
        """Write ``header`` (and ``body``) to ``path``.

        Returns:
            Number of characters written.

        Raises:
            OSError: If the file cannot be written.
        """
        contents = header if body is None else f"{header}\n{body}"
        with open(path, "w", encoding=self.encoding, newline="") as f:
            return f.write(contents)
