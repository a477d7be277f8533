"""Catalog directory layout and catalog file lifecycle.

Owns the on-disk tree::

    <base>/<translations_path>/i18n/<locale>/[C/]LC_MESSAGES/<domain>.po

Creates locale trees, synthesizes catalog headers from the configuration
and rewrites the header block of existing catalogs without touching the
messages below it.
"""

from datetime import datetime
from pathlib import Path
from typing import Callable, List, Optional, Tuple

from gettext_catalogs.i18n import paths
from gettext_catalogs.i18n.compiler import StagingViewCompiler, ViewCompiler
from gettext_catalogs.i18n.exceptions import (
    DirectoryNotFoundError,
    FileCreationError,
    LocaleFileNotFoundError,
)
from gettext_catalogs.i18n.formats import CatalogFileWriter
from gettext_catalogs.i18n.models import CatalogConfig
from gettext_catalogs.i18n.paths import PathLike
from gettext_catalogs.logging import get_module_logger

logger = get_module_logger()

GENERATOR = "Poedit 1.5.4"

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M%z"


def _local_now() -> datetime:
    return datetime.now().astimezone()


def split_header(contents: str) -> Tuple[str, str]:
    """Split catalog text into its header block and body.

    The header ends at the first blank line. A file without a blank line
    has its header end after the quoted lines following ``msgstr ""``, so
    comments, flags and ``msgctxt`` lines of the first entry stay in the
    body; failing that, the whole file is header.

    Returns:
        (header, body) where body excludes the separating blank line.
    """
    lines = contents.splitlines(keepends=True)

    for index, line in enumerate(lines):
        if not line.strip():
            return "".join(lines[:index]), "".join(lines[index + 1 :])

    in_metadata = False
    for index, line in enumerate(lines):
        if in_metadata and not line.startswith('"'):
            return "".join(lines[:index]), "".join(lines[index:])
        if line.startswith('msgstr ""'):
            in_metadata = True

    return contents, ""


class CatalogFileSystem:
    """Manages catalog directories and catalog files.

    Attributes:
        configuration: Catalog configuration.
        base_path: Application base path; every other path is relative to it.
        storage_path: Root for generated files (compiled views).
        compiler: View compiler used for domains with source paths.
        writer: Catalog file writer.
        folder_name: Directory holding the locale trees.
    """

    folder_name = "i18n"

    def __init__(
        self,
        configuration: CatalogConfig,
        base_path: PathLike,
        storage_path: PathLike,
        compiler: Optional[ViewCompiler] = None,
        writer: Optional[CatalogFileWriter] = None,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        self.configuration = configuration
        self.base_path = Path(base_path)
        self.storage_path = Path(storage_path)
        self.compiler = compiler or StagingViewCompiler(
            self.base_path, self.storage_path, encoding=configuration.encoding
        )
        self.writer = writer or CatalogFileWriter(encoding=configuration.encoding)
        self.clock = clock or _local_now

    def domain_path(self, locale: Optional[str] = None) -> Path:
        """Return the catalog root, or the directory of ``locale`` below it."""
        path = self.base_path / self.configuration.translations_path / self.folder_name
        return path / locale if locale is not None else path

    def _messages_dir(self, locale_path: Path) -> Path:
        if self.configuration.custom_locale:
            return locale_path / "C" / "LC_MESSAGES"
        return locale_path / "LC_MESSAGES"

    def make_file_path(self, locale: str, domain: str, type: str = "po") -> Path:
        """Return the canonical path of the catalog for ``(locale, domain)``."""
        return self._messages_dir(self.domain_path(locale)) / f"{domain}.{type}"

    def resolve_catalog_path(self, locale: str, domain: str) -> Path:
        """Return the compiled .mo catalog if present, the .po catalog otherwise."""
        mo_path = self.make_file_path(locale, domain, "mo")
        if mo_path.exists():
            return mo_path
        return self.make_file_path(locale, domain)

    def check_directory_structure(self, check_locales: bool = False) -> bool:
        """Verify the catalog tree exists without creating anything.

        Args:
            check_locales: Also require a directory for every supported locale.

        Returns:
            True when every required directory exists.

        Raises:
            DirectoryNotFoundError: For the first missing directory.
        """
        if not self.base_path.exists():
            raise DirectoryNotFoundError(
                f"Missing root path directory: {self.base_path}, "
                "check the base path in your configuration."
            )

        domain_path = self.domain_path()
        if not domain_path.exists():
            raise DirectoryNotFoundError(
                f"Missing base required directory: {domain_path}, "
                "remember to generate the locales the first time"
            )

        if not check_locales:
            return True

        for locale in self.configuration.supported_locales:
            if not self.domain_path(locale).exists():
                raise DirectoryNotFoundError(
                    f"Missing locale required directory: {locale}, "
                    "maybe you forgot to update the locales"
                )

        return True

    def generate_locales(self) -> List[Path]:
        """Create the catalog root and every missing locale tree.

        Locales whose directory already exists are left untouched.

        Returns:
            Locale directories created by this call.

        Raises:
            FileCreationError: If a directory or catalog cannot be created.
            DirectoryNotFoundError: If a domain's view sources are missing.
        """
        paths.create_directory(self.domain_path())

        created = []
        for locale in self.configuration.supported_locales:
            locale_path = self.domain_path(locale)
            if locale_path.exists():
                continue
            self.add_locale(locale_path, locale)
            created.append(locale_path)

        logger.info(
            "locales_generated",
            domain_path=str(self.domain_path()),
            created_count=len(created),
        )
        return created

    def add_locale(self, locale_path: PathLike, locale: str) -> None:
        """Create the directory tree of ``locale`` and one catalog per domain.

        Existing directories and catalogs are kept, so a failed call can be
        retried; nothing is rolled back.

        Raises:
            FileCreationError: If a directory or catalog cannot be created.
        """
        locale_path = Path(locale_path)
        messages_dir = self._messages_dir(locale_path)
        paths.create_directory(messages_dir)

        for domain in self.configuration.get_all_domains():
            catalog_path = messages_dir / f"{domain}.po"
            if catalog_path.exists():
                logger.info("catalog_file_exists", path=str(catalog_path))
                continue
            self.create_po_file(catalog_path, locale, domain)

        logger.info("locale_added", locale=locale, path=str(locale_path))

    def create_po_file(self, path: PathLike, locale: str, domain: str) -> int:
        """Write a catalog made of a freshly synthesized header.

        The header is followed by a blank line so appended entries are
        never mistaken for header lines.

        Returns:
            Number of characters written.

        Raises:
            FileCreationError: If the file cannot be written.
        """
        header = self.synthesize_header(locale, domain)
        try:
            written = self.writer.write(path, header, "")
        except OSError as e:
            logger.error("catalog_creation_failed", path=str(path), error=str(e))
            raise FileCreationError(f"Can't create the file: {path}") from e

        if not written:
            raise FileCreationError(f"Can't create the file: {path}")
        return written

    def update_locale(self, locale_path: PathLike, locale: str, domain: str) -> bool:
        """Regenerate the header block of an existing catalog.

        Everything after the header block is written back unchanged.

        Returns:
            True once the catalog has been rewritten.

        Raises:
            LocaleFileNotFoundError: If the catalog is missing, empty,
                unreadable or cannot be written.
        """
        catalog_path = self._messages_dir(Path(locale_path)) / f"{domain}.po"
        encoding = self.configuration.encoding

        try:
            with open(catalog_path, "r", encoding=encoding, newline="") as f:
                contents = f.read()
        except (OSError, UnicodeDecodeError) as e:
            raise LocaleFileNotFoundError(
                f"Can't read {catalog_path} verify your locale structure"
            ) from e

        if not contents:
            raise LocaleFileNotFoundError(
                f"Can't read {catalog_path} verify your locale structure"
            )

        _, body = split_header(contents)
        header = self.synthesize_header(locale, domain)

        try:
            self.writer.write(catalog_path, header, body)
        except OSError as e:
            raise LocaleFileNotFoundError(f"Can't write on {catalog_path}") from e

        logger.info("catalog_header_updated", locale=locale, domain=domain)
        return True

    def synthesize_header(self, locale: str, domain: str) -> str:
        """Build the header block of the catalog for ``(locale, domain)``.

        When the domain has source paths their views are compiled first and
        the staging directory is listed after them as a search path.

        Raises:
            DirectoryNotFoundError: If a source directory does not exist.
            FileCreationError: If the staging directory cannot be written.
        """
        config = self.configuration
        timestamp = self.clock().strftime(TIMESTAMP_FORMAT)
        keywords = ";".join(config.get_keywords_list())

        metadata = [
            ("Project-Id-Version", config.project),
            ("POT-Creation-Date", timestamp),
            ("PO-Revision-Date", timestamp),
            ("Last-Translator", config.translator),
            ("Language-Team", config.translator),
            ("Language", locale),
            ("MIME-Version", "1.0"),
            ("Content-Type", f"text/plain; charset={config.encoding}"),
            ("Content-Transfer-Encoding", "8bit"),
            ("X-Generator", GENERATOR),
            ("X-Poedit-KeywordsList", keywords),
            ("X-Poedit-Basepath", config.relative_path),
            ("X-Poedit-SourceCharset", config.encoding),
        ]

        source_paths = config.get_sources_from_domain(domain)
        if source_paths:
            self.compile_views(source_paths, domain)
            source_paths.append(self.storage_for_domain(domain))
            for index, source_path in enumerate(source_paths):
                metadata.append((f"X-Poedit-SearchPath-{index}", source_path))

        lines = ['msgid ""', 'msgstr ""']
        lines.extend(f'"{key}: {value}\\n"' for key, value in metadata)
        return "\n".join(lines) + "\n"

    def compile_views(self, view_paths: List[str], domain: str) -> bool:
        """Compile the view sources of ``domain`` into its staging directory."""
        return self.compiler.compile(view_paths, domain)

    def storage_for_domain(self, domain: str) -> str:
        """Return the staging directory of ``domain`` relative to the base path."""
        return self.relative_path(
            self.base_path.resolve(), self.compiler.staging_path(domain).resolve()
        )

    @staticmethod
    def relative_path(from_path: PathLike, to_path: PathLike) -> str:
        return paths.relative_path(from_path, to_path)

    @staticmethod
    def clear_directory(path: PathLike) -> Optional[bool]:
        return paths.clear_directory(path)
