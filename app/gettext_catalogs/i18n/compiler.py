"""View compilation for string extraction.

Template sources are compiled into plain text files under a domain-scoped
staging directory so external extraction tooling can scan them. The
staging directory is listed as a search path in the catalog header.
"""

import hashlib
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Iterable

from gettext_catalogs.i18n.exceptions import DirectoryNotFoundError, FileCreationError
from gettext_catalogs.i18n.paths import PathLike, clear_directory, create_directory
from gettext_catalogs.logging import get_module_logger

logger = get_module_logger()


class ViewCompiler(ABC):
    """Contract for compiling template sources of one domain."""

    @abstractmethod
    def compile(self, source_paths: Iterable[str], domain: str) -> bool:
        """Compile the source trees of ``domain`` into its staging directory.

        Args:
            source_paths: Source directories, relative to the base path.
            domain: Domain the sources belong to.

        Returns:
            True once every source has been compiled.

        Raises:
            DirectoryNotFoundError: If a source directory does not exist.
            FileCreationError: If the staging directory or a file cannot be written.
        """
        pass

    @abstractmethod
    def staging_path(self, domain: str) -> Path:
        """Return the staging directory for ``domain``."""
        pass


class StagingViewCompiler(ViewCompiler):
    """Copies template sources into ``<storage>/<container>/<domain>``.

    Each file is written as ``<sha1 of its real path><suffix>`` so files
    with the same name in different directories never collide. Subclasses
    override ``compile_string`` to turn template syntax into plain code.

    Attributes:
        base_path: Directory source paths are relative to.
        storage_path: Root for generated files.
        container: Directory under ``storage_path`` holding staging dirs.
        encoding: Encoding used to read and write sources.
    """

    def __init__(
        self,
        base_path: PathLike,
        storage_path: PathLike,
        container: str = "framework",
        encoding: str = "utf-8",
    ):
        self.base_path = Path(base_path)
        self.storage_path = Path(storage_path)
        self.container = container
        self.encoding = encoding

    def staging_path(self, domain: str) -> Path:
        return self.storage_path / self.container / domain

    def compile_string(self, contents: str) -> str:
        """Compile template text; sources are plain text by default."""
        return contents

    def compile(self, source_paths: Iterable[str], domain: str) -> bool:
        create_directory(self.storage_path / self.container)

        domain_dir = self.staging_path(domain)
        clear_directory(domain_dir)
        create_directory(domain_dir)

        compiled = 0
        for source in source_paths:
            path = self.base_path / source
            if not path.exists():
                logger.error("view_source_not_found", path=str(path), domain=domain)
                raise DirectoryNotFoundError(
                    f"Failed to resolve {path}, please check that it exists"
                )

            real_path = path.resolve()
            files = [real_path] if real_path.is_file() else sorted(real_path.rglob("*"))
            for file_path in files:
                if not file_path.is_file():
                    continue
                compiled += self._compile_file(file_path, domain_dir)

        logger.info("views_compiled", domain=domain, file_count=compiled)
        return True

    def _compile_file(self, file_path: Path, domain_dir: Path) -> int:
        try:
            contents = file_path.read_text(encoding=self.encoding)
        except UnicodeDecodeError:
            logger.warning("view_source_not_text", path=str(file_path))
            return 0

        digest = hashlib.sha1(str(file_path).encode("utf-8")).hexdigest()
        target = domain_dir / f"{digest}{file_path.suffix}"
        try:
            target.write_text(self.compile_string(contents), encoding=self.encoding)
        except OSError as e:
            raise FileCreationError(f"Can't create the file: {target}") from e
        return 1
