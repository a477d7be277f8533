"""Path helpers shared by the catalog filesystem and the view compiler."""

import os
from pathlib import Path
from typing import List, Optional, Union

from gettext_catalogs.i18n.exceptions import FileCreationError
from gettext_catalogs.logging import get_module_logger

logger = get_module_logger()

PathLike = Union[str, os.PathLike]

GITIGNORE = ".gitignore"


def _split(path: PathLike) -> List[str]:
    """Split a path into POSIX segments.

    Directories (existing ones, or paths written with a trailing separator)
    end with an empty segment so both sides of a comparison are treated alike.
    """
    raw = os.fspath(path)
    normalized = raw.replace("\\", "/")
    if os.path.isdir(raw) or normalized.endswith("/"):
        normalized = normalized.rstrip("/") + "/"
    return normalized.split("/")


def relative_path(from_path: PathLike, to_path: PathLike) -> str:
    """Return the POSIX relative path leading from ``from_path`` to ``to_path``.

    Both paths are walked segment by segment up to their first divergence.
    Every remaining directory of ``from_path`` becomes a ``../`` and the
    remaining segments of ``to_path`` are kept.

    Args:
        from_path: Starting file or directory.
        to_path: Target file or directory.

    Returns:
        Relative path (e.g., "../../views/" from "/app/i18n/es/" to "/app/views/").
    """
    source = _split(from_path)
    target = _split(to_path)

    # The last segment of ``source`` is a file name, or "" for a directory
    common = 0
    for source_part, target_part in zip(source[:-1], target):
        if source_part != target_part:
            break
        common += 1

    ups = len(source) - 1 - common
    return "../" * ups + "/".join(target[common:])


def create_directory(path: PathLike) -> None:
    """Create ``path`` (and missing parents) unless it already exists.

    Raises:
        FileCreationError: If the directory cannot be created.
    """
    path = Path(path)
    if path.exists():
        return
    try:
        path.mkdir(parents=True)
    except OSError as e:
        logger.error("directory_creation_failed", path=str(path), error=str(e))
        raise FileCreationError(f"Can't create the directory: {path}") from e


def clear_directory(path: PathLike) -> Optional[bool]:
    """Remove the contents of ``path`` recursively, keeping ``.gitignore`` files.

    Directories that still hold a ``.gitignore`` after clearing are kept,
    as is ``path`` itself.

    Args:
        path: Directory to clear.

    Returns:
        None if ``path`` does not exist, True once cleared.
    """
    if not os.path.exists(path):
        return None

    removed = 0
    for root, dirs, files in os.walk(path, topdown=False):
        for name in files:
            if name == GITIGNORE:
                continue
            os.unlink(os.path.join(root, name))
            removed += 1
        for name in dirs:
            directory = os.path.join(root, name)
            if os.path.islink(directory):
                os.unlink(directory)
            elif not os.listdir(directory):
                os.rmdir(directory)

    logger.debug("directory_cleared", path=os.fspath(path), removed_files=removed)
    return True
