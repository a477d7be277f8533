"""Host framework locale adapters.

The translator pushes every locale change to an Adapter so the host's own
locale setting follows. Nothing flows back from the adapter.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional

from gettext_catalogs.i18n.paths import PathLike


class Adapter(ABC):
    """Contract for the host framework's locale setting."""

    @abstractmethod
    def get_locale(self) -> str:
        pass

    @abstractmethod
    def set_locale(self, locale: str) -> bool:
        pass

    @abstractmethod
    def get_application_path(self) -> Path:
        pass


class MemoryAdapter(Adapter):
    """Adapter for hosts without a locale setting of their own."""

    def __init__(self, locale: str = "en_US", application_path: Optional[PathLike] = None):
        self._locale = locale
        self._application_path = Path(application_path or Path.cwd())

    def get_locale(self) -> str:
        return self._locale

    def set_locale(self, locale: str) -> bool:
        self._locale = locale
        return True

    def get_application_path(self) -> Path:
        return self._application_path
