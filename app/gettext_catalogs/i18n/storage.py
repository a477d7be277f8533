"""Translator state storage.

The translator keeps its current locale, domain and encoding in a
Storage so the host decides how the state lives across requests.
Unset values default to the configuration.
"""

from abc import ABC, abstractmethod
from contextvars import ContextVar
from typing import Optional

from gettext_catalogs.i18n.models import CatalogConfig


class Storage(ABC):
    """Contract for reading and writing translator state."""

    @abstractmethod
    def get_locale(self) -> str:
        pass

    @abstractmethod
    def set_locale(self, locale: str) -> None:
        pass

    @abstractmethod
    def get_domain(self) -> str:
        pass

    @abstractmethod
    def set_domain(self, domain: str) -> None:
        pass

    @abstractmethod
    def get_encoding(self) -> str:
        pass

    @abstractmethod
    def set_encoding(self, encoding: str) -> None:
        pass


class MemoryStorage(Storage):
    """Keeps state on the instance; suited to one translator per request or process."""

    def __init__(self, configuration: CatalogConfig):
        self.configuration = configuration
        self._locale: Optional[str] = None
        self._domain: Optional[str] = None
        self._encoding: Optional[str] = None

    def get_locale(self) -> str:
        return self._locale or self.configuration.locale

    def set_locale(self, locale: str) -> None:
        self._locale = locale

    def get_domain(self) -> str:
        return self._domain or self.configuration.domain

    def set_domain(self, domain: str) -> None:
        self._domain = domain

    def get_encoding(self) -> str:
        return self._encoding or self.configuration.encoding

    def set_encoding(self, encoding: str) -> None:
        self._encoding = encoding


class ContextStorage(Storage):
    """Keeps state in context variables.

    Each thread and each asyncio task sees its own values, so one
    translator can be shared by concurrent requests.
    """

    def __init__(self, configuration: CatalogConfig):
        self.configuration = configuration
        self._locale: ContextVar[Optional[str]] = ContextVar("gettext_locale", default=None)
        self._domain: ContextVar[Optional[str]] = ContextVar("gettext_domain", default=None)
        self._encoding: ContextVar[Optional[str]] = ContextVar(
            "gettext_encoding", default=None
        )

    def get_locale(self) -> str:
        return self._locale.get() or self.configuration.locale

    def set_locale(self, locale: str) -> None:
        self._locale.set(locale)

    def get_domain(self) -> str:
        return self._domain.get() or self.configuration.domain

    def set_domain(self, domain: str) -> None:
        self._domain.set(domain)

    def get_encoding(self) -> str:
        return self._encoding.get() or self.configuration.encoding

    def set_encoding(self, encoding: str) -> None:
        self._encoding.set(encoding)
