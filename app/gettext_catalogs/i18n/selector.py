"""HTML language selector."""

from html import escape
from typing import TYPE_CHECKING, Dict, Optional

if TYPE_CHECKING:
    from gettext_catalogs.i18n.service import TranslationService


class LanguageSelector:
    """Renders the supported locales as a list of links.

    The current locale is rendered as ``<strong class="active ...">``
    instead of a link. Labels default to the locale tag.

    Example:
        >>> LanguageSelector(service, {"es_AR": "Español"}).render()
        '<ul class="language-selector"><li><a href="/lang/en_US" ...'
    """

    def __init__(
        self,
        service: "TranslationService",
        labels: Optional[Dict[str, str]] = None,
        url_prefix: str = "/lang/",
    ):
        self.service = service
        self.labels = labels or {}
        self.url_prefix = url_prefix

    def render(self) -> str:
        current_locale = self.service.get_locale()

        items = []
        for locale in self.service.get_supported_locales():
            label = escape(self.labels.get(locale, locale))
            tag = escape(locale)
            if locale == current_locale:
                link = f'<strong class="active {tag}">{label}</strong>'
            else:
                link = f'<a href="{escape(self.url_prefix)}{tag}" class="{tag}">{label}</a>'
            items.append(f"<li>{link}</li>")

        return '<ul class="language-selector">' + "".join(items) + "</ul>"

    def __str__(self) -> str:
        return self.render()
