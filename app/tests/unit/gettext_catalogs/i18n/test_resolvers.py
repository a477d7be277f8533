"""Tests for gettext_catalogs.i18n.resolvers module."""

import pytest

from gettext_catalogs.i18n import LocaleResolver
from gettext_catalogs.i18n.resolvers import language_of, normalize_tag, parse_accept_language


@pytest.fixture
def resolver():
    return LocaleResolver(["en_US", "es_AR", "es_ES", "it_IT"], default_locale="en_US")


@pytest.mark.unit
class TestTagHelpers:
    """Tests for tag normalization helpers."""

    def test_normalize_tag(self):
        assert normalize_tag("es-AR") == "es_ar"
        assert normalize_tag(" en_US ") == "en_us"

    def test_language_of(self):
        assert language_of("es_AR") == "es"
        assert language_of("pt-BR") == "pt"
        assert language_of("fr") == "fr"

    def test_parse_accept_language(self):
        """Ranges are ordered by quality; q=0 ranges are dropped."""
        assert parse_accept_language("fr;q=0.5, es-AR, en;q=0.8, de;q=0") == [
            ("es-AR", 1.0),
            ("en", 0.8),
            ("fr", 0.5),
        ]

    def test_parse_accept_language_invalid_quality(self):
        assert parse_accept_language("es;q=abc") == [("es", 1.0)]

    def test_parse_empty_header(self):
        assert parse_accept_language(None) == []
        assert parse_accept_language("") == []


@pytest.mark.unit
class TestLocaleResolver:
    """Tests for LocaleResolver."""

    @pytest.mark.parametrize(
        "tag,expected",
        [
            ("es_AR", "es_AR"),
            ("es-AR", "es_AR"),
            ("ES-ar", "es_AR"),
            ("es", None),
            ("fr_FR", None),
            ("", None),
            (None, None),
        ],
    )
    def test_match(self, resolver, tag, expected):
        assert resolver.match(tag) == expected

    def test_resolve_from_header_exact(self, resolver):
        assert resolver.resolve_from_header("es-ES,es;q=0.9,en;q=0.8") == "es_ES"

    def test_resolve_from_header_language_only(self, resolver):
        """A language-only range picks the first supported locale of that language."""
        assert resolver.resolve_from_header("es;q=0.9,fr") == "es_AR"

    def test_resolve_from_header_quality_order(self, resolver):
        assert resolver.resolve_from_header("en-US;q=0.4,it-IT;q=0.7") == "it_IT"

    def test_resolve_from_header_no_match(self, resolver):
        assert resolver.resolve_from_header("fr-FR,de;q=0.5") is None
        assert resolver.resolve_from_header("*") is None
        assert resolver.resolve_from_header(None) is None

    def test_resolve_chain(self, resolver):
        """Requested locale beats stored choice, which beats the header."""
        assert resolver.resolve("it_IT", "es_AR", "es-ES") == "it_IT"
        assert resolver.resolve("fr_FR", "es_AR", "es-ES") == "es_AR"
        assert resolver.resolve(None, None, "es-ES") == "es_ES"
        assert resolver.resolve(None, "xx", "fr") == "en_US"
