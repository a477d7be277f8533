"""Tests for gettext_catalogs.i18n.formats module."""

import pytest

from tests.factories.i18n import (
    SPANISH_MESSAGES,
    SPANISH_PLURALS,
    make_mo_file,
    make_po_file,
)

from gettext_catalogs.i18n.formats import CatalogFileWriter, MoFileReader, PoFileReader


@pytest.mark.unit
class TestPoFileReader:
    """Tests for PoFileReader."""

    @pytest.fixture
    def po_path(self, tmp_path):
        return make_po_file(
            tmp_path / "messages.po",
            messages={**SPANISH_MESSAGES, "Untranslated": ""},
            plurals=SPANISH_PLURALS,
            fuzzy={"Draft": "Borrador"},
        )

    def test_reads_singular_messages(self, po_path):
        messages = PoFileReader().read(po_path)
        assert messages["Welcome"].singular == "Bienvenido"
        assert messages["Goodbye"].singular == "Adiós"

    def test_plural_entries_indexed_by_both_ids(self, po_path):
        """Plural entries are reachable by their singular and plural ids."""
        messages = PoFileReader().read(po_path)
        assert messages["item"] is messages["items"]
        assert messages["item"].forms == ("artículo", "artículos")
        assert messages["item"].msgid_plural == "items"

    def test_skips_fuzzy_and_untranslated(self, po_path):
        """Fuzzy and untranslated entries are not part of the catalog."""
        messages = PoFileReader().read(po_path)
        assert "Draft" not in messages
        assert "Untranslated" not in messages
        assert "" not in messages

    def test_invalid_file_raises(self, tmp_path):
        path = tmp_path / "broken.po"
        path.write_text("this is not a catalog\n", encoding="utf-8")
        with pytest.raises((OSError, ValueError)):
            PoFileReader().read(path)


@pytest.mark.unit
class TestMoFileReader:
    """Tests for MoFileReader."""

    def test_reads_compiled_catalog(self, tmp_path):
        path = make_mo_file(
            tmp_path / "messages.mo",
            messages=SPANISH_MESSAGES,
            plurals={"item": ("items", ["artículo", "artículos"])},
        )

        messages = MoFileReader().read(path)

        assert messages["Welcome"].singular == "Bienvenido"
        assert messages["items"].form(1) == "artículos"


@pytest.mark.unit
class TestCatalogFileWriter:
    """Tests for CatalogFileWriter."""

    def test_write_header_only(self, tmp_path):
        path = tmp_path / "messages.po"
        header = 'msgid ""\nmsgstr ""\n'

        written = CatalogFileWriter().write(path, header)

        assert written == len(header)
        assert path.read_text(encoding="utf-8") == header

    def test_write_header_and_body(self, tmp_path):
        """Header and body are separated by one blank line."""
        path = tmp_path / "messages.po"
        CatalogFileWriter().write(path, 'msgid ""\nmsgstr ""\n', 'msgid "a"\nmsgstr "b"\n')

        assert path.read_text(encoding="utf-8") == 'msgid ""\nmsgstr ""\n\nmsgid "a"\nmsgstr "b"\n'

    def test_line_endings_untouched(self, tmp_path):
        """CRLF line endings in the body are written as they are."""
        path = tmp_path / "messages.po"
        CatalogFileWriter().write(path, "h\n", 'msgid "a"\r\nmsgstr "b"\r\n')

        assert path.read_bytes() == b'h\n\nmsgid "a"\r\nmsgstr "b"\r\n'

    def test_encoding(self, tmp_path):
        path = tmp_path / "messages.po"
        CatalogFileWriter(encoding="ISO-8859-1").write(path, "Adiós\n")

        assert path.read_bytes() == "Adiós\n".encode("latin-1")
