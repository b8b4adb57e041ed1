"""Tests for CatalogManager catalog selection, caching and load tracking."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from polexengine.diagnostics import CatalogFormatError, CatalogSyntaxError
from polexengine.enums import LoadStatus
from polexengine.language import NULL_TAG, LocaleTag
from polexengine.localization import (
    CatalogManager,
    DirectoryCatalogStorage,
    LoadSummary,
    filename_to_language,
)
from tests.helpers.catalogs import MemoryStorage, MoMessage, build_mo, header_text

HEADER = 'msgid ""\nmsgstr "Content-Type: text/plain; charset=UTF-8\\n"\n\n'


def po(**translations: str) -> str:
    """Text catalog with a UTF-8 header and plain entries."""
    body = "".join(f'msgid "{k}"\nmsgstr "{v}"\n\n' for k, v in translations.items())
    return HEADER + body


@pytest.fixture
def storage() -> MemoryStorage:
    """German, Austrian German and French catalogs plus some noise."""
    return MemoryStorage({
        "app/de.po": po(Color="Farbe", January="Januar"),
        "app/de_AT.po": po(January="Jänner"),
        "app/fr.mo": build_mo([MoMessage("Color", ("Couleur",))], header=header_text()),
        "app/README": "not a catalog",
        "app/xx.po": po(Color="?"),
    })


@pytest.fixture
def manager(storage: MemoryStorage) -> CatalogManager:
    """Manager over the fixture storage."""
    result = CatalogManager(storage=storage)
    result.add_directory("app")
    return result


# ============================================================================
# FILE NAMES
# ============================================================================


class TestFilenameToLanguage:
    """Locale names from catalog file names."""

    @pytest.mark.parametrize(
        ("filename", "expected"),
        [
            ("de.po", "de"),
            ("zh_tw.po", "zh_TW"),
            ("zh_TW.mo", "zh_TW"),
            ("sr_rs@latin.mo", "sr_RS@latin"),
            ("pt_br.PO", "pt_BR"),
            ("de_at.utf-8.po", "de_AT.utf-8"),
        ],
    )
    def test_names(self, filename: str, expected: str) -> None:
        """The suffix goes; the country is upper-cased."""
        assert filename_to_language(filename) == expected


# ============================================================================
# SELECTION
# ============================================================================


class TestSelection:
    """Best-scoring catalog per directory."""

    def test_exact_country_catalog_chosen(
        self, manager: CatalogManager, storage: MemoryStorage
    ) -> None:
        """de_AT loads de_AT.po, with de.po behind it as fallback."""
        manager.set_language("de_AT")
        d = manager.get_dictionary()

        assert d.translate("January") == "Jänner"
        assert d.translate("Color") == "Farbe"
        assert storage.opened == ["app/de_AT.po", "app/de.po"]

    def test_unknown_country_uses_language_catalog(self, manager: CatalogManager) -> None:
        """de_CH has no catalog of its own; de.po scores best."""
        manager.set_language("de_CH")

        assert manager.get_dictionary().translate("January") == "Januar"

    def test_binary_catalog_loaded(self, manager: CatalogManager) -> None:
        """.mo files go through the binary parser."""
        d = manager.get_dictionary(LocaleTag.from_env("fr_FR"))

        assert d.translate("Color") == "Couleur"

    def test_precedence_directory_wins(self) -> None:
        """A directory added with precedence is searched first."""
        storage = MemoryStorage({
            "base/de.po": po(Color="Farbe", Open="Öffnen"),
            "override/de.po": po(Color="Kolor"),
        })
        manager = CatalogManager(storage=storage)
        manager.add_directory("base")
        manager.add_directory("override", precedence=True)

        d = manager.get_dictionary(LocaleTag.from_spec("de"))

        assert manager.search_path == ("override", "base")
        assert d.translate("Color") == "Kolor"
        assert d.translate("Open") == "Öffnen"

    def test_unknown_language_files_skipped(
        self, manager: CatalogManager, caplog: pytest.LogCaptureFixture
    ) -> None:
        """Files naming no known language are warned about and ignored."""
        with caplog.at_level(logging.WARNING):
            manager.get_dictionary(LocaleTag.from_spec("de"))

        assert "xx.po" in caplog.text

    def test_get_languages(self, manager: CatalogManager) -> None:
        """Only catalogs for known languages are reported."""
        assert {tag.to_string() for tag in manager.get_languages()} == {"de", "de_AT", "fr"}


# ============================================================================
# CACHING
# ============================================================================


class TestCaching:
    """Dictionaries are loaded once per tag."""

    def test_dictionary_reused(self, manager: CatalogManager, storage: MemoryStorage) -> None:
        """A second request does not read the catalog again."""
        tag = LocaleTag.from_spec("de")

        first = manager.get_dictionary(tag)
        second = manager.get_dictionary(tag)

        assert first is second
        assert storage.opened == ["app/de.po"]

    def test_clear_cache_reloads(self, manager: CatalogManager, storage: MemoryStorage) -> None:
        """clear_cache() forces a reload."""
        tag = LocaleTag.from_spec("de")
        first = manager.get_dictionary(tag)

        manager.clear_cache()

        assert manager.get_dictionary(tag) is not first
        assert storage.opened == ["app/de.po", "app/de.po"]

    def test_search_path_change_invalidates(self, manager: CatalogManager) -> None:
        """Adding or removing a directory clears the cache."""
        tag = LocaleTag.from_spec("de")
        first = manager.get_dictionary(tag)

        manager.add_directory("other")
        second = manager.get_dictionary(tag)
        manager.remove_directory("other")

        assert second is not first
        assert manager.get_dictionary(tag) is not second
        assert manager.search_path == ("app",)

    def test_duplicate_directory_ignored(self, manager: CatalogManager) -> None:
        """Adding a directory twice keeps one entry."""
        manager.add_directory("app")

        assert manager.search_path == ("app",)

    def test_current_dictionary_follows_language(self, manager: CatalogManager) -> None:
        """Switching language switches the default dictionary."""
        manager.set_language("de")
        german = manager.get_dictionary()
        manager.set_language("fr")

        assert manager.get_dictionary() is not german
        assert manager.get_dictionary().translate("Color") == "Couleur"


# ============================================================================
# NULL LANGUAGE AND FAILURES
# ============================================================================


class TestFailures:
    """Loading never raises."""

    def test_no_language_is_identity(self, manager: CatalogManager) -> None:
        """Without a language every lookup returns its input."""
        assert manager.language is NULL_TAG
        assert manager.get_dictionary().translate("Color") == "Color"
        assert manager.get_dictionary(NULL_TAG).translate("Color") == "Color"

    def test_unknown_language_name(
        self, manager: CatalogManager, caplog: pytest.LogCaptureFixture
    ) -> None:
        """An unknown name resolves to the null tag with a warning."""
        with caplog.at_level(logging.WARNING):
            tag = manager.set_language("klingon")

        assert not tag
        assert "klingon" in caplog.text

    def test_missing_catalog_recorded(self, manager: CatalogManager) -> None:
        """A language with no catalog gets an empty dictionary."""
        d = manager.get_dictionary(LocaleTag.from_spec("it"))
        summary = manager.get_load_summary()

        assert len(d) == 0
        assert summary.not_found == 1
        assert summary.get_by_locale("it")[0].status == LoadStatus.NOT_FOUND

    def test_malformed_text_catalog(self) -> None:
        """A syntax error leaves the dictionary empty and is recorded."""
        storage = MemoryStorage({"app/es.po": 'msgid "Open\nmsgstr "Abrir"\n'})
        manager = CatalogManager(storage=storage)
        manager.add_directory("app")

        d = manager.get_dictionary(LocaleTag.from_spec("es"))
        errors = manager.get_load_summary().get_errors()

        assert d.translate("Open") == "Open"
        assert len(errors) == 1
        assert errors[0].source_path == "app/es.po"
        assert isinstance(errors[0].error, CatalogSyntaxError)

    def test_rejected_binary_catalog(self) -> None:
        """A binary catalog with bad magic is an error result."""
        storage = MemoryStorage({"app/ja.mo": b"\x00" * 64})
        manager = CatalogManager(storage=storage)
        manager.add_directory("app")

        manager.get_dictionary(LocaleTag.from_spec("ja"))
        result = manager.get_load_summary().results[0]

        assert result.is_error
        assert isinstance(result.error, CatalogFormatError)
        assert result.report is not None
        assert not result.report.ok

    def test_summary_counts(self, manager: CatalogManager) -> None:
        """The summary aggregates every attempt."""
        manager.get_dictionary(LocaleTag.from_spec("de", "AT"))
        manager.get_dictionary(LocaleTag.from_spec("it"))

        summary = manager.get_load_summary()

        assert isinstance(summary, LoadSummary)
        assert (summary.total_attempted, summary.successful, summary.not_found) == (3, 2, 1)
        assert not summary.has_errors
        assert not summary.all_successful
        assert repr(summary) == (
            "LoadSummary(total=3, ok=2, not_found=1, errors=0, warnings=0)"
        )


# ============================================================================
# FILESYSTEM STORAGE
# ============================================================================


class TestDirectoryStorage:
    """Catalogs read from disk."""

    def test_loads_from_directory(self, tmp_path: Path) -> None:
        """Files in a real directory are found and parsed."""
        (tmp_path / "de.mo").write_bytes(
            build_mo([MoMessage("Color", ("Farbe",))], header=header_text())
        )
        (tmp_path / "fr.po").write_text(po(Color="Couleur"), encoding="utf-8")
        (tmp_path / "nested").mkdir()
        manager = CatalogManager()
        manager.add_directory(str(tmp_path))

        assert manager.get_dictionary(LocaleTag.from_spec("de")).translate("Color") == "Farbe"
        assert manager.get_dictionary(LocaleTag.from_spec("fr")).translate("Color") == "Couleur"

    def test_lists_regular_files_sorted(self, tmp_path: Path) -> None:
        """Directories are not listed; names come back sorted."""
        for name in ("fr.po", "de.po"):
            (tmp_path / name).write_text("", encoding="utf-8")
        (tmp_path / "sub").mkdir()

        assert DirectoryCatalogStorage().list_entries(str(tmp_path)) == ["de.po", "fr.po"]

    def test_missing_directory_is_empty(self, tmp_path: Path) -> None:
        """A directory that does not exist lists nothing."""
        assert DirectoryCatalogStorage().list_entries(str(tmp_path / "gone")) == []

    def test_root_resolves_relative_paths(self, tmp_path: Path) -> None:
        """Relative directories are taken from root."""
        (tmp_path / "locale").mkdir()
        (tmp_path / "locale" / "de.po").write_text(po(Color="Farbe"), encoding="utf-8")
        manager = CatalogManager(storage=DirectoryCatalogStorage(root=str(tmp_path)))
        manager.add_directory("locale")

        assert manager.get_dictionary(LocaleTag.from_spec("de")).translate("Color") == "Farbe"
