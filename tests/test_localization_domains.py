"""Tests for the gettext-style TextDomains facade."""

from __future__ import annotations

import pytest

from polexengine.language import LocaleTag
from polexengine.localization import DEFAULT_DOMAIN, CatalogManager, TextDomains
from tests.helpers.catalogs import SPANISH_PO, MemoryStorage, MoMessage, build_mo, header_text

TOOLS_MO = build_mo(
    [
        MoMessage("Hammer", ("Martillo",)),
        MoMessage("Tool", ("Herramienta", "Herramientas"), "Tools"),
        MoMessage("Open", ("Abrir caja",), context="box"),
        MoMessage("Nail", ("Clavo", "Clavos"), "Nails", context="box"),
    ],
    header=header_text(plural_forms="nplurals=2; plural=(n != 1);"),
)


@pytest.fixture
def domains() -> TextDomains:
    """Spanish with two bound domains; "messages" is current."""
    storage = MemoryStorage({
        "locale/messages/es.po": SPANISH_PO,
        "locale/tools/es.mo": TOOLS_MO,
    })
    result = TextDomains(language="es", storage=storage)
    result.bind_textdomain("messages", "locale/messages")
    result.bind_textdomain("tools", "locale/tools")
    return result


class TestBinding:
    """Domains and their managers."""

    def test_defaults(self) -> None:
        """The default domain is "messages" and nothing is bound."""
        domains = TextDomains(language="de", storage=MemoryStorage({}))

        assert domains.textdomain() == DEFAULT_DOMAIN
        assert domains.domains == ()
        assert domains.language == LocaleTag.from_spec("de")

    def test_bind_returns_manager(self, domains: TextDomains) -> None:
        """Each domain has its own manager on the current language."""
        manager = domains.manager("tools")

        assert isinstance(manager, CatalogManager)
        assert manager.search_path == ("locale/tools",)
        assert manager.language == LocaleTag.from_spec("es")
        assert domains.domains == ("messages", "tools")
        assert domains.manager("unbound") is None

    def test_rebind_adds_directory(self, domains: TextDomains) -> None:
        """Binding again extends the domain's search path."""
        manager = domains.bind_textdomain("tools", "extra/tools", precedence=True)

        assert manager.search_path == ("extra/tools", "locale/tools")

    def test_textdomain_switches_current(self, domains: TextDomains) -> None:
        """textdomain() selects where the plain lookups go."""
        assert domains.textdomain("tools") == "tools"
        assert domains.gettext("Hammer") == "Martillo"
        assert domains.textdomain(None) == "tools"

    def test_language_from_environment(self, clean_env: pytest.MonkeyPatch) -> None:
        """Without a language argument the environment decides."""
        clean_env.setenv("LANG", "pt_BR.UTF-8")

        assert TextDomains(storage=MemoryStorage({})).language.to_string() == "pt_BR"


class TestLookups:
    """The gettext function family."""

    def test_gettext(self, domains: TextDomains) -> None:
        """Plain lookup in the current domain."""
        assert domains.gettext("Open") == "Abrir"
        assert domains.gettext("Missing") == "Missing"

    def test_dgettext(self, domains: TextDomains) -> None:
        """Explicit domain."""
        assert domains.dgettext("tools", "Hammer") == "Martillo"
        assert domains.dgettext("messages", "Hammer") == "Hammer"

    def test_ngettext(self, domains: TextDomains) -> None:
        """Plural lookup in the current domain."""
        assert domains.ngettext("File", "Files", 1) == "Archivo"
        assert domains.ngettext("File", "Files", 3) == "Archivos"

    def test_dngettext(self, domains: TextDomains) -> None:
        """Plural lookup in a given domain."""
        assert domains.dngettext("tools", "Tool", "Tools", 2) == "Herramientas"

    def test_pgettext(self, domains: TextDomains) -> None:
        """Context lookup in the current domain."""
        assert domains.pgettext("success", "Congratulations!") == "¡Felicidades!"
        assert domains.pgettext("failure", "Congratulations!") == "Lo siento"
        assert domains.pgettext("other", "Congratulations!") == "Congratulations!"

    def test_dpgettext(self, domains: TextDomains) -> None:
        """Context lookup in a given domain."""
        assert domains.dpgettext("tools", "box", "Open") == "Abrir caja"

    def test_npgettext(self, domains: TextDomains) -> None:
        """Context plural lookup in the current domain falls back by count."""
        assert domains.npgettext("box", "Nail", "Nails", 1) == "Nail"
        assert domains.npgettext("box", "Nail", "Nails", 2) == "Nails"

    def test_dnpgettext(self, domains: TextDomains) -> None:
        """Context plural lookup in a given domain."""
        assert domains.dnpgettext("tools", "box", "Nail", "Nails", 1) == "Clavo"
        assert domains.dnpgettext("tools", "box", "Nail", "Nails", 4) == "Clavos"

    def test_unbound_domain_is_identity(self, domains: TextDomains) -> None:
        """Lookups in an unbound domain return the source text."""
        assert domains.dgettext("nowhere", "Open") == "Open"
        assert domains.dngettext("nowhere", "File", "Files", 1) == "File"
        assert domains.dngettext("nowhere", "File", "Files", 2) == "Files"
        assert domains.dpgettext("nowhere", "box", "Open") == "Open"
        assert domains.dnpgettext("nowhere", "box", "Nail", "Nails", 5) == "Nails"


class TestLanguageSwitch:
    """One language for every domain."""

    def test_set_language_applies_to_all_domains(self, domains: TextDomains) -> None:
        """Switching to an untranslated language makes lookups identity."""
        assert domains.dgettext("tools", "Hammer") == "Martillo"

        tag = domains.set_language("de")

        assert tag == LocaleTag.from_spec("de")
        assert domains.gettext("Open") == "Open"
        assert domains.dgettext("tools", "Hammer") == "Hammer"

    def test_switch_back_uses_cache(self, domains: TextDomains) -> None:
        """Returning to a language reuses its dictionary."""
        manager = domains.manager("messages")
        assert manager is not None
        first = manager.get_dictionary()

        domains.set_language("de")
        domains.set_language("es")

        assert manager.get_dictionary() is first

    def test_unknown_language(self, domains: TextDomains, caplog: pytest.LogCaptureFixture) -> None:
        """An unknown name disables translation with a warning."""
        tag = domains.set_language("zz")

        assert not tag
        assert domains.gettext("Open") == "Open"
        assert "Unknown language" in caplog.text

    def test_repr(self, domains: TextDomains) -> None:
        """repr names language, current domain and bound domains."""
        assert repr(domains) == "TextDomains(language='es', domain='messages', bound=['messages', 'tools'])"
