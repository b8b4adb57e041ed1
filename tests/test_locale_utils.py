"""Tests for locale normalization and system locale detection."""

from __future__ import annotations

import locale

import pytest

from polexengine.locale_utils import (
    get_babel_locale,
    get_system_locale,
    normalize_locale,
    split_locale,
)


class TestNormalize:
    """BCP-47 to POSIX."""

    def test_hyphen_to_underscore(self) -> None:
        """pt-BR becomes pt_BR."""
        assert normalize_locale("pt-BR") == "pt_BR"

    def test_strips_whitespace(self) -> None:
        """Surrounding whitespace is removed."""
        assert normalize_locale(" de_DE\n") == "de_DE"


class TestSplit:
    """language_COUNTRY.codeset@modifier decomposition."""

    @pytest.mark.parametrize(
        ("code", "parts"),
        [
            ("de", ("de", "", "", "")),
            ("de_AT", ("de", "AT", "", "")),
            ("de_AT.UTF-8", ("de", "AT", "UTF-8", "")),
            ("de_AT.UTF-8@euro", ("de", "AT", "UTF-8", "euro")),
            ("sr@latin", ("sr", "", "", "latin")),
            ("sr_RS@latin", ("sr", "RS", "", "latin")),
            ("en.UTF-8", ("en", "", "UTF-8", "")),
        ],
    )
    def test_parts(self, code: str, parts: tuple[str, str, str, str]) -> None:
        """Each part ends at the next separator."""
        assert split_locale(code) == parts


class TestSystemLocale:
    """Environment lookup order."""

    def test_language_first_entry(self, clean_env: pytest.MonkeyPatch) -> None:
        """LANGUAGE wins and only its first entry is used."""
        clean_env.setenv("LANGUAGE", "sr@latin:de")
        clean_env.setenv("LANG", "fr_FR.UTF-8")

        assert get_system_locale() == "sr@latin"

    def test_lc_all_before_lang(self, clean_env: pytest.MonkeyPatch) -> None:
        """LC_ALL overrides LANG; the codeset is removed."""
        clean_env.setenv("LC_ALL", "de_AT.UTF-8")
        clean_env.setenv("LANG", "fr_FR.UTF-8")

        assert get_system_locale() == "de_AT"

    def test_pseudo_locale_skipped(self, clean_env: pytest.MonkeyPatch) -> None:
        """C and POSIX do not stop the search."""
        clean_env.setenv("LC_ALL", "C")
        clean_env.setenv("LC_MESSAGES", "POSIX")
        clean_env.setenv("LANG", "it_IT")

        assert get_system_locale() == "it_IT"

    def test_os_fallback(self, clean_env: pytest.MonkeyPatch) -> None:
        """locale.getlocale() is consulted last."""
        clean_env.setattr(locale, "getlocale", lambda: ("nl_NL", "UTF-8"))

        assert get_system_locale() == "nl_NL"

    def test_default_c(self, clean_env: pytest.MonkeyPatch) -> None:
        """Nothing configured gives C."""
        assert get_system_locale() == "C"

    def test_raise_on_failure(self, clean_env: pytest.MonkeyPatch) -> None:
        """raise_on_failure turns the default into an error."""
        with pytest.raises(RuntimeError, match="Could not determine system locale"):
            get_system_locale(raise_on_failure=True)


class TestBabelLocale:
    """Cached Babel lookup."""

    def test_posix_and_bcp47(self) -> None:
        """Both spellings reach the same locale; extras are ignored."""
        assert get_babel_locale("pt-BR").territory == "BR"
        assert get_babel_locale("pt_BR.UTF-8@x").territory == "BR"

    def test_cached(self) -> None:
        """Repeated calls return the same object."""
        assert get_babel_locale("de_AT") is get_babel_locale("de_AT")
