"""Tests for the polexengine package entry point."""

from __future__ import annotations

import importlib
from importlib.metadata import PackageNotFoundError
from unittest.mock import patch

import polexengine


class TestPublicApi:
    """Top-level exports."""

    def test_all_names_accessible(self) -> None:
        """Every name in __all__ resolves."""
        for name in polexengine.__all__:
            assert getattr(polexengine, name) is not None

    def test_end_to_end(self) -> None:
        """The top-level names are enough to translate."""
        d = polexengine.Dictionary()
        d.add_catalog('msgid "Open"\nmsgstr "Abrir"\n')

        assert d.translate("Open") == "Abrir"
        assert polexengine.LocaleTag.from_env("es_ES").language == "es"

    def test_exceptions_share_base(self) -> None:
        """Both catalog exceptions derive from CatalogError."""
        assert issubclass(polexengine.CatalogSyntaxError, polexengine.CatalogError)
        assert issubclass(polexengine.CatalogFormatError, polexengine.CatalogError)


class TestVersion:
    """Version metadata."""

    def test_version_is_string(self) -> None:
        """__version__ is always a non-empty string."""
        assert isinstance(polexengine.__version__, str)
        assert polexengine.__version__

    def test_fallback_when_not_installed(self) -> None:
        """Without package metadata the development version is used."""
        with patch("importlib.metadata.version", side_effect=PackageNotFoundError):
            reloaded = importlib.reload(polexengine)
            assert reloaded.__version__ == "0.0.0+dev"
        importlib.reload(polexengine)
