"""Tests for the enums module."""

import pytest

from polexengine.enums import CatalogFormat, LoadStatus


class TestCatalogFormat:
    """Catalog representations."""

    def test_str_returns_value(self) -> None:
        """StrEnum members render as their value."""
        assert str(CatalogFormat.PO) == "po"
        assert str(CatalogFormat.MO) == "mo"

    @pytest.mark.parametrize(
        ("filename", "expected"),
        [
            ("de.po", CatalogFormat.PO),
            ("de.PO", CatalogFormat.PO),
            ("messages.mo", CatalogFormat.MO),
            ("README", None),
            ("de.pot", None),
        ],
    )
    def test_from_filename(self, filename: str, expected: CatalogFormat | None) -> None:
        """The suffix decides, case-insensitively."""
        assert CatalogFormat.from_filename(filename) is expected


class TestLoadStatus:
    """Load outcomes."""

    def test_members(self) -> None:
        """Exactly three outcomes exist."""
        assert {str(member) for member in LoadStatus} == {"success", "not_found", "error"}
