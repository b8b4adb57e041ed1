"""Tests for charset conversion."""

from __future__ import annotations

import logging

import pytest

from polexengine.transcoding import CharsetConverter, CodecConverter, canonical_charset


class TestCanonicalCharset:
    """Catalog charset names to codec names."""

    @pytest.mark.parametrize(
        ("name", "codec"),
        [("UTF-8", "utf-8"), ("iso-8859-1", "iso8859-1"), (" KOI8-R ", "koi8-r")],
    )
    def test_known(self, name: str, codec: str) -> None:
        """Known names resolve case-insensitively."""
        assert canonical_charset(name) == codec

    def test_unknown(self) -> None:
        """Unknown names give None."""
        assert canonical_charset("CHARSET") is None


class TestCodecConverter:
    """The default converter."""

    def test_satisfies_protocol(self) -> None:
        """CodecConverter is a CharsetConverter."""
        assert isinstance(CodecConverter(), CharsetConverter)

    def test_latin1_to_utf8(self) -> None:
        """Bytes are re-encoded."""
        converter = CodecConverter()

        assert converter.set_charsets("ISO-8859-1", "UTF-8") is True
        assert converter.convert("Größe".encode("latin-1")) == "Größe".encode()
        assert not converter.is_passthrough

    def test_same_charset_passthrough(self) -> None:
        """Names equal after upper-casing need no conversion."""
        converter = CodecConverter()

        assert converter.set_charsets("utf-8", "UTF-8") is True
        assert converter.is_passthrough
        assert converter.from_charset == converter.to_charset == "UTF-8"

    def test_alias_passthrough(self) -> None:
        """Different spellings of one codec need no conversion."""
        converter = CodecConverter()
        converter.set_charsets("UTF8", "UTF-8")

        assert converter.is_passthrough

    def test_unknown_charset(self, caplog: pytest.LogCaptureFixture) -> None:
        """An unknown charset fails setup and passes bytes through."""
        converter = CodecConverter()

        with caplog.at_level(logging.WARNING):
            assert converter.set_charsets("X-NOPE", "UTF-8") is False

        assert converter.convert(b"\xff") == b"\xff"
        assert "CONVERSION_UNAVAILABLE" in caplog.text

    def test_undecodable_bytes(self, caplog: pytest.LogCaptureFixture) -> None:
        """Bytes invalid in the source charset are returned unchanged."""
        converter = CodecConverter()
        converter.set_charsets("UTF-8", "ISO-8859-1")

        with caplog.at_level(logging.WARNING):
            assert converter.convert(b"\xff\xfe") == b"\xff\xfe"

        assert "CONVERSION_FAILED" in caplog.text

    def test_unencodable_text(self) -> None:
        """Characters missing from the target charset also pass through."""
        converter = CodecConverter()
        converter.set_charsets("UTF-8", "ISO-8859-1")

        assert converter.convert("€".encode()) == "€".encode()
