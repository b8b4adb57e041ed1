"""Charset conversion for catalog text.

Catalog strings are stored in whatever charset the catalog declares; a
Dictionary wants them in its own charset. Conversion is a pluggable
capability so callers can substitute their own transcoder.

A conversion that cannot be set up, or bytes that do not decode, never
abort loading: the text is passed through unconverted and the problem is
logged.

Python 3.13+. Zero external dependencies.
"""

import codecs
import logging
from typing import Protocol, runtime_checkable

from polexengine.constants import DEFAULT_CHARSET
from polexengine.diagnostics import ErrorTemplate, log_diagnostic

__all__ = ["CharsetConverter", "CodecConverter", "canonical_charset"]

logger = logging.getLogger(__name__)


@runtime_checkable
class CharsetConverter(Protocol):
    """Protocol for byte-level charset transcoders.

    Implementations are configured once per catalog with set_charsets()
    and then convert every translated string of that catalog.
    """

    def set_charsets(self, from_charset: str, to_charset: str) -> bool:
        """Prepare a conversion path.

        Returns:
            False when the path cannot be opened; convert() then passes
            bytes through unchanged
        """
        ...

    def convert(self, data: bytes) -> bytes:
        """Transcode bytes from the source to the target charset."""
        ...


def canonical_charset(name: str) -> str | None:
    """Python codec name for a catalog charset name, None if unknown.

    Example:
        >>> canonical_charset("ISO-8859-1")
        'iso8859-1'
        >>> canonical_charset("CHARSET") is None
        True
    """
    try:
        return codecs.lookup(name.strip()).name
    except LookupError:
        return None


class CodecConverter:
    """CharsetConverter backed by the standard codecs registry.

    Charset names are compared case-insensitively; identical charsets make
    conversion a no-op.

    Example:
        >>> converter = CodecConverter()
        >>> converter.set_charsets("ISO-8859-1", "UTF-8")
        True
        >>> converter.convert(b"Gr\\xfc\\xdfe")
        b'Gr\\xc3\\xbc\\xc3\\x9fe'
    """

    __slots__ = ("_from", "_passthrough", "_to")

    def __init__(self) -> None:
        self._from = DEFAULT_CHARSET
        self._to = DEFAULT_CHARSET
        self._passthrough = True

    @property
    def from_charset(self) -> str:
        """Source charset as last configured (upper-cased)."""
        return self._from

    @property
    def to_charset(self) -> str:
        """Target charset as last configured (upper-cased)."""
        return self._to

    @property
    def is_passthrough(self) -> bool:
        """True when convert() returns its input unchanged."""
        return self._passthrough

    def set_charsets(self, from_charset: str, to_charset: str) -> bool:
        self._from = from_charset.strip().upper()
        self._to = to_charset.strip().upper()
        self._passthrough = True

        if self._from == self._to:
            return True

        source = canonical_charset(self._from)
        target = canonical_charset(self._to)
        if source is None or target is None:
            log_diagnostic(logger, ErrorTemplate.conversion_unavailable(self._from, self._to))
            return False

        self._passthrough = source == target
        return True

    def convert(self, data: bytes) -> bytes:
        if self._passthrough or not data:
            return data
        try:
            return data.decode(self._from).encode(self._to)
        except UnicodeError:
            log_diagnostic(logger, ErrorTemplate.conversion_failed(self._from, self._to, data))
            return data
