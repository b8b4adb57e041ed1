"""Catalog syntax: byte cursor, parsers and serializer.

Python 3.13+.
"""

from .cursor import ByteCursor, ParseResult
from .entries import CatalogEntry, HeaderFields, ParsedCatalog, RawEntry, read_header_fields
from .mo_parser import BinaryCatalogParser, MoHeader, parse_mo
from .po_parser import TextCatalogParser, parse_po
from .serializer import CatalogSerializer, escape_string, serialize_catalog

__all__ = [
    "BinaryCatalogParser",
    "ByteCursor",
    "CatalogEntry",
    "CatalogSerializer",
    "HeaderFields",
    "MoHeader",
    "ParseResult",
    "ParsedCatalog",
    "RawEntry",
    "TextCatalogParser",
    "escape_string",
    "parse_mo",
    "parse_po",
    "read_header_fields",
    "serialize_catalog",
]
