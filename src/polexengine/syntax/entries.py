"""Parsed catalog data model.

Parsers produce ``RawEntry`` values holding undecoded bytes; decoding and
charset conversion happen when entries are folded into a Dictionary,
because only then is the target charset known.

Python 3.13+.
"""

from dataclasses import dataclass, field

from polexengine.constants import CHARSET_MARKER, DEFAULT_CHARSET, PLURAL_FORMS_MARKER
from polexengine.core import NO_PLURAL_FORMS, PluralForms, normalize_plural_spec
from polexengine.diagnostics import CatalogFormatError, Diagnostic
from polexengine.enums import CatalogFormat

from .cursor import ByteCursor

__all__ = ["CatalogEntry", "HeaderFields", "ParsedCatalog", "RawEntry", "read_header_fields"]


@dataclass(frozen=True, slots=True)
class RawEntry:
    """One translation unit exactly as stored in the catalog.

    ``context`` is tri-state: None means no msgctxt, ``b""`` means an
    explicitly empty msgctxt. The two are different lookup keys.

    Attributes:
        message_id: msgid bytes (lookup key)
        variants: Translations; index 0 is the singular or only form
        message_id_plural: msgid_plural bytes, None for non-plural entries
        context: msgctxt bytes, None when absent
        fuzzy: Entry carried a ``#, fuzzy`` flag (text catalogs only)
        line: 1-based line of the msgid (text) or entry index (binary)
    """

    message_id: bytes
    variants: tuple[bytes, ...]
    message_id_plural: bytes | None = None
    context: bytes | None = None
    fuzzy: bool = False
    line: int = 0

    @property
    def is_plural(self) -> bool:
        """True when the entry declares msgid_plural."""
        return self.message_id_plural is not None

    @property
    def has_context(self) -> bool:
        """True when msgctxt was present, even if empty."""
        return self.context is not None


@dataclass(frozen=True, slots=True)
class CatalogEntry:
    """Decoded translation unit as stored in a Dictionary.

    Attributes:
        message_id: Lookup key
        variants: Translations; never empty, index 0 is the singular form
        message_id_plural: Plural source string, informational only
        context: msgctxt, None when absent (distinct from "")
    """

    message_id: str
    variants: tuple[str, ...]
    message_id_plural: str | None = None
    context: str | None = None

    def __post_init__(self) -> None:
        """Reject entries without any translation.

        Raises:
            ValueError: If variants is empty
        """
        if not self.variants:
            msg = f"CatalogEntry {self.message_id!r} needs at least one variant"
            raise ValueError(msg)

    @property
    def is_plural(self) -> bool:
        """True when the entry carries plural information."""
        return self.message_id_plural is not None or len(self.variants) > 1

    @property
    def translation(self) -> str:
        """Singular (or only) translation."""
        return self.variants[0]


@dataclass(frozen=True, slots=True)
class ParsedCatalog:
    """Result of parsing one catalog.

    Binary catalogs report rejection through ``ok=False``; text catalogs
    raise CatalogSyntaxError instead and always return ``ok=True``.

    Attributes:
        catalog_format: Which parser produced this result
        entries: Translated entries in catalog order, header excluded
        header: Header entry translation (msgstr of msgid "")
        charset: Declared charset, DEFAULT_CHARSET when missing
        plural_spec: Normalized Plural-Forms value, "" when missing
        plural_forms: Resolved rule; falsy when missing or unknown
        diagnostics: Everything reported during parsing, in order
        ok: False only when a binary catalog was rejected outright
        source_path: File name the catalog came from, "" for in-memory data
        revision: Binary format revision word (0 for text catalogs)
        swapped: Binary catalog was big-endian relative to the magic
    """

    catalog_format: CatalogFormat
    entries: tuple[RawEntry, ...] = ()
    header: bytes = b""
    charset: str = DEFAULT_CHARSET
    plural_spec: str = ""
    plural_forms: PluralForms = NO_PLURAL_FORMS
    diagnostics: tuple[Diagnostic, ...] = field(default=(), compare=False)
    ok: bool = True
    source_path: str = ""
    revision: int = 0
    swapped: bool = False

    def __len__(self) -> int:
        return len(self.entries)

    @property
    def warnings(self) -> tuple[Diagnostic, ...]:
        """Non-fatal diagnostics."""
        return tuple(d for d in self.diagnostics if d.is_warning)

    @property
    def errors(self) -> tuple[Diagnostic, ...]:
        """Fatal diagnostics (only present when ``ok`` is False)."""
        return tuple(d for d in self.diagnostics if not d.is_warning)

    def raise_for_status(self) -> "ParsedCatalog":
        """Raise CatalogFormatError if the catalog was rejected.

        Returns:
            self, for chaining

        Raises:
            CatalogFormatError: Carrying the first fatal diagnostic
        """
        if not self.ok:
            errors = self.errors
            if errors:
                raise CatalogFormatError(errors[0])
            msg = f"Catalog {self.source_path or '<memory>'} rejected"
            raise CatalogFormatError(msg)
        return self


@dataclass(frozen=True, slots=True)
class HeaderFields:
    """Metadata found in a catalog header entry.

    Attributes:
        charset: Value after ``charset=``, None when absent or blank
        plural_spec: Normalized text from ``nplurals=`` to line end, None when absent
    """

    charset: str | None = None
    plural_spec: str | None = None


def _rest_of_line(cursor: ByteCursor, start: int) -> bytes:
    value = cursor.slice_until(start, b"\n")
    if value or cursor.matches_at(b"\n", start):
        return value
    return cursor.data[start:]


def read_header_fields(header: bytes) -> HeaderFields:
    """Locate charset and Plural-Forms inside header text.

    Both parsers search the header the same way: find the marker, take
    everything up to the next line break.

    Example:
        >>> read_header_fields(b"Content-Type: text/plain; charset=UTF-8\\n")
        HeaderFields(charset='UTF-8', plural_spec=None)
    """
    cursor = ByteCursor(header)
    charset: str | None = None
    plural_spec: str | None = None

    pos = cursor.find(CHARSET_MARKER)
    if pos is not None:
        value = _rest_of_line(cursor, pos + len(CHARSET_MARKER)).strip()
        charset = value.decode("ascii", errors="replace") or None

    pos = cursor.find(PLURAL_FORMS_MARKER)
    if pos is not None:
        value = _rest_of_line(cursor, pos)
        plural_spec = normalize_plural_spec(value.decode("ascii", errors="replace"))

    return HeaderFields(charset, plural_spec)
