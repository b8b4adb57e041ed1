"""Compiled (binary) catalog parser.

Reads the GNU ``.mo`` layout: a 28-byte header of seven 32-bit words, two
tables of ``(length, offset)`` descriptors, and the string data they point
to. The hash table is never consulted; entries are read by position.

Parsing never mutates or decodes bytes. Charset conversion is left to the
caller, which knows the target charset.

State machine::

    Unparsed -> HeaderValidated -> MetadataExtracted -> EntriesLoaded
    Unparsed -> Rejected            (bad magic, truncated, unknown revision)

Python 3.13+.
"""

import logging
from dataclasses import dataclass

from polexengine.constants import (
    CHARSET_PLACEHOLDER,
    CONTEXT_SEPARATOR,
    DEFAULT_CHARSET,
    MAX_SOURCE_SIZE,
    MO_DESCRIPTOR_SIZE,
    MO_HEADER_SIZE,
    MO_MAGIC,
    MO_MAGIC_SWAPPED,
    MO_SUPPORTED_MAJOR_REVISIONS,
    PLURAL_SEPARATOR,
)
from polexengine.core import NO_PLURAL_FORMS, PluralForms, lookup_plural_forms
from polexengine.diagnostics import Diagnostic, ErrorTemplate, log_diagnostic
from polexengine.enums import CatalogFormat

from .cursor import ByteCursor
from .entries import ParsedCatalog, RawEntry, read_header_fields

__all__ = ["BinaryCatalogParser", "MoHeader", "parse_mo"]

logger = logging.getLogger(__name__)

_EOT = CONTEXT_SEPARATOR[0]
_NUL = PLURAL_SEPARATOR[0]


@dataclass(frozen=True, slots=True)
class MoHeader:
    """The seven fixed header words, already byte-order corrected."""

    magic: int
    revision: int
    count: int
    originals_offset: int
    translations_offset: int
    hash_size: int
    hash_offset: int

    @property
    def major_revision(self) -> int:
        """Upper 16 bits of the revision word."""
        return self.revision >> 16


def _read_header(cursor: ByteCursor) -> MoHeader:
    words: list[int] = []
    for _ in range(MO_HEADER_SIZE // 4):
        result = cursor.read_u32()
        words.append(result.value)
        cursor = result.cursor
    return MoHeader(*words)


class BinaryCatalogParser:
    """Parser for compiled catalogs.

    A bad magic number, a buffer shorter than the header, or an unknown
    major revision rejects the whole catalog (``ok=False``, no entries).
    Any other inconsistency, such as a descriptor pointing past the end of
    the buffer, skips just that entry.

    Example:
        >>> parser = BinaryCatalogParser()
        >>> catalog = parser.parse(open("de.mo", "rb").read(), source_path="de.mo")
        >>> catalog.ok, catalog.charset
        (True, 'UTF-8')
    """

    __slots__ = ("_max_source_size",)

    def __init__(self, *, max_source_size: int | None = None) -> None:
        """Initialize parser.

        Args:
            max_source_size: Largest accepted catalog in bytes
                (default: MAX_SOURCE_SIZE). 0 or negative disables the check.
        """
        self._max_source_size = MAX_SOURCE_SIZE if max_source_size is None else max_source_size

    @property
    def max_source_size(self) -> int:
        """Maximum accepted catalog size in bytes."""
        return self._max_source_size

    def parse(self, data: bytes, *, source_path: str = "") -> ParsedCatalog:
        """Parse a complete compiled catalog held in memory.

        Args:
            data: Catalog bytes
            source_path: File name used in diagnostics

        Returns:
            ParsedCatalog; check ``ok`` before trusting it
        """
        path = source_path or None

        if 0 < self._max_source_size < len(data):
            return self._reject(
                ErrorTemplate.source_too_large(len(data), self._max_source_size, path),
                source_path,
            )
        if len(data) < MO_HEADER_SIZE:
            return self._reject(ErrorTemplate.truncated_header(len(data), path), source_path)

        cursor = ByteCursor(data)
        magic = cursor.read_u32_at(0)
        if magic == MO_MAGIC:
            swapped = False
        elif magic == MO_MAGIC_SWAPPED:
            swapped = True
        else:
            return self._reject(ErrorTemplate.bad_magic(magic, path), source_path)

        cursor = cursor.with_swapped(swapped)
        header = _read_header(cursor)
        if header.major_revision not in MO_SUPPORTED_MAJOR_REVISIONS:
            return self._reject(
                ErrorTemplate.unsupported_revision(header.revision, path), source_path
            )

        state = _ParseState(cursor, header, path)
        state.load_entries()
        state.extract_metadata()

        logger.debug(
            "Parsed compiled catalog %s: %d entries (%s-endian)",
            source_path or "<memory>",
            len(state.entries),
            "big" if swapped else "little",
        )
        return ParsedCatalog(
            catalog_format=CatalogFormat.MO,
            entries=tuple(state.entries),
            header=state.header_text,
            charset=state.charset,
            plural_spec=state.plural_spec,
            plural_forms=state.plural_forms,
            diagnostics=tuple(state.diagnostics),
            ok=True,
            source_path=source_path,
            revision=header.revision,
            swapped=swapped,
        )

    @staticmethod
    def _reject(diagnostic: Diagnostic, source_path: str) -> ParsedCatalog:
        log_diagnostic(logger, diagnostic)
        return ParsedCatalog(
            catalog_format=CatalogFormat.MO,
            diagnostics=(diagnostic,),
            ok=False,
            source_path=source_path,
        )


class _ParseState:
    """Transient per-parse working state; discarded after parse()."""

    __slots__ = (
        "charset",
        "cursor",
        "diagnostics",
        "entries",
        "header",
        "header_text",
        "path",
        "plural_forms",
        "plural_spec",
    )

    def __init__(self, cursor: ByteCursor, header: MoHeader, path: str | None) -> None:
        self.cursor = cursor
        self.header = header
        self.path = path
        self.entries: list[RawEntry] = []
        self.diagnostics: list[Diagnostic] = []
        self.header_text = b""
        self.charset = DEFAULT_CHARSET
        self.plural_spec = ""
        self.plural_forms: PluralForms = NO_PLURAL_FORMS

    def warn(self, diagnostic: Diagnostic) -> None:
        self.diagnostics.append(diagnostic)
        log_diagnostic(logger, diagnostic)

    def descriptor(self, table_offset: int, index: int) -> tuple[int, int] | None:
        """Read the (length, offset) pair of one entry, None if out of bounds."""
        at = table_offset + index * MO_DESCRIPTOR_SIZE
        if not self.cursor.in_bounds(at, MO_DESCRIPTOR_SIZE):
            return None
        first = self.cursor.seek(at).read_u32()
        length = first.value
        offset = first.cursor.read_u32().value
        if not self.cursor.in_bounds(offset, length):
            return None
        return length, offset

    def table_capacity(self) -> int:
        """Descriptors that fit in both tables before the end of the buffer."""
        size = len(self.cursor)
        return min(
            max(0, (size - table) // MO_DESCRIPTOR_SIZE)
            for table in (self.header.originals_offset, self.header.translations_offset)
        )

    def load_entries(self) -> None:
        count = self.header.count
        capacity = self.table_capacity()
        if count > capacity:
            self.warn(ErrorTemplate.table_truncated(count, capacity, self.path))
            count = capacity
        for index in range(count):
            original = self.descriptor(self.header.originals_offset, index)
            translated = self.descriptor(self.header.translations_offset, index)
            if original is None or translated is None:
                self.warn(ErrorTemplate.entry_out_of_bounds(index, self.path))
                continue
            self.load_entry(index, original, translated)

    def load_entry(
        self, index: int, original: tuple[int, int], translated: tuple[int, int]
    ) -> None:
        cursor = self.cursor
        length, offset = original
        end = offset + length

        context: bytes | None = None
        eot = cursor.find_byte(_EOT, offset, length)
        if eot is not None:
            context = cursor.slice(offset, eot - offset)
            offset = eot + 1

        message_id_plural: bytes | None = None
        nul = cursor.find_byte(_NUL, offset, end - offset)
        if nul is not None:
            message_id = cursor.slice(offset, nul - offset)
            message_id_plural = cursor.slice(nul + 1, end - nul - 1)
        else:
            message_id = cursor.slice(offset, end - offset)

        t_length, t_offset = translated
        segments = cursor.slice(t_offset, t_length).split(PLURAL_SEPARATOR)
        singular = segments[0]

        if not message_id and context is None:
            self.header_text = singular
            return
        if not singular:
            logger.debug("Entry %d has no translation, skipped", index)
            return

        variants = [singular]
        for segment in segments[1:]:
            if not segment:
                break
            variants.append(segment)

        self.entries.append(
            RawEntry(
                message_id=message_id,
                variants=tuple(variants),
                message_id_plural=message_id_plural,
                context=context,
                line=index,
            )
        )

    def extract_metadata(self) -> None:
        fields = read_header_fields(self.header_text)

        charset = fields.charset
        if charset is None or charset.upper() == CHARSET_PLACEHOLDER:
            self.warn(ErrorTemplate.missing_charset(self.path))
            charset = DEFAULT_CHARSET
        self.charset = charset

        if fields.plural_spec is not None:
            self.plural_spec = fields.plural_spec
            self.plural_forms = lookup_plural_forms(fields.plural_spec)
            if not self.plural_forms:
                self.warn(ErrorTemplate.unknown_plural_spec(fields.plural_spec, self.path))
        elif any(entry.is_plural for entry in self.entries):
            self.warn(ErrorTemplate.missing_plural_spec(1, self.path))


def parse_mo(
    data: bytes, *, source_path: str = "", max_source_size: int | None = None
) -> ParsedCatalog:
    """Parse a compiled catalog with default settings.

    Convenience wrapper around ``BinaryCatalogParser().parse()``.
    """
    return BinaryCatalogParser(max_source_size=max_source_size).parse(
        data, source_path=source_path
    )
