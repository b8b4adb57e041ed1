"""Editable (text) catalog parser.

Line-oriented parser for the GNU ``.po`` format::

    # translator comment
    #, fuzzy
    msgctxt "menu"
    msgid "Open"
    msgid_plural "Open %d files"
    msgstr[0] "Öffnen"
    msgstr[1] ""
    "%d Dateien öffnen"

Unlike the binary parser, a structural error (unterminated string, missing
msgstr, msgstr[n] out of sequence, a line that fits no rule) raises
CatalogSyntaxError and aborts the parse: one broken line shifts the meaning
of every line after it, so nothing parsed is trustworthy.

Escapes ``\\a \\b \\v \\n \\t \\r \\" \\\\`` are decoded; any other escape is
reported and both characters are kept.

Lines are handled as bytes so that double-byte charsets survive untouched.
In BIG5 mode (declared by the header), a lead byte in 0x81-0xFE always
consumes the following byte, which may look like a quote or backslash.

Python 3.13+.
"""

import logging
import re

from polexengine.constants import (
    BIG5_CHARSET,
    BIG5_LEAD_BYTES,
    CHARSET_PLACEHOLDER,
    DEFAULT_CHARSET,
    MAX_SOURCE_SIZE,
    UTF8_BOM,
)
from polexengine.core import NO_PLURAL_FORMS, PluralForms, lookup_plural_forms
from polexengine.diagnostics import CatalogSyntaxError, Diagnostic, ErrorTemplate, log_diagnostic
from polexengine.enums import CatalogFormat

from .entries import ParsedCatalog, RawEntry, read_header_fields

__all__ = ["TextCatalogParser", "parse_po"]

logger = logging.getLogger(__name__)

_QUOTE = ord('"')
_BACKSLASH = ord("\\")

_ESCAPES: dict[int, bytes] = {
    ord("a"): b"\a",
    ord("b"): b"\b",
    ord("v"): b"\v",
    ord("n"): b"\n",
    ord("t"): b"\t",
    ord("r"): b"\r",
    ord('"'): b'"',
    ord("\\"): b"\\",
}

_MSGSTR_INDEX = re.compile(rb"msgstr\[(\d+)\]")


class TextCatalogParser:
    """Parser for text catalogs.

    Example:
        >>> parser = TextCatalogParser()
        >>> catalog = parser.parse('msgid "Hello"\\nmsgstr "Hallo"\\n')
        >>> catalog.entries[0].variants
        (b'Hallo',)
    """

    __slots__ = ("_max_source_size", "_pedantic", "_use_fuzzy")

    def __init__(
        self,
        *,
        use_fuzzy: bool = True,
        pedantic: bool = True,
        max_source_size: int | None = None,
    ) -> None:
        """Initialize parser.

        Args:
            use_fuzzy: Include entries flagged ``#, fuzzy``
            pedantic: Warn about spacing that msgfmt would reformat
            max_source_size: Largest accepted catalog in bytes
                (default: MAX_SOURCE_SIZE). 0 or negative disables the check.
        """
        self._use_fuzzy = use_fuzzy
        self._pedantic = pedantic
        self._max_source_size = MAX_SOURCE_SIZE if max_source_size is None else max_source_size

    @property
    def use_fuzzy(self) -> bool:
        """Whether fuzzy entries are kept."""
        return self._use_fuzzy

    @property
    def pedantic(self) -> bool:
        """Whether spacing warnings are reported."""
        return self._pedantic

    def parse(self, source: bytes | str, *, source_path: str = "") -> ParsedCatalog:
        """Parse a complete text catalog.

        ``str`` input is encoded as UTF-8 first; the result then reports
        UTF-8 as its charset whatever the header says, because that is the
        encoding of the bytes handed to the caller.

        Args:
            source: Catalog contents
            source_path: File name used in diagnostics

        Returns:
            ParsedCatalog (always ``ok``)

        Raises:
            CatalogSyntaxError: On the first structural error
        """
        decoded_input = isinstance(source, str)
        data = source.encode("utf-8") if isinstance(source, str) else source

        if 0 < self._max_source_size < len(data):
            diagnostic = ErrorTemplate.source_too_large(
                len(data), self._max_source_size, source_path or None
            )
            raise CatalogSyntaxError(diagnostic, source_path=source_path, line=1)

        data = data.removeprefix(UTF8_BOM)
        reader = _PoReader(
            data,
            source_path,
            use_fuzzy=self._use_fuzzy,
            pedantic=self._pedantic,
            decoded_input=decoded_input,
        )
        reader.run()

        charset = DEFAULT_CHARSET if decoded_input else reader.charset
        logger.debug(
            "Parsed text catalog %s: %d entries, charset %s",
            source_path or "<memory>",
            len(reader.entries),
            charset,
        )
        return ParsedCatalog(
            catalog_format=CatalogFormat.PO,
            entries=tuple(reader.entries),
            header=reader.header,
            charset=charset,
            plural_spec=reader.plural_spec,
            plural_forms=reader.plural_forms,
            diagnostics=tuple(reader.diagnostics),
            ok=True,
            source_path=source_path,
        )


class _PoReader:
    """Transient per-parse working state; discarded after parse()."""

    def __init__(
        self,
        data: bytes,
        source_path: str,
        *,
        use_fuzzy: bool,
        pedantic: bool,
        decoded_input: bool = False,
    ) -> None:
        raw_lines = data.split(b"\n")
        self.lines = [line.removesuffix(b"\r") for line in raw_lines]
        self.offsets: list[int] = []
        offset = 0
        for raw in raw_lines:
            self.offsets.append(offset)
            offset += len(raw) + 1
        self.index = 0
        self.source_path = source_path
        self.path = source_path or None
        self.use_fuzzy = use_fuzzy
        self.pedantic = pedantic
        # Text already decoded by the caller is UTF-8 here, whatever the header says.
        self.decoded_input = decoded_input

        self.big5 = False
        self.seen_header = False
        self.header = b""
        self.charset = DEFAULT_CHARSET
        self.plural_spec = ""
        self.plural_forms: PluralForms = NO_PLURAL_FORMS
        self.entries: list[RawEntry] = []
        self.diagnostics: list[Diagnostic] = []

    # ------------------------------------------------------------------
    # Line access
    # ------------------------------------------------------------------

    @property
    def eof(self) -> bool:
        return self.index >= len(self.lines)

    @property
    def line(self) -> bytes:
        return self.lines[self.index] if not self.eof else b""

    @property
    def line_number(self) -> int:
        return min(self.index, len(self.lines) - 1) + 1

    @property
    def offset(self) -> int:
        return self.offsets[min(self.index, len(self.offsets) - 1)]

    def warn(self, diagnostic: Diagnostic) -> None:
        self.diagnostics.append(diagnostic)
        log_diagnostic(logger, diagnostic)

    def fail(self, diagnostic: Diagnostic) -> CatalogSyntaxError:
        return CatalogSyntaxError(
            diagnostic,
            source_path=self.source_path,
            line=self.line_number,
            line_text=self.line.decode("utf-8", errors="replace"),
        )

    # ------------------------------------------------------------------
    # Entries
    # ------------------------------------------------------------------

    def run(self) -> None:
        fuzzy = False
        while not self.eof:
            line = self.line
            if not line.strip():
                self.index += 1
            elif line.startswith(b"#"):
                if line.startswith(b"#,") and b"fuzzy" in line:
                    fuzzy = True
                self.index += 1
            elif line.startswith((b"msgctxt", b"msgid")):
                self.read_entry(fuzzy)
                fuzzy = False
            else:
                raise self.fail(
                    ErrorTemplate.unexpected_line(line, self.line_number, self.path, self.offset)
                )

        if not self.seen_header:
            self.warn(ErrorTemplate.missing_charset(self.path))

    def read_entry(self, fuzzy: bool) -> None:
        context: bytes | None = None
        if self.line.startswith(b"msgctxt"):
            context = self.read_string(b"msgctxt")

        if not self.line.startswith(b"msgid") or self.line.startswith(b"msgid_plural"):
            raise self.fail(
                ErrorTemplate.unexpected_line(self.line, self.line_number, self.path, self.offset)
            )
        entry_line = self.line_number
        message_id = self.read_string(b"msgid")

        message_id_plural: bytes | None = None
        if self.line.startswith(b"msgid_plural"):
            message_id_plural = self.read_string(b"msgid_plural")

        if message_id_plural is None:
            variants = (self.read_singular_msgstr(),)
        else:
            variants = self.read_plural_msgstrs()

        if not message_id and context is None:
            self.take_header(variants[0], entry_line)
            return

        self.commit(
            RawEntry(
                message_id=message_id,
                variants=variants,
                message_id_plural=message_id_plural,
                context=context,
                fuzzy=fuzzy,
                line=entry_line,
            )
        )

    def read_singular_msgstr(self) -> bytes:
        line = self.line
        if _MSGSTR_INDEX.match(line):
            raise self.fail(
                ErrorTemplate.unexpected_line(line, self.line_number, self.path, self.offset)
            )
        if self.eof or not line.startswith(b"msgstr"):
            raise self.fail(ErrorTemplate.missing_msgstr(self.line_number, self.path, self.offset))
        return self.read_string(b"msgstr")

    def read_plural_msgstrs(self) -> tuple[bytes, ...]:
        variants: list[bytes] = []
        while True:
            line = self.line
            match = _MSGSTR_INDEX.match(line)
            if match is None:
                if variants:
                    return tuple(variants)
                if line.startswith(b"msgstr"):
                    raise self.fail(
                        ErrorTemplate.plural_msgstr_expected(
                            self.line_number, self.path, self.offset
                        )
                    )
                raise self.fail(
                    ErrorTemplate.missing_msgstr(self.line_number, self.path, self.offset)
                )
            number = int(match.group(1))
            if number != len(variants):
                raise self.fail(
                    ErrorTemplate.plural_index_out_of_sequence(
                        len(variants), number, self.line_number, self.path, self.offset
                    )
                )
            variants.append(self.read_string(match.group(0)))

    def take_header(self, text: bytes, line: int) -> None:
        if self.seen_header:
            logger.debug("Ignoring repeated header entry at line %d", line)
            return
        self.seen_header = True
        self.header = text

        fields = read_header_fields(text)
        charset = fields.charset
        if charset is None or charset.upper() == CHARSET_PLACEHOLDER:
            self.warn(ErrorTemplate.missing_charset(self.path))
            charset = DEFAULT_CHARSET
        elif charset.upper() == BIG5_CHARSET and not self.decoded_input:
            self.big5 = True
        self.charset = charset

        if fields.plural_spec is not None:
            self.plural_spec = fields.plural_spec
            self.plural_forms = lookup_plural_forms(fields.plural_spec)
            if not self.plural_forms:
                self.warn(ErrorTemplate.unknown_plural_spec(fields.plural_spec, self.path))

    def commit(self, entry: RawEntry) -> None:
        if entry.fuzzy and not self.use_fuzzy:
            logger.debug("Skipping fuzzy entry at line %d", entry.line)
            return
        if not any(entry.variants):
            logger.debug("Skipping untranslated entry at line %d", entry.line)
            return
        if entry.is_plural:
            if not self.plural_spec:
                self.warn(ErrorTemplate.missing_plural_spec(entry.line, self.path))
            elif self.plural_forms and len(entry.variants) != self.plural_forms.form_count:
                self.warn(
                    ErrorTemplate.plural_count_mismatch(
                        len(entry.variants), self.plural_forms.form_count, entry.line, self.path
                    )
                )
        self.entries.append(entry)

    # ------------------------------------------------------------------
    # Strings
    # ------------------------------------------------------------------

    def read_string(self, keyword: bytes) -> bytes:
        """Read a keyword's string plus continuation lines; advance past them."""
        name = keyword.decode("ascii")
        line = self.line
        start = len(keyword)

        if self.pedantic and not line.startswith(b' "', start):
            self.warn(ErrorTemplate.spacing(name, self.line_number, self.path, self.offset))
        while start < len(line) and line[start : start + 1].isspace():
            start += 1
        if start >= len(line) or line[start] != _QUOTE:
            raise self.fail(
                ErrorTemplate.expected_string(name, self.line_number, self.path, self.offset)
            )

        first_line = self.line_number
        segments = [self.scan_quoted(line, start, name)]
        self.index += 1

        while not self.eof:
            line = self.line
            stripped = line.lstrip()
            if not stripped.startswith(b'"'):
                break
            if self.pedantic and len(stripped) != len(line):
                self.warn(ErrorTemplate.leading_whitespace(self.line_number, self.path, self.offset))
            segments.append(self.scan_quoted(line, len(line) - len(stripped), name))
            self.index += 1

        return self.unescape(b"".join(segments), first_line)

    def scan_quoted(self, line: bytes, start: int, name: str) -> bytes:
        """Return the raw (still escaped) bytes between the quotes at start."""
        i = start + 1
        end = len(line)
        while i < end:
            byte = line[i]
            if self.big5 and byte in BIG5_LEAD_BYTES:
                if i + 1 >= end:
                    break
                i += 2
            elif byte == _BACKSLASH:
                if i + 1 >= end:
                    break
                i += 2
            elif byte == _QUOTE:
                if line[i + 1 :].strip():
                    self.warn(ErrorTemplate.trailing_garbage(self.line_number, self.path, self.offset))
                return line[start + 1 : i]
            else:
                i += 1
        raise self.fail(
            ErrorTemplate.unterminated_string(name, self.line_number, self.path, self.offset)
        )

    def unescape(self, raw: bytes, line: int) -> bytes:
        if _BACKSLASH not in raw:
            return raw
        out = bytearray()
        i = 0
        end = len(raw)
        while i < end:
            byte = raw[i]
            if self.big5 and byte in BIG5_LEAD_BYTES and i + 1 < end:
                out += raw[i : i + 2]
                i += 2
            elif byte == _BACKSLASH and i + 1 < end:
                follower = raw[i + 1]
                replacement = _ESCAPES.get(follower)
                if replacement is None:
                    self.warn(
                        ErrorTemplate.unhandled_escape(
                            chr(follower), line, self.path, self.offsets[line - 1]
                        )
                    )
                    out += raw[i : i + 2]
                else:
                    out += replacement
                i += 2
            else:
                out.append(byte)
                i += 1
        return bytes(out)


def parse_po(
    source: bytes | str,
    *,
    source_path: str = "",
    use_fuzzy: bool = True,
    pedantic: bool = True,
    max_source_size: int | None = None,
) -> ParsedCatalog:
    """Parse a text catalog with the given options.

    Convenience wrapper around ``TextCatalogParser(...).parse()``.

    Raises:
        CatalogSyntaxError: On the first structural error
    """
    parser = TextCatalogParser(
        use_fuzzy=use_fuzzy, pedantic=pedantic, max_source_size=max_source_size
    )
    return parser.parse(source, source_path=source_path)
