"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from polexengine.constants import DEFAULT_CHARSET, MAX_LOG_FRAGMENT_LENGTH

from .codes import Diagnostic, DiagnosticCode, SourceSpan

__all__ = ["ErrorTemplate", "fragment"]


def fragment(text: str | bytes, limit: int = MAX_LOG_FRAGMENT_LENGTH) -> str:
    """Render catalog text for messages and logs.

    Goes through repr() so control characters stay escaped, then truncates.
    """
    rendered = repr(text)
    if len(rendered) > limit:
        return rendered[:limit] + "..."
    return rendered


def _line_span(line: int, offset: int = 0) -> SourceSpan:
    return SourceSpan(start=offset, end=offset, line=line)


class ErrorTemplate:
    """Centralized error message templates.

    All diagnostics are created here. NO f-strings in exception constructors!
    This keeps messages:
        - Testable
        - Consistently formatted
        - Documented in one place per error case
    """

    # ------------------------------------------------------------------
    # Format errors
    # ------------------------------------------------------------------

    @staticmethod
    def bad_magic(magic: int, source_path: str | None = None) -> Diagnostic:
        """Binary catalog does not start with either magic number.

        Args:
            magic: The 32-bit value found at offset 0
            source_path: Catalog file name

        Returns:
            Diagnostic for BAD_MAGIC
        """
        msg = f"Not a compiled catalog: bad magic number 0x{magic:08x}"
        return Diagnostic(
            code=DiagnosticCode.BAD_MAGIC,
            message=msg,
            span=SourceSpan(start=0, end=4, line=1),
            hint="Compile the catalog with msgfmt or load it as a text catalog",
            source_path=source_path,
        )

    @staticmethod
    def truncated_header(size: int, source_path: str | None = None) -> Diagnostic:
        """Buffer too short to hold the fixed binary header.

        Args:
            size: Actual buffer size in bytes
            source_path: Catalog file name

        Returns:
            Diagnostic for TRUNCATED_HEADER
        """
        msg = f"Compiled catalog truncated: {size} bytes, header needs 28"
        return Diagnostic(
            code=DiagnosticCode.TRUNCATED_HEADER,
            message=msg,
            span=SourceSpan(start=0, end=size, line=1),
            source_path=source_path,
        )

    @staticmethod
    def unsupported_revision(revision: int, source_path: str | None = None) -> Diagnostic:
        """Binary catalog major revision not understood.

        Args:
            revision: Full 32-bit revision word
            source_path: Catalog file name

        Returns:
            Diagnostic for UNSUPPORTED_REVISION
        """
        msg = f"Unsupported compiled catalog revision {revision >> 16}.{revision & 0xFFFF}"
        return Diagnostic(
            code=DiagnosticCode.UNSUPPORTED_REVISION,
            message=msg,
            span=SourceSpan(start=4, end=8, line=1),
            source_path=source_path,
        )

    @staticmethod
    def source_too_large(size: int, limit: int, source_path: str | None = None) -> Diagnostic:
        """Catalog exceeds the configured size limit.

        Args:
            size: Catalog size in bytes
            limit: Configured maximum
            source_path: Catalog file name

        Returns:
            Diagnostic for SOURCE_TOO_LARGE
        """
        msg = f"Catalog is {size} bytes, limit is {limit}"
        return Diagnostic(
            code=DiagnosticCode.SOURCE_TOO_LARGE,
            message=msg,
            span=_line_span(1),
            hint="Raise max_source_size if the catalog is trusted",
            source_path=source_path,
        )

    # ------------------------------------------------------------------
    # Structural errors
    # ------------------------------------------------------------------

    @staticmethod
    def unterminated_string(
        keyword: str, line: int, source_path: str | None = None, offset: int = 0
    ) -> Diagnostic:
        """Quoted string without its closing quote.

        Args:
            keyword: Keyword the string belongs to (msgid, msgstr, ...)
            line: 1-based line number
            source_path: Catalog file name
            offset: Byte offset of the line

        Returns:
            Diagnostic for UNTERMINATED_STRING
        """
        msg = f"Unterminated string after {keyword}"
        return Diagnostic(
            code=DiagnosticCode.UNTERMINATED_STRING,
            message=msg,
            span=_line_span(line, offset),
            hint="Close the string with a double quote",
            source_path=source_path,
        )

    @staticmethod
    def expected_string(
        keyword: str, line: int, source_path: str | None = None, offset: int = 0
    ) -> Diagnostic:
        """Keyword not followed by a quoted string.

        Args:
            keyword: Keyword missing its string
            line: 1-based line number
            source_path: Catalog file name
            offset: Byte offset of the line

        Returns:
            Diagnostic for UNTERMINATED_STRING
        """
        msg = f"Expected a quoted string after {keyword}"
        return Diagnostic(
            code=DiagnosticCode.UNTERMINATED_STRING,
            message=msg,
            span=_line_span(line, offset),
            source_path=source_path,
        )

    @staticmethod
    def missing_msgstr(line: int, source_path: str | None = None, offset: int = 0) -> Diagnostic:
        """msgid not followed by a msgstr.

        Args:
            line: 1-based line where msgstr was expected
            source_path: Catalog file name
            offset: Byte offset of the line

        Returns:
            Diagnostic for MISSING_MSGSTR
        """
        return Diagnostic(
            code=DiagnosticCode.MISSING_MSGSTR,
            message="Expected msgstr after msgid",
            span=_line_span(line, offset),
            hint="Every msgid needs a msgstr (or msgstr[0] for plural entries)",
            source_path=source_path,
        )

    @staticmethod
    def plural_msgstr_expected(
        line: int, source_path: str | None = None, offset: int = 0
    ) -> Diagnostic:
        """Plain msgstr used after msgid_plural.

        Args:
            line: 1-based line number
            source_path: Catalog file name
            offset: Byte offset of the line

        Returns:
            Diagnostic for MISSING_MSGSTR
        """
        return Diagnostic(
            code=DiagnosticCode.MISSING_MSGSTR,
            message="Expected msgstr[0] after msgid_plural",
            span=_line_span(line, offset),
            source_path=source_path,
        )

    @staticmethod
    def plural_index_out_of_sequence(
        expected: int,
        found: int,
        line: int,
        source_path: str | None = None,
        offset: int = 0,
    ) -> Diagnostic:
        """msgstr[n] index does not continue the sequence.

        Args:
            expected: Index that should have come next
            found: Index actually read
            line: 1-based line number
            source_path: Catalog file name
            offset: Byte offset of the line

        Returns:
            Diagnostic for PLURAL_INDEX_OUT_OF_SEQUENCE
        """
        msg = f"msgstr[{found}] out of sequence, expected msgstr[{expected}]"
        return Diagnostic(
            code=DiagnosticCode.PLURAL_INDEX_OUT_OF_SEQUENCE,
            message=msg,
            span=_line_span(line, offset),
            source_path=source_path,
        )

    @staticmethod
    def unexpected_line(
        text: str | bytes, line: int, source_path: str | None = None, offset: int = 0
    ) -> Diagnostic:
        """Line that starts with no known keyword.

        Args:
            text: The offending line
            line: 1-based line number
            source_path: Catalog file name
            offset: Byte offset of the line

        Returns:
            Diagnostic for UNEXPECTED_LINE
        """
        msg = f"Unexpected line {fragment(text)}"
        return Diagnostic(
            code=DiagnosticCode.UNEXPECTED_LINE,
            message=msg,
            span=_line_span(line, offset),
            hint="Expected msgctxt, msgid, msgid_plural, msgstr or a comment",
            source_path=source_path,
        )

    @staticmethod
    def entry_out_of_bounds(index: int, source_path: str | None = None) -> Diagnostic:
        """Binary catalog descriptor points outside the buffer.

        Args:
            index: Zero-based entry index
            source_path: Catalog file name

        Returns:
            Diagnostic for ENTRY_OUT_OF_BOUNDS (warning, entry skipped)
        """
        msg = f"Entry {index} points outside the catalog, skipped"
        return Diagnostic(
            code=DiagnosticCode.ENTRY_OUT_OF_BOUNDS,
            message=msg,
            source_path=source_path,
            severity="warning",
        )

    @staticmethod
    def table_truncated(declared: int, available: int, source_path: str | None = None) -> Diagnostic:
        """Binary catalog declares more entries than its descriptor tables hold.

        Args:
            declared: Entry count from the header
            available: Descriptors that fit in both tables
            source_path: Catalog file name

        Returns:
            Diagnostic for TABLE_TRUNCATED (warning, extra entries ignored)
        """
        msg = f"Header declares {declared} entries but only {available} fit in the catalog"
        return Diagnostic(
            code=DiagnosticCode.TABLE_TRUNCATED,
            message=msg,
            hint="The catalog is truncated or corrupt; recompile it with msgfmt",
            source_path=source_path,
            severity="warning",
        )

    @staticmethod
    def trailing_garbage(line: int, source_path: str | None = None, offset: int = 0) -> Diagnostic:
        """Non-blank text after a closing quote.

        Args:
            line: 1-based line number
            source_path: Catalog file name
            offset: Byte offset of the line

        Returns:
            Diagnostic for TRAILING_GARBAGE (warning)
        """
        return Diagnostic(
            code=DiagnosticCode.TRAILING_GARBAGE,
            message="Unexpected text after closing quote, ignored",
            span=_line_span(line, offset),
            source_path=source_path,
            severity="warning",
        )

    @staticmethod
    def unhandled_escape(
        char: str, line: int, source_path: str | None = None, offset: int = 0
    ) -> Diagnostic:
        """Unknown backslash escape, kept literally.

        Args:
            char: Character following the backslash
            line: 1-based line number
            source_path: Catalog file name
            offset: Byte offset of the line

        Returns:
            Diagnostic for UNHANDLED_ESCAPE (warning)
        """
        msg = f"Unhandled escape sequence \\{char}, kept as-is"
        return Diagnostic(
            code=DiagnosticCode.UNHANDLED_ESCAPE,
            message=msg,
            span=_line_span(line, offset),
            source_path=source_path,
            severity="warning",
        )

    @staticmethod
    def spacing(keyword: str, line: int, source_path: str | None = None, offset: int = 0) -> Diagnostic:
        """Keyword and string not separated by exactly one space.

        Args:
            keyword: The keyword
            line: 1-based line number
            source_path: Catalog file name
            offset: Byte offset of the line

        Returns:
            Diagnostic for SPACING (warning, pedantic mode only)
        """
        msg = f"Expected exactly one space after {keyword}"
        return Diagnostic(
            code=DiagnosticCode.SPACING,
            message=msg,
            span=_line_span(line, offset),
            source_path=source_path,
            severity="warning",
        )

    @staticmethod
    def leading_whitespace(line: int, source_path: str | None = None, offset: int = 0) -> Diagnostic:
        """Continuation string indented instead of starting at column 1.

        Args:
            line: 1-based line number
            source_path: Catalog file name
            offset: Byte offset of the line

        Returns:
            Diagnostic for SPACING (warning, pedantic mode only)
        """
        return Diagnostic(
            code=DiagnosticCode.SPACING,
            message="Leading whitespace before continuation string",
            span=_line_span(line, offset),
            source_path=source_path,
            severity="warning",
        )

    # ------------------------------------------------------------------
    # Dictionary warnings
    # ------------------------------------------------------------------

    @staticmethod
    def collision(message_id: str, context: str | None = None) -> Diagnostic:
        """Insert with a key that already holds a different value.

        Args:
            message_id: Conflicting message id
            context: Message context, None for the flat index

        Returns:
            Diagnostic for COLLISION (warning)
        """
        if context is None:
            msg = f"Duplicate message id {fragment(message_id)}"
        else:
            msg = f"Duplicate message id {fragment(message_id)} in context {fragment(context)}"
        return Diagnostic(
            code=DiagnosticCode.COLLISION,
            message=msg,
            hint="Remove one of the conflicting entries",
            severity="warning",
        )

    @staticmethod
    def plural_index_out_of_range(message_id: str, index: int, count: int) -> Diagnostic:
        """Selector chose a variant the entry does not have.

        Args:
            message_id: Looked-up message id
            index: Variant index chosen by the selector
            count: Number of stored variants

        Returns:
            Diagnostic for PLURAL_INDEX_OUT_OF_RANGE
        """
        msg = (
            f"Plural form {index} requested for {fragment(message_id)}, "
            f"but only {count} variant(s) stored"
        )
        return Diagnostic(
            code=DiagnosticCode.PLURAL_INDEX_OUT_OF_RANGE,
            message=msg,
            hint="Check that the catalog's Plural-Forms matches its msgstr[n] entries",
        )

    @staticmethod
    def plural_forms_mismatch(existing: str, incoming: str) -> Diagnostic:
        """Second catalog declares a different plural rule.

        Args:
            existing: Rule already configured on the dictionary
            incoming: Rule declared by the newly loaded catalog

        Returns:
            Diagnostic for PLURAL_FORMS_MISMATCH (warning)
        """
        msg = f"Plural forms mismatch: keeping {existing!r}, ignoring {incoming!r}"
        return Diagnostic(
            code=DiagnosticCode.PLURAL_FORMS_MISMATCH,
            message=msg,
            severity="warning",
        )

    # ------------------------------------------------------------------
    # Metadata warnings
    # ------------------------------------------------------------------

    @staticmethod
    def unknown_plural_spec(spec: str, source_path: str | None = None) -> Diagnostic:
        """Plural-Forms spelling not in the rule table.

        Args:
            spec: Normalized Plural-Forms value
            source_path: Catalog file name

        Returns:
            Diagnostic for UNKNOWN_PLURAL_SPEC (warning)
        """
        msg = f"Unknown Plural-Forms {fragment(spec, 120)}, plural lookups use n != 1"
        return Diagnostic(
            code=DiagnosticCode.UNKNOWN_PLURAL_SPEC,
            message=msg,
            hint="Use one of the Plural-Forms spellings generated by msginit",
            source_path=source_path,
            severity="warning",
        )

    @staticmethod
    def missing_charset(source_path: str | None = None) -> Diagnostic:
        """No charset or the CHARSET placeholder in the header.

        Args:
            source_path: Catalog file name

        Returns:
            Diagnostic for MISSING_CHARSET (warning)
        """
        msg = f"Catalog declares no charset, assuming {DEFAULT_CHARSET}"
        return Diagnostic(
            code=DiagnosticCode.MISSING_CHARSET,
            message=msg,
            hint="Set 'Content-Type: text/plain; charset=UTF-8' in the header",
            source_path=source_path,
            severity="warning",
        )

    @staticmethod
    def missing_plural_spec(line: int, source_path: str | None = None) -> Diagnostic:
        """Plural entry in a catalog without a Plural-Forms header.

        Args:
            line: 1-based line of the plural entry
            source_path: Catalog file name

        Returns:
            Diagnostic for MISSING_PLURAL_SPEC (warning)
        """
        return Diagnostic(
            code=DiagnosticCode.MISSING_PLURAL_SPEC,
            message="Plural entry found but the header declares no Plural-Forms",
            span=_line_span(line),
            source_path=source_path,
            severity="warning",
        )

    @staticmethod
    def plural_count_mismatch(
        found: int, expected: int, line: int, source_path: str | None = None
    ) -> Diagnostic:
        """Number of msgstr[n] differs from nplurals.

        Args:
            found: Forms present in the entry
            expected: Forms declared by Plural-Forms
            line: 1-based line of the entry
            source_path: Catalog file name

        Returns:
            Diagnostic for PLURAL_COUNT_MISMATCH (warning)
        """
        msg = f"Entry has {found} plural form(s), Plural-Forms declares {expected}"
        return Diagnostic(
            code=DiagnosticCode.PLURAL_COUNT_MISMATCH,
            message=msg,
            span=_line_span(line),
            source_path=source_path,
            severity="warning",
        )

    # ------------------------------------------------------------------
    # Conversion warnings
    # ------------------------------------------------------------------

    @staticmethod
    def conversion_unavailable(from_charset: str, to_charset: str) -> Diagnostic:
        """No codec for one side of the conversion.

        Args:
            from_charset: Catalog charset
            to_charset: Dictionary charset

        Returns:
            Diagnostic for CONVERSION_UNAVAILABLE (warning)
        """
        msg = f"Cannot convert from {from_charset} to {to_charset}, text passed through"
        return Diagnostic(
            code=DiagnosticCode.CONVERSION_UNAVAILABLE,
            message=msg,
            severity="warning",
        )

    @staticmethod
    def conversion_failed(from_charset: str, to_charset: str, text: bytes) -> Diagnostic:
        """Bytes not valid in the source charset (or unrepresentable in the target).

        Args:
            from_charset: Catalog charset
            to_charset: Dictionary charset
            text: Offending bytes

        Returns:
            Diagnostic for CONVERSION_FAILED (warning)
        """
        msg = f"Failed to convert {fragment(text)} from {from_charset} to {to_charset}"
        return Diagnostic(
            code=DiagnosticCode.CONVERSION_FAILED,
            message=msg,
            severity="warning",
        )
