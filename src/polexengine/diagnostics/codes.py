"""Diagnostic codes and data structures.

Defines error codes, source spans, and diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum, StrEnum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "ErrorCategory",
    "SourceSpan",
]


class ErrorCategory(StrEnum):
    """Error categorization mirroring the catalog error kinds.

    Inherits from ``StrEnum`` so that ``str(category)`` and direct string
    comparisons work without accessing ``.value``.

    Categories:
        FORMAT: Catalog rejected before any entry was read
        STRUCTURE: Malformed line or field inside a catalog
        DICTIONARY: Insert or lookup anomaly inside a dictionary
        METADATA: Header charset or Plural-Forms problem
        CONVERSION: Charset transcoding problem
    """

    FORMAT = "format"
    STRUCTURE = "structure"
    DICTIONARY = "dictionary"
    METADATA = "metadata"
    CONVERSION = "conversion"


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Format errors (catalog rejected as a whole)
        2000-2999: Structural errors (malformed lines and fields)
        3000-3999: Dictionary warnings (collisions, plural index overflow)
        4000-4999: Metadata warnings (charset, Plural-Forms)
        5000-5999: Conversion warnings (transcoding)
    """

    # Format errors (1000-1999)
    BAD_MAGIC = 1001
    TRUNCATED_HEADER = 1002
    UNSUPPORTED_REVISION = 1003
    SOURCE_TOO_LARGE = 1004

    # Structural errors (2000-2999)
    UNTERMINATED_STRING = 2001
    MISSING_MSGSTR = 2002
    PLURAL_INDEX_OUT_OF_SEQUENCE = 2003
    UNEXPECTED_LINE = 2004
    ENTRY_OUT_OF_BOUNDS = 2005
    TRAILING_GARBAGE = 2006
    UNHANDLED_ESCAPE = 2007
    SPACING = 2008
    TABLE_TRUNCATED = 2009

    # Dictionary warnings (3000-3999)
    COLLISION = 3001
    PLURAL_INDEX_OUT_OF_RANGE = 3002
    PLURAL_FORMS_MISMATCH = 3003

    # Metadata warnings (4000-4999)
    UNKNOWN_PLURAL_SPEC = 4001
    MISSING_CHARSET = 4002
    MISSING_PLURAL_SPEC = 4003
    PLURAL_COUNT_MISMATCH = 4004

    # Conversion warnings (5000-5999)
    CONVERSION_UNAVAILABLE = 5001
    CONVERSION_FAILED = 5002

    @property
    def category(self) -> ErrorCategory:
        """Category derived from the code range."""
        match self.value // 1000:
            case 1:
                return ErrorCategory.FORMAT
            case 2:
                return ErrorCategory.STRUCTURE
            case 3:
                return ErrorCategory.DICTIONARY
            case 4:
                return ErrorCategory.METADATA
            case _:
                return ErrorCategory.CONVERSION


@dataclass(frozen=True, slots=True)
class SourceSpan:
    """Catalog location for error reporting.

    Binary catalogs report byte offsets with ``line`` fixed at 1; text
    catalogs report the physical line the problem was found on.

    Attributes:
        start: Starting byte offset (0-indexed)
        end: Ending byte offset (exclusive)
        line: Line number (1-indexed)
        column: Column number (1-indexed)
    """

    start: int
    end: int
    line: int
    column: int = 1

    def __post_init__(self) -> None:
        """Validate SourceSpan invariants.

        Raises:
            ValueError: If start is negative, end precedes start, line is
                less than 1 (lines are 1-indexed), or column is less than 1
                (columns are 1-indexed).
        """
        if self.start < 0:
            msg = f"SourceSpan.start must be >= 0, got {self.start}"
            raise ValueError(msg)
        if self.end < self.start:
            msg = f"SourceSpan.end ({self.end}) must be >= start ({self.start})"
            raise ValueError(msg)
        if self.line < 1:
            msg = f"SourceSpan.line must be >= 1 (1-indexed), got {self.line}"
            raise ValueError(msg)
        if self.column < 1:
            msg = f"SourceSpan.column must be >= 1 (1-indexed), got {self.column}"
            raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Inspired by Rust compiler diagnostics. Parsers collect these for every
    non-fatal condition they log; fatal conditions wrap one in an exception.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        span: Catalog location (None when not tied to a position)
        hint: Suggestion for fixing the error
        source_path: Catalog file name, when known
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    span: SourceSpan | None = None
    hint: str | None = None
    source_path: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    @property
    def is_warning(self) -> bool:
        """True for non-fatal diagnostics."""
        return self.severity == "warning"

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Delegates to DiagnosticFormatter for consistent output with
        control-character escaping (log injection prevention).

        Example output:
            error[UNTERMINATED_STRING]: Unterminated string
              --> messages.po:12
              = help: Close the string with a double quote

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
