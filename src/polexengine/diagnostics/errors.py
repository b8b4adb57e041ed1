"""Catalog exception hierarchy with structured diagnostics.

All exceptions can store Diagnostic objects for rich error information.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic

__all__ = [
    "CatalogError",
    "CatalogFormatError",
    "CatalogSyntaxError",
]


class CatalogError(Exception):
    """Base exception for all catalog errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize CatalogError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class CatalogFormatError(CatalogError):
    """Binary catalog rejected as a whole (bad magic, truncated header).

    The binary parser reports rejection as a failed result; this exception
    is raised only when a caller asks for it via ``raise_for_status()``.
    """


class CatalogSyntaxError(CatalogError):
    """Malformed text catalog.

    The text parser does not recover: the first structural error aborts the
    whole parse, since a broken line desynchronizes everything after it.

    Attributes:
        source_path: Catalog file name ("" when parsed from memory)
        line: 1-based physical line of the error
        line_text: Offending line, decoded leniently for display
    """

    def __init__(
        self,
        message: str | Diagnostic,
        *,
        source_path: str = "",
        line: int = 0,
        line_text: str = "",
    ) -> None:
        """Initialize CatalogSyntaxError.

        Args:
            message: Error message string OR Diagnostic object
            source_path: Catalog file name
            line: 1-based line number
            line_text: Offending line
        """
        super().__init__(message)
        self.source_path = source_path
        self.line = line
        self.line_text = line_text
