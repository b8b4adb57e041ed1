"""Diagnostic system for catalog errors.

Provides structured error diagnostics with codes, spans and hints.
Inspired by Rust compiler diagnostics.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, ErrorCategory, SourceSpan
from .errors import CatalogError, CatalogFormatError, CatalogSyntaxError
from .formatter import DiagnosticFormatter, OutputFormat, log_diagnostic
from .templates import ErrorTemplate

__all__ = [
    "CatalogError",
    "CatalogFormatError",
    "CatalogSyntaxError",
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "ErrorCategory",
    "ErrorTemplate",
    "OutputFormat",
    "SourceSpan",
    "log_diagnostic",
]
