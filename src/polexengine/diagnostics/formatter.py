"""Diagnostic formatting service.

Centralizes diagnostic output formatting with configurable options.
Python 3.13+. Zero external dependencies.
"""

import json
import logging
from collections.abc import Iterable
from dataclasses import dataclass
from enum import StrEnum

from .codes import Diagnostic

__all__ = [
    "DiagnosticFormatter",
    "OutputFormat",
    "log_diagnostic",
]

_CONTROL_ESCAPES = str.maketrans({"\n": "\\n", "\r": "\\r", "\t": "\\t", "\x00": "\\0"})
_SEVERITY_COLORS = {"error": "\033[1;31m", "warning": "\033[1;33m"}


class OutputFormat(StrEnum):
    """Output format options for diagnostic formatting."""

    RUST = "rust"  # Rust compiler-style output (default)
    SIMPLE = "simple"  # Single-line format
    JSON = "json"  # JSON format for tooling integration


@dataclass(frozen=True, slots=True)
class DiagnosticFormatter:
    """Diagnostic formatting service.

    Centralizes formatting of Diagnostic objects into human-readable
    or machine-readable output. Catalog text quoted in messages is escaped
    so embedded newlines cannot forge extra log lines.

    Attributes:
        output_format: Output style (rust, simple, json)
        sanitize: Truncate content to prevent information leakage
        color: Enable ANSI color codes (for terminal output)
        max_content_length: Maximum content length when sanitizing

    Example:
        >>> formatter = DiagnosticFormatter()
        >>> diagnostic = ErrorTemplate.unterminated_string("msgid", 4, "app.po")
        >>> print(formatter.format(diagnostic))
        error[UNTERMINATED_STRING]: Unterminated string after msgid
          --> app.po:4
          = help: Close the string with a double quote

        >>> formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)
        >>> print(formatter.format(diagnostic))
        UNTERMINATED_STRING: Unterminated string after msgid
    """

    output_format: OutputFormat = OutputFormat.RUST
    sanitize: bool = False
    color: bool = False
    max_content_length: int = 100

    def format(self, diagnostic: Diagnostic) -> str:
        """Render one parser, dictionary or conversion diagnostic in the configured style."""
        match self.output_format:
            case OutputFormat.RUST:
                return self._format_rust(diagnostic)
            case OutputFormat.SIMPLE:
                return self._format_simple(diagnostic)
            case OutputFormat.JSON:
                return self._format_json(diagnostic)

    def format_all(self, diagnostics: Iterable[Diagnostic]) -> str:
        """Format multiple diagnostics separated by blank lines."""
        return "\n\n".join(self.format(d) for d in diagnostics)

    def location(self, diagnostic: Diagnostic) -> str | None:
        """Render "path:line", "line N, offset M" or the bare path; None if unknown."""
        path = diagnostic.source_path
        span = diagnostic.span
        if span is not None and path:
            return f"{path}:{span.line}"
        if span is not None:
            return f"line {span.line}, offset {span.start}"
        return path or None

    def _format_rust(self, diagnostic: Diagnostic) -> str:
        """Render a header line, the catalog location and the hint.

        Example output:
            warning[COLLISION]: Duplicate message id 'Open'
              --> app.mo
              = help: Remove one of the conflicting entries
        """
        severity = diagnostic.severity if diagnostic.severity == "warning" else "error"
        label = f"{_SEVERITY_COLORS[severity]}{severity}\033[0m" if self.color else severity

        message = self._clean(diagnostic.message)
        parts = [f"{label}[{diagnostic.code.name}]: {message}"]

        location = self.location(diagnostic)
        if location:
            parts.append(f"  --> {location}")

        if diagnostic.hint:
            parts.append(f"  = help: {self._clean(diagnostic.hint)}")

        return "\n".join(parts)

    def _format_simple(self, diagnostic: Diagnostic) -> str:
        """Render CODE: message on one line.

        Example output:
            MISSING_CHARSET: Catalog declares no charset, assuming UTF-8
        """
        return f"{diagnostic.code.name}: {self._clean(diagnostic.message)}"

    def _format_json(self, diagnostic: Diagnostic) -> str:
        """Render a JSON object with the code, category, span and catalog path.

        Example output:
            {"code": "BAD_MAGIC", "message": "...", "severity": "error"}
        """
        data: dict[str, str | int | None] = {
            "code": diagnostic.code.name,
            "code_value": diagnostic.code.value,
            "category": str(diagnostic.code.category),
            "message": self._maybe_sanitize(diagnostic.message),
            "severity": diagnostic.severity,
        }

        if diagnostic.span:
            data["line"] = diagnostic.span.line
            data["column"] = diagnostic.span.column
            data["start"] = diagnostic.span.start
            data["end"] = diagnostic.span.end

        if diagnostic.source_path:
            data["source_path"] = diagnostic.source_path

        if diagnostic.hint:
            data["hint"] = self._maybe_sanitize(diagnostic.hint)

        return json.dumps(data, ensure_ascii=False)

    def _clean(self, text: str) -> str:
        return self._maybe_sanitize(text).translate(_CONTROL_ESCAPES)

    def _maybe_sanitize(self, text: str) -> str:
        """Cut quoted catalog text to max_content_length when sanitize is set."""
        if self.sanitize and len(text) > self.max_content_length:
            return text[: self.max_content_length] + "..."
        return text


_LOG_FORMATTER = DiagnosticFormatter(output_format=OutputFormat.SIMPLE, sanitize=True, max_content_length=200)


def log_diagnostic(logger: logging.Logger, diagnostic: Diagnostic, level: int | None = None) -> None:
    """Emit a diagnostic as one log line.

    Warnings log at WARNING and errors at ERROR unless ``level`` overrides.
    The catalog name and line, when known, prefix the message.
    """
    if level is None:
        level = logging.WARNING if diagnostic.is_warning else logging.ERROR
    location = _LOG_FORMATTER.location(diagnostic)
    text = _LOG_FORMATTER.format(diagnostic)
    if location:
        logger.log(level, "%s: %s", location, text)
    else:
        logger.log(level, "%s", text)
