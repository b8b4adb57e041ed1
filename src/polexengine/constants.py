"""Shared constants for polexengine.

This module provides centralized configuration constants used across
syntax and runtime packages. Placing constants here avoids circular
imports and provides a single source of truth.

Constants are grouped by domain:
- Binary catalog layout: magic numbers, header and descriptor sizes
- Catalog metadata: header markers, separators, charset defaults
- Input limits: DoS prevention via size constraints

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Binary catalog layout
    "MO_MAGIC",
    "MO_MAGIC_SWAPPED",
    "MO_HEADER_SIZE",
    "MO_DESCRIPTOR_SIZE",
    "MO_SUPPORTED_MAJOR_REVISIONS",
    # Catalog metadata
    "CONTEXT_SEPARATOR",
    "PLURAL_SEPARATOR",
    "CHARSET_MARKER",
    "PLURAL_FORMS_MARKER",
    "CHARSET_PLACEHOLDER",
    "DEFAULT_CHARSET",
    "BIG5_CHARSET",
    "BIG5_LEAD_BYTES",
    "UTF8_BOM",
    # Input limits
    "MAX_SOURCE_SIZE",
    "MAX_LOG_FRAGMENT_LENGTH",
    # Catalog files
    "CATALOG_SUFFIXES",
]

# ============================================================================
# BINARY CATALOG LAYOUT
# ============================================================================

# Magic number as written by a little-endian compiler.
MO_MAGIC: int = 0x950412DE

# Same magic read with the opposite byte order.
MO_MAGIC_SWAPPED: int = 0xDE120495

# Seven 32-bit words: magic, revision, count, originals, translations,
# hash size, hash offset.
MO_HEADER_SIZE: int = 28

# (length, offset) pair of 32-bit words.
MO_DESCRIPTOR_SIZE: int = 8

# Major revision lives in the upper 16 bits of the revision word.
MO_SUPPORTED_MAJOR_REVISIONS: frozenset[int] = frozenset({0, 1})

# ============================================================================
# CATALOG METADATA
# ============================================================================

# Separates msgctxt from msgid inside a compiled original string.
CONTEXT_SEPARATOR: bytes = b"\x04"

# Separates msgid/msgid_plural and plural translations.
PLURAL_SEPARATOR: bytes = b"\x00"

CHARSET_MARKER: bytes = b"Content-Type: text/plain; charset="
PLURAL_FORMS_MARKER: bytes = b"nplurals="

# Literal left in the header by catalog templates that were never filled in.
CHARSET_PLACEHOLDER: str = "CHARSET"

DEFAULT_CHARSET: str = "UTF-8"

# Double-byte charset whose trail bytes may look like quotes or backslashes.
BIG5_CHARSET: str = "BIG5"
BIG5_LEAD_BYTES: range = range(0x81, 0xFF)

UTF8_BOM: bytes = b"\xef\xbb\xbf"

# ============================================================================
# INPUT LIMITS
# ============================================================================

# Default maximum catalog size in bytes (10 MB).
# Prevents DoS attacks via unbounded memory allocation from large catalogs.
MAX_SOURCE_SIZE: int = 10 * 1024 * 1024

# Message ids and catalog fragments are truncated to this length in logs.
MAX_LOG_FRAGMENT_LENGTH: int = 50

# ============================================================================
# CATALOG FILES
# ============================================================================

# Recognized catalog file suffixes, lower-case.
CATALOG_SUFFIXES: tuple[str, ...] = (".po", ".mo")
