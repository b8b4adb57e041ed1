"""Type aliases for the catalog domain.

Provides semantic type aliases used throughout the package and by user
code when annotating lookup call sites.

Python 3.13+. Zero external dependencies.
"""

__all__ = [
    "CatalogName",
    "CatalogSource",
    "CharsetName",
    "Context",
    "DomainName",
    "LocaleCode",
    "MessageId",
]

type MessageId = str
"""Canonical source string used as a lookup key (e.g., 'Open file')."""

type Context = str
"""Disambiguation tag from msgctxt (e.g., 'menu', 'success')."""

type CharsetName = str
"""Charset name as written in a catalog header (e.g., 'UTF-8', 'ISO-8859-1')."""

type LocaleCode = str
"""POSIX locale name (e.g., 'de', 'pt_BR', 'sr_RS@latin')."""

type CatalogName = str
"""Catalog file name inside a directory (e.g., 'de_DE.po')."""

type DomainName = str
"""Text domain grouping one package's messages (e.g., 'myapp')."""

type CatalogSource = bytes | str
"""Catalog contents: raw bytes, or already-decoded text for text catalogs."""
