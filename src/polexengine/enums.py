"""Enumerations for polexengine type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

from enum import StrEnum


class CatalogFormat(StrEnum):
    """On-disk catalog representation.

    StrEnum provides automatic string conversion: str(CatalogFormat.PO) == "po"
    """

    PO = "po"
    """Editable text catalog: msgid "..." / msgstr "..." """

    MO = "mo"
    """Compiled binary catalog with a 28-byte header"""

    @classmethod
    def from_filename(cls, filename: str) -> "CatalogFormat | None":
        """Detect the catalog format from a file suffix (case-insensitive)."""
        lowered = filename.lower()
        if lowered.endswith(".po"):
            return cls.PO
        if lowered.endswith(".mo"):
            return cls.MO
        return None


class LoadStatus(StrEnum):
    """Status of a catalog load operation.

    StrEnum provides automatic string conversion: str(LoadStatus.SUCCESS) == "success"
    """

    SUCCESS = "success"
    """Catalog parsed and merged into a dictionary"""

    NOT_FOUND = "not_found"
    """No catalog file matched the requested language"""

    ERROR = "error"
    """Catalog could not be read or was rejected by the parser"""


__all__ = [
    "CatalogFormat",
    "LoadStatus",
]
