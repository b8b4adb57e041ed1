"""Runtime translation store.

Exports:
    Dictionary: Translations for one locale and domain
    CatalogLoadReport: Outcome of Dictionary.add_catalog()

Python 3.13+.
"""

from .dictionary import CatalogLoadReport, Dictionary, detect_catalog_format

__all__ = ["CatalogLoadReport", "Dictionary", "detect_catalog_format"]
