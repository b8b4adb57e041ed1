"""Catalog orchestration: storage, per-locale managers and text domains.

Python 3.13+.
"""

from .domains import DEFAULT_DOMAIN, TextDomains
from .loading import CatalogLoadResult, CatalogStorage, DirectoryCatalogStorage, LoadSummary
from .orchestrator import CatalogManager, filename_to_language

__all__ = [
    "DEFAULT_DOMAIN",
    "CatalogLoadResult",
    "CatalogManager",
    "CatalogStorage",
    "DirectoryCatalogStorage",
    "LoadSummary",
    "TextDomains",
    "filename_to_language",
]
