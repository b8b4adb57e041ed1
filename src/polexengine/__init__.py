"""polexengine - GNU gettext-compatible message catalog engine.

Reads compiled (.mo) and editable (.po) catalogs, resolves plural rules and
locale names, and serves translations through dictionaries and
gettext-style text domains.

Public API:
    Dictionary - Translations for one locale and domain
    CatalogManager - Locate, load and cache dictionaries per locale
    TextDomains - gettext/ngettext/pgettext lookups over bound domains
    LocaleTag - Language identification with scored matching
    parse_mo - Parse a compiled catalog
    parse_po - Parse a text catalog
    serialize_catalog - Render entries as text catalog source

Exceptions:
    CatalogError - Base exception class
    CatalogSyntaxError - Malformed text catalog
    CatalogFormatError - Rejected compiled catalog

Submodules:
    polexengine.syntax - Byte cursor, parsers and serializer
    polexengine.core - Plural-Forms rule table
    polexengine.diagnostics - Diagnostic codes, templates and formatting
    polexengine.localization - Catalog storage, managers and text domains
    polexengine.transcoding - Charset conversion
"""

# Essential Public API - Minimal exports for clean namespace
from .diagnostics import CatalogError, CatalogFormatError, CatalogSyntaxError
from .language import LocaleTag
from .localization import CatalogManager, TextDomains
from .runtime import Dictionary
from .syntax import parse_mo, parse_po, serialize_catalog

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("polexengine")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "CatalogError",
    "CatalogFormatError",
    "CatalogManager",
    "CatalogSyntaxError",
    "Dictionary",
    "LocaleTag",
    "TextDomains",
    "__version__",
    "parse_mo",
    "parse_po",
    "serialize_catalog",
]
