"""Core utilities shared across syntax and runtime layers.

Both the catalog parsers (syntax) and the dictionary (runtime) resolve
Plural-Forms headers, so the rule table lives here to keep a clean
dependency graph:

    core <- syntax <- runtime

Exports:
    PluralForms: Form count plus selector
    lookup_plural_forms: Resolve a Plural-Forms header value
    normalize_plural_spec: Canonical spelling used for table lookup

Python 3.13+.
"""

from .plural_forms import (
    NO_PLURAL_FORMS,
    PluralForms,
    PluralSelector,
    known_plural_specs,
    lookup_plural_forms,
    normalize_plural_spec,
    plural_forms_for_locale,
)

__all__ = [
    "NO_PLURAL_FORMS",
    "PluralForms",
    "PluralSelector",
    "known_plural_specs",
    "lookup_plural_forms",
    "normalize_plural_spec",
    "plural_forms_for_locale",
]
