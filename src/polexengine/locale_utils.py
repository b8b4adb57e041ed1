"""Locale utilities for BCP-47 to POSIX conversion and locale detection.

Centralizes locale-name normalization so catalog file names, environment
values and caller input all reach LocaleTag in one canonical form.

Python 3.13+.
"""

from __future__ import annotations

import functools
import os
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from babel import Locale

__all__ = [
    "LOCALE_ENV_VARS",
    "PSEUDO_LOCALES",
    "get_babel_locale",
    "get_system_locale",
    "normalize_locale",
    "split_locale",
]

LOCALE_ENV_VARS: tuple[str, ...] = ("LANGUAGE", "LC_ALL", "LC_MESSAGES", "LANG")
"""Environment variables consulted by get_system_locale(), in order."""

PSEUDO_LOCALES: frozenset[str] = frozenset({"C", "POSIX"})
"""Locale names meaning "no translation"."""


def normalize_locale(locale_code: str) -> str:
    """Convert a BCP-47 locale code to POSIX form.

    BCP-47 uses hyphens (pt-BR); catalogs and the language table use
    underscores (pt_BR). Surrounding whitespace is dropped.

    Args:
        locale_code: BCP-47 or POSIX locale code

    Returns:
        POSIX-formatted locale code

    Example:
        >>> normalize_locale("pt-BR")
        'pt_BR'
        >>> normalize_locale("sr_RS@latin")
        'sr_RS@latin'
    """
    return locale_code.strip().replace("-", "_")


def split_locale(locale_code: str) -> tuple[str, str, str, str]:
    """Split ``language[_COUNTRY][.codeset][@modifier]`` into its parts.

    Missing parts are returned as "". The separators may appear in any
    order; each part ends at the next separator.

    Example:
        >>> split_locale("de_AT.UTF-8@euro")
        ('de', 'AT', 'UTF-8', 'euro')
        >>> split_locale("sr@latin")
        ('sr', '', '', 'latin')
    """
    positions = {sep: locale_code.find(sep) for sep in "_.@"}
    found = sorted(pos for pos in positions.values() if pos >= 0)

    def part_after(sep: str) -> str:
        start = positions[sep]
        if start < 0:
            return ""
        ends = [pos for pos in found if pos > start]
        return locale_code[start + 1 : ends[0] if ends else None]

    language = locale_code[: found[0]] if found else locale_code
    return language, part_after("_"), part_after("."), part_after("@")


@functools.lru_cache(maxsize=128)
def get_babel_locale(locale_code: str) -> Locale:
    """Get a Babel Locale object with caching.

    Thread-safe via lru_cache internal locking.

    Args:
        locale_code: Locale code (BCP-47 or POSIX format accepted);
            codeset and modifier are ignored

    Returns:
        Babel Locale object

    Raises:
        babel.core.UnknownLocaleError: If locale is not recognized
        ValueError: If locale format is invalid

    Example:
        >>> get_babel_locale("pt-BR").territory
        'BR'
    """
    # Lazy import: Babel loads CLDR data at import time; defer until needed
    from babel import Locale  # noqa: PLC0415

    language, country, _, _ = split_locale(normalize_locale(locale_code))
    return Locale.parse(f"{language}_{country}" if country else language)


def get_system_locale(*, raise_on_failure: bool = False) -> str:
    """Detect the message locale from environment variables and the OS.

    Detection order follows gettext:
    1. LANGUAGE (colon-separated priority list, first entry used)
    2. LC_ALL (overrides all categories)
    3. LC_MESSAGES (message catalogs)
    4. LANG (default locale)
    5. Python locale.getlocale() (OS-level locale)

    The codeset suffix is removed; a ``@modifier`` is kept because it
    selects catalog variants (sr@latin).

    Args:
        raise_on_failure: If True, raise RuntimeError when no locale is
            configured. If False (default), return "C".

    Returns:
        POSIX locale code, or "C" when nothing is configured

    Raises:
        RuntimeError: If raise_on_failure is True and no locale is set

    Example:
        >>> import os
        >>> os.environ["LANGUAGE"] = "sr@latin:de"
        >>> get_system_locale()
        'sr@latin'
    """
    for var in LOCALE_ENV_VARS:
        value = os.environ.get(var, "")
        if var == "LANGUAGE":
            value = value.split(":")[0]
        if value and value not in PSEUDO_LOCALES:
            return _strip_codeset(normalize_locale(value))

    import locale as locale_module  # noqa: PLC0415

    try:
        system_locale, _ = locale_module.getlocale()
    except (ValueError, AttributeError):
        system_locale = None
    if system_locale and system_locale not in PSEUDO_LOCALES:
        return _strip_codeset(normalize_locale(system_locale))

    if raise_on_failure:
        msg = (
            "Could not determine system locale. "
            "Set LANGUAGE, LC_ALL, LC_MESSAGES, or LANG environment variable."
        )
        raise RuntimeError(msg)
    return "C"


def _strip_codeset(locale_code: str) -> str:
    language, country, _, modifier = split_locale(locale_code)
    code = f"{language}_{country}" if country else language
    return f"{code}@{modifier}" if modifier else code
