"""Plural-Forms rule table.

Maps a catalog's ``Plural-Forms`` header value to the number of plural
forms and a selector choosing a form index for a count.

The table is closed: only the spellings generated by msginit and the
common hand-written variants are recognized. Matching is on the
normalized spelling (whitespace removed, trailing ``;`` guaranteed), never
on the meaning of the expression, so two catalogs selecting the same way
with different spellings are only interchangeable if both spellings are
listed here.

Python 3.13+. Depends on Babel for locale-to-rule defaults.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from functools import lru_cache
from types import MappingProxyType

from babel.core import UnknownLocaleError
from babel.messages.plurals import get_plural

__all__ = [
    "NO_PLURAL_FORMS",
    "PluralForms",
    "PluralSelector",
    "known_plural_specs",
    "lookup_plural_forms",
    "normalize_plural_spec",
    "plural_forms_for_locale",
]

logger = logging.getLogger(__name__)

type PluralSelector = Callable[[int], int]


@dataclass(frozen=True, slots=True)
class PluralForms:
    """Form count plus selector.

    A falsy instance means "no plural support configured": lookups then use
    the gettext default of form 0 for a count of one and form 1 otherwise.

    Attributes:
        form_count: Number of plural forms (0 when unconfigured)
        selector: Count to zero-based form index, None when unconfigured
        expression: Normalized Plural-Forms spelling, informational only
    """

    form_count: int = 0
    selector: PluralSelector | None = None
    expression: str = field(default="", compare=False)

    def __bool__(self) -> bool:
        return self.selector is not None

    def select(self, count: int) -> int:
        """Map a count to a form index.

        Counts are unsigned in gettext; negative counts use their magnitude.

        Example:
            >>> lookup_plural_forms("nplurals=2; plural=(n != 1);").select(1)
            0
        """
        n = abs(count)
        if self.selector is None:
            return 0 if n == 1 else 1
        return self.selector(n)


NO_PLURAL_FORMS = PluralForms()

# ============================================================================
# SELECTORS
# ============================================================================
#
# Conditional chains mirror the C ternaries of the gettext expressions they
# stand for; keep them in that shape so each can be checked against its key.


def _one_form(n: int) -> int:
    return 0


def _not_one(n: int) -> int:
    return 1 if n != 1 else 0


def _above_one(n: int) -> int:
    return 1 if n > 1 else 0


def _macedonian(n: int) -> int:
    return 0 if n == 1 or n % 10 == 1 else 1


def _icelandic(n: int) -> int:
    return 0 if n % 10 == 1 and n % 100 != 11 else 1


def _spanish_3(n: int) -> int:
    return 0 if n == 1 else 1 if n != 0 and n % 1000000 == 0 else 2


def _latvian_3(n: int) -> int:
    return 0 if n % 10 == 1 and n % 100 != 11 else 1 if n != 0 else 2


def _irish_3(n: int) -> int:
    return 0 if n == 1 else 1 if n == 2 else 2


def _lithuanian_3(n: int) -> int:
    if n % 10 == 1 and n % 100 != 11:
        return 0
    if n % 10 >= 2 and (n % 100 < 10 or n % 100 >= 20):
        return 1
    return 2


def _east_slavic_3(n: int) -> int:
    if n % 10 == 1 and n % 100 != 11:
        return 0
    if 2 <= n % 10 <= 4 and (n % 100 < 10 or n % 100 >= 20):
        return 1
    return 2


def _czech_slovak_3(n: int) -> int:
    return 0 if n == 1 else 1 if 2 <= n <= 4 else 2


def _polish_3(n: int) -> int:
    if n == 1:
        return 0
    if 2 <= n % 10 <= 4 and (n % 100 < 10 or n % 100 >= 20):
        return 1
    return 2


def _romanian_3(n: int) -> int:
    if n == 1:
        return 0
    return 2 if n % 100 > 19 or (n % 100 == 0 and n != 0) else 1


def _slovenian_4(n: int) -> int:
    if n % 100 == 1:
        return 0
    if n % 100 == 2:
        return 1
    return 2 if n % 100 in (3, 4) else 3


def _slovak_czech_4(n: int) -> int:
    # Form 2 is reserved for fractions, which integer counts never are.
    return 0 if n == 1 else 1 if 2 <= n <= 4 else 3


def _belarusian_4(n: int) -> int:
    if n % 10 == 1 and n % 100 != 11:
        return 0
    if 2 <= n % 10 <= 4 and (n % 100 < 12 or n % 100 > 14):
        return 1
    if n % 10 == 0 or 5 <= n % 10 <= 9 or 11 <= n % 100 <= 14:
        return 2
    return 3


def _scottish_gaelic_4(n: int) -> int:
    if n in (1, 11):
        return 0
    if n in (2, 12):
        return 1
    return 2 if 2 < n < 20 else 3


def _welsh_4(n: int) -> int:
    return 0 if n == 1 else 1 if n == 2 else 2 if n not in (8, 11) else 3


def _lithuanian_4(n: int) -> int:
    if n % 10 == 1 and (n % 100 > 19 or n % 100 < 11):
        return 0
    if 2 <= n % 10 <= 9 and (n % 100 > 19 or n % 100 < 11):
        return 1
    return 3


def _ukrainian_4(n: int) -> int:
    if n % 10 == 1 and n % 100 != 11:
        return 0
    if 2 <= n % 10 <= 4 and (n % 100 < 12 or n % 100 > 14):
        return 1
    if n % 10 == 0 or 5 <= n % 10 <= 9 or 11 <= n % 100 <= 14:
        return 2
    return 3


def _polish_4(n: int) -> int:
    if n == 1:
        return 0
    if 2 <= n % 10 <= 4 and (n % 100 < 12 or n % 100 > 14):
        return 1
    if (n != 1 and 0 <= n % 10 <= 1) or 5 <= n % 10 <= 9 or 12 <= n % 100 <= 14:
        return 2
    return 3


def _hebrew_4(n: int) -> int:
    if n == 1:
        return 0
    if n == 2:
        return 1
    return 2 if n % 10 == 0 and n > 10 else 3


def _irish_5(n: int) -> int:
    if n == 1:
        return 0
    if n == 2:
        return 1
    return 2 if n < 7 else 3 if n < 11 else 4


def _arabic_6(n: int) -> int:
    if n == 0:
        return 0
    if n == 1:
        return 1
    if n == 2:
        return 2
    if 3 <= n % 100 <= 10:
        return 3
    return 4 if n % 100 >= 11 else 5


# ============================================================================
# TABLE
# ============================================================================

_PF = "nplurals="
_PE = ";plural="

_RULES: MappingProxyType[str, tuple[int, PluralSelector]] = MappingProxyType({
    _PF + "1" + _PE + "0;": (1, _one_form),
    _PF + "2" + _PE + "(n!=1);": (2, _not_one),
    _PF + "2" + _PE + "n!=1;": (2, _not_one),
    _PF + "2" + _PE + "(n>1);": (2, _above_one),
    _PF + "2" + _PE + "n>1;": (2, _above_one),
    _PF + "2" + _PE + "n==1||n%10==1?0:1;": (2, _macedonian),
    _PF + "2" + _PE + "(n%10==1&&n%100!=11)?0:1;": (2, _icelandic),
    _PF + "2" + _PE + "(n%10!=1||n%100==11);": (2, _icelandic),
    _PF + "3" + _PE + "n==1?0:n!=0&&n%1000000==0?1:2;": (3, _spanish_3),
    _PF + "3" + _PE + "(n%10==1&&n%100!=11?0:n!=0?1:2);": (3, _latvian_3),
    # Spelling with an unbalanced parenthesis found in some catalogs.
    _PF + "3" + _PE + "n%10==1&&n%100!=11?0:n!=0?1:2);": (3, _latvian_3),
    _PF + "3" + _PE + "n==1?0:n==2?1:2;": (3, _irish_3),
    _PF + "3" + _PE + "(n%10==1&&n%100!=11?0:n%10>=2&&(n%100<10||n%100>=20)?1:2);": (
        3,
        _lithuanian_3,
    ),
    _PF + "3" + _PE
    + "(n%10==1&&n%100!=11?0:n%10>=2&&n%10<=4&&(n%100<10||n%100>=20)?1:2);": (
        3,
        _east_slavic_3,
    ),
    _PF + "3" + _PE + "(n==1)?0:(n>=2&&n<=4)?1:2;": (3, _czech_slovak_3),
    _PF + "3" + _PE + "(n==1?0:n%10>=2&&n%10<=4&&(n%100<10||n%100>=20)?1:2);": (
        3,
        _polish_3,
    ),
    _PF + "3" + _PE + "(n==1?0:(((n%100>19)||((n%100==0)&&(n!=0)))?2:1));": (
        3,
        _romanian_3,
    ),
    _PF + "4" + _PE + "(n%100==1?0:n%100==2?1:n%100==3||n%100==4?2:3);": (
        4,
        _slovenian_4,
    ),
    # Same rule under an understated nplurals; the selector still yields four forms.
    _PF + "3" + _PE + "(n%100==1?0:n%100==2?1:n%100==3||n%100==4?2:3);": (
        4,
        _slovenian_4,
    ),
    _PF + "4" + _PE + "(n%1==0&&n==1?0:n%1==0&&n>=2&&n<=4?1:n%1!=0?2:3);": (
        4,
        _slovak_czech_4,
    ),
    _PF + "4" + _PE + "(n==1&&n%1==0)?0:(n>=2&&n<=4&&n%1==0)?1:(n%1!=0)?2:3;": (
        4,
        _slovak_czech_4,
    ),
    _PF + "4" + _PE
    + "(n%10==1&&n%100!=11?0:n%10>=2&&n%10<=4&&(n%100<12||n%100>14)"
    + "?1:n%10==0||(n%10>=5&&n%10<=9)||(n%100>=11&&n%100<=14)?2:3);": (
        4,
        _belarusian_4,
    ),
    _PF + "4" + _PE + "(n==1||n==11)?0:(n==2||n==12)?1:(n>2&&n<20)?2:3;": (
        4,
        _scottish_gaelic_4,
    ),
    _PF + "4" + _PE + "(n==1)?0:(n==2)?1:(n!=8&&n!=11)?2:3;": (4, _welsh_4),
    _PF + "4" + _PE
    + "(n%10==1&&(n%100>19||n%100<11)?0:(n%10>=2&&n%10<=9)&&"
    + "(n%100>19||n%100<11)?1:n%1!=0?2:3);": (4, _lithuanian_4),
    _PF + "4" + _PE
    + "(n%1==0&&n%10==1&&n%100!=11?0:n%1==0&&n%10>=2&&n%10<=4&&"
    + "(n%100<12||n%100>14)?1:n%1==0&&(n%10==0||(n%10>=5&&"
    + "n%10<=9)||(n%100>=11&&n%100<=14))?2:3);": (4, _ukrainian_4),
    _PF + "4" + _PE
    + "(n==1?0:(n%10>=2&&n%10<=4)&&(n%100<12||n%100>14)?1:n!=1&&"
    + "(n%10>=0&&n%10<=1)||(n%10>=5&&n%10<=9)||(n%100>=12&&"
    + "n%100<=14)?2:3);": (4, _polish_4),
    _PF + "4" + _PE
    + "(n==1&&n%1==0)?0:(n==2&&n%1==0)?1:(n%10==0&&n%1==0&&n>10)?2:3;": (
        4,
        _hebrew_4,
    ),
    _PF + "5" + _PE + "(n==1?0:n==2?1:n<7?2:n<11?3:4);": (5, _irish_5),
    _PF + "6" + _PE
    + "(n==0?0:n==1?1:n==2?2:n%100>=3&&n%100<=10?3:n%100>=11?4:5);": (6, _arabic_6),
    _PF + "6" + _PE + "n==0?0:n==1?1:n==2?2:n%100>=3&&n%100<=10?3:n%100>=11?4:5;": (
        6,
        _arabic_6,
    ),
})


def normalize_plural_spec(spec: str) -> str:
    """Remove all whitespace and guarantee a trailing semicolon.

    Compiled catalogs often omit the final ``;``, so it is restored here.

    Example:
        >>> normalize_plural_spec("nplurals=2; plural=(n != 1)")
        'nplurals=2;plural=(n!=1);'
    """
    compact = "".join(spec.split())
    if compact and not compact.endswith(";"):
        compact += ";"
    return compact


def lookup_plural_forms(spec: str) -> PluralForms:
    """Resolve a Plural-Forms value.

    Args:
        spec: Raw or normalized ``nplurals=...; plural=...;`` text

    Returns:
        Matching PluralForms, or the falsy NO_PLURAL_FORMS when the
        spelling is not in the table. Callers treat that as "no plural
        support configured", never as an error.
    """
    normalized = normalize_plural_spec(spec)
    rule = _RULES.get(normalized)
    if rule is None:
        return NO_PLURAL_FORMS
    form_count, selector = rule
    return PluralForms(form_count, selector, normalized)


def known_plural_specs() -> tuple[str, ...]:
    """All recognized normalized spellings, in table order."""
    return tuple(_RULES)


@lru_cache(maxsize=128)
def plural_forms_for_locale(locale_code: str) -> PluralForms:
    """Default plural rule for a locale from Babel's CLDR-derived table.

    Used when writing a catalog header for a dictionary that never saw one.

    Args:
        locale_code: Locale identifier (e.g. "pl", "pt_BR")

    Returns:
        PluralForms for the locale's conventional gettext rule, or
        NO_PLURAL_FORMS when Babel does not know the locale or its rule
        is not in the table
    """
    try:
        babel_plural = get_plural(locale_code)
    except (UnknownLocaleError, ValueError):
        logger.debug("No plural rule for locale %r", locale_code)
        return NO_PLURAL_FORMS
    return lookup_plural_forms(babel_plural.plural_forms)
