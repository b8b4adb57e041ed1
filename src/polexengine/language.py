"""LocaleTag - language identification and scored locale matching.

A LocaleTag wraps one record of the static language table. Tags are built
from explicit parts, from environment-style strings
(``language[_COUNTRY][.codeset][@modifier]``) or from free-form names that
go through the locale alias table first. Input that matches no record
yields the null tag, which is falsy and reports "" from every accessor.

Tags are ranked against each other with match(), which is the only
primitive catalog selection uses.

Python 3.13+.
"""

import logging
from collections import defaultdict
from dataclasses import dataclass
from types import MappingProxyType

from babel.core import UnknownLocaleError

from polexengine.language_data import LANGUAGE_ALIASES, LANGUAGE_SPECS, LanguageSpec
from polexengine.locale_utils import (
    PSEUDO_LOCALES,
    get_babel_locale,
    get_system_locale,
    normalize_locale,
    split_locale,
)

__all__ = ["NULL_TAG", "LocaleTag", "resolve_alias"]

logger = logging.getLogger(__name__)

# Rows: country exact / one side empty / different.
# Columns: modifier exact / one side empty / different.
_MATCH_TABLE: tuple[tuple[int, int, int], ...] = (
    (9, 8, 5),
    (7, 6, 3),
    (4, 2, 1),
)


def _build_index() -> MappingProxyType[str, tuple[LanguageSpec, ...]]:
    index: defaultdict[str, list[LanguageSpec]] = defaultdict(list)
    for spec in LANGUAGE_SPECS:
        index[spec.language].append(spec)
    return MappingProxyType({lang: tuple(specs) for lang, specs in index.items()})


_SPECS_BY_LANGUAGE = _build_index()


def _compare(left: str, right: str) -> int:
    if left == right:
        return 0
    if not left or not right:
        return 1
    return 2


def resolve_alias(name: str) -> str:
    """Map a locale alias ("german", "bokmål") to its locale spec.

    An exact key wins, then the lower-cased name; unknown names are
    returned unchanged.

    Example:
        >>> resolve_alias("German")
        'de_DE.ISO-8859-1'
        >>> resolve_alias("pt_BR")
        'pt_BR'
    """
    return LANGUAGE_ALIASES.get(name) or LANGUAGE_ALIASES.get(name.lower(), name)


@dataclass(frozen=True, slots=True)
class LocaleTag:
    """Immutable (language, country, modifier) identity.

    Equality and hashing follow the underlying table record, so tags are
    usable as cache keys. Similarity between tags is measured by match(),
    not by equality.

    Attributes:
        spec: Language table record, None for the null tag

    Example:
        >>> tag = LocaleTag.from_env("de_AT.UTF-8")
        >>> tag.to_string()
        'de_AT'
        >>> tag.name
        'German (Austria)'
        >>> bool(LocaleTag.from_env("xx_YY"))
        False
    """

    spec: LanguageSpec | None = None

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def from_spec(cls, language: str, country: str = "", modifier: str = "") -> "LocaleTag":
        """Best table record for explicit parts.

        Among the records sharing ``language``, the one scoring highest
        against the request wins; country agreement outweighs modifier
        agreement. The first record wins ties.

        Args:
            language: ISO 639 code ("de")
            country: ISO 3166 code ("AT"), "" for none
            modifier: Variant ("latin"), "" for none

        Returns:
            Matching tag, or the null tag when the language is unknown
        """
        candidates = _SPECS_BY_LANGUAGE.get(language)
        if not candidates:
            return NULL_TAG

        request = LanguageSpec(language, country, modifier, "", "")
        best: LanguageSpec | None = None
        best_score = 0
        for candidate in candidates:
            score = cls._score(candidate, request)
            if score > best_score:
                best, best_score = candidate, score
        return cls(best)

    @classmethod
    def from_env(cls, env: str) -> "LocaleTag":
        """Tag for an environment-style value; the codeset is ignored.

        Hyphenated BCP-47 input ("pt-BR") is accepted. "C" and "POSIX"
        yield the null tag.

        Example:
            >>> LocaleTag.from_env("sr@latin").modifier
            'latin'
        """
        normalized = normalize_locale(env)
        if not normalized or normalized in PSEUDO_LOCALES:
            return NULL_TAG
        language, country, _, modifier = split_locale(normalized)
        return cls.from_spec(language, country, modifier)

    @classmethod
    def from_name(cls, name: str) -> "LocaleTag":
        """Tag for a free-form name, resolving locale aliases first.

        Example:
            >>> LocaleTag.from_name("german").to_string()
            'de_DE'
        """
        return cls.from_env(resolve_alias(name.strip()))

    @classmethod
    def from_system(cls) -> "LocaleTag":
        """Tag for the locale configured in the environment."""
        return cls.from_env(get_system_locale())

    # ------------------------------------------------------------------
    # Matching
    # ------------------------------------------------------------------

    @staticmethod
    def match(left: "LocaleTag", right: "LocaleTag") -> int:
        """Score how well two tags agree (0 to 9, symmetric).

        0 means different languages. Otherwise the score grows with
        country agreement first and modifier agreement second; a side with
        no country (or modifier) counts as a wildcard, ranking between an
        exact match and a mismatch.

        Example:
            >>> de = LocaleTag.from_spec("de")
            >>> LocaleTag.match(de, LocaleTag.from_spec("de", "AT"))
            8
            >>> LocaleTag.match(de, LocaleTag.from_spec("fr"))
            0
        """
        return LocaleTag._score(left.spec, right.spec)

    @staticmethod
    def _score(left: LanguageSpec | None, right: LanguageSpec | None) -> int:
        left_parts = (left.language, left.country, left.modifier) if left else ("", "", "")
        right_parts = (right.language, right.country, right.modifier) if right else ("", "", "")
        if left_parts[0] != right_parts[0]:
            return 0
        row = _compare(left_parts[1], right_parts[1])
        column = _compare(left_parts[2], right_parts[2])
        return _MATCH_TABLE[row][column]

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    def __bool__(self) -> bool:
        return self.spec is not None

    @property
    def language(self) -> str:
        """ISO 639 code, "" for the null tag."""
        return self.spec.language if self.spec else ""

    @property
    def country(self) -> str:
        """ISO 3166 code, "" when absent."""
        return self.spec.country if self.spec else ""

    @property
    def modifier(self) -> str:
        """Variant modifier, "" when absent."""
        return self.spec.modifier if self.spec else ""

    @property
    def name(self) -> str:
        """English name."""
        return self.spec.name if self.spec else ""

    @property
    def localized_name(self) -> str:
        """Name in the language itself.

        Falls back to Babel's display name when the table has none, then to
        the English name.
        """
        if self.spec is None:
            return ""
        if self.spec.native_name:
            return self.spec.native_name
        try:
            display = get_babel_locale(self.to_string()).display_name
        except (UnknownLocaleError, ValueError):
            logger.debug("Babel has no display name for %s", self.to_string())
            display = None
        return display or self.spec.name

    @property
    def language_only(self) -> "LocaleTag":
        """Tag for the bare language (country and modifier dropped)."""
        if self.spec is None or not (self.spec.country or self.spec.modifier):
            return self
        return LocaleTag.from_spec(self.spec.language)

    def to_string(self) -> str:
        """Render as ``language[_COUNTRY][@modifier]``, "" for the null tag."""
        if self.spec is None:
            return ""
        text = self.spec.language
        if self.spec.country:
            text += f"_{self.spec.country}"
        if self.spec.modifier:
            text += f"@{self.spec.modifier}"
        return text

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"LocaleTag({self.to_string()!r})"


NULL_TAG = LocaleTag()
"""The tag for unknown input."""
