"""CatalogManager - per-locale dictionaries assembled from catalog directories.

For each requested LocaleTag the manager scans its search path, picks the
best-scoring catalog file in every directory, and folds it into one
Dictionary. Dictionaries are cached per tag; a tag carrying a country gets
the language-only dictionary as its fallback.

Loading never raises: missing, unreadable or malformed catalogs are logged
and recorded in the LoadSummary, and the affected dictionary simply stays
empty, which makes every lookup an identity translation.

Python 3.13+.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from contextlib import AbstractContextManager, nullcontext
from typing import TYPE_CHECKING

from polexengine.constants import CATALOG_SUFFIXES, DEFAULT_CHARSET
from polexengine.diagnostics import CatalogError, CatalogFormatError
from polexengine.enums import CatalogFormat, LoadStatus
from polexengine.language import NULL_TAG, LocaleTag
from polexengine.localization.loading import (
    CatalogLoadResult,
    CatalogStorage,
    DirectoryCatalogStorage,
    LoadSummary,
)
from polexengine.runtime import Dictionary
from polexengine.transcoding import CharsetConverter, CodecConverter

if TYPE_CHECKING:
    from polexengine.types import CatalogName

__all__ = ["CatalogManager", "filename_to_language"]

logger = logging.getLogger(__name__)


def filename_to_language(filename: CatalogName) -> str:
    """Derive the locale name from a catalog file name.

    The catalog suffix is removed and the letters following the first
    underscore are upper-cased up to the next non-letter, so ``zh_tw.po``
    and ``zh_TW.po`` name the same locale.

    Example:
        >>> filename_to_language("zh_tw.po")
        'zh_TW'
        >>> filename_to_language("sr_rs@latin.mo")
        'sr_RS@latin'
    """
    stem = filename
    for suffix in CATALOG_SUFFIXES:
        if stem.lower().endswith(suffix):
            stem = stem[: -len(suffix)]
            break

    underscore = stem.find("_")
    if underscore < 0:
        return stem
    end = underscore + 1
    while end < len(stem) and stem[end].isalpha():
        end += 1
    return stem[: underscore + 1] + stem[underscore + 1 : end].upper() + stem[end:]


class CatalogManager:
    """Locate, load and cache dictionaries for locales.

    The search path is an ordered list of directories. Directories added
    with ``precedence=True`` go to the front. When several directories hold
    a catalog for the same locale, all of them are loaded into the same
    dictionary in search-path order; collisions follow the Dictionary
    insert policy, so the earlier directory keeps its plain and plural
    translations.

    Thread Safety:
        With thread_safe=True, dictionary creation and search-path changes
        are serialized through an RLock. Lookups on returned dictionaries
        do not take the lock.

    Example:
        >>> manager = CatalogManager()
        >>> manager.add_directory("locale/myapp")
        >>> manager.set_language("de_AT")
        >>> manager.get_dictionary().translate("File")
        'Datei'
    """

    __slots__ = (
        "_charset",
        "_converter_factory",
        "_current_dictionary",
        "_current_language",
        "_dictionaries",
        "_empty",
        "_lock",
        "_max_source_size",
        "_results",
        "_search_path",
        "_storage",
        "_use_fuzzy",
    )

    def __init__(
        self,
        *,
        storage: CatalogStorage | None = None,
        charset: str = DEFAULT_CHARSET,
        use_fuzzy: bool = True,
        converter_factory: Callable[[], CharsetConverter] = CodecConverter,
        max_source_size: int | None = None,
        thread_safe: bool = False,
    ) -> None:
        """Initialize a manager with an empty search path.

        Args:
            storage: File access (default: DirectoryCatalogStorage)
            charset: Target charset of every dictionary
            use_fuzzy: Keep fuzzy entries of text catalogs
            converter_factory: Creates one transcoder per catalog load
            max_source_size: Catalog size limit passed to the parsers
            thread_safe: Serialize dictionary creation through an RLock
        """
        self._storage: CatalogStorage = storage or DirectoryCatalogStorage()
        self._charset = charset
        self._use_fuzzy = use_fuzzy
        self._converter_factory = converter_factory
        self._max_source_size = max_source_size
        self._search_path: list[str] = []
        self._dictionaries: dict[LocaleTag, Dictionary] = {}
        self._current_language: LocaleTag = NULL_TAG
        self._current_dictionary: Dictionary | None = None
        self._empty = Dictionary(charset)
        self._results: list[CatalogLoadResult] = []
        self._lock = threading.RLock() if thread_safe else None

    def __repr__(self) -> str:
        """Return string representation for debugging."""
        return (
            f"CatalogManager(language={self._current_language.to_string()!r}, "
            f"directories={len(self._search_path)}, "
            f"cached={len(self._dictionaries)})"
        )

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------

    @property
    def charset(self) -> str:
        """Target charset of managed dictionaries (read-only)."""
        return self._charset

    @property
    def search_path(self) -> tuple[str, ...]:
        """Directories in search order (read-only)."""
        return tuple(self._search_path)

    @property
    def language(self) -> LocaleTag:
        """Current language; the null tag when none is set."""
        return self._current_language

    def add_directory(self, directory: str, *, precedence: bool = False) -> None:
        """Add a directory to the search path; duplicates are ignored.

        Changing the search path invalidates every cached dictionary.

        Args:
            directory: Directory holding ``<locale>.po`` / ``<locale>.mo`` files
            precedence: Search this directory before the existing ones
        """
        with self._guard():
            if directory in self._search_path:
                return
            self.clear_cache()
            if precedence:
                self._search_path.insert(0, directory)
            else:
                self._search_path.append(directory)
            logger.debug("Added catalog directory %s (precedence=%s)", directory, precedence)

    def remove_directory(self, directory: str) -> None:
        """Remove a directory from the search path; unknown ones are ignored."""
        with self._guard():
            if directory not in self._search_path:
                return
            self.clear_cache()
            self._search_path.remove(directory)
            logger.debug("Removed catalog directory %s", directory)

    def set_language(self, language: LocaleTag | str) -> LocaleTag:
        """Select the language get_dictionary() returns by default.

        Args:
            language: Tag, or a name resolved through LocaleTag.from_name()

        Returns:
            The resolved tag (the null tag for unknown names)
        """
        tag = LocaleTag.from_name(language) if isinstance(language, str) else language
        if not tag and isinstance(language, str):
            logger.warning("Unknown language %r, translations disabled", language)
        with self._guard():
            if tag != self._current_language:
                self._current_language = tag
                self._current_dictionary = None
        return tag

    def clear_cache(self) -> None:
        """Drop all cached dictionaries; they are reloaded on next access."""
        with self._guard():
            self._dictionaries.clear()
            self._current_dictionary = None

    # ------------------------------------------------------------------
    # Dictionaries
    # ------------------------------------------------------------------

    def get_dictionary(self, language: LocaleTag | None = None) -> Dictionary:
        """Dictionary for a language, loading its catalogs on first use.

        Args:
            language: Tag to look up (default: the current language)

        Returns:
            The cached or newly loaded dictionary; an empty dictionary for
            the null tag
        """
        if language is None:
            current = self._current_dictionary
            if current is not None:
                return current
            if not self._current_language:
                return self._empty
            with self._guard():
                self._current_dictionary = self._get_or_load(self._current_language)
                return self._current_dictionary

        if not language:
            return self._empty
        with self._guard():
            return self._get_or_load(language)

    def get_languages(self) -> set[LocaleTag]:
        """Languages with at least one catalog on the search path.

        File names that map to no known language are skipped.
        """
        languages: set[LocaleTag] = set()
        for directory in self._search_path:
            for filename in self._storage.list_entries(directory):
                if CatalogFormat.from_filename(filename) is None:
                    continue
                tag = LocaleTag.from_env(filename_to_language(filename))
                if tag:
                    languages.add(tag)
        return languages

    def get_load_summary(self) -> LoadSummary:
        """Summary of every catalog load attempted so far."""
        return LoadSummary(results=tuple(self._results))

    def _guard(self) -> AbstractContextManager[object]:
        return self._lock if self._lock is not None else nullcontext()

    def _get_or_load(self, language: LocaleTag) -> Dictionary:
        cached = self._dictionaries.get(language)
        if cached is not None:
            return cached

        dictionary = Dictionary(self._charset)
        self._dictionaries[language] = dictionary

        found = False
        for directory in self._search_path:
            filename = self._best_candidate(language, directory)
            if filename is None:
                continue
            found = True
            self._results.append(self._load_catalog(language, directory, filename, dictionary))

        if not found:
            logger.info("No catalog for %s on the search path", language.to_string())
            self._results.append(
                CatalogLoadResult(
                    locale=language.to_string(),
                    source_path="",
                    status=LoadStatus.NOT_FOUND,
                )
            )

        if language.country:
            base = language.language_only
            if base and base != language:
                dictionary.set_fallback(self._get_or_load(base))
        return dictionary

    def _best_candidate(self, language: LocaleTag, directory: str) -> CatalogName | None:
        best: CatalogName | None = None
        best_score = 0
        for filename in self._storage.list_entries(directory):
            if CatalogFormat.from_filename(filename) is None:
                continue
            candidate = LocaleTag.from_env(filename_to_language(filename))
            if not candidate:
                logger.warning("%s/%s: ignoring unknown language", directory, filename)
                continue
            score = LocaleTag.match(language, candidate)
            if score > best_score:
                best, best_score = filename, score
        return best

    def _load_catalog(
        self,
        language: LocaleTag,
        directory: str,
        filename: CatalogName,
        dictionary: Dictionary,
    ) -> CatalogLoadResult:
        source_path = f"{directory.rstrip('/')}/{filename}"
        locale = language.to_string()
        try:
            with self._storage.open(source_path) as stream:
                data = stream.read()
            report = dictionary.add_catalog(
                data,
                source_path=source_path,
                catalog_format=CatalogFormat.from_filename(filename),
                converter=self._converter_factory(),
                use_fuzzy=self._use_fuzzy,
                max_source_size=self._max_source_size,
            )
        except FileNotFoundError:
            logger.error("Failure opening %s", source_path)
            return CatalogLoadResult(locale, source_path, LoadStatus.NOT_FOUND)
        except (OSError, CatalogError) as e:
            logger.error("Failure loading %s: %s", source_path, e)
            return CatalogLoadResult(locale, source_path, LoadStatus.ERROR, error=e)

        if not report.ok:
            error = CatalogFormatError(report.diagnostics[0]) if report.diagnostics else None
            logger.error("Catalog %s rejected", source_path)
            return CatalogLoadResult(locale, source_path, LoadStatus.ERROR, error=error, report=report)
        return CatalogLoadResult(locale, source_path, LoadStatus.SUCCESS, report=report)
