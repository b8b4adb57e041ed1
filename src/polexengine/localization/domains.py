"""TextDomains - gettext-style lookup functions over bound text domains.

Each text domain is bound to one or more catalog directories and owns a
CatalogManager. The lookup family mirrors the GNU gettext API: the plain
functions use the current domain, the ``d`` variants name one explicitly.
Lookups in a domain that was never bound are identity translations.

Python 3.13+.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from polexengine.constants import DEFAULT_CHARSET
from polexengine.language import LocaleTag
from polexengine.localization.orchestrator import CatalogManager

if TYPE_CHECKING:
    from polexengine.localization.loading import CatalogStorage
    from polexengine.runtime import Dictionary
    from polexengine.types import Context, DomainName, MessageId

__all__ = ["DEFAULT_DOMAIN", "TextDomains"]

logger = logging.getLogger(__name__)

DEFAULT_DOMAIN: DomainName = "messages"
"""Domain used until textdomain() selects another (GNU gettext default)."""


class TextDomains:
    """Bound text domains sharing one current language.

    Catalog directories hold files named after locales
    (``de.po``, ``pt_BR.mo``).

    Example:
        >>> domains = TextDomains(language="es")
        >>> domains.bind_textdomain("myapp", "locale/myapp")
        >>> domains.textdomain("myapp")
        'myapp'
        >>> domains.ngettext("File", "Files", 2)
        'Archivos'
    """

    __slots__ = ("_charset", "_current", "_language", "_managers", "_storage", "_use_fuzzy")

    def __init__(
        self,
        *,
        language: LocaleTag | str | None = None,
        storage: CatalogStorage | None = None,
        charset: str = DEFAULT_CHARSET,
        use_fuzzy: bool = True,
    ) -> None:
        """Initialize with no bound domains.

        Args:
            language: Initial language (default: detected from LANGUAGE,
                LC_ALL, LC_MESSAGES and LANG)
            storage: File access shared by every domain's manager
            charset: Target charset of all dictionaries
            use_fuzzy: Keep fuzzy entries of text catalogs
        """
        self._managers: dict[DomainName, CatalogManager] = {}
        self._current: DomainName = DEFAULT_DOMAIN
        self._storage = storage
        self._charset = charset
        self._use_fuzzy = use_fuzzy
        self._language = self._resolve(language) if language is not None else LocaleTag.from_system()

    def __repr__(self) -> str:
        """Return string representation for debugging."""
        return (
            f"TextDomains(language={self._language.to_string()!r}, "
            f"domain={self._current!r}, bound={sorted(self._managers)})"
        )

    @staticmethod
    def _resolve(language: LocaleTag | str) -> LocaleTag:
        return LocaleTag.from_name(language) if isinstance(language, str) else language

    # ------------------------------------------------------------------
    # Binding
    # ------------------------------------------------------------------

    @property
    def language(self) -> LocaleTag:
        """Current language for every domain."""
        return self._language

    @property
    def domains(self) -> tuple[DomainName, ...]:
        """Bound domain names in binding order."""
        return tuple(self._managers)

    def bind_textdomain(
        self, domain: DomainName, directory: str, *, precedence: bool = False
    ) -> CatalogManager:
        """Add a catalog directory for a domain.

        Binding the same domain again adds another directory to its search
        path.

        Returns:
            The domain's CatalogManager
        """
        manager = self._managers.get(domain)
        if manager is None:
            manager = CatalogManager(
                storage=self._storage,
                charset=self._charset,
                use_fuzzy=self._use_fuzzy,
            )
            manager.set_language(self._language)
            self._managers[domain] = manager
        manager.add_directory(directory, precedence=precedence)
        logger.debug("Bound text domain %s to %s", domain, directory)
        return manager

    def textdomain(self, domain: DomainName | None = None) -> DomainName:
        """Select the current domain and return it; None only queries."""
        if domain:
            self._current = domain
        return self._current

    def set_language(self, language: LocaleTag | str) -> LocaleTag:
        """Switch every bound domain to another language.

        Returns:
            The resolved tag (the null tag for unknown names)
        """
        self._language = self._resolve(language)
        if not self._language:
            logger.warning("Unknown language %r, translations disabled", language)
        for manager in self._managers.values():
            manager.set_language(self._language)
        return self._language

    def manager(self, domain: DomainName) -> CatalogManager | None:
        """CatalogManager of a bound domain, None if unbound."""
        return self._managers.get(domain)

    def _dictionary(self, domain: DomainName) -> Dictionary | None:
        manager = self._managers.get(domain)
        if manager is None:
            logger.debug("Text domain %s is not bound", domain)
            return None
        return manager.get_dictionary()

    # ------------------------------------------------------------------
    # Lookups
    # ------------------------------------------------------------------

    def gettext(self, message_id: MessageId) -> str:
        """Translate in the current domain."""
        return self.dgettext(self._current, message_id)

    def dgettext(self, domain: DomainName, message_id: MessageId) -> str:
        """Translate in a given domain."""
        dictionary = self._dictionary(domain)
        return dictionary.translate(message_id) if dictionary is not None else message_id

    def ngettext(self, message_id: MessageId, message_id_plural: str, count: int) -> str:
        """Translate a plural message in the current domain."""
        return self.dngettext(self._current, message_id, message_id_plural, count)

    def dngettext(
        self, domain: DomainName, message_id: MessageId, message_id_plural: str, count: int
    ) -> str:
        """Translate a plural message in a given domain."""
        dictionary = self._dictionary(domain)
        if dictionary is None:
            return message_id if count == 1 else message_id_plural
        return dictionary.translate_plural(message_id, message_id_plural, count)

    def pgettext(self, context: Context, message_id: MessageId) -> str:
        """Translate a context-qualified message in the current domain."""
        return self.dpgettext(self._current, context, message_id)

    def dpgettext(self, domain: DomainName, context: Context, message_id: MessageId) -> str:
        """Translate a context-qualified message in a given domain."""
        dictionary = self._dictionary(domain)
        return dictionary.translate_ctxt(context, message_id) if dictionary is not None else message_id

    def npgettext(
        self, context: Context, message_id: MessageId, message_id_plural: str, count: int
    ) -> str:
        """Translate a context-qualified plural message in the current domain."""
        return self.dnpgettext(self._current, context, message_id, message_id_plural, count)

    def dnpgettext(
        self,
        domain: DomainName,
        context: Context,
        message_id: MessageId,
        message_id_plural: str,
        count: int,
    ) -> str:
        """Translate a context-qualified plural message in a given domain."""
        dictionary = self._dictionary(domain)
        if dictionary is None:
            return message_id if count == 1 else message_id_plural
        return dictionary.translate_ctxt_plural(context, message_id, message_id_plural, count)
