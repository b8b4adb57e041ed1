"""Dictionary - in-memory translation store for one locale and domain.

Python 3.13+.
"""

import logging
import threading
import weakref
from collections.abc import Iterator, Sequence
from contextlib import AbstractContextManager, nullcontext
from dataclasses import dataclass

from polexengine.constants import DEFAULT_CHARSET, MO_MAGIC, MO_MAGIC_SWAPPED
from polexengine.core import NO_PLURAL_FORMS, PluralForms, plural_forms_for_locale
from polexengine.diagnostics import (
    CatalogSyntaxError,
    Diagnostic,
    ErrorTemplate,
    log_diagnostic,
)
from polexengine.diagnostics.templates import fragment
from polexengine.enums import CatalogFormat
from polexengine.syntax import (
    BinaryCatalogParser,
    CatalogEntry,
    ParsedCatalog,
    RawEntry,
    TextCatalogParser,
    serialize_catalog,
)
from polexengine.transcoding import CharsetConverter, CodecConverter, canonical_charset
from polexengine.types import CatalogSource, Context, MessageId

__all__ = ["CatalogLoadReport", "Dictionary", "detect_catalog_format"]

logger = logging.getLogger(__name__)


def detect_catalog_format(source: CatalogSource) -> CatalogFormat:
    """Guess the catalog format from its first bytes.

    Anything starting with either compiled-catalog magic number is binary;
    everything else is treated as text.
    """
    if isinstance(source, str) or len(source) < 4:
        return CatalogFormat.PO
    magic = int.from_bytes(source[:4], "little")
    if magic in (MO_MAGIC, MO_MAGIC_SWAPPED):
        return CatalogFormat.MO
    return CatalogFormat.PO


@dataclass(frozen=True, slots=True)
class CatalogLoadReport:
    """Outcome of Dictionary.add_catalog().

    Attributes:
        source_path: Catalog file name ("" for in-memory data)
        catalog_format: Parser used
        ok: False when the catalog was rejected and nothing was added
        entry_count: Translated entries found in the catalog
        added: Entries that were new to the dictionary
        charset: Charset the catalog declared
        diagnostics: Parser, conversion and plural-forms diagnostics
    """

    source_path: str
    catalog_format: CatalogFormat
    ok: bool
    entry_count: int = 0
    added: int = 0
    charset: str = DEFAULT_CHARSET
    diagnostics: tuple[Diagnostic, ...] = ()

    @property
    def skipped(self) -> int:
        """Entries that collided with existing keys."""
        return self.entry_count - self.added

    @property
    def warnings(self) -> tuple[Diagnostic, ...]:
        """Non-fatal diagnostics."""
        return tuple(d for d in self.diagnostics if d.is_warning)


def _decode(data: bytes, charset: str) -> str:
    codec = canonical_charset(charset) or "utf-8"
    return data.decode(codec, errors="replace")


class Dictionary:
    """Translations for one locale and domain.

    Two indexes hold the entries: a flat one keyed by message id, and a
    two-level one keyed by context, then message id. Lookups degrade to the
    source text when nothing matches, so an empty Dictionary is a valid
    identity translator.

    Collision policy differs between the insert paths:
    flat inserts (singular or plural) and context-qualified plural inserts
    keep the first value; context-qualified singular inserts let a
    differing later value replace the earlier one. Both log a warning;
    re-inserting an identical value is silent.

    Thread Safety:
        By default, dictionaries are NOT thread-safe. Populate first, then
        share for reading. With thread_safe=True, inserts and catalog loads
        are serialized through an internal RLock.

    Examples:
        >>> d = Dictionary()
        >>> d.add("File", "Archivo")
        True
        >>> d.translate("File")
        'Archivo'
        >>> d.translate("Edit")
        'Edit'
        >>> d.add_plural("File", "Files", ["Archivo", "Archivos"])
        False
    """

    __slots__ = (
        "__weakref__",
        "_charset",
        "_ctxt_entries",
        "_entries",
        "_fallback",
        "_header",
        "_lock",
        "_plural_forms",
    )

    def __init__(self, charset: str = DEFAULT_CHARSET, *, thread_safe: bool = False) -> None:
        """Initialize an empty dictionary.

        Args:
            charset: Charset every translation is converted to on load
            thread_safe: Serialize inserts through an internal RLock
        """
        self._charset = charset
        self._entries: dict[MessageId, CatalogEntry] = {}
        self._ctxt_entries: dict[Context, dict[MessageId, CatalogEntry]] = {}
        self._plural_forms: PluralForms = NO_PLURAL_FORMS
        self._fallback: weakref.ref[Dictionary] | None = None
        self._header = ""
        self._lock: threading.RLock | None = threading.RLock() if thread_safe else None

    def _guard(self) -> AbstractContextManager[object]:
        return self._lock if self._lock is not None else nullcontext()

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------

    @property
    def charset(self) -> str:
        """Target charset of stored translations (read-only)."""
        return self._charset

    @property
    def header(self) -> str:
        """Header text of the first loaded catalog that had one."""
        return self._header

    @property
    def is_thread_safe(self) -> bool:
        """Check if inserts are serialized (read-only)."""
        return self._lock is not None

    @property
    def plural_forms(self) -> PluralForms:
        """Configured plural rule; falsy when none."""
        return self._plural_forms

    def get_plural_forms(self) -> PluralForms:
        """Return the configured plural rule (falsy when none)."""
        return self._plural_forms

    def set_plural_forms(self, plural_forms: PluralForms) -> bool:
        """Configure the plural rule; the first configured rule wins.

        Args:
            plural_forms: Rule declared by a catalog

        Returns:
            True if the rule is now in effect (newly set or identical),
            False if a different rule was already configured, or the
            given rule is falsy
        """
        if not plural_forms:
            return False
        if not self._plural_forms:
            self._plural_forms = plural_forms
            return True
        if self._plural_forms != plural_forms:
            log_diagnostic(
                logger,
                ErrorTemplate.plural_forms_mismatch(
                    self._plural_forms.expression, plural_forms.expression
                ),
            )
            return False
        return True

    @property
    def fallback(self) -> "Dictionary | None":
        """Fallback dictionary, None when unset or already collected."""
        return self._fallback() if self._fallback is not None else None

    def set_fallback(self, fallback: "Dictionary | None") -> None:
        """Consult another dictionary when a plain lookup misses.

        Only a weak reference is kept: the caller that built the chain owns
        the fallback and decides how long it lives.

        Raises:
            ValueError: If the chain starting at fallback leads back here
        """
        node = fallback
        while node is not None:
            if node is self:
                msg = "Fallback chain would form a cycle"
                raise ValueError(msg)
            node = node.fallback
        self._fallback = weakref.ref(fallback) if fallback is not None else None

    # ------------------------------------------------------------------
    # Inserts
    # ------------------------------------------------------------------

    def add(self, message_id: MessageId, translation: str) -> bool:
        """Insert a singular translation into the flat index.

        Returns:
            True if the key was new; False on collision (first writer wins)
        """
        return self._add_flat(CatalogEntry(message_id, (translation,)))

    def add_plural(
        self, message_id: MessageId, message_id_plural: str, variants: Sequence[str]
    ) -> bool:
        """Insert plural translations into the flat index.

        Returns:
            True if the key was new; False on collision (first writer wins)

        Raises:
            ValueError: If variants is empty
        """
        return self._add_flat(CatalogEntry(message_id, tuple(variants), message_id_plural))

    def add_ctxt(self, context: Context, message_id: MessageId, translation: str) -> bool:
        """Insert a context-qualified singular translation.

        A later insert with a different translation replaces the stored one.

        Returns:
            True if the key was new; False if it already existed
        """
        entry = CatalogEntry(message_id, (translation,), context=context)
        with self._guard():
            scope = self._ctxt_entries.setdefault(context, {})
            existing = scope.get(message_id)
            if existing is None:
                scope[message_id] = entry
                logger.debug("Registered %s in context %s", fragment(message_id), fragment(context))
                return True
            if existing.variants != entry.variants:
                log_diagnostic(logger, ErrorTemplate.collision(message_id, context))
                scope[message_id] = entry
            return False

    def add_ctxt_plural(
        self,
        context: Context,
        message_id: MessageId,
        message_id_plural: str,
        variants: Sequence[str],
    ) -> bool:
        """Insert context-qualified plural translations (first writer wins).

        Returns:
            True if the key was new; False on collision

        Raises:
            ValueError: If variants is empty
        """
        entry = CatalogEntry(message_id, tuple(variants), message_id_plural, context)
        with self._guard():
            scope = self._ctxt_entries.setdefault(context, {})
            existing = scope.get(message_id)
            if existing is None:
                scope[message_id] = entry
                logger.debug("Registered %s in context %s", fragment(message_id), fragment(context))
                return True
            if existing.variants != entry.variants:
                log_diagnostic(logger, ErrorTemplate.collision(message_id, context))
            return False

    def add_entry(self, entry: CatalogEntry) -> bool:
        """Insert a prepared entry through the matching add_* path."""
        match entry:
            case CatalogEntry(context=None, message_id_plural=None, variants=(translation,)):
                return self.add(entry.message_id, translation)
            case CatalogEntry(context=None):
                return self._add_flat(entry)
            case CatalogEntry(context=str() as context, message_id_plural=None, variants=(translation,)):
                return self.add_ctxt(context, entry.message_id, translation)
            case CatalogEntry(context=str() as context):
                return self.add_ctxt_plural(
                    context,
                    entry.message_id,
                    entry.message_id_plural or entry.message_id,
                    entry.variants,
                )
        msg = f"Unsupported entry {entry!r}"
        raise TypeError(msg)

    def _add_flat(self, entry: CatalogEntry) -> bool:
        with self._guard():
            existing = self._entries.get(entry.message_id)
            if existing is None:
                self._entries[entry.message_id] = entry
                logger.debug("Registered %s", fragment(entry.message_id))
                return True
            if existing.variants != entry.variants:
                log_diagnostic(logger, ErrorTemplate.collision(entry.message_id))
            return False

    # ------------------------------------------------------------------
    # Lookups
    # ------------------------------------------------------------------

    def translate(self, message_id: MessageId) -> str:
        """Translate a plain message.

        On a miss the fallback dictionary is consulted, if one is set and
        still alive; otherwise the message id itself is returned.
        """
        entry = self._entries.get(message_id)
        if entry is not None and entry.translation:
            return entry.translation
        logger.debug("No translation for %s", fragment(message_id))
        fallback = self.fallback
        if fallback is not None:
            return fallback.translate(message_id)
        return message_id

    def translate_plural(self, message_id: MessageId, message_id_plural: str, count: int) -> str:
        """Translate a message whose form depends on count.

        The fallback dictionary is never consulted for plurals.
        """
        return self._translate_plural(self._entries, message_id, message_id_plural, count)

    def translate_ctxt(self, context: Context, message_id: MessageId) -> str:
        """Translate a message within a context; no fallback across contexts."""
        entry = self._ctxt_entries.get(context, {}).get(message_id)
        if entry is not None and entry.translation:
            return entry.translation
        logger.debug("No translation for %s in context %s", fragment(message_id), fragment(context))
        return message_id

    def translate_ctxt_plural(
        self, context: Context, message_id: MessageId, message_id_plural: str, count: int
    ) -> str:
        """Translate a plural message within a context."""
        scope = self._ctxt_entries.get(context)
        if scope is None:
            logger.debug("No context %s", fragment(context))
            return message_id if count == 1 else message_id_plural
        return self._translate_plural(scope, message_id, message_id_plural, count)

    def _translate_plural(
        self,
        index: dict[MessageId, CatalogEntry],
        message_id: MessageId,
        message_id_plural: str,
        count: int,
    ) -> str:
        entry = index.get(message_id)
        if entry is None:
            logger.debug("No plural translation for %s", fragment(message_id))
            return message_id if count == 1 else message_id_plural

        form = self._plural_forms.select(count)
        if form >= len(entry.variants):
            log_diagnostic(
                logger,
                ErrorTemplate.plural_index_out_of_range(message_id, form, len(entry.variants)),
            )
            return message_id

        variant = entry.variants[form]
        if variant:
            return variant
        return message_id if count == 1 else message_id_plural

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------

    def __len__(self) -> int:
        return len(self._entries) + sum(len(scope) for scope in self._ctxt_entries.values())

    def __bool__(self) -> bool:
        return True

    def __contains__(self, key: object) -> bool:
        """``"id" in d`` checks the flat index, ``("ctx", "id") in d`` the context index."""
        match key:
            case str():
                return key in self._entries
            case (str() as context, str() as message_id):
                return message_id in self._ctxt_entries.get(context, {})
        return False

    def get_entry(self, message_id: MessageId, context: Context | None = None) -> CatalogEntry | None:
        """Return the stored entry for a key, or None."""
        if context is None:
            return self._entries.get(message_id)
        return self._ctxt_entries.get(context, {}).get(message_id)

    def entries(self) -> Iterator[CatalogEntry]:
        """Iterate flat entries, then context-qualified ones, in insertion order."""
        yield from self._entries.values()
        for scope in self._ctxt_entries.values():
            yield from scope.values()

    def contexts(self) -> list[Context]:
        """Contexts that hold at least one entry."""
        return [context for context, scope in self._ctxt_entries.items() if scope]

    def clear(self) -> None:
        """Remove all entries; charset, plural rule and fallback are kept."""
        with self._guard():
            self._entries.clear()
            self._ctxt_entries.clear()

    def to_po(self, *, locale: str | None = None) -> str:
        """Render the dictionary as text catalog source for debugging.

        The stored header is reused when there is one. Otherwise a minimal
        header is written; without a configured plural rule, ``locale``
        supplies Babel's conventional rule for that language.

        Args:
            locale: Locale code used only for the fallback Plural-Forms line
        """
        header = self._header
        if not header:
            plural_forms = self._plural_forms
            if not plural_forms and locale:
                plural_forms = plural_forms_for_locale(locale)
            lines = [f"Content-Type: text/plain; charset={self._charset}\n"]
            if plural_forms:
                lines.append(f"Plural-Forms: {plural_forms.expression}\n")
            header = "".join(lines)
        return serialize_catalog(self.entries(), header=header)

    def __repr__(self) -> str:
        """Return string representation for debugging.

        Example:
            >>> repr(Dictionary())
            "Dictionary(charset='UTF-8', entries=0, contexts=0)"
        """
        return (
            f"Dictionary(charset={self._charset!r}, "
            f"entries={len(self._entries)}, "
            f"contexts={len(self.contexts())})"
        )

    # ------------------------------------------------------------------
    # Catalog loading
    # ------------------------------------------------------------------

    def add_catalog(
        self,
        source: CatalogSource,
        /,
        *,
        source_path: str = "",
        catalog_format: CatalogFormat | None = None,
        converter: CharsetConverter | None = None,
        use_fuzzy: bool = True,
        max_source_size: int | None = None,
    ) -> CatalogLoadReport:
        """Parse a catalog and fold its entries into this dictionary.

        Message ids and contexts are decoded with the catalog's charset;
        translations are first converted to the dictionary's charset.

        Args:
            source: Catalog contents [positional-only]
            source_path: File name for diagnostics and logs
            catalog_format: Force a parser instead of detecting one
            converter: Charset transcoder (default: CodecConverter)
            use_fuzzy: Keep fuzzy entries of text catalogs
            max_source_size: Parser size limit (default: MAX_SOURCE_SIZE)

        Returns:
            CatalogLoadReport; ``ok`` is False when a binary catalog was
            rejected

        Raises:
            CatalogSyntaxError: Text catalog is malformed
        """
        fmt = catalog_format or detect_catalog_format(source)
        with self._guard():
            try:
                parsed = self._parse(source, fmt, source_path, use_fuzzy, max_source_size)
            except CatalogSyntaxError as e:
                logger.error("Failed to parse catalog %s: %s", source_path or "<memory>", e)
                raise
            if not parsed.ok:
                return CatalogLoadReport(
                    source_path=source_path,
                    catalog_format=fmt,
                    ok=False,
                    diagnostics=parsed.diagnostics,
                )
            return self._merge(parsed, converter or CodecConverter())

    @staticmethod
    def _parse(
        source: CatalogSource,
        fmt: CatalogFormat,
        source_path: str,
        use_fuzzy: bool,
        max_source_size: int | None,
    ) -> ParsedCatalog:
        match fmt:
            case CatalogFormat.MO:
                data = source.encode("utf-8") if isinstance(source, str) else source
                return BinaryCatalogParser(max_source_size=max_source_size).parse(
                    data, source_path=source_path
                )
            case CatalogFormat.PO:
                parser = TextCatalogParser(use_fuzzy=use_fuzzy, max_source_size=max_source_size)
                return parser.parse(source, source_path=source_path)

    def _merge(self, parsed: ParsedCatalog, converter: CharsetConverter) -> CatalogLoadReport:
        diagnostics = list(parsed.diagnostics)

        if not converter.set_charsets(parsed.charset, self._charset):
            diagnostics.append(ErrorTemplate.conversion_unavailable(parsed.charset, self._charset))

        if parsed.plural_forms and not self.set_plural_forms(parsed.plural_forms):
            diagnostics.append(
                ErrorTemplate.plural_forms_mismatch(
                    self._plural_forms.expression, parsed.plural_forms.expression
                )
            )

        if parsed.header and not self._header:
            self._header = _decode(converter.convert(parsed.header), self._charset)

        added = 0
        for raw in parsed.entries:
            entry = self._decode_entry(raw, parsed.charset, converter)
            if self.add_entry(entry):
                added += 1

        source = parsed.source_path or "<memory>"
        logger.info(
            "Added catalog %s: %d entries, %d new, charset %s",
            source,
            len(parsed.entries),
            added,
            parsed.charset,
        )
        return CatalogLoadReport(
            source_path=parsed.source_path,
            catalog_format=parsed.catalog_format,
            ok=True,
            entry_count=len(parsed.entries),
            added=added,
            charset=parsed.charset,
            diagnostics=tuple(diagnostics),
        )

    def _decode_entry(
        self, raw: RawEntry, charset: str, converter: CharsetConverter
    ) -> CatalogEntry:
        return CatalogEntry(
            message_id=_decode(raw.message_id, charset),
            variants=tuple(_decode(converter.convert(v), self._charset) for v in raw.variants),
            message_id_plural=(
                _decode(raw.message_id_plural, charset) if raw.message_id_plural is not None else None
            ),
            context=_decode(raw.context, charset) if raw.context is not None else None,
        )
