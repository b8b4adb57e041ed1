"""Serialize dictionary entries back to text catalog syntax.

One-way, best-effort reconstruction for debugging and tests: the output
parses back to the same lookups, but comments, ordering and line wrapping
of any original file are not preserved.

Python 3.13+.
"""

from collections.abc import Iterable

from .entries import CatalogEntry

__all__ = ["CatalogSerializer", "escape_string", "serialize_catalog"]

_ESCAPES = str.maketrans({
    "\\": "\\\\",
    '"': '\\"',
    "\a": "\\a",
    "\b": "\\b",
    "\v": "\\v",
    "\t": "\\t",
    "\r": "\\r",
    "\n": "\\n",
})


def escape_string(text: str) -> str:
    """Escape text for use between double quotes.

    Example:
        >>> escape_string('Say "hi"\\n')
        'Say \\\\"hi\\\\"\\\\n'
    """
    return text.translate(_ESCAPES)


class CatalogSerializer:
    """Renders a header and entries as a text catalog.

    Strings containing inner line breaks are wrapped the way msgmerge does:
    an empty first segment, then one quoted segment per line.
    """

    __slots__ = ()

    def serialize(self, entries: Iterable[CatalogEntry], *, header: str = "") -> str:
        """Render a complete catalog.

        Args:
            entries: Entries in output order
            header: Header text (``Key: value`` lines), "" to omit the header

        Returns:
            Catalog text ending in a newline
        """
        blocks: list[str] = []
        if header:
            blocks.append(self._serialize_header(header))
        blocks.extend(self._serialize_entry(entry) for entry in entries)
        return "\n".join(blocks)

    def _serialize_header(self, header: str) -> str:
        lines = ['msgid ""', 'msgstr ""']
        lines.extend(f'"{escape_string(line)}"' for line in header.splitlines(keepends=True))
        return "\n".join(lines) + "\n"

    def _serialize_entry(self, entry: CatalogEntry) -> str:
        lines: list[str] = []
        if entry.context is not None:
            lines.extend(self._keyword("msgctxt", entry.context))
        lines.extend(self._keyword("msgid", entry.message_id))
        if entry.is_plural:
            plural = entry.message_id_plural
            lines.extend(self._keyword("msgid_plural", entry.message_id if plural is None else plural))
            for index, variant in enumerate(entry.variants):
                lines.extend(self._keyword(f"msgstr[{index}]", variant))
        else:
            lines.extend(self._keyword("msgstr", entry.translation))
        return "\n".join(lines) + "\n"

    def _keyword(self, keyword: str, text: str) -> list[str]:
        parts = text.splitlines(keepends=True)
        if len(parts) <= 1:
            return [f'{keyword} "{escape_string(text)}"']
        return [f'{keyword} ""', *(f'"{escape_string(part)}"' for part in parts)]


def serialize_catalog(entries: Iterable[CatalogEntry], *, header: str = "") -> str:
    """Render entries as text catalog source.

    Convenience wrapper around ``CatalogSerializer().serialize()``.
    """
    return CatalogSerializer().serialize(entries, header=header)
