"""Catalog fixtures for tests.

Compiled catalogs are built in memory with only the parts the parser reads:
header, both descriptor tables and the string data. The hash table is left
empty. MemoryStorage serves catalog files from a dict.
"""

from __future__ import annotations

import io
from collections.abc import Sequence
from dataclasses import dataclass
from typing import BinaryIO

MAGIC = 0x950412DE


@dataclass(frozen=True, slots=True)
class MoMessage:
    """One catalog entry as fed to build_mo()."""

    message_id: str
    variants: tuple[str, ...]
    message_id_plural: str | None = None
    context: str | None = None

    def original(self, encoding: str) -> bytes:
        key = self.message_id.encode(encoding)
        if self.message_id_plural is not None:
            key += b"\x00" + self.message_id_plural.encode(encoding)
        if self.context is not None:
            key = self.context.encode(encoding) + b"\x04" + key
        return key

    def translation(self, encoding: str) -> bytes:
        return b"\x00".join(v.encode(encoding) for v in self.variants)


def header_text(charset: str = "UTF-8", plural_forms: str | None = None) -> str:
    """Header entry translation with Content-Type and optional Plural-Forms."""
    text = f"Content-Type: text/plain; charset={charset}\n"
    if plural_forms is not None:
        text += f"Plural-Forms: {plural_forms}\n"
    return text


def build_mo(
    messages: Sequence[MoMessage],
    *,
    header: str | None = None,
    byteorder: str = "little",
    encoding: str = "utf-8",
    revision: int = 0,
) -> bytes:
    """Serialize messages to compiled-catalog bytes.

    Args:
        messages: Entries in table order
        header: Header entry translation; None omits the header entry
        byteorder: "little" or "big"; "big" yields the swapped magic when
            read little-endian
        encoding: Encoding of every string
        revision: Revision word
    """
    pairs: list[tuple[bytes, bytes]] = []
    if header is not None:
        pairs.append((b"", header.encode(encoding)))
    pairs.extend((m.original(encoding), m.translation(encoding)) for m in messages)

    count = len(pairs)
    originals_offset = 28
    translations_offset = originals_offset + count * 8
    data_offset = translations_offset + count * 8

    def u32(value: int) -> bytes:
        return value.to_bytes(4, byteorder)

    blob = bytearray()
    original_table = bytearray()
    translation_table = bytearray()
    for original, _ in pairs:
        original_table += u32(len(original)) + u32(data_offset + len(blob))
        blob += original + b"\x00"
    for _, translation in pairs:
        translation_table += u32(len(translation)) + u32(data_offset + len(blob))
        blob += translation + b"\x00"

    head = b"".join(
        u32(word)
        for word in (MAGIC, revision, count, originals_offset, translations_offset, 0, data_offset)
    )
    return head + bytes(original_table) + bytes(translation_table) + bytes(blob)


SPANISH_PO = """\
msgid ""
msgstr ""
"Content-Type: text/plain; charset=UTF-8\\n"
"Plural-Forms: nplurals=2; plural=(n != 1);\\n"

msgid "File"
msgid_plural "Files"
msgstr[0] "Archivo"
msgstr[1] "Archivos"

msgctxt "success"
msgid "Congratulations!"
msgstr "¡Felicidades!"

msgctxt "failure"
msgid "Congratulations!"
msgstr "Lo siento"

msgid "Open"
msgstr "Abrir"
"""


class MemoryStorage:
    """CatalogStorage over a dict of ``directory/filename`` to bytes.

    Records every opened path so tests can assert what was read.
    """

    def __init__(self, files: dict[str, bytes | str]) -> None:
        self.files = {
            path: data.encode("utf-8") if isinstance(data, str) else data
            for path, data in files.items()
        }
        self.opened: list[str] = []

    def list_entries(self, directory: str) -> list[str]:
        prefix = directory.rstrip("/") + "/"
        return sorted(
            path.removeprefix(prefix)
            for path in self.files
            if path.startswith(prefix) and "/" not in path.removeprefix(prefix)
        )

    def open(self, path: str) -> BinaryIO:
        self.opened.append(path)
        try:
            return io.BytesIO(self.files[path])
        except KeyError:
            raise FileNotFoundError(path) from None
