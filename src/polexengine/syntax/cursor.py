"""Immutable byte cursor for compiled-catalog parsing.

Implements the immutable cursor pattern over a raw byte buffer.
Python 3.13+. Zero external dependencies.

Design Philosophy:
    - ByteCursor is immutable (frozen dataclass)
    - Offset-based accessors never depend on the cursor position, so they
      may be called in any order
    - Sequential reads return a NEW cursor inside a ParseResult
    - "Not found" is ``None``, never an exception: compiled catalogs
      legitimately omit context and plural separators
    - Out-of-range extraction raises EOFError

Byte Order:
    Compiled catalogs are written in the byte order of the machine that
    produced them. The ``swapped`` flag selects big-endian decoding of the
    32-bit fields; the flag is chosen once from the magic number.
"""

from dataclasses import dataclass, replace

__all__ = ["ByteCursor", "ParseResult"]

_U32_SIZE = 4


@dataclass(frozen=True, slots=True)
class ByteCursor:
    """Read-only view over a catalog buffer.

    Attributes:
        data: The complete catalog bytes (shared, never copied)
        pos: Read position used by sequential callers
        swapped: Decode 32-bit words as big-endian

    Example:
        >>> cursor = ByteCursor(b"\\xde\\x12\\x04\\x95rest")
        >>> hex(cursor.read_u32_at(0))
        '0x950412de'
        >>> cursor.find(b"rest")
        4
        >>> cursor.find_byte(0x04, 0, 8)
        2
        >>> cursor.find_byte(0x00, 0, 8) is None
        True
    """

    data: bytes
    pos: int = 0
    swapped: bool = False

    def __len__(self) -> int:
        return len(self.data)

    @property
    def is_eof(self) -> bool:
        """Check if the sequential position reached the end of the buffer."""
        return self.pos >= len(self.data)

    @property
    def byteorder(self) -> str:
        """Byte order name understood by ``int.from_bytes``."""
        return "big" if self.swapped else "little"

    def with_swapped(self, swapped: bool) -> "ByteCursor":
        """Return a cursor over the same buffer with a different byte order."""
        return replace(self, swapped=swapped)

    def in_bounds(self, start: int, length: int) -> bool:
        """Check that ``[start, start + length)`` lies inside the buffer."""
        return start >= 0 and length >= 0 and start + length <= len(self.data)

    def read_u32_at(self, offset: int) -> int:
        """Read an unsigned 32-bit word at an absolute offset.

        Args:
            offset: Byte offset of the word

        Returns:
            Decoded value honoring the byte-swap flag

        Raises:
            EOFError: If fewer than four bytes remain at offset
        """
        if not self.in_bounds(offset, _U32_SIZE):
            msg = f"Cannot read 32-bit word at offset {offset}: buffer is {len(self.data)} bytes"
            raise EOFError(msg)
        return int.from_bytes(self.data[offset : offset + _U32_SIZE], self.byteorder)

    def read_u32(self) -> "ParseResult[int]":
        """Read the word at the current position and advance past it.

        Example:
            >>> result = ByteCursor(bytes(8)).read_u32()
            >>> result.value, result.cursor.pos
            (0, 4)
        """
        value = self.read_u32_at(self.pos)
        return ParseResult(value, self.advance(_U32_SIZE))

    def advance(self, count: int = 1) -> "ByteCursor":
        """Return new cursor advanced by count bytes, clamped to the buffer end."""
        return replace(self, pos=min(self.pos + count, len(self.data)))

    def seek(self, pos: int) -> "ByteCursor":
        """Return new cursor at an absolute position."""
        return replace(self, pos=max(0, min(pos, len(self.data))))

    def find(self, pattern: bytes, start: int = 0, end: int | None = None) -> int | None:
        """Locate a byte pattern.

        Args:
            pattern: Bytes to search for (the whole pattern must match)
            start: Offset to start searching at
            end: Exclusive end of the searched range (default: buffer end)

        Returns:
            Offset of the first match, or None
        """
        if not pattern or start < 0 or start + len(pattern) > len(self.data):
            return None
        stop = len(self.data) if end is None else end
        index = self.data.find(pattern, start, stop)
        return None if index < 0 else index

    def find_byte(self, byte: int, start: int, length: int) -> int | None:
        """Locate a single delimiter byte inside a bounded range.

        Args:
            byte: Byte value to look for (e.g. 0x00 or 0x04)
            start: Start of the range
            length: Length of the range

        Returns:
            Offset of the first occurrence within ``[start, start + length)``,
            or None when absent or the range leaves the buffer
        """
        if not self.in_bounds(start, length):
            return None
        index = self.data.find(bytes((byte,)), start, start + length)
        return None if index < 0 else index

    def matches_at(self, pattern: bytes, offset: int | None = None) -> bool:
        """Check whether pattern occurs exactly at offset (default: position)."""
        at = self.pos if offset is None else offset
        return self.data.startswith(pattern, at)

    def slice(self, start: int, length: int) -> bytes:
        """Extract raw bytes, no decoding.

        Raises:
            EOFError: If the range leaves the buffer
        """
        if not self.in_bounds(start, length):
            msg = (
                f"Range [{start}, {start + length}) outside buffer "
                f"of {len(self.data)} bytes"
            )
            raise EOFError(msg)
        return self.data[start : start + length]

    def slice_until(self, start: int, delimiters: bytes = b"\n\x00") -> bytes:
        """Extract bytes from start up to (not including) the first delimiter.

        Used for line-like header fields such as the charset value.

        Args:
            start: Offset to start at
            delimiters: Any of these bytes ends the field

        Returns:
            The field bytes; empty when start is out of range or no
            delimiter follows
        """
        if start < 0 or start >= len(self.data):
            return b""
        for index in range(start, len(self.data)):
            if self.data[index] in delimiters:
                return self.data[start:index]
        return b""


@dataclass(frozen=True, slots=True)
class ParseResult[T]:
    """Parser result containing parsed value and new cursor position.

    Type Parameters:
        T: The type of the parsed value

    Example:
        >>> cursor = ByteCursor(b"\\x01\\x00\\x00\\x00")
        >>> result = cursor.read_u32()
        >>> result.value
        1
        >>> result.cursor.is_eof
        True
    """

    value: T
    cursor: ByteCursor
