"""Binary reader with position tracking for map file parsing."""

from __future__ import annotations

import struct

from keroedit.const import FieldKind
from keroedit.errors import MapIOError, StringTooLong
from keroedit.io.strings import decode_string


class Reader:
    """Binary reader with position tracking and little-endian support."""

    def __init__(self, data: bytes) -> None:
        self._data = data
        self._position = 0

    @property
    def position(self) -> int:
        """Current read position."""
        return self._position

    @property
    def remaining(self) -> int:
        """Bytes remaining to read."""
        return len(self._data) - self._position

    def read_bytes(self, count: int) -> bytes:
        """Read raw bytes, failing on a short read."""
        if self._position + count > len(self._data):
            raise MapIOError(f'Cannot read {count} bytes at position {self._position}, only {self.remaining} remaining')
        result = self._data[self._position : self._position + count]
        self._position += count
        return result

    def read_uint8(self) -> int:
        """Read unsigned 8-bit integer."""
        return struct.unpack('<B', self.read_bytes(1))[0]

    def read_uint16(self) -> int:
        """Read unsigned 16-bit integer (little-endian)."""
        return struct.unpack('<H', self.read_bytes(2))[0]

    def read_string(self, max_length: int, kind: FieldKind) -> str:
        """Read a length-prefixed string.

        Format:
        - one unsigned length byte
        - that many Shift-JIS encoded bytes

        Raises:
            StringTooLong: declared length is above max_length
            IllegalCharacter: string contains a space and kind forbids it
        """
        length = self.read_uint8()
        if length > max_length:
            raise StringTooLong(kind.value, None, max_length, length)
        return decode_string(self.read_bytes(length), kind)
