"""Binary writer for map file serialization."""

from __future__ import annotations

import io
import struct

from keroedit.const import FieldKind
from keroedit.io.strings import encode_string


class Writer:
    """In-memory binary writer with little-endian support."""

    def __init__(self) -> None:
        self._buffer = io.BytesIO()

    @property
    def position(self) -> int:
        """Current write position."""
        return self._buffer.tell()

    def to_bytes(self) -> bytes:
        """Get all written data as bytes."""
        return self._buffer.getvalue()

    def write_bytes(self, data: bytes) -> None:
        """Write raw bytes."""
        self._buffer.write(data)

    def write_uint8(self, value: int) -> None:
        """Write unsigned 8-bit integer."""
        self._buffer.write(struct.pack('<B', value))

    def write_uint16(self, value: int) -> None:
        """Write unsigned 16-bit integer (little-endian)."""
        self._buffer.write(struct.pack('<H', value))

    def write_string(self, value: str, kind: FieldKind) -> None:
        """Write a length-prefixed string.

        The value is validated with the same rules the reader applies, so an
        over-long string raises StringTooLong instead of producing a length
        byte that disagrees with the data.
        """
        data = encode_string(value, kind)
        self.write_uint8(len(data))
        self._buffer.write(data)

    def write_zeros(self, count: int) -> None:
        """Write zero bytes (for reserved fields)."""
        self._buffer.write(b'\x00' * count)
