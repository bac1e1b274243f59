"""Tile layer of a PXPACK map.

A layer is either absent or a rectangular grid of byte tile indices stored
row-major. On disk:

- 8-byte layer magic
- uint16 width, uint16 height
- if width * height > 0: one reserved byte (always 0) and the grid bytes
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

from keroedit.const import LAYER_MAGIC, MAX_BYTE, MAX_UINT16
from keroedit.errors import (
    ArityMismatch,
    BadLayerMagic,
    DimensionOverflow,
    IndexOutOfBounds,
    TileValueOutOfRange,
)
from keroedit.log import log

if TYPE_CHECKING:
    from keroedit.io.reader import Reader
    from keroedit.io.writer import Writer


def _check_dimensions(width: int, height: int) -> None:
    if width < 0 or height < 0 or width > MAX_UINT16 or height > MAX_UINT16:
        raise DimensionOverflow(width, height)


def _check_tile(x: int, y: int, value: int) -> None:
    if not isinstance(value, int) or isinstance(value, bool) or value < 0 or value > MAX_BYTE:
        raise TileValueOutOfRange(x, y, value)


class TileLayer:
    """One of the three fixed layers of a map."""

    def __init__(self, tiles: Sequence[Sequence[int]] | None = None) -> None:
        """Create a layer from a list of rows, or an absent layer.

        An empty grid (no rows, or rows of width 0) gives an absent layer.
        """
        self._width = 0
        self._height = 0
        self._data: bytearray | None = None

        if not tiles:
            return
        if not tiles[0]:
            for y, row in enumerate(tiles):
                if len(row) != 0:
                    raise ArityMismatch(f'tile layer row {y}', 0, len(row))
            return

        height = len(tiles)
        width = len(tiles[0])
        _check_dimensions(width, height)

        data = bytearray(width * height)
        for y, row in enumerate(tiles):
            if len(row) != width:
                raise ArityMismatch(f'tile layer row {y}', width, len(row))
            for x, value in enumerate(row):
                _check_tile(x, y, value)
                data[y * width + x] = value

        self._width = width
        self._height = height
        self._data = data

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def is_empty(self) -> bool:
        return self._data is None

    @property
    def tiles(self) -> list[list[int]] | None:
        """Copy of the grid as a list of rows, or None for an absent layer."""
        if self._data is None:
            return None
        return [list(self._data[y * self._width : (y + 1) * self._width]) for y in range(self._height)]

    def _offset(self, x: int, y: int) -> int:
        if self._data is None or not (0 <= x < self._width and 0 <= y < self._height):
            raise IndexOutOfBounds(x, y, self._width, self._height)
        return y * self._width + x

    def get_tile(self, x: int, y: int) -> int:
        return self._data[self._offset(x, y)]

    def set_tile(self, x: int, y: int, value: int) -> None:
        _check_tile(x, y, value)
        self._data[self._offset(x, y)] = value

    def resize(self, width: int, height: int) -> None:
        """Resize the layer in place.

        Cells in the overlapping top-left region keep their values, new cells
        are 0. A width or height of 0 makes the layer absent.
        """
        _check_dimensions(width, height)

        if width == 0 or height == 0:
            self._width = self._height = 0
            self._data = None
            return

        if width == self._width and height == self._height:
            return

        data = bytearray(width * height)
        if self._data is not None:
            copy_width = min(width, self._width)
            for y in range(min(height, self._height)):
                src = y * self._width
                dst = y * width
                data[dst : dst + copy_width] = self._data[src : src + copy_width]

        self._width = width
        self._height = height
        self._data = data

    @classmethod
    def read(cls, reader: Reader, layer_index: int) -> TileLayer:
        """Read TileLayer from reader.

        Args:
            reader: Binary reader
            layer_index: Slot of the layer, used in error messages
        """
        magic = reader.read_bytes(len(LAYER_MAGIC))
        if magic != LAYER_MAGIC:
            raise BadLayerMagic(layer_index, magic)

        width = reader.read_uint16()
        height = reader.read_uint16()
        layer = cls()
        if width * height == 0:
            log.debug(f'Layer {layer_index}: empty')
            return layer

        reserved = reader.read_uint8()
        if reserved != 0:
            log.warning(f'Unexpected non-zero reserved byte in layer {layer_index}: {reserved}')

        layer._width = width
        layer._height = height
        layer._data = bytearray(reader.read_bytes(width * height))
        log.debug(f'Layer {layer_index}: {width}x{height}')
        return layer

    def write(self, writer: Writer) -> None:
        """Write TileLayer to writer."""
        writer.write_bytes(LAYER_MAGIC)
        if self._data is None:
            writer.write_uint16(0)
            writer.write_uint16(0)
            return

        writer.write_uint16(self._width)
        writer.write_uint16(self._height)
        writer.write_zeros(1)
        writer.write_bytes(bytes(self._data))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TileLayer):
            return NotImplemented
        return self._width == other._width and self._height == other._height and self._data == other._data

    def __repr__(self) -> str:
        if self._data is None:
            return 'TileLayer(empty)'
        return f'TileLayer({self._width}x{self._height})'

    def __str__(self) -> str:
        lines = [f'Width: {self._width:02X}', f'Height: {self._height:02X}']
        for row in self.tiles or []:
            lines.append(' '.join(f'{tile:02X}' for tile in row))
        return '\n'.join(lines)
