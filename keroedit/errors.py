"""Exceptions raised while reading, validating and writing PXPACK maps.

Every failure in the codec derives from PxPackError. Storage problems are
MapIOError; malformed input or an invalid model value is a FormatError.
"""

from __future__ import annotations

from typing import Any


class PxPackError(Exception):
    """Base class for all map codec errors."""


class MapIOError(PxPackError, OSError):
    """Read, write or move failure on the underlying storage (including short reads)."""


class InvalidMapPath(PxPackError, ValueError):
    """Map path does not carry the map file extension."""

    def __init__(self, path: Any, extension: str) -> None:
        super().__init__(f'File {path} does not end with extension {extension}')
        self.path = path
        self.extension = extension


class FormatError(PxPackError, ValueError):
    """Malformed file data or a semantically invalid model value."""


class BadHeaderMagic(FormatError):
    def __init__(self, found: bytes, expected: bytes) -> None:
        super().__init__(f'Invalid map header {found!r} (expected {expected!r})')
        self.found = found
        self.expected = expected


class BadLayerMagic(FormatError):
    def __init__(self, layer_index: int, found: bytes) -> None:
        super().__init__(f'Invalid header {found!r} for tile layer {layer_index}')
        self.layer_index = layer_index
        self.found = found


class ArityMismatch(FormatError):
    def __init__(self, field: str, expected: int, actual: int) -> None:
        super().__init__(f'{field} has {actual} elements, {expected} expected')
        self.field = field
        self.expected = expected
        self.actual = actual


class FieldConstraintViolated(FormatError):
    def __init__(self, field: str, value: Any, reason: str = '') -> None:
        message = f'Invalid value for {field}: {value!r}'
        if reason:
            message += f' ({reason})'
        super().__init__(message)
        self.field = field
        self.value = value
        self.reason = reason


class StringTooLong(FieldConstraintViolated):
    def __init__(self, field: str, value: Any, max_length: int, length: int) -> None:
        super().__init__(field, value, f'length {length} exceeds maximum of {max_length}')
        self.max_length = max_length
        self.length = length


class IllegalCharacter(FieldConstraintViolated):
    def __init__(self, field: str, value: Any, character: str = ' ') -> None:
        super().__init__(field, value, f'{character!r} is not allowed')
        self.character = character


class DimensionOverflow(FormatError):
    def __init__(self, width: int, height: int) -> None:
        super().__init__(f'Tile layer dimensions {width}x{height} outside range 0 - 65535')
        self.width = width
        self.height = height


class TileValueOutOfRange(FormatError):
    def __init__(self, x: int, y: int, value: int) -> None:
        super().__init__(f'Tile at ({x}, {y}) set to {value}, outside range 0 - 255')
        self.x = x
        self.y = y
        self.value = value


class IndexOutOfBounds(FormatError, IndexError):
    def __init__(self, x: int, y: int, width: int, height: int) -> None:
        super().__init__(f'Tile ({x}, {y}) outside layer of size {width}x{height}')
        self.x = x
        self.y = y
        self.width = width
        self.height = height
