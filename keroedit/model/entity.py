"""Entity records placed on a PXPACK map."""

from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

from keroedit.const import MAX_BYTE, MAX_UINT16, NUM_ENTITY_DATA, FieldKind
from keroedit.io.strings import encode_string
from keroedit.model.fields import check_arity, check_index, check_range

if TYPE_CHECKING:
    from keroedit.io.reader import Reader
    from keroedit.io.writer import Writer


class Entity:
    """A placed object: 9-byte record followed by a length-prefixed name.

    Record layout:
    - flag (uint8)
    - type (uint8)
    - unknown byte (uint8), possibly a subtype
    - x, y (uint16 each)
    - 2 data bytes
    """

    RECORD_SIZE = 9

    def __init__(
        self,
        flag: int = 0,
        type: int = 0,
        unknown_byte: int = 0,
        x: int = 0,
        y: int = 0,
        data: Sequence[int] = (0, 0),
        name: str = '',
    ) -> None:
        check_arity('entity data', data, NUM_ENTITY_DATA)
        self.flag = flag
        self.type = type
        self.unknown_byte = unknown_byte
        self.set_coordinates(x, y)
        self._data = [0] * NUM_ENTITY_DATA
        for i, value in enumerate(data):
            self.set_data(i, value)
        self.name = name

    @property
    def flag(self) -> int:
        return self._flag

    @flag.setter
    def flag(self, value: int) -> None:
        self._flag = check_range('entity flag', value, 0, MAX_BYTE)

    @property
    def type(self) -> int:
        return self._type

    @type.setter
    def type(self, value: int) -> None:
        self._type = check_range('entity type', value, 0, MAX_BYTE)

    @property
    def unknown_byte(self) -> int:
        return self._unknown_byte

    @unknown_byte.setter
    def unknown_byte(self, value: int) -> None:
        self._unknown_byte = check_range('entity unknown byte', value, 0, MAX_BYTE)

    @property
    def x(self) -> int:
        return self._x

    @x.setter
    def x(self, value: int) -> None:
        self._x = check_range('entity x', value, 0, MAX_UINT16)

    @property
    def y(self) -> int:
        return self._y

    @y.setter
    def y(self, value: int) -> None:
        self._y = check_range('entity y', value, 0, MAX_UINT16)

    def set_coordinates(self, x: int, y: int) -> None:
        # Validate both before assigning either
        check_range('entity x', x, 0, MAX_UINT16)
        check_range('entity y', y, 0, MAX_UINT16)
        self._x = x
        self._y = y

    @property
    def data(self) -> bytes:
        return bytes(self._data)

    def set_data(self, index: int, value: int) -> None:
        check_index('entity data', index, NUM_ENTITY_DATA)
        self._data[index] = check_range('entity data', value, 0, MAX_BYTE)

    @property
    def name(self) -> str:
        return self._name

    @name.setter
    def name(self, value: str) -> None:
        encode_string(value, FieldKind.ENTITY_NAME)
        self._name = value

    @classmethod
    def read(cls, reader: Reader) -> Entity:
        """Read Entity from reader."""
        flag = reader.read_uint8()
        type_ = reader.read_uint8()
        unknown_byte = reader.read_uint8()
        x = reader.read_uint16()
        y = reader.read_uint16()
        data = reader.read_bytes(NUM_ENTITY_DATA)
        name = reader.read_string(FieldKind.ENTITY_NAME.max_length, FieldKind.ENTITY_NAME)
        return cls(flag=flag, type=type_, unknown_byte=unknown_byte, x=x, y=y, data=list(data), name=name)

    def write(self, writer: Writer) -> None:
        """Write Entity to writer."""
        writer.write_uint8(self._flag)
        writer.write_uint8(self._type)
        writer.write_uint8(self._unknown_byte)
        writer.write_uint16(self._x)
        writer.write_uint16(self._y)
        writer.write_bytes(bytes(self._data))
        writer.write_string(self._name, FieldKind.ENTITY_NAME)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Entity):
            return NotImplemented
        return (
            self._flag == other._flag
            and self._type == other._type
            and self._unknown_byte == other._unknown_byte
            and self._x == other._x
            and self._y == other._y
            and self._data == other._data
            and self._name == other._name
        )

    def __repr__(self) -> str:
        return f'Entity(type={self._type}, x={self._x}, y={self._y}, name={self._name!r})'

    def __str__(self) -> str:
        return (
            f'Flag: {self._flag:02X} Type: {self._type:02X} Unknown: {self._unknown_byte:02X} '
            f'X: {self._x} Y: {self._y} Data: {self._data[0]:02X} {self._data[1]:02X} Name: {self._name}'
        )
