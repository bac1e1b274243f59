"""Head record of a PXPACK map.

The head follows the file magic and holds the map's metadata: description,
neighbouring map names, spritesheet, background color and the per-layer
tileset, visibility and scroll settings.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

from keroedit.const import (
    DEFAULT_SCROLL_TYPES,
    DEFAULT_TILESET_NAMES,
    DEFAULT_VISIBILITY_TYPES,
    MAX_BYTE,
    MAX_SCROLL_TYPE,
    MAX_VISIBILITY_TYPE,
    NUM_HEAD_RESERVED,
    NUM_LAYERS,
    NUM_REF_MAPS,
    FieldKind,
)
from keroedit.errors import FieldConstraintViolated
from keroedit.io.strings import encode_string
from keroedit.log import log
from keroedit.model.color import BLACK, Color
from keroedit.model.fields import check_arity, check_index, check_range

if TYPE_CHECKING:
    from keroedit.io.reader import Reader
    from keroedit.io.writer import Writer


class Head:
    """Map metadata with validated fields.

    Every setter checks its value before assignment and list-valued
    properties return tuples, so the stored fields can only change through
    the setters.
    """

    def __init__(
        self,
        description: str,
        map_names: Sequence[str],
        spritesheet_name: str,
        reserved: Sequence[int],
        bg_color: Color,
        tileset_names: Sequence[str],
        visibility_types: Sequence[int],
        scroll_types: Sequence[int],
    ) -> None:
        check_arity('map names', map_names, NUM_REF_MAPS)
        check_arity('reserved bytes', reserved, NUM_HEAD_RESERVED)
        check_arity('tileset names', tileset_names, NUM_LAYERS)
        check_arity('visibility types', visibility_types, NUM_LAYERS)
        check_arity('scroll types', scroll_types, NUM_LAYERS)

        self._map_names = [''] * NUM_REF_MAPS
        self._reserved = [0] * NUM_HEAD_RESERVED
        self._tileset_names = [''] * NUM_LAYERS
        self._visibility_types = [0] * NUM_LAYERS
        self._scroll_types = [0] * NUM_LAYERS

        self.description = description
        for i, name in enumerate(map_names):
            self.set_map_name(i, name)
        self.spritesheet_name = spritesheet_name
        for i, value in enumerate(reserved):
            self.set_reserved(i, value)
        self.bg_color = bg_color
        for i in range(NUM_LAYERS):
            self.set_tileset_name(i, tileset_names[i])
            self.set_visibility_type(i, visibility_types[i])
            self.set_scroll_type(i, scroll_types[i])

    @classmethod
    def default(cls) -> Head:
        """Head used for a map that has not been saved yet."""
        return cls(
            description='',
            map_names=[''] * NUM_REF_MAPS,
            spritesheet_name='',
            reserved=[0] * NUM_HEAD_RESERVED,
            bg_color=BLACK,
            tileset_names=DEFAULT_TILESET_NAMES,
            visibility_types=DEFAULT_VISIBILITY_TYPES,
            scroll_types=DEFAULT_SCROLL_TYPES,
        )

    # Accessors

    @property
    def description(self) -> str:
        return self._description

    @description.setter
    def description(self, value: str) -> None:
        encode_string(value, FieldKind.DESCRIPTION)
        self._description = value

    @property
    def map_names(self) -> tuple[str, ...]:
        return tuple(self._map_names)

    def set_map_name(self, index: int, name: str) -> None:
        check_index('map name', index, NUM_REF_MAPS)
        encode_string(name, FieldKind.MAP_NAME)
        self._map_names[index] = name

    @property
    def spritesheet_name(self) -> str:
        return self._spritesheet_name

    @spritesheet_name.setter
    def spritesheet_name(self, value: str) -> None:
        encode_string(value, FieldKind.SPRITESHEET_NAME)
        self._spritesheet_name = value

    @property
    def reserved(self) -> bytes:
        """The five unknown bytes following the spritesheet name."""
        return bytes(self._reserved)

    def set_reserved(self, index: int, value: int) -> None:
        check_index('reserved byte', index, NUM_HEAD_RESERVED)
        self._reserved[index] = check_range('reserved byte', value, 0, MAX_BYTE)

    @property
    def bg_color(self) -> Color:
        return self._bg_color

    @bg_color.setter
    def bg_color(self, color: Color) -> None:
        if not isinstance(color, Color):
            raise FieldConstraintViolated('background color', color, 'not a Color')
        if not color.is_opaque:
            raise FieldConstraintViolated('background color', color, 'must be opaque')
        self._bg_color = color

    @property
    def tileset_names(self) -> tuple[str, ...]:
        return tuple(self._tileset_names)

    def set_tileset_name(self, index: int, name: str) -> None:
        check_index('tileset name', index, NUM_LAYERS)
        # Only the first layer's tileset is required
        if index == 0 and name == '':
            raise FieldConstraintViolated('tileset name', name, 'first tileset is required')
        encode_string(name, FieldKind.TILESET_NAME)
        self._tileset_names[index] = name

    @property
    def visibility_types(self) -> tuple[int, ...]:
        return tuple(self._visibility_types)

    def set_visibility_type(self, index: int, value: int) -> None:
        """Set a layer's visibility byte.

        0 hides the layer and 2 shows it; other values up to 32 make the game
        pull tiles from the wrong offsets, anything larger crashes it.
        """
        check_index('visibility type', index, NUM_LAYERS)
        self._visibility_types[index] = check_range('visibility type', value, 0, MAX_VISIBILITY_TYPE)

    @property
    def scroll_types(self) -> tuple[int, ...]:
        return tuple(self._scroll_types)

    def set_scroll_type(self, index: int, value: int) -> None:
        check_index('scroll type', index, NUM_LAYERS)
        self._scroll_types[index] = check_range('scroll type', value, 0, MAX_SCROLL_TYPE)

    # Serialization

    @classmethod
    def read(cls, reader: Reader) -> Head:
        """Read Head from reader (starts right after the file magic)."""
        description = reader.read_string(FieldKind.DESCRIPTION.max_length, FieldKind.DESCRIPTION)
        map_names = [reader.read_string(FieldKind.MAP_NAME.max_length, FieldKind.MAP_NAME) for _ in range(NUM_REF_MAPS)]
        spritesheet_name = reader.read_string(FieldKind.SPRITESHEET_NAME.max_length, FieldKind.SPRITESHEET_NAME)
        reserved = reader.read_bytes(NUM_HEAD_RESERVED)
        red, green, blue = reader.read_bytes(3)

        tileset_names: list[str] = []
        visibility_types: list[int] = []
        scroll_types: list[int] = []
        for i in range(NUM_LAYERS):
            name = reader.read_string(FieldKind.TILESET_NAME.max_length, FieldKind.TILESET_NAME)
            if i == 0 and name == '':
                raise FieldConstraintViolated('tileset name', name, 'first tileset is required')
            tileset_names.append(name)
            visibility_types.append(reader.read_uint8())
            scroll_types.append(reader.read_uint8())

        log.debug(f'Head: description={description!r}, tilesets={tileset_names}')

        return cls(
            description=description,
            map_names=map_names,
            spritesheet_name=spritesheet_name,
            reserved=list(reserved),
            bg_color=Color(red, green, blue),
            tileset_names=tileset_names,
            visibility_types=visibility_types,
            scroll_types=scroll_types,
        )

    def write(self, writer: Writer) -> None:
        """Write Head to writer."""
        writer.write_string(self._description, FieldKind.DESCRIPTION)
        for name in self._map_names:
            writer.write_string(name, FieldKind.MAP_NAME)
        writer.write_string(self._spritesheet_name, FieldKind.SPRITESHEET_NAME)
        writer.write_bytes(bytes(self._reserved))
        writer.write_bytes(bytes(self._bg_color.to_rgb()))
        for i in range(NUM_LAYERS):
            writer.write_string(self._tileset_names[i], FieldKind.TILESET_NAME)
            writer.write_uint8(self._visibility_types[i])
            writer.write_uint8(self._scroll_types[i])

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Head):
            return NotImplemented
        return (
            self._description == other._description
            and self._map_names == other._map_names
            and self._spritesheet_name == other._spritesheet_name
            and self._reserved == other._reserved
            and self._bg_color == other._bg_color
            and self._tileset_names == other._tileset_names
            and self._visibility_types == other._visibility_types
            and self._scroll_types == other._scroll_types
        )

    def __repr__(self) -> str:
        return f'Head(description={self._description!r}, tileset_names={self._tileset_names!r})'

    def __str__(self) -> str:
        lines = [f'Description: {self._description}']
        for i, name in enumerate(self._map_names):
            lines.append(f'Map Name {i}: {name}')
        lines.append(f'Spritesheet Name: {self._spritesheet_name}')
        lines.append('Reserved: ' + ' '.join(f'{b:02X}' for b in self._reserved))
        lines.append(f'Background Color: {self._bg_color}')
        for i in range(NUM_LAYERS):
            lines.append(
                f'Layer {i}: tileset={self._tileset_names[i]} '
                f'visibility={self._visibility_types[i]} scroll={self._scroll_types[i]}'
            )
        return '\n'.join(lines)
