"""
Constants for the PXPACK map format.
"""

from enum import Enum

# Map file naming
MAP_EXTENSION = '.pxpack'

# Strings are stored in the game's legacy charset
ENCODING = 'shift_jis'

# Section magics
HEAD_MAGIC = b'PXPACK121127a**\x00'
LAYER_MAGIC = b'pxMAP01\x00'

# Fixed section shapes
NUM_LAYERS = 3
NUM_REF_MAPS = 4
NUM_HEAD_RESERVED = 5
NUM_ENTITY_DATA = 2

# String limits (encoded bytes)
DESCRIPTION_MAX_LEN = 31
FILENAME_MAX_LEN = 15
ENTITY_NAME_MAX_LEN = 15

# Value ranges
MAX_BYTE = 0xFF
MAX_UINT16 = 0xFFFF
MAX_VISIBILITY_TYPE = 32
MAX_SCROLL_TYPE = 9

# Defaults for a map that does not exist on disk yet
DEFAULT_TILESET_NAMES = ('mpt00', '', '')
DEFAULT_VISIBILITY_TYPES = (2, 2, 2)
DEFAULT_SCROLL_TYPES = (0, 0, 1)


class FieldKind(str, Enum):
    """Kind of length-prefixed string stored in a map file."""

    DESCRIPTION = 'description'
    MAP_NAME = 'map name'
    SPRITESHEET_NAME = 'spritesheet name'
    TILESET_NAME = 'tileset name'
    ENTITY_NAME = 'entity name'

    @property
    def max_length(self) -> int:
        if self is FieldKind.DESCRIPTION:
            return DESCRIPTION_MAX_LEN
        if self is FieldKind.ENTITY_NAME:
            return ENTITY_NAME_MAX_LEN
        return FILENAME_MAX_LEN

    @property
    def allows_spaces(self) -> bool:
        # Only the free-form description may contain spaces
        return self is FieldKind.DESCRIPTION
