"""
Pytest configuration and shared fixtures.
"""

import struct
from pathlib import Path

import pytest

from keroedit.const import HEAD_MAGIC, LAYER_MAGIC


def _string(value: bytes) -> bytes:
    return bytes([len(value)]) + value


@pytest.fixture()
def sample_map_data() -> bytes:
    """A hand-assembled map with two present layers, one empty layer and two entities."""
    data = bytearray(HEAD_MAGIC)

    # Head
    data += _string(b'Test map')
    data += _string(b'm01') + _string(b'') + _string(b'') + _string(b'm02')
    data += _string(b'spr')
    data += bytes([1, 2, 3, 4, 5])
    data += bytes([0x10, 0x20, 0x30])
    data += _string(b'mpt00') + bytes([2, 0])
    data += _string(b'') + bytes([0, 0])
    data += _string(b'bg01') + bytes([2, 1])

    # Layer 0: 2x1
    data += LAYER_MAGIC + struct.pack('<HH', 2, 1) + b'\x00' + bytes([5, 200])
    # Layer 1: empty
    data += LAYER_MAGIC + struct.pack('<HH', 0, 0)
    # Layer 2: 3x2
    data += LAYER_MAGIC + struct.pack('<HH', 3, 2) + b'\x00' + bytes([1, 2, 3, 4, 5, 6])

    # Entities
    data += struct.pack('<H', 2)
    data += struct.pack('<BBBHH', 1, 10, 0, 5, 7) + bytes([0, 0]) + _string(b'')
    data += struct.pack('<BBBHH', 0, 255, 3, 300, 65535) + bytes([9, 8]) + _string(b'door')

    return bytes(data)


@pytest.fixture()
def sample_map_path(tmp_path: Path, sample_map_data: bytes) -> Path:
    """Write the sample map to a temporary .pxpack file."""
    path = tmp_path / 'sample.pxpack'
    path.write_bytes(sample_map_data)
    return path
