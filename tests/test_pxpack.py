"""
Tests for map file load, save and rename.
"""

from pathlib import Path

import pytest

from keroedit.const import HEAD_MAGIC, LAYER_MAGIC
from keroedit.errors import (
    ArityMismatch,
    BadHeaderMagic,
    BadLayerMagic,
    FieldConstraintViolated,
    InvalidMapPath,
    MapIOError,
    PxPackError,
    StringTooLong,
)
from keroedit.io.reader import Reader
from keroedit.model.color import Color
from keroedit.model.entity import Entity
from keroedit.model.head import Head
from keroedit.model.pxpack import PxPack
from keroedit.model.tile_layer import TileLayer


class TestLoad:
    def test_sample(self, sample_map_path: Path) -> None:
        pxpack = PxPack.load(sample_map_path)

        assert pxpack.name == 'sample'
        assert pxpack.path == sample_map_path.absolute()
        assert pxpack.head.description == 'Test map'

        layers = pxpack.tile_layers
        assert layers[0].tiles == [[5, 200]]
        assert layers[1].is_empty
        assert layers[2].tiles == [[1, 2, 3], [4, 5, 6]]

        assert pxpack.entities == [
            Entity(flag=1, type=10, unknown_byte=0, x=5, y=7, data=[0, 0], name=''),
            Entity(flag=0, type=255, unknown_byte=3, x=300, y=65535, data=[9, 8], name='door'),
        ]

    def test_missing_file_gives_new_map(self, tmp_path: Path) -> None:
        path = tmp_path / 'new.pxpack'
        pxpack = PxPack.load(path)

        assert pxpack.head == Head.default()
        assert pxpack.head.bg_color == Color(0, 0, 0)
        assert all(layer.is_empty for layer in pxpack.tile_layers)
        assert pxpack.entities == []
        assert not path.exists()

    def test_wrong_extension(self, tmp_path: Path) -> None:
        with pytest.raises(InvalidMapPath):
            PxPack.load(tmp_path / 'map.bin')

    def test_bad_header_magic_stops_reading(self, sample_map_data: bytes) -> None:
        data = b'X' + sample_map_data[1:]
        reader = Reader(data)
        with pytest.raises(BadHeaderMagic):
            PxPack.read(reader, Path('bad.pxpack'))
        assert reader.position == len(HEAD_MAGIC)

    def test_bad_layer_magic(self, sample_map_data: bytes) -> None:
        index = sample_map_data.index(LAYER_MAGIC, sample_map_data.index(LAYER_MAGIC) + 1)
        data = sample_map_data[:index] + b'PXMAP01\x00' + sample_map_data[index + len(LAYER_MAGIC) :]
        with pytest.raises(BadLayerMagic) as exc_info:
            PxPack.from_bytes(data, Path('bad.pxpack'))
        assert exc_info.value.layer_index == 1

    @pytest.mark.parametrize('cut', [5, len(HEAD_MAGIC) + 3, 60, -1])
    def test_truncated_file(self, sample_map_data: bytes, cut: int) -> None:
        with pytest.raises(MapIOError):
            PxPack.from_bytes(sample_map_data[:cut], Path('short.pxpack'))

    def test_trailing_bytes_ignored(self, sample_map_data: bytes, tmp_path: Path) -> None:
        pxpack = PxPack.from_bytes(sample_map_data + b'\x00\x00', tmp_path / 'a.pxpack')
        assert len(pxpack.entities) == 2

    def test_entity_count_is_unsigned(self, sample_map_data: bytes) -> None:
        # Count 0x8000 with no records behind it must be a short read, not a negative count
        end = sample_map_data.index(b'\x02\x00\x01\x0a')
        data = sample_map_data[:end] + b'\x00\x80'
        with pytest.raises(MapIOError):
            PxPack.from_bytes(data, Path('count.pxpack'))


class TestSave:
    def test_unmodified_round_trip_is_byte_identical(self, sample_map_path: Path, sample_map_data: bytes) -> None:
        pxpack = PxPack.load(sample_map_path)
        pxpack.save()
        assert sample_map_path.read_bytes() == sample_map_data

    def test_round_trip_after_edits(self, sample_map_path: Path) -> None:
        pxpack = PxPack.load(sample_map_path)
        pxpack.head.description = 'edited map'
        pxpack.head.set_tileset_name(1, 'mpt01')
        pxpack.head.bg_color = Color(255, 128, 0)
        pxpack.tile_layers[1].resize(4, 3)
        pxpack.tile_layers[1].set_tile(3, 2, 77)
        pxpack.tile_layers[2].resize(0, 0)
        pxpack.entities.append(Entity(type=5, x=10, y=20, name='new'))
        del pxpack.entities[0]
        pxpack.save()

        reloaded = PxPack.load(sample_map_path)
        assert reloaded == pxpack
        assert reloaded.tile_layers[1].get_tile(3, 2) == 77
        assert reloaded.tile_layers[2].is_empty
        assert [e.name for e in reloaded.entities] == ['door', 'new']

    def test_new_map_round_trip(self, tmp_path: Path) -> None:
        path = tmp_path / 'fresh.pxpack'
        pxpack = PxPack.load(path)
        pxpack.tile_layers[0].resize(2, 2)
        pxpack.save()

        assert path.exists()
        assert PxPack.load(path) == pxpack

    def test_layers_written_in_slot_order(self, tmp_path: Path) -> None:
        layers = [TileLayer(), TileLayer([[1]]), TileLayer([[2, 3]])]
        pxpack = PxPack(tmp_path / 'order.pxpack', tile_layers=layers)
        data = pxpack.to_bytes()

        first = data.index(LAYER_MAGIC)
        second = data.index(LAYER_MAGIC, first + 1)
        third = data.index(LAYER_MAGIC, second + 1)
        assert data[first + 8 : second] == b'\x00\x00\x00\x00'
        assert data[second + 8 : third] == b'\x01\x00\x01\x00\x00\x01'
        assert data[third + 8 :] == b'\x02\x00\x01\x00\x00\x02\x03' + b'\x00\x00'

    def test_too_many_entities_leaves_file_untouched(self, sample_map_path: Path, sample_map_data: bytes) -> None:
        pxpack = PxPack.load(sample_map_path)
        pxpack.entities.extend(Entity() for _ in range(0x10000))
        with pytest.raises(FieldConstraintViolated):
            pxpack.save()
        assert sample_map_path.read_bytes() == sample_map_data

    def test_save_to_missing_directory(self, tmp_path: Path) -> None:
        pxpack = PxPack(tmp_path / 'missing' / 'a.pxpack')
        with pytest.raises(MapIOError):
            pxpack.save()

    def test_wrong_number_of_tile_layers(self, tmp_path: Path) -> None:
        with pytest.raises(ArityMismatch) as exc_info:
            PxPack(tmp_path / 'a.pxpack', tile_layers=[TileLayer(), TileLayer()])
        assert isinstance(exc_info.value, PxPackError)
        assert exc_info.value.actual == 2

    def test_tile_layers_share_layer_objects(self, tmp_path: Path) -> None:
        pxpack = PxPack(tmp_path / 'a.pxpack')
        assert isinstance(pxpack.tile_layers, tuple)
        assert pxpack.tile_layers[0] is pxpack.tile_layers[0]


class TestRename:
    def test_rename(self, sample_map_path: Path) -> None:
        pxpack = PxPack.load(sample_map_path)
        pxpack.rename('renamed')

        assert pxpack.name == 'renamed'
        assert pxpack.path == sample_map_path.with_name('renamed.pxpack').absolute()
        assert pxpack.path.exists()
        assert not sample_map_path.exists()

    def test_name_too_long_fails_before_moving(self, sample_map_path: Path) -> None:
        pxpack = PxPack.load(sample_map_path)
        with pytest.raises(StringTooLong):
            pxpack.rename('a' * 16)

        assert sample_map_path.exists()
        assert pxpack.path == sample_map_path.absolute()
        assert list(sample_map_path.parent.iterdir()) == [sample_map_path]

    @pytest.mark.parametrize('new_name', ['', 'x/y', '..'])
    def test_name_must_be_plain_file_name(self, sample_map_path: Path, new_name: str) -> None:
        pxpack = PxPack.load(sample_map_path)
        with pytest.raises(FieldConstraintViolated):
            pxpack.rename(new_name)

        assert sample_map_path.exists()
        assert pxpack.path == sample_map_path.absolute()
        assert list(sample_map_path.parent.iterdir()) == [sample_map_path]

    def test_max_length_name(self, sample_map_path: Path) -> None:
        pxpack = PxPack.load(sample_map_path)
        pxpack.rename('a' * 15)
        assert pxpack.name == 'a' * 15

    def test_target_exists(self, sample_map_path: Path) -> None:
        other = sample_map_path.with_name('other.pxpack')
        other.write_bytes(b'keep')
        pxpack = PxPack.load(sample_map_path)

        with pytest.raises(MapIOError):
            pxpack.rename('other')
        assert other.read_bytes() == b'keep'
        assert pxpack.path == sample_map_path.absolute()

    def test_unsaved_map(self, tmp_path: Path) -> None:
        pxpack = PxPack.load(tmp_path / 'unsaved.pxpack')
        with pytest.raises(MapIOError):
            pxpack.rename('other')
        assert pxpack.name == 'unsaved'


def test_str_dump(sample_map_path: Path) -> None:
    text = str(PxPack.load(sample_map_path))
    assert text.startswith('Name: sample.pxpack')
    assert '05 C8' in text
    assert 'Entities: 2' in text
