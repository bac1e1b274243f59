"""PxPack - top-level entry point for map file operations."""

from __future__ import annotations

import os
from pathlib import Path

from keroedit.const import ENCODING, FILENAME_MAX_LEN, HEAD_MAGIC, MAP_EXTENSION, MAX_UINT16, NUM_LAYERS
from keroedit.errors import BadHeaderMagic, FieldConstraintViolated, InvalidMapPath, MapIOError, StringTooLong
from keroedit.io.reader import Reader
from keroedit.io.writer import Writer
from keroedit.log import log
from keroedit.model.entity import Entity
from keroedit.model.fields import check_arity
from keroedit.model.head import Head
from keroedit.model.tile_layer import TileLayer


class PxPack:
    """A map file: Head, three TileLayers and a list of Entities.

    Layers are fixed to their slot and are resized in place, never
    replaced. The entity list is returned as-is so the editor can add and
    remove entities directly.
    """

    def __init__(
        self,
        path: Path,
        head: Head | None = None,
        tile_layers: list[TileLayer] | None = None,
        entities: list[Entity] | None = None,
    ) -> None:
        path = Path(path)
        if not path.name.endswith(MAP_EXTENSION):
            raise InvalidMapPath(path, MAP_EXTENSION)
        self._path = path.absolute()

        if tile_layers is None:
            tile_layers = [TileLayer() for _ in range(NUM_LAYERS)]
        check_arity('tile layers', tile_layers, NUM_LAYERS)

        self._head = head if head is not None else Head.default()
        self._tile_layers = list(tile_layers)
        self._entities = entities if entities is not None else []

    @classmethod
    def load(cls, path: Path) -> PxPack:
        """Load a map file.

        A path that does not exist yet gives a new map with a default head,
        empty layers and no entities.

        Args:
            path: Path to a .pxpack file

        Returns:
            Parsed PxPack
        """
        path = Path(path)
        if not path.name.endswith(MAP_EXTENSION):
            raise InvalidMapPath(path, MAP_EXTENSION)

        if not path.exists():
            log.info(f'Map file {path} does not exist, creating new map')
            return cls(path)

        log.info(f'Reading map file: {path}')
        try:
            data = path.read_bytes()
        except OSError as e:
            raise MapIOError(f'Failed to read map file {path}: {e}') from e
        return cls.from_bytes(data, path)

    @classmethod
    def from_bytes(cls, data: bytes, path: Path) -> PxPack:
        """Parse a map from file bytes.

        Args:
            data: Map file contents
            path: Path the map is associated with

        Returns:
            Parsed PxPack
        """
        reader = Reader(data)
        pxpack = cls.read(reader, path)
        if reader.remaining:
            log.warning(f'Ignoring {reader.remaining} trailing bytes in {Path(path).name}')
        return pxpack

    @classmethod
    def read(cls, reader: Reader, path: Path) -> PxPack:
        """Read a complete map from reader."""
        magic = reader.read_bytes(len(HEAD_MAGIC))
        if magic != HEAD_MAGIC:
            raise BadHeaderMagic(magic, HEAD_MAGIC)

        head = Head.read(reader)
        tile_layers = [TileLayer.read(reader, i) for i in range(NUM_LAYERS)]

        entity_count = reader.read_uint16()
        log.debug(f'Reading {entity_count} entities at offset {reader.position}')
        entities = [Entity.read(reader) for _ in range(entity_count)]

        return cls(path, head=head, tile_layers=tile_layers, entities=entities)

    def write(self, writer: Writer) -> None:
        """Write the complete map to writer."""
        if len(self._entities) > MAX_UINT16:
            raise FieldConstraintViolated('entity count', len(self._entities), f'maximum is {MAX_UINT16}')

        writer.write_bytes(HEAD_MAGIC)
        self._head.write(writer)
        for layer in self._tile_layers:
            layer.write(writer)

        writer.write_uint16(len(self._entities))
        for entity in self._entities:
            entity.write(writer)

    def to_bytes(self) -> bytes:
        writer = Writer()
        self.write(writer)
        return writer.to_bytes()

    def save(self) -> None:
        """Save the map to its path, replacing any previous content."""
        # Serialize first so an invalid model never truncates the file
        data = self.to_bytes()
        try:
            self._path.write_bytes(data)
        except OSError as e:
            raise MapIOError(f'Failed to write map file {self._path}: {e}') from e
        log.info(f'Saved map file: {self._path} ({len(data)} bytes)')

    def rename(self, new_name: str) -> None:
        """Move the map file to new_name + extension in the same directory.

        Args:
            new_name: New base name, at most 15 encoded bytes and no path separator
        """
        try:
            encoded = new_name.encode(ENCODING)
        except UnicodeEncodeError as e:
            raise FieldConstraintViolated('map file name', new_name, f'not representable in {ENCODING}') from e
        if len(encoded) > FILENAME_MAX_LEN:
            raise StringTooLong('map file name', new_name, FILENAME_MAX_LEN, len(encoded))
        if not new_name or new_name in ('.', '..') or any(sep in new_name for sep in ('/', os.sep)):
            raise FieldConstraintViolated('map file name', new_name, 'must be a plain file name')

        target = self._path.with_name(new_name + MAP_EXTENSION)
        if target.exists():
            raise MapIOError(f'Cannot rename {self._path.name}: {target} already exists')
        try:
            self._path = self._path.rename(target).absolute()
        except OSError as e:
            raise MapIOError(f'Failed to rename {self._path} to {target}: {e}') from e
        log.info(f'Renamed map to {self._path.name}')

    @property
    def path(self) -> Path:
        return self._path

    @property
    def name(self) -> str:
        """Base file name without the map extension."""
        return self._path.name[: -len(MAP_EXTENSION)]

    @property
    def head(self) -> Head:
        return self._head

    @property
    def tile_layers(self) -> tuple[TileLayer, ...]:
        return tuple(self._tile_layers)

    @property
    def entities(self) -> list[Entity]:
        return self._entities

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PxPack):
            return NotImplemented
        return (
            self._head == other._head
            and self._tile_layers == other._tile_layers
            and self._entities == other._entities
        )

    def __repr__(self) -> str:
        return f'PxPack({self._path.name!r}, entities={len(self._entities)})'

    def __str__(self) -> str:
        sections = [f'Name: {self._path.name}', str(self._head)]
        for i, layer in enumerate(self._tile_layers):
            sections.append(f'Layer {i}:\n{layer}')
        sections.append(f'Entities: {len(self._entities)}')
        sections.extend(str(entity) for entity in self._entities)
        return '\n'.join(sections)
