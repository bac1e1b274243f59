"""Map model classes."""

from keroedit.model.color import Color
from keroedit.model.entity import Entity
from keroedit.model.head import Head
from keroedit.model.pxpack import PxPack
from keroedit.model.tile_layer import TileLayer

__all__ = ['Color', 'Entity', 'Head', 'PxPack', 'TileLayer']
