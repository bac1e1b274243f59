#!/usr/bin/env python3
"""
Print the contents of a PXPACK map file.

Usage: uv run python scripts/print_map.py <map.pxpack> [--no-tiles]
"""

import argparse
from pathlib import Path

from keroedit.errors import PxPackError
from keroedit.log import log
from keroedit.model.pxpack import PxPack


def summarize(pxpack: PxPack) -> list[str]:
    """One line per layer and entity count, without the tile grids."""
    lines = [f'Map: {pxpack.name}']
    for i, layer in enumerate(pxpack.tile_layers):
        tileset = pxpack.head.tileset_names[i] or '-'
        if layer.is_empty:
            lines.append(f'Layer {i} ({tileset}): empty')
        else:
            lines.append(f'Layer {i} ({tileset}): {layer.width}x{layer.height}')
    lines.append(f'Entities: {len(pxpack.entities)}')
    return lines


def main() -> None:
    parser = argparse.ArgumentParser(description='Print a PXPACK map file')
    parser.add_argument('path', type=Path, help='Map file to read')
    parser.add_argument('--no-tiles', action='store_true', help='Only print a summary')
    args = parser.parse_args()

    if not args.path.exists():
        log.error(f'Map file not found: {args.path}')
        return

    try:
        pxpack = PxPack.load(args.path)
    except PxPackError as e:
        log.error(f'Failed to load map file: {e}')
        return

    if args.no_tiles:
        for line in summarize(pxpack):
            log.info(line)
    else:
        print(pxpack)


if __name__ == '__main__':
    main()
