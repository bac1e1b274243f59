#!/usr/bin/env python3
"""
Rename a PXPACK map file.

Usage: uv run python scripts/rename_map.py <map.pxpack> <new_name>

The new name is given without the .pxpack extension and may be at most
15 bytes long once encoded.
"""

import argparse
from pathlib import Path

from keroedit.errors import PxPackError
from keroedit.log import log
from keroedit.model.pxpack import PxPack


def main() -> None:
    parser = argparse.ArgumentParser(description='Rename a PXPACK map file')
    parser.add_argument('path', type=Path, help='Map file to rename')
    parser.add_argument('new_name', help='New base name (without extension)')
    args = parser.parse_args()

    if not args.path.exists():
        log.error(f'Map file not found: {args.path}')
        return

    try:
        pxpack = PxPack.load(args.path)
        pxpack.rename(args.new_name)
    except PxPackError as e:
        log.error(f'Failed to rename map: {e}')
        return

    log.info(f'Map is now at {pxpack.path}')


if __name__ == '__main__':
    main()
