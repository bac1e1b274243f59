"""Background color value type."""

from __future__ import annotations

from dataclasses import dataclass

from keroedit.const import MAX_BYTE
from keroedit.model.fields import check_range


@dataclass(frozen=True)
class Color:
    """RGBA color with 8-bit channels.

    Map files only store RGB, so only opaque colors can be assigned to a map.
    """

    red: int
    green: int
    blue: int
    alpha: int = MAX_BYTE

    def __post_init__(self) -> None:
        for channel in ('red', 'green', 'blue', 'alpha'):
            check_range(f'color {channel}', getattr(self, channel), 0, MAX_BYTE)

    @property
    def is_opaque(self) -> bool:
        return self.alpha == MAX_BYTE

    def to_rgb(self) -> tuple[int, int, int]:
        return (self.red, self.green, self.blue)

    def __str__(self) -> str:
        if self.is_opaque:
            return f'#{self.red:02X}{self.green:02X}{self.blue:02X}'
        return f'#{self.red:02X}{self.green:02X}{self.blue:02X}{self.alpha:02X}'


BLACK = Color(0, 0, 0)
