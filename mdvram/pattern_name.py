"""VDP pattern names: tile index, flip, palette line and priority in one word."""

from __future__ import annotations

import enum
from typing import BinaryIO

_XYFLIP_SHIFT = 11
_PALETTE_SHIFT = 13
_PRIORITY_SHIFT = 15

TILE_MASK = 0x07FF
_XYFLIP_MASK = 3 << _XYFLIP_SHIFT
_PALETTE_MASK = 3 << _PALETTE_SHIFT
_PRIORITY_MASK = 1 << _PRIORITY_SHIFT


class FlipMode(enum.IntEnum):
    """Possible flips of a tile in a pattern name."""

    NO_FLIP = 0
    X_FLIP = 1
    Y_FLIP = 2
    XY_FLIP = 3

    def __xor__(self, other):
        if not isinstance(other, int):
            return NotImplemented
        return FlipMode((int(self) ^ int(other)) & 3)

    __rxor__ = __xor__


def flip_x(value: FlipMode) -> FlipMode:
    """Return the flip mode with the horizontal flip toggled."""
    return FlipMode(value) ^ FlipMode.X_FLIP


def flip_y(value: FlipMode) -> FlipMode:
    """Return the flip mode with the vertical flip toggled."""
    return FlipMode(value) ^ FlipMode.Y_FLIP


def flip_xy(value: FlipMode) -> FlipMode:
    """Return the flip mode with both flips toggled."""
    return FlipMode(value) ^ FlipMode.XY_FLIP


class PaletteLine(enum.IntEnum):
    """One of the four palette lines; arithmetic wraps around."""

    LINE0 = 0
    LINE1 = 1
    LINE2 = 2
    LINE3 = 3

    def __add__(self, delta):
        if not isinstance(delta, int):
            return NotImplemented
        return PaletteLine((int(self) + int(delta)) % 4)

    def __sub__(self, delta):
        if not isinstance(delta, int):
            return NotImplemented
        return PaletteLine((int(self) - int(delta)) % 4)


class PatternName:
    """A 16-bit VDP pattern name with its fields exposed as properties.

    Ordering compares only the tile index; equality compares the whole word.
    Adding and subtracting act on the tile index and saturate at its limits.
    """

    __slots__ = ("_value",)

    def __init__(self, value: int = 0) -> None:
        value = int(value)
        if not 0 <= value <= 0xFFFF:
            raise ValueError(f"pattern name out of range: {value:#x}")
        self._value = value

    @property
    def value(self) -> int:
        return self._value

    def __int__(self) -> int:
        return self._value

    def __index__(self) -> int:
        return self._value

    @property
    def tile(self) -> int:
        return self._value & TILE_MASK

    @tile.setter
    def tile(self, tile: int) -> None:
        tile = int(tile)
        if not 0 <= tile <= TILE_MASK:
            raise ValueError(f"tile index out of range: {tile:#x}")
        self._value = (self._value & ~TILE_MASK & 0xFFFF) | tile

    @property
    def flip(self) -> FlipMode:
        return FlipMode((self._value & _XYFLIP_MASK) >> _XYFLIP_SHIFT)

    @flip.setter
    def flip(self, flip: FlipMode) -> None:
        flip = FlipMode(flip)
        self._value = (self._value & ~_XYFLIP_MASK & 0xFFFF) | (
            int(flip) << _XYFLIP_SHIFT
        )

    @property
    def palette(self) -> PaletteLine:
        return PaletteLine((self._value & _PALETTE_MASK) >> _PALETTE_SHIFT)

    @palette.setter
    def palette(self, palette: PaletteLine) -> None:
        palette = PaletteLine(palette)
        self._value = (self._value & ~_PALETTE_MASK & 0xFFFF) | (
            int(palette) << _PALETTE_SHIFT
        )

    @property
    def priority(self) -> bool:
        return bool(self._value & _PRIORITY_MASK)

    @priority.setter
    def priority(self, priority: bool) -> None:
        self._value = (self._value & ~_PRIORITY_MASK & 0xFFFF) | (
            _PRIORITY_MASK if priority else 0
        )

    def __eq__(self, other):
        if not isinstance(other, PatternName):
            return NotImplemented
        return self._value == other._value

    __hash__ = None  # mutable

    def __lt__(self, other):
        if not isinstance(other, PatternName):
            return NotImplemented
        return self.tile < other.tile

    def _with_tile(self, tile: int) -> PatternName:
        result = PatternName(self._value)
        result.tile = min(max(tile, 0), TILE_MASK)
        return result

    def __add__(self, delta):
        if not isinstance(delta, int):
            return NotImplemented
        return self._with_tile(self.tile + delta)

    def __radd__(self, delta):
        return self.__add__(delta)

    def __sub__(self, delta):
        if not isinstance(delta, int):
            return NotImplemented
        return self._with_tile(self.tile - delta)

    def to_bytes(self) -> bytes:
        """Return the pattern name as a big-endian word."""
        return self._value.to_bytes(2, "big")

    @classmethod
    def from_bytes(cls, data: bytes) -> PatternName:
        """Build a pattern name from a two-byte big-endian word."""
        if len(data) != 2:
            raise ValueError(f"expected 2 bytes, got {len(data)}")
        return cls(int.from_bytes(data, "big"))

    def write(self, stream: BinaryIO) -> None:
        """Write the pattern name to a binary stream."""
        stream.write(self.to_bytes())

    def __repr__(self) -> str:
        return (
            f"PatternName(tile={self.tile:#05x}, flip={self.flip.name}, "
            f"palette={self.palette.name}, priority={self.priority})"
        )