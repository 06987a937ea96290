"""Sprite mapping pieces, DPLC entries and the frames made of them."""

from __future__ import annotations

import struct
from dataclasses import dataclass, field

_MAP_SIZE_S1 = 5
_MAP_SIZE_S2 = 8
_MAP_SIZE_S3 = 6

# A DPLC entry is one big-endian word holding both count and tile.
_DPLC_ENTRY = struct.Struct(">H")
# Frame headers: a byte count in the oldest format, a word otherwise.
_HEADER_BYTE = struct.Struct(">B")
_HEADER_WORD = struct.Struct(">H")


def _check_range(name: str, value: int, low: int, high: int) -> None:
    if not low <= value <= high:
        raise ValueError(f"{name} out of range [{low}, {high}]: {value}")


@dataclass(frozen=True, order=True)
class SingleDplc:
    """One DPLC entry: a run of ``count`` tiles starting at ``tile``."""

    count: int
    tile: int

    def __post_init__(self) -> None:
        _check_range("count", self.count, 0, 0xFFFF)
        _check_range("tile", self.tile, 0, 0xFFFF)

    @staticmethod
    def size(version: int) -> int:
        """Size in bytes of one entry; the same for every engine version."""
        entry = _DPLC_ENTRY
        return entry.size


@dataclass(frozen=True, order=True)
class SingleMapping:
    """One sprite piece of a mapping frame."""

    tile: int
    flags: int
    xx: int
    yy: int
    sx: int
    sy: int

    def __post_init__(self) -> None:
        _check_range("tile", self.tile, 0, 0xFFFF)
        _check_range("flags", self.flags, 0, 0xFFFF)
        _check_range("xx", self.xx, -0x8000, 0x7FFF)
        _check_range("yy", self.yy, -0x8000, 0x7FFF)
        _check_range("sx", self.sx, 0, 0xFF)
        _check_range("sy", self.sy, 0, 0xFF)

    @staticmethod
    def size(version: int) -> int:
        """Size in bytes of one piece for the given engine version."""
        if version == 1:
            return _MAP_SIZE_S1
        if version == 2:
            return _MAP_SIZE_S2
        return _MAP_SIZE_S3

    @classmethod
    def from_tuple(cls, values) -> SingleMapping:
        """Build a piece from (tile, flags, xx, yy, sx, sy)."""
        tile, flags, xx, yy, sx, sy = values
        return cls(tile, flags, xx, yy, sx, sy)


@dataclass(order=True)
class FrameDplc:
    """The DPLC entries of one animation frame."""

    dplc: list[SingleDplc] = field(default_factory=list)

    def size(self, version: int) -> int:
        """Size in bytes of the frame, header included."""
        header = _HEADER_BYTE if version == 1 else _HEADER_WORD
        return header.size + SingleDplc.size(version) * len(self.dplc)


@dataclass(order=True)
class FrameMapping:
    """The sprite pieces of one mapping frame."""

    maps: list[SingleMapping] = field(default_factory=list)

    def size(self, version: int) -> int:
        """Size in bytes of the frame, header included."""
        header = _HEADER_BYTE if version == 1 else _HEADER_WORD
        return header.size + SingleMapping.size(version) * len(self.maps)