"""Fixed-size grids of pattern names, as laid out in a VDP plane."""

from __future__ import annotations

import struct
from typing import BinaryIO, ClassVar

from mdvram.pattern_name import PatternName


class PatternNameTable:
    """A ``HEIGHT`` by ``WIDTH`` grid of pattern names.

    Concrete sizes are subclasses that set ``WIDTH`` and ``HEIGHT``.
    """

    WIDTH: ClassVar[int] = 0
    HEIGHT: ClassVar[int] = 0

    def __init__(self, rows=None) -> None:
        width, height = type(self).WIDTH, type(self).HEIGHT
        if width <= 0 or height <= 0:
            raise TypeError(f"{type(self).__name__} has no table dimensions")
        if rows is None:
            self._rows = [[PatternName() for _ in range(width)] for _ in range(height)]
            return
        table = [[PatternName(int(entry)) for entry in row] for row in rows]
        if len(table) != height or any(len(row) != width for row in table):
            raise ValueError(f"table must be {height} rows of {width} pattern names")
        self._rows = table

    @classmethod
    def _byte_size(cls) -> int:
        return cls.WIDTH * cls.HEIGHT * 2

    @classmethod
    def from_bytes(cls, data: bytes) -> PatternNameTable:
        """Build a table from big-endian words; missing words become zero."""
        needed = cls._byte_size()
        usable = data[:needed]
        usable = usable[: len(usable) & ~1]
        values = [word for (word,) in struct.iter_unpack(">H", usable)]
        values.extend([0] * (cls.WIDTH * cls.HEIGHT - len(values)))
        rows = [
            values[start : start + cls.WIDTH]
            for start in range(0, len(values), cls.WIDTH)
        ]
        return cls(rows)

    @classmethod
    def from_stream(cls, stream: BinaryIO) -> PatternNameTable:
        """Read a table from an uncompressed binary stream."""
        return cls.from_bytes(stream.read(cls._byte_size()))

    def __getitem__(self, index: int) -> list[PatternName]:
        return self._rows[index]

    def __iter__(self):
        return iter(self._rows)

    def __len__(self) -> int:
        return len(self._rows)

    def __eq__(self, other):
        if not isinstance(other, PatternNameTable):
            return NotImplemented
        return type(self) is type(other) and self._rows == other._rows

    __hash__ = None

    def to_bytes(self) -> bytes:
        """Return the table as consecutive big-endian words, row by row."""
        return b"".join(pattern.to_bytes() for row in self._rows for pattern in row)

    def write(self, stream: BinaryIO) -> None:
        """Write the table to a binary stream."""
        stream.write(self.to_bytes())


class PlaneH32V28(PatternNameTable):
    WIDTH = 32
    HEIGHT = 28


class PlaneH40V28(PatternNameTable):
    WIDTH = 40
    HEIGHT = 28


class PlaneH128V28(PatternNameTable):
    WIDTH = 128
    HEIGHT = 28