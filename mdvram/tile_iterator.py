"""Random-access iteration over the pixels of a tile in any flip order."""

from __future__ import annotations

import functools
from typing import MutableSequence

from mdvram.pattern_name import FlipMode


@functools.total_ordering
class TileIterator:
    """A position in a tile's pixels, walked in the order a flip mode gives.

    ``NO_FLIP`` walks lines top to bottom, each left to right; ``X_FLIP``
    reverses every line; ``Y_FLIP`` reverses the order of the lines;
    ``XY_FLIP`` reverses both. Moving before the first pixel stops at the
    first pixel, and moving past the last pixel gives the end position.
    """

    __slots__ = ("_data", "_line_size", "_num_lines", "_flip", "_pos")

    def __init__(
        self,
        data: MutableSequence[int],
        line_size: int,
        num_lines: int,
        flip: FlipMode = FlipMode.NO_FLIP,
        ending: bool = False,
    ) -> None:
        if line_size <= 0 or num_lines <= 0:
            raise ValueError("tile dimensions must be positive")
        if len(data) != line_size * num_lines:
            raise ValueError(
                f"expected {line_size * num_lines} pixels, got {len(data)}"
            )
        self._data = data
        self._line_size = line_size
        self._num_lines = num_lines
        self._flip = FlipMode(flip)
        self._pos = self._size if ending else 0

    @property
    def _size(self) -> int:
        return self._line_size * self._num_lines

    @property
    def data(self) -> MutableSequence[int]:
        return self._data

    @property
    def line_size(self) -> int:
        return self._line_size

    @property
    def num_lines(self) -> int:
        return self._num_lines

    @property
    def flip(self) -> FlipMode:
        return self._flip

    @property
    def at_end(self) -> bool:
        """True when the iterator is past the last pixel."""
        return self._pos == self._size

    @property
    def _loc(self) -> int:
        size = self._size
        if self._pos == size:
            return size
        line, offset = divmod(self._pos, self._line_size)
        if self._flip is FlipMode.NO_FLIP:
            return self._pos
        if self._flip is FlipMode.XY_FLIP:
            return size - 1 - self._pos
        if self._flip is FlipMode.X_FLIP:
            return line * self._line_size + (self._line_size - 1 - offset)
        return (self._num_lines - 1 - line) * self._line_size + offset

    def copy(self) -> TileIterator:
        """Return an independent iterator at the same position."""
        other = TileIterator(
            self._data, self._line_size, self._num_lines, self._flip
        )
        other._pos = self._pos
        return other

    def _moved(self, delta: int) -> TileIterator:
        result = self.copy()
        result._pos = min(max(self._pos + delta, 0), self._size)
        return result

    def __add__(self, delta):
        if not isinstance(delta, int):
            return NotImplemented
        return self._moved(delta)

    def __radd__(self, delta):
        return self.__add__(delta)

    def _check_compatible(self, other: TileIterator) -> None:
        if other._data is not self._data or other._flip != self._flip:
            raise ValueError("iterators walk different tiles or flip orders")

    def __sub__(self, other):
        if isinstance(other, TileIterator):
            self._check_compatible(other)
            return self._pos - other._pos
        if isinstance(other, int):
            return self._moved(-other)
        return NotImplemented

    def __eq__(self, other):
        if not isinstance(other, TileIterator):
            return NotImplemented
        if self.at_end or other.at_end:
            return self.at_end and other.at_end
        if other._data is not self._data or other._flip != self._flip:
            return False
        return self._pos == other._pos

    __hash__ = None

    def __lt__(self, other):
        if not isinstance(other, TileIterator):
            return NotImplemented
        return (self - other) < 0

    def __iter__(self) -> TileIterator:
        return self

    def __next__(self) -> int:
        if self.at_end:
            raise StopIteration
        value = self._data[self._loc]
        self._pos += 1
        return value

    def get(self) -> int:
        """Return the pixel at the current position."""
        if self.at_end:
            raise IndexError("iterator is at the end of the tile")
        return self._data[self._loc]

    def set(self, value: int) -> None:
        """Store a pixel at the current position."""
        if self.at_end:
            raise IndexError("iterator is at the end of the tile")
        self._data[self._loc] = value

    def __repr__(self) -> str:
        return (
            f"TileIterator({self._line_size}x{self._num_lines}, "
            f"flip={self._flip.name}, position={self._pos})"
        )