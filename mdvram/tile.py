"""Tiles of 4-bit pixels, read, written and compared in any flip order."""

from __future__ import annotations

from typing import BinaryIO, ClassVar, Iterable, Sequence

from mdvram.pattern_name import FlipMode
from mdvram.tile_iterator import TileIterator

DistTable = Sequence[Sequence[int]]


def _check_pixel(value: int) -> int:
    value = int(value)
    if not 0 <= value <= 0x0F:
        raise ValueError(f"pixel value out of range [0, 15]: {value}")
    return value


class BaseTile:
    """A tile of ``NUM_LINES`` lines of ``LINE_SIZE`` 4-bit pixels each.

    Concrete sizes are subclasses that set ``LINE_SIZE`` and ``NUM_LINES``.
    In bytes, two pixels are packed per byte, high nibble first.
    """

    LINE_SIZE: ClassVar[int] = 0
    NUM_LINES: ClassVar[int] = 0
    TILE_SIZE: ClassVar[int] = 0
    BYTE_SIZE: ClassVar[int] = 0

    def __init_subclass__(cls, **kwargs) -> None:
        super().__init_subclass__(**kwargs)
        cls.TILE_SIZE = cls.LINE_SIZE * cls.NUM_LINES
        cls.BYTE_SIZE = cls.TILE_SIZE // 2

    def __init__(self, pixels: Iterable[int] | None = None) -> None:
        size = type(self).TILE_SIZE
        if size <= 0:
            raise TypeError(f"{type(self).__name__} has no tile dimensions")
        if pixels is None:
            self._pixels = [0] * size
            return
        data = [_check_pixel(value) for value in pixels]
        if len(data) != size:
            raise ValueError(f"expected {size} pixels, got {len(data)}")
        self._pixels = data

    @classmethod
    def from_bytes(cls, data: bytes) -> BaseTile:
        """Unpack a tile from packed nibbles; missing bytes become zero pixels."""
        tile = cls()
        usable = bytes(data[: cls.BYTE_SIZE])
        for index, byte in enumerate(usable):
            tile._pixels[2 * index] = (byte >> 4) & 0x0F
            tile._pixels[2 * index + 1] = byte & 0x0F
        return tile

    @classmethod
    def from_stream(cls, stream: BinaryIO) -> BaseTile:
        """Read one tile from a binary stream."""
        return cls.from_bytes(stream.read(cls.BYTE_SIZE))

    @classmethod
    def from_pixels(
        cls,
        pixels,
        flip: FlipMode = FlipMode.NO_FLIP,
        repeats: int = 1,
    ) -> BaseTile:
        """Build a tile by storing pixels in the order the flip mode walks.

        The pixels are copied ``repeats`` times in a row, and what is left of
        the tile is filled with zeros. Only the last copy advances ``pixels``
        when it is an iterator; for more than one repeat pass a sequence or a
        ``TileIterator``.
        """
        tile = cls()
        dest = tile.begin(flip)

        def fill(source) -> None:
            nonlocal dest
            while not dest.at_end:
                try:
                    value = next(source)
                except StopIteration:
                    return
                dest.set(_check_pixel(value))
                dest = dest + 1

        for _ in range(1, repeats):
            fill(pixels.copy() if isinstance(pixels, TileIterator) else iter(pixels))
        fill(pixels if isinstance(pixels, TileIterator) else iter(pixels))
        return tile

    def begin(self, flip: FlipMode = FlipMode.NO_FLIP) -> TileIterator:
        """Return an iterator at the first pixel in the given flip order."""
        return TileIterator(self._pixels, self.LINE_SIZE, self.NUM_LINES, flip, False)

    def end(self, flip: FlipMode = FlipMode.NO_FLIP) -> TileIterator:
        """Return the end iterator for the given flip order."""
        return TileIterator(self._pixels, self.LINE_SIZE, self.NUM_LINES, flip, True)

    def pixels(self, flip: FlipMode = FlipMode.NO_FLIP) -> list[int]:
        """Return all pixels in the order the flip mode walks them."""
        return list(self.begin(flip))

    def distance(self, table: DistTable, flip: FlipMode, other_pixels) -> int:
        """Sum ``table[mine][theirs]`` over pixel pairs, this tile read with ``flip``.

        Stops at whichever runs out first. A ``TileIterator`` argument is not
        advanced.
        """
        if isinstance(other_pixels, TileIterator):
            other_pixels = other_pixels.copy()
        return sum(
            table[mine][theirs]
            for mine, theirs in zip(self.begin(flip), other_pixels)
        )

    def draw(self, start: TileIterator | None = None, line_count: int | None = None) -> bytes:
        """Pack ``line_count`` lines of pixels from ``start`` into bytes.

        ``start`` is advanced past the pixels drawn.
        """
        if start is None:
            start = self.begin(FlipMode.NO_FLIP)
        if line_count is None:
            line_count = self.NUM_LINES
        finish = start + line_count * self.LINE_SIZE
        output = bytearray()
        while start != finish:
            value = (next(start) & 0x0F) << 4
            if start != finish:
                value |= next(start) & 0x0F
            output.append(value)
        return bytes(output)

    def to_bytes(self) -> bytes:
        """Return the tile as packed nibbles."""
        return self.draw(self.begin(FlipMode.NO_FLIP), self.NUM_LINES)

    def __eq__(self, other):
        if not isinstance(other, BaseTile):
            return NotImplemented
        return type(self) is type(other) and self._pixels == other._pixels

    __hash__ = None

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.to_bytes().hex()})"


class Tile(BaseTile):
    """A full 8x8 tile."""

    LINE_SIZE = 8
    NUM_LINES = 8


class ShortTile(BaseTile):
    """A short tile of two 8-pixel lines."""

    LINE_SIZE = 8
    NUM_LINES = 2