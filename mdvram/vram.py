"""A growable store of tiles addressed by pattern names."""

from __future__ import annotations

import operator
from typing import BinaryIO, Iterable

from mdvram.pattern_name import FlipMode, PatternName
from mdvram.tile import BaseTile, DistTable

_MODES = (FlipMode.NO_FLIP, FlipMode.X_FLIP, FlipMode.Y_FLIP, FlipMode.XY_FLIP)
_INFINITE_DISTANCE = 0xFFFFFFFF


class Vram:
    """Tiles of one type, with a 16x16 pixel distance table for matching."""

    def __init__(self, tile_type: type[BaseTile], tiles: Iterable[BaseTile] | None = None) -> None:
        self.tile_type = tile_type
        self._tiles: list[BaseTile] = []
        self.dist_table: list[list[int]] = [[0] * 16 for _ in range(16)]
        for tile in tiles or ():
            self._tiles.append(self._checked(tile))

    def _checked(self, tile: BaseTile) -> BaseTile:
        if not isinstance(tile, self.tile_type):
            raise TypeError(
                f"expected {self.tile_type.__name__}, got {type(tile).__name__}"
            )
        return tile

    @classmethod
    def from_stream(cls, tile_type: type[BaseTile], stream: BinaryIO) -> Vram:
        """Read whole tiles until the stream ends; a trailing partial tile is dropped."""
        vram = cls(tile_type)
        while True:
            chunk = stream.read(tile_type.BYTE_SIZE)
            if len(chunk) < tile_type.BYTE_SIZE:
                return vram
            vram._tiles.append(tile_type.from_bytes(chunk))

    @classmethod
    def from_bytes(cls, tile_type: type[BaseTile], data: bytes) -> Vram:
        """Split data into whole tiles; a trailing partial tile is dropped."""
        size = tile_type.BYTE_SIZE
        whole = len(data) - len(data) % size
        return cls(
            tile_type,
            (tile_type.from_bytes(data[start : start + size]) for start in range(0, whole, size)),
        )

    def __len__(self) -> int:
        return len(self._tiles)

    def __iter__(self):
        return iter(self._tiles)

    def __getitem__(self, pattern) -> BaseTile:
        index = pattern.tile if isinstance(pattern, PatternName) else operator.index(pattern)
        return self._tiles[index]

    def new_tile(self) -> BaseTile:
        """Append a blank tile and return it."""
        tile = self.tile_type()
        self._tiles.append(tile)
        return tile

    def append(self, tile: BaseTile) -> PatternName:
        """Append a tile and return the pattern name that refers to it."""
        pattern = PatternName(len(self._tiles))
        self._tiles.append(self._checked(tile))
        return pattern

    def add_tile(self, tile: BaseTile, pattern: PatternName) -> None:
        """Store a tile at the pattern's index, growing with blank tiles if needed."""
        tile = self._checked(tile)
        index = pattern.tile
        while len(self._tiles) <= index:
            self._tiles.append(self.tile_type())
        self._tiles[index] = tile

    def copy_dist_table(self, other: Vram) -> None:
        """Take a copy of another store's distance table."""
        if other is not self:
            self.dist_table = [list(row) for row in other.dist_table]

    def find_closest(self, tile: BaseTile) -> tuple[PatternName, int]:
        """Return the pattern name (with flip) of the closest tile and its distance.

        Every stored tile is tried in every flip mode; the first smallest
        distance wins.
        """
        if not self._tiles:
            raise ValueError("no tiles to compare against")
        best = PatternName()
        best_dist = _INFINITE_DISTANCE
        target = tile.pixels(FlipMode.NO_FLIP)
        for index, candidate in enumerate(self._tiles):
            for mode in _MODES:
                dist = candidate.distance(self.dist_table, mode, target)
                if dist < best_dist:
                    best = PatternName(index)
                    best.flip = mode
                    best_dist = dist
        return best, best_dist

    def to_bytes(self) -> bytes:
        """Return all tiles as packed nibbles."""
        return b"".join(tile.to_bytes() for tile in self._tiles)

    def write(self, stream: BinaryIO) -> None:
        """Write all tiles to a binary stream."""
        stream.write(self.to_bytes())