# mdvram

Data structures for Sega Mega Drive video data: pattern names, 4-bit tiles,
a tile store with best-match search, plane tables, and sprite mapping and
DPLC entries.

## Modules

- `mdvram.pattern_name` — `PatternName`, the 16-bit VDP pattern name word.
  Its `tile`, `flip` (`FlipMode`), `palette` (`PaletteLine`) and `priority`
  fields are read and set as properties. Adding to or subtracting from a
  pattern name changes only the tile index and saturates at 0 and 0x7FF.
  Ordering compares only the tile index; equality compares the whole word.
  `flip_x`, `flip_y` and `flip_xy` toggle flips; `PaletteLine` arithmetic
  wraps around the four lines. `to_bytes`, `from_bytes` and `write` use
  big-endian words.
- `mdvram.tile_iterator` — `TileIterator`, a random-access position in a
  tile's pixels walked in any of the four flip orders. Moving before the
  first pixel stops there; moving past the last gives the end position.
  `get` and `set` read and store the pixel at the current position.
- `mdvram.tile` — `BaseTile`, with `Tile` (8×8) and `ShortTile` (8×2).
  Tiles are built from packed nibbles (`from_bytes`, `from_stream`, high
  nibble first, missing bytes as zero pixels) or from pixels stored in a
  flip order (`from_pixels`, with repeats and zero fill). `pixels(flip)`
  lists the pixels in a flip order, `distance` sums a 16×16 table over pixel
  pairs, and `draw` / `to_bytes` pack pixels back into bytes.
- `mdvram.vram` — `Vram`, a growable list of tiles of one type, indexed by
  `PatternName` or integer. `append` returns the pattern name of the new
  tile, `add_tile` stores at a pattern's index growing with blank tiles,
  and `find_closest` tries every tile in every flip and returns the pattern
  name (with flip) and distance of the first best match, using the store's
  `dist_table`.
- `mdvram.pattern_name_table` — `PatternNameTable` and its fixed sizes
  `PlaneH32V28`, `PlaneH40V28` and `PlaneH128V28`, read from and written
  to big-endian words, row by row; missing words read as zero.
- `mdvram.mappings` — `SingleMapping`, `SingleDplc`, `FrameMapping` and
  `FrameDplc` as validated dataclasses, with their sizes in bytes for each
  game engine version.

## Installing

    pip install .

For running the tests:

    pip install ".[test]"
    pytest

## Example

    from pathlib import Path

    from mdvram.pattern_name import PatternName
    from mdvram.tile import Tile
    from mdvram.vram import Vram

    name = PatternName(0x2805)
    print(name.tile, name.flip, name.palette, name.priority)

    vram = Vram.from_bytes(Tile, Path("art.bin").read_bytes())
    vram.dist_table = [[(a - b) ** 2 for b in range(16)] for a in range(16)]
    closest, distance = vram.find_closest(vram[PatternName(3)])
    print(closest.tile, closest.flip, distance)

## What it does not do

- It does not read or write sprite mapping or DPLC files; the mapping
  classes hold entries and report sizes only.
- Plane tables are read from uncompressed data only; no compression
  formats are handled.
- There is no command-line tool; everything is used as a library.