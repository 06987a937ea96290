import io

import pytest
from hypothesis import given
from hypothesis import strategies as st

from mdvram.pattern_name import FlipMode
from mdvram.tile import BaseTile, ShortTile, Tile

ALL_FLIPS = list(FlipMode)


def _squares():
    return [[(a - b) ** 2 for b in range(16)] for a in range(16)]


@given(st.binary(min_size=32, max_size=32))
def test_bytes_round_trip(data):
    assert Tile.from_bytes(data).to_bytes() == data


def test_nibbles_unpack_high_first():
    tile = Tile.from_bytes(bytes([0x12]) + bytes(31))
    pixels = tile.pixels()
    assert pixels[:2] == [1, 2]
    assert pixels[2:] == [0] * 62


def test_short_data_filled_with_zeros():
    assert Tile.from_bytes(b"\xab").to_bytes() == b"\xab" + bytes(31)


def test_from_stream_reads_one_tile():
    stream = io.BytesIO(bytes(range(40)))
    tile = Tile.from_stream(stream)
    assert tile.to_bytes() == bytes(range(32))
    assert stream.read() == bytes(range(32, 40))


def test_short_tile_size():
    data = bytes(range(8))
    tile = ShortTile.from_bytes(data + b"\xff")
    assert tile.to_bytes() == data
    assert len(tile.pixels()) == ShortTile.TILE_SIZE


def test_x_flip_reverses_lines():
    tile = ShortTile(range(16))
    assert tile.pixels(FlipMode.X_FLIP) == list(range(7, -1, -1)) + list(range(15, 7, -1))
    assert tile.pixels(FlipMode.Y_FLIP) == list(range(8, 16)) + list(range(8))


@given(st.lists(st.integers(0, 15), min_size=64, max_size=64))
def test_xy_flip_is_reverse(pixels):
    tile = Tile(pixels)
    assert tile.pixels(FlipMode.XY_FLIP) == pixels[::-1]


@pytest.mark.parametrize("flip", ALL_FLIPS)
@given(pixels=st.lists(st.integers(0, 15), min_size=64, max_size=64))
def test_from_pixels_round_trip(flip, pixels):
    assert Tile.from_pixels(pixels, flip).pixels(flip) == pixels


def test_from_pixels_repeats_and_zero_fill():
    tile = ShortTile.from_pixels([1, 2, 3], FlipMode.NO_FLIP, 2)
    assert tile.pixels() == [1, 2, 3, 1, 2, 3] + [0] * 10


def test_from_pixels_advances_tile_iterator():
    source = Tile(i % 16 for i in range(64))
    start = source.begin()
    short = ShortTile.from_pixels(start)
    assert short.pixels() == source.pixels()[:16]
    assert start - source.begin() == 16


def test_distance_to_self_is_zero():
    tile = Tile(i % 16 for i in range(64))
    assert tile.distance(_squares(), FlipMode.NO_FLIP, tile.pixels()) == 0


def test_distance_sums_table():
    table = _squares()
    zeros = Tile()
    ones = Tile([1] * 64)
    assert zeros.distance(table, FlipMode.NO_FLIP, ones.pixels()) == 64 * table[0][1]


def test_distance_does_not_advance_iterator():
    tile = Tile([3] * 64)
    start = tile.begin()
    tile.distance(_squares(), FlipMode.NO_FLIP, start)
    assert start == tile.begin()


def test_draw_one_line_advances_start():
    tile = Tile.from_bytes(bytes(range(32)))
    start = tile.begin()
    assert tile.draw(start, 1) == bytes(range(4))
    assert start - tile.begin() == 8


def test_invalid_pixels_rejected():
    with pytest.raises(ValueError):
        Tile([16] * 64)
    with pytest.raises(ValueError):
        Tile([0] * 10)
    with pytest.raises(TypeError):
        BaseTile()


def test_equality():
    assert Tile.from_bytes(b"\x11") == Tile.from_bytes(b"\x11")
    assert not (Tile() == ShortTile())