import io
import random

import pytest

from mdvram.pattern_name import PatternName
from mdvram.pattern_name_table import (
    PatternNameTable,
    PlaneH32V28,
    PlaneH40V28,
    PlaneH128V28,
)


def _random_bytes(table_type, seed=1):
    rng = random.Random(seed)
    return bytes(rng.randrange(256) for _ in range(table_type.WIDTH * table_type.HEIGHT * 2))


@pytest.mark.parametrize(
    ("table_type", "width", "height"),
    [(PlaneH32V28, 32, 28), (PlaneH40V28, 40, 28), (PlaneH128V28, 128, 28)],
)
def test_dimensions(table_type, width, height):
    table = table_type()
    assert len(table) == height
    assert len(table[0]) == width
    assert len(table.to_bytes()) == width * height * 2


def test_default_table_is_zero():
    table = PlaneH32V28()
    assert len(table) == 28
    assert table.to_bytes() == bytes(32 * 28 * 2)


def test_base_class_cannot_be_instantiated():
    with pytest.raises(TypeError):
        PatternNameTable()


@pytest.mark.parametrize("table_type", [PlaneH32V28, PlaneH40V28, PlaneH128V28])
def test_bytes_round_trip(table_type):
    data = _random_bytes(table_type)
    table = table_type.from_bytes(data)
    assert table.to_bytes() == data
    stream = io.BytesIO()
    table.write(stream)
    assert stream.getvalue() == data


def test_word_layout_row_major():
    data = bytearray(PlaneH32V28.WIDTH * PlaneH32V28.HEIGHT * 2)
    data[2:4] = PatternName(0x1234).to_bytes()
    offset = PlaneH32V28.WIDTH * 2
    data[offset : offset + 2] = PatternName(0x0042).to_bytes()
    table = PlaneH32V28.from_bytes(bytes(data))
    assert table[0][1] == PatternName(0x1234)
    assert table[1][0] == PatternName(0x0042)


def test_short_data_is_zero_filled():
    table = PlaneH40V28.from_bytes(b"\x12\x34\x56")
    assert table[0][0] == PatternName(0x1234)
    assert table[0][1] == PatternName(0)
    assert table.to_bytes()[2:] == bytes(len(table.to_bytes()) - 2)


def test_from_stream_reads_one_table():
    data = _random_bytes(PlaneH32V28, seed=7)
    stream = io.BytesIO(data + b"trailing")
    table = PlaneH32V28.from_stream(stream)
    assert table.to_bytes() == data
    assert stream.read() == b"trailing"


def test_rows_are_mutable():
    table = PlaneH32V28()
    table[3][5] = PatternName(0x0123)
    assert PlaneH32V28.from_bytes(table.to_bytes()) == table
    assert table[3][5].tile == 0x0123


def test_wrong_shape_rejected():
    with pytest.raises(ValueError):
        PlaneH32V28([[0] * 32] * 27)
    with pytest.raises(ValueError):
        PlaneH32V28([[0] * 31] * 28)