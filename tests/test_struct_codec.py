from __future__ import annotations

from dataclasses import dataclass

import pytest

from helpers.struct_codec import RecordLayout, pack_record, unpack_record
from markup_engine.errors import NullArgument, RecordEncodingError

HEADER = RecordLayout(fields=(('version', 'B'), ('flags', 'H'), ('length', 'I')))


def test_layout_has_no_padding():
    assert HEADER.size == 7


def test_little_endian_bytes():
    data = pack_record({'version': 1, 'flags': 0x0203, 'length': 0x04050607}, HEADER)
    assert data == bytes([0x01, 0x03, 0x02, 0x07, 0x06, 0x05, 0x04])


def test_big_endian_bytes():
    layout = RecordLayout(fields=HEADER.fields, byte_order='big')
    data = pack_record({'version': 1, 'flags': 0x0203, 'length': 0x04050607}, layout)
    assert data == bytes([0x01, 0x02, 0x03, 0x04, 0x05, 0x06, 0x07])


def test_pack_from_object_and_unpack():
    @dataclass
    class Point:
        x: int
        y: int
        label: str

    layout = RecordLayout(fields=(('x', 'h'), ('y', 'h'), ('label', '4s')))
    data = pack_record(Point(-1, 2, 'ab'), layout)
    assert data == b'\xff\xff\x02\x00ab\x00\x00'
    assert unpack_record(data, layout) == {'x': -1, 'y': 2, 'label': b'ab\x00\x00'}


def test_missing_field():
    with pytest.raises(NullArgument):
        pack_record({'version': 1, 'flags': 2}, HEADER)


def test_value_out_of_range():
    with pytest.raises(RecordEncodingError):
        pack_record({'version': 256, 'flags': 0, 'length': 0}, HEADER)


def test_wrong_data_length():
    with pytest.raises(RecordEncodingError):
        unpack_record(b'\x00\x01', HEADER)


@pytest.mark.parametrize(
    "kwargs",
    [
        {'fields': (('a', 'Z'),)},
        {'fields': (('a', 'B'),), 'byte_order': 'middle'},
    ],
)
def test_invalid_layout(kwargs):
    with pytest.raises(RecordEncodingError):
        RecordLayout(**kwargs)
