import pytest

from pqformat.encoding.plain_byte_array import Decoder
from pqformat.errors import OutOfSpecError


def _plain(items):
    return b"".join(len(item).to_bytes(4, "little") + item for item in items)


def test_decodes_values_in_order():
    items = [b"Hello", b"", b"aa", b"abc"]
    assert list(Decoder(_plain(items), len(items))) == items


def test_wire_layout():
    data = bytes([5, 0, 0, 0]) + b"Hello" + bytes([5, 0, 0, 0]) + b"World"
    assert list(Decoder(data, 2)) == [b"Hello", b"World"]


def test_len_decreases():
    items = [b"x", b"yy", b"zzz"]
    decoder = Decoder(_plain(items), len(items))
    assert len(decoder) == 3
    assert next(decoder) == b"x"
    assert len(decoder) == 2


def test_stops_at_length():
    items = [b"a", b"b", b"c"]
    assert list(Decoder(_plain(items), 2)) == items[:2]


def test_stops_when_bytes_run_out():
    items = [b"a", b"bc"]
    decoder = Decoder(_plain(items) + b"\x01\x02", 5)
    assert list(decoder) == items


def test_truncated_value_raises():
    data = (10).to_bytes(4, "little") + b"short"
    with pytest.raises(OutOfSpecError):
        list(Decoder(data, 1))