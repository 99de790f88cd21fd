import pytest

from pqformat.encoding.common import ceil8, get_length


def test_get_length_reads_little_endian_prefix():
    assert get_length(bytes([2, 0, 0, 0, 3, 11])) == 2


def test_get_length_roundtrips_u32():
    for value in (0, 1, 255, 256, 65_536, 2**32 - 1):
        assert get_length(value.to_bytes(4, "little") + b"tail") == value


def test_get_length_too_short():
    with pytest.raises(ValueError):
        get_length(b"\x01\x02\x03")


def test_ceil8_exact_multiples():
    for k in range(10):
        assert ceil8(8 * k) == k


def test_ceil8_is_smallest_covering_byte_count():
    for value in range(1, 200):
        n = ceil8(value)
        assert n * 8 >= value
        assert (n - 1) * 8 < value