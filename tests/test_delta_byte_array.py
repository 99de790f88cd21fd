import pytest

from pqformat.encoding.delta_byte_array import Decoder

SPARK_DATA = bytes(
    [
        128, 1, 4, 2, 0, 0, 0, 0, 0, 0,
        128, 1, 4, 2, 10, 0, 0, 0, 0, 0,
        72, 101, 108, 108, 111, 87, 111, 114, 108, 100,
        1, 2, 3,
    ]
)


def test_bla():
    decoder = Decoder(SPARK_DATA)
    assert list(decoder) == [0, 0]

    lengths = decoder.into_lengths()
    assert list(lengths) == [5, 5]

    assert lengths.into_values() == b"HelloWorld"


def test_into_lengths_before_consuming_raises():
    decoder = Decoder(SPARK_DATA)
    next(decoder)
    with pytest.raises(ValueError):
        decoder.into_lengths()


def test_prefixes_stop_after_count():
    decoder = Decoder(SPARK_DATA)
    assert next(decoder) == 0
    assert next(decoder) == 0
    with pytest.raises(StopIteration):
        next(decoder)