import pytest

from pqformat.encoding.bitpacking import BLOCK_LEN, Decoder, encode, encode_pack
from pqformat.errors import OutOfSpecError


def case1():
    num_bits = 3
    compressed = bytes([0b10001000, 0b11000110, 0b11111010] * 5)
    decompressed = [0, 1, 2, 3, 4, 5, 6, 7] * 5
    return num_bits, decompressed, compressed


def test_decode_rle():
    data = bytes([0b10001000, 0b11000110, 0b11111010])
    assert list(Decoder(data, 3, 8)) == [0, 1, 2, 3, 4, 5, 6, 7]


def test_decode_large():
    num_bits, expected, data = case1()
    assert list(Decoder(data, num_bits, len(expected))) == expected


def test_encode_large():
    num_bits, data, expected = case1()
    assert encode(data, num_bits) == expected


def test_encode():
    assert encode([0, 1, 2, 3, 4, 5, 6, 7], 3) == bytes(
        [0b10001000, 0b11000110, 0b11111010]
    )


def test_decode_bool():
    assert list(Decoder(bytes([0b10101010]), 1, 8)) == [0, 1, 0, 1, 0, 1, 0, 1]


def test_even_case():
    data = bytes([0b10001000, 0b11000110, 0b00011010])
    copies = 99
    expected = [0, 1, 2, 3, 4, 5, 6, 0] * copies
    decoded = list(Decoder(data * copies, 3, len(expected)))
    assert decoded == expected


def test_odd_case():
    data = bytes([0b10001000, 0b11000110, 0b00011010])
    copies = 4
    expected = [0, 1, 2, 3, 4, 5, 6, 0] * copies + [2]
    buffer = data * copies + bytes([0b00000010])
    assert list(Decoder(buffer, 3, len(expected))) == expected


def test_len_tracks_remaining():
    num_bits, expected, data = case1()
    decoder = Decoder(data, num_bits, len(expected))
    assert len(decoder) == len(expected)
    next(decoder)
    next(decoder)
    assert len(decoder) == len(expected) - 2


def test_encode_pack_size_and_roundtrip():
    values = [i % 32 for i in range(BLOCK_LEN)]
    packed = encode_pack(values, 5)
    assert len(packed) == 4 * 5
    assert list(Decoder(packed, 5, BLOCK_LEN)) == values


def test_encode_pack_wrong_length():
    with pytest.raises(ValueError):
        encode_pack([1, 2, 3], 2)


@pytest.mark.parametrize("num_bits", [1, 7, 13, 32])
def test_roundtrip_multiple_blocks(num_bits):
    mask = (1 << num_bits) - 1
    values = [(i * 2654435761) & mask for i in range(96)]
    assert list(Decoder(encode(values, num_bits), num_bits, len(values))) == values


def test_decoder_requires_data():
    with pytest.raises(OutOfSpecError):
        Decoder(b"", 3, 1)


def test_decoder_runs_out_of_data():
    decoder = Decoder(bytes(12), 3, 40)
    received = []
    with pytest.raises(OutOfSpecError):
        for value in decoder:
            received.append(value)
    assert all(value == 0 for value in received)
    assert len(received) < 40


def test_invalid_num_bits():
    with pytest.raises(ValueError):
        encode([1], 33)