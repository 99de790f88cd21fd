import pytest

from pqformat.compression import (
    BrotliCodec,
    CompressionCodec,
    GZipCodec,
    Lz4Codec,
    SnappyCodec,
    ZstdCodec,
    create_codec,
)
from pqformat.errors import ParquetError

CODECS = [
    CompressionCodec.SNAPPY,
    CompressionCodec.GZIP,
    CompressionCodec.BROTLI,
    CompressionCodec.LZ4,
    CompressionCodec.ZSTD,
]


def _data(size):
    return bytes(x % 255 for x in range(size))


@pytest.mark.parametrize("codec", CODECS)
@pytest.mark.parametrize("size", [100, 10000, 100000])
def test_roundtrip(codec, size):
    data = _data(size)
    c1 = create_codec(codec)
    c2 = create_codec(codec)

    compressed = c1.compress(data)
    assert c2.decompress(compressed, len(data)) == data

    compressed = c2.compress(data)
    assert c1.decompress(compressed, len(data)) == data


@pytest.mark.parametrize(
    "codec, cls",
    [
        (CompressionCodec.SNAPPY, SnappyCodec),
        (CompressionCodec.GZIP, GZipCodec),
        (CompressionCodec.BROTLI, BrotliCodec),
        (CompressionCodec.LZ4, Lz4Codec),
        (CompressionCodec.ZSTD, ZstdCodec),
    ],
)
def test_create_codec_type(codec, cls):
    assert type(create_codec(codec)) is cls


def test_uncompressed_has_no_codec():
    assert create_codec(CompressionCodec.UNCOMPRESSED) is None


def test_lzo_not_installed():
    with pytest.raises(ParquetError, match="not installed"):
        create_codec(CompressionCodec.LZO)


def test_snappy_empty_wire_format():
    assert SnappyCodec().compress(b"") == b"\x00"


def test_snappy_literal_wire_format():
    assert SnappyCodec().compress(b"abc") == b"\x03\x08abc"


def test_snappy_overlapping_copy():
    data = b"a" * 1000
    codec = SnappyCodec()
    compressed = codec.compress(data)
    assert len(compressed) < len(data)
    assert codec.decompress(compressed, len(data)) == data


def test_snappy_output_too_small():
    codec = SnappyCodec()
    compressed = codec.compress(b"abcdef")
    with pytest.raises(ParquetError):
        codec.decompress(compressed, 3)


def test_snappy_truncated_input():
    with pytest.raises(ParquetError, match="snap"):
        SnappyCodec().decompress(b"\x05\x10ab", 5)


def test_snappy_invalid_offset():
    # literal "a", then a copy with offset 2 reaching before the start
    with pytest.raises(ParquetError):
        SnappyCodec().decompress(b"\x05\x00a\x01\x02", 5)


@pytest.mark.parametrize(
    "codec",
    [CompressionCodec.GZIP, CompressionCodec.BROTLI, CompressionCodec.LZ4, CompressionCodec.ZSTD],
)
def test_decompress_short_output_raises(codec):
    c = create_codec(codec)
    compressed = c.compress(b"abc")
    with pytest.raises(ParquetError, match="IO error"):
        c.decompress(compressed, 10)


@pytest.mark.parametrize(
    "codec",
    [CompressionCodec.GZIP, CompressionCodec.BROTLI, CompressionCodec.LZ4, CompressionCodec.ZSTD],
)
def test_decompress_garbage_raises(codec):
    with pytest.raises(ParquetError):
        create_codec(codec).decompress(b"definitely not compressed", 4)


def test_decompress_prefix():
    c = create_codec(CompressionCodec.GZIP)
    assert c.decompress(c.compress(b"hello world"), 5) == b"hello"