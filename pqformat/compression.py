"""Compression codecs used by parquet column chunks."""

from __future__ import annotations

import abc
import enum
import gzip
import zlib

import brotli
import lz4.frame
import zstandard

from .encoding import uleb128
from .errors import ParquetError

__all__ = [
    "CompressionCodec",
    "Codec",
    "SnappyCodec",
    "GZipCodec",
    "BrotliCodec",
    "Lz4Codec",
    "ZstdCodec",
    "create_codec",
]

_BROTLI_QUALITY = 1
_BROTLI_LG_WINDOW = 22
_GZIP_LEVEL = 6
_ZSTD_LEVEL = 1
_SNAPPY_MAX_OFFSET = 65535


class CompressionCodec(enum.IntEnum):
    """Compression codecs of the parquet format, with their wire values."""

    UNCOMPRESSED = 0
    SNAPPY = 1
    GZIP = 2
    LZO = 3
    BROTLI = 4
    LZ4 = 5
    ZSTD = 6


def _io_error(error: BaseException | str) -> ParquetError:
    return ParquetError(f"underlying IO error: {error}")


def _read_exact(decompressed: bytes, output_size: int) -> bytes:
    if output_size < 0:
        raise ValueError(f"output size must not be negative, got {output_size}")
    if len(decompressed) < output_size:
        raise _io_error("failed to fill whole buffer")
    return decompressed[:output_size]


class Codec(abc.ABC):
    """A codec that compresses and decompresses byte buffers."""

    @abc.abstractmethod
    def compress(self, data: bytes) -> bytes:
        """Return the compressed form of ``data``."""

    @abc.abstractmethod
    def decompress(self, data: bytes, output_size: int) -> bytes:
        """Return exactly ``output_size`` decompressed bytes of ``data``."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


def _snappy_error(message: str) -> ParquetError:
    return ParquetError(f"underlying snap error: {message}")


def _snappy_literal(out: bytearray, literal: bytes) -> None:
    size = len(literal)
    if size == 0:
        return
    n = size - 1
    if n < 60:
        out.append(n << 2)
    else:
        width = (n.bit_length() + 7) // 8
        out.append((59 + width) << 2)
        out += n.to_bytes(width, "little")
    out += literal


def _snappy_copy(out: bytearray, offset: int, length: int) -> None:
    while length >= 68:
        out.append((63 << 2) | 2)
        out += offset.to_bytes(2, "little")
        length -= 64
    if length > 64:
        out.append((59 << 2) | 2)
        out += offset.to_bytes(2, "little")
        length -= 60
    if length < 12 and offset < 2048:
        out.append(((offset >> 8) << 5) | ((length - 4) << 2) | 1)
        out.append(offset & 0xFF)
    else:
        out.append(((length - 1) << 2) | 2)
        out += offset.to_bytes(2, "little")


def _snappy_compress(data: bytes) -> bytes:
    out = bytearray(uleb128.encode(len(data)))
    size = len(data)
    table: dict[bytes, int] = {}
    position = 0
    literal_start = 0
    while position + 4 <= size:
        key = data[position : position + 4]
        candidate = table.get(key)
        table[key] = position
        if candidate is None or position - candidate > _SNAPPY_MAX_OFFSET:
            position += 1
            continue
        length = 4
        while position + length < size and data[candidate + length] == data[position + length]:
            length += 1
        _snappy_literal(out, data[literal_start:position])
        _snappy_copy(out, position - candidate, length)
        position += length
        literal_start = position
    _snappy_literal(out, data[literal_start:])
    return bytes(out)


def _snappy_decompressed_len(data: bytes) -> tuple[int, int]:
    try:
        expected, position = uleb128.decode(data)
    except ValueError as error:
        raise _snappy_error(str(error)) from None
    if position == 0 or data[position - 1] & 0x80:
        raise _snappy_error("failed to decode the length header")
    if expected > 0xFFFFFFFF:
        raise _snappy_error(f"decompressed length {expected} is too large")
    return expected, position


def _snappy_decompress(data: bytes) -> bytes:
    expected, position = _snappy_decompressed_len(data)
    size = len(data)
    out = bytearray()
    while position < size:
        tag = data[position]
        position += 1
        kind = tag & 3
        if kind == 0:
            length = tag >> 2
            if length >= 60:
                extra = length - 59
                if position + extra > size:
                    raise _snappy_error("literal length header is truncated")
                length = int.from_bytes(data[position : position + extra], "little")
                position += extra
            length += 1
            if position + length > size:
                raise _snappy_error("literal is truncated")
            out += data[position : position + length]
            position += length
        else:
            if kind == 1:
                need = 1
                length = 4 + ((tag >> 2) & 7)
            else:
                need = 2 if kind == 2 else 4
                length = 1 + (tag >> 2)
            if position + need > size:
                raise _snappy_error("copy offset is truncated")
            offset = int.from_bytes(data[position : position + need], "little")
            if kind == 1:
                offset |= (tag >> 5) << 8
            position += need
            if offset == 0 or offset > len(out):
                raise _snappy_error(f"invalid copy offset {offset}")
            start = len(out) - offset
            while length > 0:
                take = min(length, offset)
                out += out[start : start + take]
                start += take
                length -= take
        if len(out) > expected:
            raise _snappy_error("data decompresses to more bytes than announced")
    if len(out) != expected:
        raise _snappy_error("data decompresses to fewer bytes than announced")
    return bytes(out)


class SnappyCodec(Codec):
    """Codec for the raw (unframed) Snappy format."""

    def compress(self, data: bytes) -> bytes:
        return _snappy_compress(bytes(data))

    def decompress(self, data: bytes, output_size: int) -> bytes:
        data = bytes(data)
        expected, _ = _snappy_decompressed_len(data)
        if expected > output_size:
            raise ParquetError(
                f"snappy data decompresses to {expected} bytes, more than {output_size}"
            )
        decompressed = _snappy_decompress(data)
        return decompressed + bytes(output_size - len(decompressed))


class GZipCodec(Codec):
    """Codec for the GZIP format."""

    def compress(self, data: bytes) -> bytes:
        return gzip.compress(bytes(data), compresslevel=_GZIP_LEVEL, mtime=0)

    def decompress(self, data: bytes, output_size: int) -> bytes:
        decompressor = zlib.decompressobj(wbits=31)
        try:
            decompressed = decompressor.decompress(bytes(data))
        except zlib.error as error:
            raise _io_error(error) from None
        return _read_exact(decompressed, output_size)


class BrotliCodec(Codec):
    """Codec for the Brotli format."""

    def compress(self, data: bytes) -> bytes:
        return brotli.compress(bytes(data), quality=_BROTLI_QUALITY, lgwin=_BROTLI_LG_WINDOW)

    def decompress(self, data: bytes, output_size: int) -> bytes:
        try:
            decompressed = brotli.decompress(bytes(data))
        except brotli.error as error:
            raise _io_error(error) from None
        return _read_exact(decompressed, output_size)


class Lz4Codec(Codec):
    """Codec for the LZ4 frame format."""

    def compress(self, data: bytes) -> bytes:
        return lz4.frame.compress(bytes(data))

    def decompress(self, data: bytes, output_size: int) -> bytes:
        try:
            decompressed = lz4.frame.decompress(bytes(data))
        except (RuntimeError, ValueError) as error:
            raise _io_error(error) from None
        return _read_exact(decompressed, output_size)


class ZstdCodec(Codec):
    """Codec for the Zstandard format."""

    def compress(self, data: bytes) -> bytes:
        return zstandard.ZstdCompressor(level=_ZSTD_LEVEL).compress(bytes(data))

    def decompress(self, data: bytes, output_size: int) -> bytes:
        try:
            decompressed = zstandard.ZstdDecompressor().decompressobj().decompress(bytes(data))
        except zstandard.ZstdError as error:
            raise _io_error(error) from None
        return _read_exact(decompressed, output_size)


_CODECS: dict[CompressionCodec, type[Codec]] = {
    CompressionCodec.SNAPPY: SnappyCodec,
    CompressionCodec.GZIP: GZipCodec,
    CompressionCodec.BROTLI: BrotliCodec,
    CompressionCodec.LZ4: Lz4Codec,
    CompressionCodec.ZSTD: ZstdCodec,
}


def create_codec(codec: CompressionCodec) -> Codec | None:
    """Return a codec for ``codec``, or ``None`` when it is ``UNCOMPRESSED``."""
    codec = CompressionCodec(codec)
    if codec is CompressionCodec.UNCOMPRESSED:
        return None
    try:
        return _CODECS[codec]()
    except KeyError:
        raise ParquetError(f"CompressionCodec {codec.name} is not installed") from None