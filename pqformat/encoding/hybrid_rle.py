"""RLE / bit-packing hybrid encoding, plus LSB-first bitmaps."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from ..errors import OutOfSpecError
from . import uleb128
from .bitpacking import BLOCK_LEN, encode_pack
from .common import ceil8

__all__ = [
    "Bitpacked",
    "Rle",
    "Decoder",
    "set_bit",
    "iter_bitmap",
    "bitpacked_encode",
    "encode_bool",
    "encode_u32",
]


@dataclass(frozen=True)
class Bitpacked:
    """A bit-packed run; the consumer must know its bit width to unpack it."""

    data: bytes


@dataclass(frozen=True)
class Rle:
    """A run-length encoded value, repeated ``run_length`` times."""

    data: bytes
    run_length: int


def set_bit(byte: int, i: int) -> int:
    """Return ``byte`` with bit ``i`` (0 = least significant) set."""
    if not 0 <= i < 8:
        raise ValueError(f"bit position must be between 0 and 7, got {i}")
    return byte | (1 << i)


def iter_bitmap(data: bytes, offset: int, length: int) -> Iterator[bool]:
    """Yield ``length`` bits of ``data`` starting at bit ``offset``, LSB first.

    Iteration stops early if the bitmap runs out of bytes.
    """
    for position in range(offset, offset + length):
        byte_index = position // 8
        if byte_index >= len(data):
            return
        yield bool((data[byte_index] >> (position % 8)) & 1)


def bitpacked_encode(values: Iterable[bool]) -> bytes:
    """Pack booleans into bytes, least significant bit first."""
    bits = list(values)
    out = bytearray(ceil8(len(bits)))
    for position, bit in enumerate(bits):
        if bit:
            out[position // 8] = set_bit(out[position // 8], position % 8)
    return bytes(out)


def _bitpacked_header(length: int) -> bytes:
    return uleb128.encode((ceil8(length) << 1) | 1)


def encode_bool(values: Iterable[bool]) -> bytes:
    """Encode booleans as a single bit-packed hybrid run (header included)."""
    bits = list(values)
    return _bitpacked_header(len(bits)) + bitpacked_encode(bits)


def encode_u32(values: Iterable[int], num_bits: int) -> bytes:
    """Encode ``u32`` values as a single bit-packed hybrid run of width ``num_bits``."""
    items = list(values)
    out = bytearray(_bitpacked_header(len(items)))
    for start in range(0, len(items), BLOCK_LEN):
        block = items[start : start + BLOCK_LEN]
        used = len(block)
        block.extend([0] * (BLOCK_LEN - used))
        packed = encode_pack(block, num_bits)
        out += packed[: ceil8(used * num_bits)]
    return bytes(out)


class Decoder:
    """Iterator over the runs (:class:`Bitpacked` or :class:`Rle`) in ``values``."""

    def __init__(self, values: bytes, num_bits: int) -> None:
        self._values = memoryview(bytes(values))
        self._num_bits = num_bits

    def __iter__(self) -> Decoder:
        return self

    def _take(self, size: int) -> bytes:
        if size > len(self._values):
            raise OutOfSpecError(
                f"hybrid run needs {size} bytes but only {len(self._values)} remain"
            )
        data = bytes(self._values[:size])
        self._values = self._values[size:]
        return data

    def __next__(self) -> Bitpacked | Rle:
        if not len(self._values):
            raise StopIteration
        indicator, consumed = uleb128.decode(self._values)
        self._values = self._values[consumed:]
        if indicator & 1:
            return Bitpacked(self._take((indicator >> 1) * self._num_bits))
        run_length = indicator >> 1
        return Rle(self._take(ceil8(self._num_bits)), run_length)