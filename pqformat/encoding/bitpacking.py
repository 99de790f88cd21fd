"""Bit-packing of ``u32`` values in blocks of 32, least significant bit first."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence

from ..errors import OutOfSpecError
from .common import ceil8

__all__ = ["BLOCK_LEN", "encode", "encode_pack", "Decoder"]

BLOCK_LEN = 32


def _check_num_bits(num_bits: int) -> None:
    if not 0 <= num_bits <= 32:
        raise ValueError(f"num_bits must be between 0 and 32, got {num_bits}")


def _pack(values: Sequence[int], num_bits: int) -> bytes:
    mask = (1 << num_bits) - 1
    acc = 0
    for position, value in enumerate(values):
        acc |= (value & mask) << (position * num_bits)
    return acc.to_bytes(ceil8(len(values) * num_bits), "little")


def _unpack(chunk: bytes, num_bits: int) -> list[int]:
    acc = int.from_bytes(chunk, "little")
    mask = (1 << num_bits) - 1
    return [(acc >> (position * num_bits)) & mask for position in range(BLOCK_LEN)]


def encode_pack(decompressed: Sequence[int], num_bits: int) -> bytes:
    """Pack exactly 32 values into ``4 * num_bits`` bytes."""
    _check_num_bits(num_bits)
    values = list(decompressed)
    if len(values) != BLOCK_LEN:
        raise ValueError(f"a pack holds exactly {BLOCK_LEN} values, got {len(values)}")
    return _pack(values, num_bits)


def encode(decompressed: Iterable[int], num_bits: int) -> bytes:
    """Bit-pack ``decompressed`` using ``num_bits`` per value.

    The last block is padded with zeros; the result holds
    ``len(decompressed) * num_bits // 8`` bytes.
    """
    _check_num_bits(num_bits)
    values = list(decompressed)
    packs = []
    for start in range(0, len(values), BLOCK_LEN):
        block = values[start : start + BLOCK_LEN]
        block.extend([0] * (BLOCK_LEN - len(block)))
        packs.append(_pack(block, num_bits))
    return b"".join(packs)[: len(values) * num_bits // 8]


class Decoder:
    """Iterator over ``length`` bit-packed values of width ``num_bits``."""

    def __init__(self, compressed: bytes, num_bits: int, length: int) -> None:
        _check_num_bits(num_bits)
        self._data = memoryview(bytes(compressed))
        self._num_bits = num_bits
        self._block_size = BLOCK_LEN * num_bits // 8
        self._offset = 0
        self._remaining = length
        self._pack: Iterator[int] = iter(())
        self._load_pack()

    def _load_pack(self) -> None:
        chunk = bytes(self._data[self._offset : self._offset + self._block_size])
        if self._num_bits and not chunk:
            raise OutOfSpecError("bit-packed data ended before all values were read")
        self._offset += self._block_size
        self._pack = iter(_unpack(chunk, self._num_bits))

    def __iter__(self) -> Decoder:
        return self

    def __next__(self) -> int:
        if self._remaining == 0:
            raise StopIteration
        value = next(self._pack, None)
        if value is None:
            self._load_pack()
            value = next(self._pack)
        self._remaining -= 1
        return value

    def __len__(self) -> int:
        return self._remaining