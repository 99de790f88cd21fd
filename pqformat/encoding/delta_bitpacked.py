"""The ``DELTA_BINARY_PACKED`` encoding of 32-bit integers."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from ..errors import OutOfSpecError
from . import bitpacking, uleb128, zigzag_leb128
from .common import ceil8

__all__ = ["encode", "Decoder"]

_BLOCK_SIZE = 128
_MINI_BLOCKS = 1
_I32_MIN = -(1 << 31)
_I32_MAX = (1 << 31) - 1


def _wrap_i32(value: int) -> int:
    return ((value + (1 << 31)) % (1 << 32)) - (1 << 31)


def encode(values: Iterable[int]) -> bytes:
    """Encode 32-bit integers as ``DELTA_BINARY_PACKED``.

    Blocks hold 128 values in a single mini-block. Deltas wrap around
    at 32 bits, as the decoder expects.
    """
    items = list(values)
    if not items:
        raise ValueError("cannot delta-encode an empty sequence")
    for item in items:
        if not _I32_MIN <= item <= _I32_MAX:
            raise ValueError(f"{item} is not a signed 32-bit integer")

    out = bytearray(uleb128.encode(_BLOCK_SIZE))
    out += uleb128.encode(_MINI_BLOCKS)
    out += uleb128.encode(len(items))
    out += zigzag_leb128.encode(items[0])

    deltas = [_wrap_i32(current - previous) for previous, current in zip(items, items[1:])]
    for start in range(0, len(deltas), _BLOCK_SIZE):
        block = deltas[start : start + _BLOCK_SIZE]
        min_delta = min(block)
        num_bits = (max(block) - min_delta).bit_length()
        # <min delta> <bit widths of the mini-blocks> <mini-blocks>
        out += zigzag_leb128.encode(min_delta)
        out.append(num_bits)
        if num_bits:
            relative = [delta - min_delta for delta in block]
            relative.extend([0] * (_BLOCK_SIZE - len(relative)))
            out += bitpacking.encode(relative, num_bits)
    return bytes(out)


class Decoder:
    """Iterator over the 32-bit integers of a ``DELTA_BINARY_PACKED`` buffer."""

    def __init__(self, values: bytes) -> None:
        self._data = memoryview(bytes(values))
        offset = 0

        block_size, used = uleb128.decode(self._data[offset:])
        offset += used
        if block_size % 128 != 0:
            raise OutOfSpecError(f"block size {block_size} is not a multiple of 128")
        num_mini_blocks, used = uleb128.decode(self._data[offset:])
        offset += used
        if num_mini_blocks == 0:
            raise OutOfSpecError("the number of mini-blocks must be positive")
        total_count, used = uleb128.decode(self._data[offset:])
        offset += used
        first_value, used = zigzag_leb128.decode(self._data[offset:])
        offset += used

        values_per_mini_block = block_size // num_mini_blocks
        if values_per_mini_block % 8 != 0:
            raise OutOfSpecError(
                f"{values_per_mini_block} values per mini-block is not a multiple of 8"
            )

        self._num_mini_blocks = num_mini_blocks
        self._values_per_mini_block = values_per_mini_block
        self._total_count = total_count
        self._remaining = total_count
        self._current = first_value
        self._offset = offset
        self._consumed = offset
        self._delta_iter = self._deltas()

    def _deltas(self) -> Iterator[int]:
        data = self._data
        offset = self._offset
        remaining = self._total_count - 1
        capacity = self._num_mini_blocks * self._values_per_mini_block
        while remaining > 0:
            if offset >= len(data):
                raise OutOfSpecError("delta-encoded data ended before all blocks were read")
            min_delta, used = zigzag_leb128.decode(data[offset:])
            offset += used
            widths = bytes(data[offset : offset + self._num_mini_blocks])
            if len(widths) < self._num_mini_blocks:
                raise OutOfSpecError("delta-encoded block is missing mini-block bit widths")
            offset += self._num_mini_blocks
            self._consumed = offset

            count = min(remaining, capacity)
            for width in widths:
                if count == 0:
                    break
                take = min(count, self._values_per_mini_block)
                if width:
                    size = ceil8(self._values_per_mini_block * width)
                    chunk = data[offset : offset + size]
                    offset += size
                    self._consumed = offset
                    for relative in bitpacking.Decoder(chunk, width, take):
                        yield min_delta + relative
                else:
                    for _ in range(take):
                        yield min_delta
                count -= take
                remaining -= take

    def __iter__(self) -> Decoder:
        return self

    def __next__(self) -> int:
        if self._remaining == 0:
            raise StopIteration
        if self._remaining != self._total_count:
            try:
                delta = next(self._delta_iter)
            except StopIteration:
                raise OutOfSpecError("delta-encoded data holds fewer deltas than values") from None
            self._current += delta
        self._remaining -= 1
        return _wrap_i32(self._current)

    def __len__(self) -> int:
        return self._remaining

    def consumed_bytes(self) -> int:
        """Return the number of bytes of the buffer consumed so far."""
        return self._consumed