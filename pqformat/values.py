"""Helpers to turn pages into native values and back."""

from __future__ import annotations

import struct
from collections.abc import Iterable, Iterator, Sequence
from typing import Any, TypeVar

from .encoding.hybrid_rle import encode_bool

__all__ = ["values_def", "is_set", "get_bit", "read_bitmap", "unzip_option"]

T = TypeVar("T")


def values_def(
    values: Iterable[T], def_levels: Iterable[int], max_def_level: int
) -> Iterator[T | None]:
    """Yield one item per definition level: the next value when the level is the
    maximum, ``None`` otherwise (or when the values are exhausted)."""
    value_iter = iter(values)
    for level in def_levels:
        if level == max_def_level:
            yield next(value_iter, None)
        else:
            yield None


def is_set(byte: int, i: int) -> bool:
    """Return whether bit ``i`` (0 = least significant) of ``byte`` is set."""
    if not 0 <= i < 8:
        raise IndexError(f"bit position must be between 0 and 7, got {i}")
    return bool(byte & (1 << i))


def get_bit(data: bytes, i: int) -> bool:
    """Return bit ``i`` of a PLAIN boolean buffer, whose least significant byte is last."""
    byte_index = len(data) - 1 - i // 8
    if byte_index < 0:
        raise IndexError(f"bit {i} is outside a buffer of {len(data)} bytes")
    return is_set(data[byte_index], i % 8)


def read_bitmap(values: bytes, length: int) -> list[bool]:
    """Read the first ``length`` bits of a PLAIN boolean buffer."""
    return [get_bit(values, i) for i in range(length)]


def unzip_option(array: Sequence[Any | None], fmt: str) -> tuple[bytes, bytes]:
    """Split optional values into PLAIN values and length-prefixed validity levels.

    ``fmt`` is the :mod:`struct` format of one value (for instance ``"i"``, ``"q"``,
    ``"f"``, ``"d"`` or ``"3I"``), written little-endian. Returns the encoded
    values and the definition levels, preceded by their byte length as ``u32``.
    """
    packer = struct.Struct("<" + fmt)
    parts = []
    for item in array:
        if item is None:
            continue
        if isinstance(item, (tuple, list)):
            parts.append(packer.pack(*item))
        else:
            parts.append(packer.pack(item))
    levels = encode_bool(item is not None for item in array)
    validity = struct.pack("<I", len(levels)) + levels
    return b"".join(parts), validity