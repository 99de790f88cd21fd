"""Signed integers as zig-zag mapped ULEB128."""

from __future__ import annotations

from . import uleb128

__all__ = ["decode", "encode"]

_U64_MASK = (1 << 64) - 1


def decode(values: bytes) -> tuple[int, int]:
    """Decode a zig-zag ULEB128 integer; returns the value and bytes consumed."""
    u, consumed = uleb128.decode(values)
    return (u >> 1) ^ -(u & 1), consumed


def encode(value: int) -> bytes:
    """Encode a signed 64-bit ``value`` as zig-zag ULEB128."""
    if not -(1 << 63) <= value < (1 << 63):
        raise ValueError(f"{value} is not a signed 64-bit integer")
    zigzag = ((value << 1) ^ (value >> 63)) & _U64_MASK
    return uleb128.encode(zigzag)