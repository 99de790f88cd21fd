"""Small helpers shared by the encoders and decoders."""

from __future__ import annotations

__all__ = ["get_length", "ceil8"]


def get_length(values: bytes) -> int:
    """Return the little-endian ``u32`` stored in the first four bytes of ``values``."""
    if len(values) < 4:
        raise ValueError("at least 4 bytes are required to read a length")
    return int.from_bytes(bytes(values[:4]), "little")


def ceil8(value: int) -> int:
    """Return ``value / 8`` rounded up."""
    return (value + 7) // 8