"""The ``DELTA_LENGTH_BYTE_ARRAY`` encoding: delta-packed lengths, then the bytes."""

from __future__ import annotations

from collections.abc import Iterable

from ..errors import OutOfSpecError
from . import delta_bitpacked

__all__ = ["encode", "Decoder"]


def _as_bytes(item: bytes | bytearray | memoryview | str) -> bytes:
    if isinstance(item, str):
        return item.encode("utf-8")
    return bytes(item)


def encode(items: Iterable[bytes | bytearray | memoryview | str]) -> bytes:
    """Encode byte strings (``str`` is taken as UTF-8) as delta lengths followed by their bytes."""
    parts = [_as_bytes(item) for item in items]
    return delta_bitpacked.encode(len(part) for part in parts) + b"".join(parts)


class Decoder:
    """Iterator over the lengths; :meth:`into_values` then returns the concatenated bytes."""

    def __init__(self, values: bytes) -> None:
        self._values = bytes(values)
        self._lengths = delta_bitpacked.Decoder(self._values)
        self._total_length = 0

    def __iter__(self) -> Decoder:
        return self

    def __next__(self) -> int:
        length = next(self._lengths)
        if length < 0:
            raise OutOfSpecError(f"negative byte array length {length}")
        self._total_length += length
        return length

    def into_values(self) -> bytes:
        """Return the concatenated values; every length must have been read first."""
        if len(self._lengths):
            raise ValueError("all lengths must be consumed before reading the values")
        start = self._lengths.consumed_bytes()
        end = start + self._total_length
        if end > len(self._values):
            raise OutOfSpecError(
                f"values need {self._total_length} bytes but only {len(self._values) - start} remain"
            )
        return self._values[start:end]