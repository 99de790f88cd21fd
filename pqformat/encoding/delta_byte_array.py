"""Decoder of the ``DELTA_BYTE_ARRAY`` (delta strings) encoding."""

from __future__ import annotations

from ..errors import OutOfSpecError
from . import delta_bitpacked, delta_length_byte_array

__all__ = ["Decoder"]


class Decoder:
    """Iterator over the prefix lengths; :meth:`into_lengths` moves on to the suffixes."""

    def __init__(self, values: bytes) -> None:
        self._values = bytes(values)
        self._prefix_lengths = delta_bitpacked.Decoder(self._values)

    def __iter__(self) -> Decoder:
        return self

    def __next__(self) -> int:
        length = next(self._prefix_lengths)
        if length < 0:
            raise OutOfSpecError(f"negative prefix length {length}")
        return length

    def into_lengths(self) -> delta_length_byte_array.Decoder:
        """Return the decoder of suffix lengths; every prefix must have been read first."""
        if len(self._prefix_lengths):
            raise ValueError("all prefix lengths must be consumed before reading the suffixes")
        start = self._prefix_lengths.consumed_bytes()
        return delta_length_byte_array.Decoder(self._values[start:])