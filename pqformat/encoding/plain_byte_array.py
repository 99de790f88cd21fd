"""Decoder of PLAIN-encoded byte arrays (length-prefixed values)."""

from __future__ import annotations

from ..errors import OutOfSpecError
from .common import get_length

__all__ = ["Decoder"]


class Decoder:
    """Iterator over up to ``length`` byte strings, each prefixed by a ``u32`` length."""

    def __init__(self, values: bytes, length: int) -> None:
        self._values = memoryview(bytes(values))
        self._remaining = length

    def __iter__(self) -> Decoder:
        return self

    def __next__(self) -> bytes:
        values = self._values
        if self._remaining == 0 or len(values) < 4:
            raise StopIteration
        size = get_length(values)
        end = 4 + size
        if end > len(values):
            raise OutOfSpecError(
                f"byte array of length {size} exceeds the {len(values) - 4} bytes left"
            )
        item = bytes(values[4:end])
        self._values = values[end:]
        self._remaining -= 1
        return item

    def __len__(self) -> int:
        return self._remaining