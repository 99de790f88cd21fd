"""Sort and column orders used to aggregate min/max statistics."""

from __future__ import annotations

import enum
from dataclasses import dataclass

__all__ = ["SortOrder", "ColumnOrder"]


class SortOrder(enum.Enum):
    """Sort order for page and column statistics."""

    SIGNED = "signed"
    """Signed (either value or legacy byte-wise) comparison."""
    UNSIGNED = "unsigned"
    """Unsigned (value or byte-wise, depending on the physical type) comparison."""
    UNDEFINED = "undefined"
    """Comparison is undefined."""


@dataclass(frozen=True)
class ColumnOrder:
    """How min/max values of a column were aggregated.

    ``order`` is ``None`` for the undefined (legacy) column order, in which
    all values are compared as signed values or bytes.
    """

    order: SortOrder | None = None

    def __post_init__(self) -> None:
        if self.order is not None and not isinstance(self.order, SortOrder):
            raise TypeError(f"expected a SortOrder, got {self.order!r}")

    @classmethod
    def type_defined(cls, order: SortOrder) -> ColumnOrder:
        """Column order defined by the column's logical or physical type."""
        if not isinstance(order, SortOrder):
            raise TypeError(f"expected a SortOrder, got {order!r}")
        return cls(order)

    @classmethod
    def undefined(cls) -> ColumnOrder:
        """The legacy, undefined column order."""
        return cls(None)

    @property
    def is_undefined(self) -> bool:
        return self.order is None

    def sort_order(self) -> SortOrder:
        """Return the sort order associated with this column order."""
        return SortOrder.SIGNED if self.order is None else self.order