"""Metadata of a whole parquet file."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from .column_order import ColumnOrder
from .row_group import RowGroupMetaData
from .schema import SchemaDescriptor

__all__ = [
    "FOOTER_SIZE",
    "PARQUET_MAGIC",
    "DEFAULT_FOOTER_READ_SIZE",
    "KeyValue",
    "FileMetaData",
]

FOOTER_SIZE = 8
PARQUET_MAGIC = b"PAR1"
# Number of bytes read from the end of a file on the first read.
DEFAULT_FOOTER_READ_SIZE = 64 * 1024


@dataclass(frozen=True)
class KeyValue:
    """An application-defined key/value pair stored in the file."""

    key: str
    value: str | None = None


@dataclass
class FileMetaData:
    """Metadata of a parquet file, with the schema descriptor of its columns.

    ``created_by`` has the form
    ``<application> version <application version> (build <build hash>)``.
    ``column_orders`` holds one order per leaf column, or ``None`` when the file
    records none (each column then has the undefined, legacy order).
    """

    version: int
    num_rows: int
    created_by: str | None
    row_groups: Sequence[RowGroupMetaData]
    key_value_metadata: Sequence[KeyValue] | None
    schema_descr: SchemaDescriptor
    column_orders: Sequence[ColumnOrder] | None = None

    def schema(self) -> SchemaDescriptor:
        """Return the schema descriptor of this file."""
        return self.schema_descr

    def column_order(self, i: int) -> ColumnOrder:
        """Return the column order of the ``i``-th column, undefined if none is recorded."""
        if self.column_orders is None:
            return ColumnOrder.undefined()
        return self.column_orders[i]