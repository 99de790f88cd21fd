"""Metadata of row groups and of their column chunks."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any

from ..compression import CompressionCodec
from ..errors import OutOfSpecError
from .schema import ColumnDescriptor, SchemaDescriptor

__all__ = [
    "ColumnMetaData",
    "ColumnChunk",
    "RowGroup",
    "ColumnChunkMetaData",
    "RowGroupMetaData",
]


@dataclass
class ColumnMetaData:
    """Wire-level metadata of a column chunk."""

    type_: Any
    encodings: list[Any]
    path_in_schema: list[str]
    codec: CompressionCodec
    num_values: int
    total_uncompressed_size: int
    total_compressed_size: int
    data_page_offset: int
    key_value_metadata: list[Any] | None = None
    index_page_offset: int | None = None
    dictionary_page_offset: int | None = None
    statistics: Any = None


@dataclass
class ColumnChunk:
    """Wire-level column chunk."""

    file_offset: int
    file_path: str | None = None
    meta_data: ColumnMetaData | None = None


@dataclass
class RowGroup:
    """Wire-level row group."""

    columns: list[ColumnChunk]
    total_byte_size: int
    num_rows: int
    sorting_columns: list[Any] | None = None


@dataclass(frozen=True)
class ColumnChunkMetaData:
    """Metadata of a column chunk together with the descriptor of its column."""

    column_chunk: ColumnChunk
    descriptor: ColumnDescriptor

    @property
    def _meta(self) -> ColumnMetaData:
        meta = self.column_chunk.meta_data
        if meta is None:
            raise OutOfSpecError("column chunk has no column metadata")
        return meta

    @property
    def file_path(self) -> str | None:
        """File holding the chunk, relative to this file; ``None`` for this file."""
        return self.column_chunk.file_path

    @property
    def file_offset(self) -> int:
        return self.column_chunk.file_offset

    @property
    def type_(self) -> Any:
        return self._meta.type_

    @property
    def statistics(self) -> Any:
        """The raw statistics of the chunk, if any."""
        return self._meta.statistics

    @property
    def num_values(self) -> int:
        return self._meta.num_values

    @property
    def compression(self) -> CompressionCodec:
        return self._meta.codec

    @property
    def compressed_size(self) -> int:
        return self._meta.total_compressed_size

    @property
    def uncompressed_size(self) -> int:
        return self._meta.total_uncompressed_size

    @property
    def data_page_offset(self) -> int:
        return self._meta.data_page_offset

    @property
    def index_page_offset(self) -> int | None:
        return self._meta.index_page_offset

    @property
    def dictionary_page_offset(self) -> int | None:
        return self._meta.dictionary_page_offset

    @property
    def column_encoding(self) -> list[Any]:
        return self._meta.encodings

    def physical_type(self) -> Any:
        """Return the physical type of the chunk's column."""
        return self.descriptor.physical_type()

    def has_index_page(self) -> bool:
        """Return whether the chunk has an index page."""
        return self._meta.index_page_offset is not None

    def byte_range(self) -> tuple[int, int]:
        """Return the start offset and length in bytes of the chunk in its file."""
        start = self.dictionary_page_offset
        if start is None:
            start = self.data_page_offset
        length = self.compressed_size
        if start < 0 or length < 0:
            raise ValueError("column start and length should not be negative")
        return start, length

    @classmethod
    def try_from_thrift(
        cls, column_descr: ColumnDescriptor, column_chunk: ColumnChunk
    ) -> ColumnChunkMetaData:
        return cls(column_chunk, column_descr)

    def into_thrift(self) -> ColumnChunk:
        return self.column_chunk


@dataclass(frozen=True)
class RowGroupMetaData:
    """Metadata of a row group."""

    columns: Sequence[ColumnChunkMetaData]
    num_rows: int
    total_byte_size: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "columns", tuple(self.columns))

    def num_columns(self) -> int:
        return len(self.columns)

    def column(self, i: int) -> ColumnChunkMetaData:
        return self.columns[i]

    def compressed_size(self) -> int:
        """Total size of the compressed column data of this row group."""
        return sum(c.compressed_size for c in self.columns)

    @classmethod
    def try_from_thrift(cls, schema_descr: SchemaDescriptor, rg: RowGroup) -> RowGroupMetaData:
        if schema_descr.num_columns() != len(rg.columns):
            raise OutOfSpecError(
                f"row group has {len(rg.columns)} columns but the schema has "
                f"{schema_descr.num_columns()}"
            )
        columns = [
            ColumnChunkMetaData.try_from_thrift(descriptor, chunk)
            for chunk, descriptor in zip(rg.columns, schema_descr.columns())
        ]
        return cls(columns, rg.num_rows, rg.total_byte_size)

    def into_thrift(self) -> RowGroup:
        return RowGroup(
            columns=[c.into_thrift() for c in self.columns],
            total_byte_size=self.total_byte_size,
            num_rows=self.num_rows,
            sorting_columns=None,
        )


_ = field