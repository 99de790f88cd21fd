"""Schema types and the descriptors of a schema's leaf columns."""

from __future__ import annotations

import enum
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass, field
from typing import Any, Union

from ..errors import OutOfSpecError

__all__ = [
    "Repetition",
    "PrimitiveType",
    "GroupType",
    "ParquetType",
    "ColumnDescriptor",
    "SchemaDescriptor",
]


class Repetition(enum.Enum):
    """How many times a field may occur in its parent."""

    REQUIRED = "required"
    OPTIONAL = "optional"
    REPEATED = "repeated"


@dataclass(frozen=True)
class PrimitiveType:
    """A leaf field of a schema.

    ``physical_type`` names the physical type (for instance ``"INT32"`` or
    ``"BYTE_ARRAY"``); ``logical_type`` and ``converted_type`` are kept as given.
    """

    name: str
    physical_type: Any
    repetition: Repetition = Repetition.OPTIONAL
    id: int | None = None
    logical_type: Any = None
    converted_type: Any = None


@dataclass(frozen=True)
class GroupType:
    """A field that groups other fields."""

    name: str
    fields: tuple[Union[PrimitiveType, "GroupType"], ...] = ()
    repetition: Repetition = Repetition.OPTIONAL
    id: int | None = None
    logical_type: Any = None
    converted_type: Any = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "fields", tuple(self.fields))


ParquetType = Union[PrimitiveType, GroupType]


@dataclass(frozen=True)
class ColumnDescriptor:
    """Descriptor of a leaf column: its type, levels, path and top-level field."""

    primitive_type: ParquetType
    max_def_level: int
    max_rep_level: int
    path_in_schema: tuple[str, ...] = field(default=())
    base_type: ParquetType | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "path_in_schema", tuple(self.path_in_schema))

    def physical_type(self) -> Any:
        """Return the physical type of this leaf column.

        Raises :class:`TypeError` if the column's type is not primitive.
        """
        if not isinstance(self.primitive_type, PrimitiveType):
            raise TypeError(f"column {self.name()!r} does not have a primitive type")
        return self.primitive_type.physical_type

    def name(self) -> str:
        """Return the column name."""
        return self.primitive_type.name


def _leaves(
    tp: ParquetType,
    base: ParquetType,
    max_rep_level: int,
    max_def_level: int,
    path: tuple[str, ...],
) -> Iterator[ColumnDescriptor]:
    path = path + (tp.name,)
    if tp.repetition is Repetition.OPTIONAL:
        max_def_level += 1
    elif tp.repetition is Repetition.REPEATED:
        max_def_level += 1
        max_rep_level += 1

    if isinstance(tp, PrimitiveType):
        yield ColumnDescriptor(tp, max_def_level, max_rep_level, path, base)
    else:
        for child in tp.fields:
            yield from _leaves(child, base, max_rep_level, max_def_level, path)


class SchemaDescriptor:
    """The top-level fields of a schema and the descriptors of all its leaves,
    in depth-first order."""

    __slots__ = ("name", "fields", "_leaves")

    def __init__(self, name: str, fields: Iterable[ParquetType]) -> None:
        self.name = name
        self.fields: tuple[ParquetType, ...] = tuple(fields)
        self._leaves: tuple[ColumnDescriptor, ...] = tuple(
            leaf for f in self.fields for leaf in _leaves(f, f, 0, 0, ())
        )

    def column(self, i: int) -> ColumnDescriptor:
        """Return the descriptor of the ``i``-th leaf column."""
        return self._leaves[i]

    def columns(self) -> Sequence[ColumnDescriptor]:
        """Return the descriptors of all leaf columns."""
        return self._leaves

    def num_columns(self) -> int:
        """Return the number of leaf columns."""
        return len(self._leaves)

    @classmethod
    def try_from_type(cls, type_: ParquetType) -> SchemaDescriptor:
        """Build a descriptor from the root of a schema, which must be a group."""
        if not isinstance(type_, GroupType):
            raise OutOfSpecError("The parquet schema MUST be a group type")
        return cls(type_.name, type_.fields)

    def __repr__(self) -> str:
        return f"SchemaDescriptor(name={self.name!r}, fields={self.fields!r})"