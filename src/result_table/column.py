"""Typed, borrowed column views.

A column is one variant of a closed set of frozen dataclasses. The variant
fixes the logical SQL type; the element sequence is borrowed from its
producer (usually an :class:`~result_table.arena.ArenaSlice`) and is never
copied or resized.
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from typing import ClassVar

import pyarrow as pa

from result_table.column_types import ColumnType
from result_table.scalar import Scalar


class _ColumnBase[T]:
    """Behaviour shared by every column variant."""

    __slots__ = ()

    column_type: ClassVar[ColumnType]
    values: Sequence[T]

    def len(self) -> int:
        """Return the number of values in the column."""
        return len(self.values)

    def __len__(self) -> int:
        return len(self.values)

    def __iter__(self) -> Iterator[T]:
        return iter(self.values)

    def is_empty(self) -> bool:
        """Return whether the column holds no values."""
        return len(self.values) == 0

    def arrow_type(self) -> pa.DataType:
        """Return the Arrow type describing this column."""
        return self.column_type.to_arrow_type()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, _ColumnBase):
            return NotImplemented
        if type(self) is not type(other) or len(self) != len(other):
            return False
        return all(left == right for left, right in zip(self.values, other.values, strict=True))

    __hash__ = None  # type: ignore[assignment]


@dataclass(frozen=True, slots=True, eq=False)
class BooleanColumn(_ColumnBase[bool]):
    """Column of SQL booleans."""

    values: Sequence[bool]
    column_type: ClassVar[ColumnType] = ColumnType.BOOLEAN


@dataclass(frozen=True, slots=True, eq=False)
class TinyIntColumn(_ColumnBase[int]):
    """Column of 8-bit signed integers."""

    values: Sequence[int]
    column_type: ClassVar[ColumnType] = ColumnType.TINYINT


@dataclass(frozen=True, slots=True, eq=False)
class IntColumn(_ColumnBase[int]):
    """Column of 32-bit signed integers."""

    values: Sequence[int]
    column_type: ClassVar[ColumnType] = ColumnType.INT


@dataclass(frozen=True, slots=True, eq=False)
class BigIntColumn(_ColumnBase[int]):
    """Column of 64-bit signed integers."""

    values: Sequence[int]
    column_type: ClassVar[ColumnType] = ColumnType.BIGINT


@dataclass(frozen=True, slots=True, eq=False)
class Int128Column(_ColumnBase[int]):
    """Column of 128-bit signed integers."""

    values: Sequence[int]
    column_type: ClassVar[ColumnType] = ColumnType.INT128


@dataclass(frozen=True, slots=True, eq=False)
class VarCharColumn(_ColumnBase[str]):
    """Column of variable-length text."""

    values: Sequence[str]
    column_type: ClassVar[ColumnType] = ColumnType.VARCHAR


@dataclass(frozen=True, slots=True, eq=False)
class ScalarColumn[S: Scalar](_ColumnBase[S]):
    """Column of field elements of the scalar type ``S``."""

    values: Sequence[S]
    column_type: ClassVar[ColumnType] = ColumnType.SCALAR


type Column[S: Scalar] = (
    BooleanColumn
    | TinyIntColumn
    | IntColumn
    | BigIntColumn
    | Int128Column
    | VarCharColumn
    | ScalarColumn[S]
)

COLUMN_VARIANTS: tuple[type[_ColumnBase[object]], ...] = (
    BooleanColumn,
    TinyIntColumn,
    IntColumn,
    BigIntColumn,
    Int128Column,
    VarCharColumn,
    ScalarColumn,
)

_VARIANT_BY_TYPE: dict[ColumnType, type[_ColumnBase[object]]] = {
    variant.column_type: variant for variant in COLUMN_VARIANTS
}


def column_from_values(column_type: ColumnType, values: Sequence[object]) -> Column[Scalar]:
    """Wrap a sequence in the variant tagged by ``column_type``.

    The element type is trusted, not checked.

    Returns
    -------
    Column
        Column variant borrowing ``values``.
    """
    variant = _VARIANT_BY_TYPE[ColumnType(column_type)]
    return variant(values)  # type: ignore[call-arg, return-value]


__all__ = [
    "COLUMN_VARIANTS",
    "BigIntColumn",
    "BooleanColumn",
    "Column",
    "Int128Column",
    "IntColumn",
    "ScalarColumn",
    "TinyIntColumn",
    "VarCharColumn",
    "column_from_values",
]
