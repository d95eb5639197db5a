"""Logical SQL column types and their Arrow counterparts."""

from __future__ import annotations

from enum import StrEnum, auto

import pyarrow as pa

from core_types import IntBounds, signed_bounds

# Widest decimal precision that holds every Curve25519 scalar.
SCALAR_DECIMAL_PRECISION = 75
INT128_DECIMAL_PRECISION = 38


class ColumnType(StrEnum):
    """Logical type tag carried by every column variant."""

    BOOLEAN = auto()
    TINYINT = auto()
    INT = auto()
    BIGINT = auto()
    INT128 = auto()
    VARCHAR = auto()
    SCALAR = auto()

    def to_arrow_type(self) -> pa.DataType:
        """Return the Arrow type used to describe this column type.

        Returns
        -------
        pyarrow.DataType
            Arrow data type for schema descriptions.
        """
        return _ARROW_TYPES[self]()

    def integer_bounds(self) -> IntBounds | None:
        """Return inclusive value bounds for integer types.

        Returns
        -------
        tuple[int, int] | None
            ``(min, max)`` for integer types, otherwise ``None``.
        """
        bits = _INTEGER_BITS.get(self)
        return None if bits is None else signed_bounds(bits)


_INTEGER_BITS: dict[ColumnType, int] = {
    ColumnType.TINYINT: 8,
    ColumnType.INT: 32,
    ColumnType.BIGINT: 64,
    ColumnType.INT128: 128,
}

_ARROW_TYPES = {
    ColumnType.BOOLEAN: pa.bool_,
    ColumnType.TINYINT: pa.int8,
    ColumnType.INT: pa.int32,
    ColumnType.BIGINT: pa.int64,
    ColumnType.INT128: lambda: pa.decimal128(INT128_DECIMAL_PRECISION, 0),
    ColumnType.VARCHAR: pa.string,
    ColumnType.SCALAR: lambda: pa.decimal256(SCALAR_DECIMAL_PRECISION, 0),
}


__all__ = [
    "INT128_DECIMAL_PRECISION",
    "SCALAR_DECIMAL_PRECISION",
    "ColumnType",
]
