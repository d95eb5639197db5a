"""Validated, order-sensitive columnar tables for query results."""

from __future__ import annotations

from result_table.arena import ArenaSlice, ColumnArena
from result_table.column import (
    COLUMN_VARIANTS,
    BigIntColumn,
    BooleanColumn,
    Column,
    Int128Column,
    IntColumn,
    ScalarColumn,
    TinyIntColumn,
    VarCharColumn,
    column_from_values,
)
from result_table.column_types import ColumnType
from result_table.config import TableSettings, table_settings
from result_table.errors import (
    ArenaReleasedError,
    ColumnLengthMismatchError,
    IdentifierParseError,
    TableError,
)
from result_table.identifier import Identifier
from result_table.scalar import Scalar
from result_table.table import Table

__all__ = [
    "COLUMN_VARIANTS",
    "ArenaReleasedError",
    "ArenaSlice",
    "BigIntColumn",
    "BooleanColumn",
    "Column",
    "ColumnArena",
    "ColumnLengthMismatchError",
    "ColumnType",
    "Identifier",
    "IdentifierParseError",
    "Int128Column",
    "IntColumn",
    "Scalar",
    "ScalarColumn",
    "Table",
    "TableError",
    "TableSettings",
    "TinyIntColumn",
    "VarCharColumn",
    "column_from_values",
    "table_settings",
]
