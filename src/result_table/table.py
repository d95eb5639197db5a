"""Ordered, schema-carrying result tables.

A :class:`Table` maps column identifiers to columns, keeps the identifiers in
insertion order, and guarantees that every column has the same number of
rows. It is the in-memory form of a query result before it is handed to an
encoder (Arrow record batches, JSON) or compared in tests.

Tables are validated once at construction and are read-only afterwards.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, KeysView, Mapping
from types import MappingProxyType

import pyarrow as pa

from core_types import first_or_none
from result_table.column import Column
from result_table.errors import ColumnLengthMismatchError
from result_table.identifier import Identifier
from result_table.scalar import Scalar

_LOGGER = logging.getLogger(__name__)


def _validated_row_count(columns: Mapping[Identifier, Column[Scalar]]) -> int:
    """Return the shared row count, taken from the first column in order.

    Raises
    ------
    ColumnLengthMismatchError
        Raised when a column's length differs from the first column's.
    """
    first = first_or_none(columns.values())
    if first is None:
        return 0
    num_rows = len(first)
    for name, column in columns.items():
        if len(column) != num_rows:
            _LOGGER.debug(
                "Column %s has %d rows but the first column has %d",
                name,
                len(column),
                num_rows,
            )
            raise ColumnLengthMismatchError(
                column=str(name),
                expected=num_rows,
                actual=len(column),
            )
    return num_rows


class Table[S: Scalar]:
    """Ordered mapping of identifiers to equal-length columns.

    Equality is stricter than mapping equality: two tables are equal only
    when they hold the same columns under the same identifiers *and* list
    those identifiers in the same order, matching record-batch semantics.
    """

    __slots__ = ("_columns", "_num_rows")

    def __init__(self, columns: Mapping[Identifier, Column[S]]) -> None:
        owned = dict(columns)
        self._num_rows = _validated_row_count(owned)
        self._columns = owned
        _LOGGER.debug(
            "Validated table with %d columns and %d rows",
            len(owned),
            self._num_rows,
        )

    @classmethod
    def try_new(cls, columns: Mapping[Identifier, Column[S]]) -> Table[S]:
        """Validate columns and build a table.

        Parameters
        ----------
        columns
            Ordered mapping of identifier to column. The mapping is copied;
            the columns themselves are shared.

        Returns
        -------
        Table
            Validated table.

        Raises
        ------
        ColumnLengthMismatchError
            Raised when a column's length differs from the first column's.
        """
        return cls(columns)

    @classmethod
    def try_from_iter(cls, pairs: Iterable[tuple[Identifier, Column[S]]]) -> Table[S]:
        """Build a table from identifier/column pairs.

        A repeated identifier keeps its first position and its last column.

        Returns
        -------
        Table
            Validated table.

        Raises
        ------
        ColumnLengthMismatchError
            Raised when a column's length differs from the first column's.
        """
        return cls(dict(pairs))

    def num_columns(self) -> int:
        """Return the number of columns."""
        return len(self._columns)

    def num_rows(self) -> int:
        """Return the number of rows shared by every column."""
        return self._num_rows

    def is_empty(self) -> bool:
        """Return whether the table has no columns."""
        return not self._columns

    def into_inner(self) -> dict[Identifier, Column[S]]:
        """Return the columns as a new ordered dict owned by the caller."""
        return dict(self._columns)

    def inner_table(self) -> Mapping[Identifier, Column[S]]:
        """Return a read-only view of the columns."""
        return MappingProxyType(self._columns)

    def column_names(self) -> KeysView[Identifier]:
        """Return the column identifiers in insertion order.

        The returned view is lazy and can be iterated any number of times.
        """
        return self._columns.keys()

    def schema(self) -> pa.Schema:
        """Describe the table as an Arrow schema, without touching the values.

        Returns
        -------
        pyarrow.Schema
            One non-nullable field per column, in column order.
        """
        return pa.schema(
            [
                pa.field(str(name), column.arrow_type(), nullable=False)
                for name, column in self._columns.items()
            ]
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Table):
            return NotImplemented
        return self._columns == other._columns and all(
            left == right for left, right in zip(self._columns, other._columns, strict=False)
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        names = ", ".join(str(name) for name in self._columns)
        return f"Table(columns=[{names}], num_rows={self._num_rows})"


__all__ = ["Table"]
