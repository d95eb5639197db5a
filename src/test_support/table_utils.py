"""Builders and lookups for writing table tests.

The ``borrowed_*`` helpers allocate values in an arena and return an
``(Identifier, Column)`` pair, so a table can be spelled out inline::

    t = table(
        [
            borrowed_bigint("a", [1, 2, 3], arena),
            borrowed_varchar("b", ["x", "y", "z"], arena),
        ]
    )
"""

from __future__ import annotations

from collections.abc import Iterable

from result_table.arena import ColumnArena
from result_table.column import (
    BigIntColumn,
    BooleanColumn,
    Column,
    Int128Column,
    IntColumn,
    ScalarColumn,
    TinyIntColumn,
    VarCharColumn,
)
from result_table.identifier import Identifier
from result_table.scalar import Scalar
from result_table.table import Table

type ColumnPair[S: Scalar] = tuple[Identifier, Column[S]]


def column_by_name[S: Scalar](t: Table[S], name: str) -> Column[S]:
    """Look up a column by its textual name.

    Returns
    -------
    Column
        Column stored under the parsed identifier.

    Raises
    ------
    KeyError
        Raised when the table has no such column.
    """
    identifier = Identifier.parse(name)
    columns = t.inner_table()
    if identifier not in columns:
        msg = f"Table has no column named {identifier.name!r}."
        raise KeyError(msg)
    return columns[identifier]


def table[S: Scalar](pairs: Iterable[ColumnPair[S]]) -> Table[S]:
    """Build a table from pairs, raising on length mismatch.

    Returns
    -------
    Table
        Validated table.
    """
    return Table.try_from_iter(pairs)


def borrowed_boolean(name: str, values: Iterable[bool], arena: ColumnArena) -> ColumnPair[Scalar]:
    """Return a boolean column pair backed by ``arena``."""
    return Identifier.parse(name), BooleanColumn(arena.alloc(values))


def borrowed_tinyint(name: str, values: Iterable[int], arena: ColumnArena) -> ColumnPair[Scalar]:
    """Return a tinyint column pair backed by ``arena``."""
    return Identifier.parse(name), TinyIntColumn(arena.alloc(values))


def borrowed_int(name: str, values: Iterable[int], arena: ColumnArena) -> ColumnPair[Scalar]:
    """Return an int column pair backed by ``arena``."""
    return Identifier.parse(name), IntColumn(arena.alloc(values))


def borrowed_bigint(name: str, values: Iterable[int], arena: ColumnArena) -> ColumnPair[Scalar]:
    """Return a bigint column pair backed by ``arena``."""
    return Identifier.parse(name), BigIntColumn(arena.alloc(values))


def borrowed_int128(name: str, values: Iterable[int], arena: ColumnArena) -> ColumnPair[Scalar]:
    """Return an int128 column pair backed by ``arena``."""
    return Identifier.parse(name), Int128Column(arena.alloc(values))


def borrowed_varchar(name: str, values: Iterable[str], arena: ColumnArena) -> ColumnPair[Scalar]:
    """Return a varchar column pair backed by ``arena``."""
    return Identifier.parse(name), VarCharColumn(arena.alloc(values))


def borrowed_scalar[S: Scalar](
    name: str,
    values: Iterable[int],
    arena: ColumnArena,
    *,
    scalar_type: type[S],
) -> ColumnPair[S]:
    """Return a scalar column pair, converting integers with ``scalar_type``."""
    return Identifier.parse(name), ScalarColumn(
        arena.alloc(scalar_type.from_int(value) for value in values)
    )


__all__ = [
    "ColumnPair",
    "borrowed_bigint",
    "borrowed_boolean",
    "borrowed_int",
    "borrowed_int128",
    "borrowed_scalar",
    "borrowed_tinyint",
    "borrowed_varchar",
    "column_by_name",
    "table",
]
