"""Static catalog of benchmark queries and the columns they read."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from result_table.column_types import ColumnType

type RandBound = Callable[[int], int]


def default_rand_bound(size: int) -> int:
    """Return the value bound used for a table of ``size`` rows.

    Returns
    -------
    int
        One tenth of the row count, never below ten.
    """
    return max(size // 10, 10)


@dataclass(frozen=True)
class ColumnSpec:
    """Name, type, and optional value bound of one generated column."""

    name: str
    column_type: ColumnType
    rand_bound: RandBound | None = None


@dataclass(frozen=True)
class QuerySpec:
    """A titled benchmark query and the columns of the table it runs on."""

    title: str
    sql: str
    columns: tuple[ColumnSpec, ...]


SINGLE_COLUMN_FILTER = QuerySpec(
    title="Single Column Filter",
    sql="SELECT b FROM table WHERE a = 0",
    columns=(
        ColumnSpec("a", ColumnType.BIGINT, default_rand_bound),
        ColumnSpec("b", ColumnType.VARCHAR),
    ),
)
MULTI_COLUMN_FILTER = QuerySpec(
    title="Multi Column Filter",
    sql="SELECT * FROM table WHERE ((a = 0) or (b = 1)) and (not (c = 'a'))",
    columns=(
        ColumnSpec("a", ColumnType.BIGINT, default_rand_bound),
        ColumnSpec("b", ColumnType.BIGINT, default_rand_bound),
        ColumnSpec("c", ColumnType.VARCHAR),
    ),
)
ARITHMETIC = QuerySpec(
    title="Arithmetic",
    sql="SELECT a + b as r0, a * b - 2 as r1, c FROM table WHERE a <= b AND a >= 0",
    columns=(
        ColumnSpec("a", ColumnType.BIGINT, default_rand_bound),
        ColumnSpec("b", ColumnType.TINYINT, default_rand_bound),
        ColumnSpec("c", ColumnType.VARCHAR),
    ),
)
GROUP_BY = QuerySpec(
    title="Group By",
    sql="SELECT a, COUNT(*) FROM table WHERE (c = TRUE) and (a <= b) and (a > 0) GROUP BY a",
    columns=(
        ColumnSpec("a", ColumnType.INT128, default_rand_bound),
        ColumnSpec("b", ColumnType.TINYINT, default_rand_bound),
        ColumnSpec("c", ColumnType.BOOLEAN),
    ),
)
AGGREGATE = QuerySpec(
    title="Aggregate",
    sql="SELECT SUM(a) FROM table WHERE b = a OR c = 'ab'",
    columns=(
        ColumnSpec("a", ColumnType.BIGINT, default_rand_bound),
        ColumnSpec("b", ColumnType.INT, default_rand_bound),
        ColumnSpec("c", ColumnType.VARCHAR),
    ),
)

QUERIES: tuple[QuerySpec, ...] = (
    SINGLE_COLUMN_FILTER,
    MULTI_COLUMN_FILTER,
    ARITHMETIC,
    GROUP_BY,
    AGGREGATE,
)


def select_queries(titles: tuple[str, ...] = ()) -> tuple[QuerySpec, ...]:
    """Return catalog entries whose titles match, case-insensitively.

    An empty filter selects the whole catalog.

    Returns
    -------
    tuple[QuerySpec, ...]
        Matching queries in catalog order.

    Raises
    ------
    ValueError
        Raised when a requested title is not in the catalog.
    """
    if not titles:
        return QUERIES
    wanted = {title.casefold() for title in titles}
    known = {query.title.casefold() for query in QUERIES}
    unknown = sorted(wanted - known)
    if unknown:
        msg = f"Unknown benchmark queries: {', '.join(unknown)}."
        raise ValueError(msg)
    return tuple(query for query in QUERIES if query.title.casefold() in wanted)


__all__ = [
    "QUERIES",
    "ColumnSpec",
    "QuerySpec",
    "RandBound",
    "default_rand_bound",
    "select_queries",
]
