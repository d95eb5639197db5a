"""Timed table construction over the benchmark catalog."""

from __future__ import annotations

import logging
import random
import time

from core_types import IdentifierStr, NonNegativeInt, PositiveInt
from result_table.arena import ColumnArena
from result_table.column import Column
from result_table.identifier import Identifier
from result_table.scalar import Scalar
from result_table.table import Table
from serde_msgspec import StructBaseStrict
from table_bench.queries import QuerySpec
from table_bench.random_columns import generate_random_columns

_LOGGER = logging.getLogger(__name__)


def _time_construction(pairs: list[tuple[Identifier, Column[Scalar]]]) -> float:
    start = time.perf_counter()
    Table.try_from_iter(pairs)
    return time.perf_counter() - start


class BenchResult(StructBaseStrict, frozen=True):
    """Timing summary for building one query's table."""

    title: str
    num_rows: NonNegativeInt
    num_columns: NonNegativeInt
    columns: tuple[IdentifierStr, ...]
    repetitions: PositiveInt
    best_seconds: float
    mean_seconds: float


def run_query_benchmark(
    query: QuerySpec,
    size: int,
    *,
    seed: int = 0,
    repetitions: int = 3,
    scalar_type: type[Scalar] | None = None,
) -> BenchResult:
    """Generate a random table for ``query`` and time its construction.

    Parameters
    ----------
    query
        Catalog entry describing the table columns.
    size
        Rows per column.
    seed
        Seed for the random source.
    repetitions
        Number of timed constructions.
    scalar_type
        Scalar implementation for scalar columns.

    Returns
    -------
    BenchResult
        Best and mean construction time plus the table shape.

    Raises
    ------
    ValueError
        Raised when ``repetitions`` is not positive.
    """
    if repetitions < 1:
        msg = f"repetitions must be positive, got {repetitions}."
        raise ValueError(msg)
    rng = random.Random(seed)  # noqa: S311
    with ColumnArena(label=query.title) as arena:
        pairs = generate_random_columns(
            arena,
            query.columns,
            size,
            rng=rng,
            scalar_type=scalar_type,
        )
        table = Table.try_from_iter(pairs)
        timings = [_time_construction(pairs) for _ in range(repetitions)]
        result = BenchResult(
            title=query.title,
            num_rows=table.num_rows(),
            num_columns=table.num_columns(),
            columns=tuple(name.name for name in table.column_names()),
            repetitions=repetitions,
            best_seconds=min(timings),
            mean_seconds=sum(timings) / len(timings),
        )
    _LOGGER.debug(
        "Benchmarked %s: %d rows, best %.6fs",
        result.title,
        result.num_rows,
        result.best_seconds,
    )
    return result


__all__ = ["BenchResult", "run_query_benchmark"]
