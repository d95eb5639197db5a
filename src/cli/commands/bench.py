"""Benchmark table construction over the query catalog."""

from __future__ import annotations

import logging
import sys
from typing import Annotated, Literal

from cyclopts import Parameter
from rich.console import Console
from rich.table import Table as RichTable

from cli.groups import output_group, session_group, workload_group
from serde_msgspec import dumps_json
from table_bench.queries import select_queries
from table_bench.runner import BenchResult, run_query_benchmark
from test_support.scalars import TestScalar

_LOGGER = logging.getLogger(__name__)


def _render(results: list[BenchResult], *, size: int) -> None:
    table = RichTable(title=f"Table construction ({size} rows)")
    table.add_column("Query")
    table.add_column("Columns")
    table.add_column("Rows", justify="right")
    table.add_column("Best (us)", justify="right")
    table.add_column("Mean (us)", justify="right")
    for result in results:
        table.add_row(
            result.title,
            ", ".join(result.columns),
            str(result.num_rows),
            f"{result.best_seconds * 1e6:.1f}",
            f"{result.mean_seconds * 1e6:.1f}",
        )
    Console().print(table)


def bench_command(
    *,
    size: Annotated[
        int,
        Parameter(
            name="--size",
            help="Rows per generated column.",
            group=workload_group,
        ),
    ] = 1000,
    seed: Annotated[
        int,
        Parameter(
            name="--seed",
            help="Seed for the random value generator.",
            group=workload_group,
        ),
    ] = 0,
    repetitions: Annotated[
        int,
        Parameter(
            name="--repetitions",
            help="Timed constructions per query.",
            group=workload_group,
        ),
    ] = 3,
    query: Annotated[
        tuple[str, ...],
        Parameter(
            name="--query",
            help="Query title to run (repeatable). Runs every query when omitted.",
            group=workload_group,
        ),
    ] = (),
    as_json: Annotated[
        bool,
        Parameter(
            name="--json",
            help="Emit results as JSON instead of a table.",
            group=output_group,
        ),
    ] = False,
    log_level: Annotated[
        Literal["DEBUG", "INFO", "WARNING", "ERROR"],
        Parameter(
            name="--log-level",
            help="Logging verbosity level.",
            env_var="RESULT_TABLE_LOG_LEVEL",
            group=session_group,
        ),
    ] = "WARNING",
) -> int:
    """Generate random tables for catalog queries and time their construction.

    Returns
    -------
    int
        Exit status code.
    """
    logging.basicConfig(level=log_level)
    queries = select_queries(query)
    _LOGGER.info("Running %d benchmark queries at %d rows", len(queries), size)
    results = [
        run_query_benchmark(
            spec,
            size,
            seed=seed,
            repetitions=repetitions,
            scalar_type=TestScalar,
        )
        for spec in queries
    ]
    if as_json:
        payload = dumps_json(results, pretty=True)
        sys.stdout.write(payload.decode() + "\n")
    else:
        _render(results, size=size)
    return 0
