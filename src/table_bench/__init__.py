"""Benchmark scaffold: query catalog, random columns, and timing runs."""

from __future__ import annotations

from table_bench.queries import QUERIES, ColumnSpec, QuerySpec, default_rand_bound
from table_bench.random_columns import generate_random_columns
from table_bench.runner import BenchResult, run_query_benchmark

__all__ = [
    "QUERIES",
    "BenchResult",
    "ColumnSpec",
    "QuerySpec",
    "default_rand_bound",
    "generate_random_columns",
    "run_query_benchmark",
]
