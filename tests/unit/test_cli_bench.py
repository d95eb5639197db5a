"""Tests for the result-table command line."""

from __future__ import annotations

import json
import logging

import pytest

from cli.app import run
from cli.exit_codes import ExitCode
from result_table.errors import (
    ArenaReleasedError,
    ColumnLengthMismatchError,
    IdentifierParseError,
)
from serde_msgspec import loads_json
from table_bench.runner import BenchResult


def test_bench_json_output(capsys: pytest.CaptureFixture[str]) -> None:
    """Ensure bench emits one JSON record per selected query."""
    code = run(["bench", "--size", "20", "--repetitions", "1", "--query", "Aggregate", "--json"])
    assert code == ExitCode.SUCCESS
    results = loads_json(capsys.readouterr().out, target_type=list[BenchResult])
    assert [result.title for result in results] == ["Aggregate"]
    assert results[0].num_rows == 20
    assert results[0].columns == ("a", "b", "c")


def test_bench_table_output(capsys: pytest.CaptureFixture[str]) -> None:
    """Ensure bench renders a table covering every query by default."""
    code = run(["bench", "--size", "10", "--repetitions", "1"])
    assert code == ExitCode.SUCCESS
    out = capsys.readouterr().out
    assert "Single Column Filter" in out
    assert "Aggregate" in out


def test_bench_unknown_query_is_validation_error(capsys: pytest.CaptureFixture[str]) -> None:
    """Ensure an unknown query title exits with the validation code."""
    code = run(["bench", "--query", "Nope"])
    assert code == ExitCode.VALIDATION_ERROR
    err = capsys.readouterr().err
    assert "error: Unknown benchmark queries: nope." in err
    assert "Traceback" not in err


def test_command_failure_traceback_logged_at_debug(caplog: pytest.LogCaptureFixture) -> None:
    """Ensure command failures keep their traceback at DEBUG level only."""
    with caplog.at_level(logging.DEBUG, logger="cli.app"):
        run(["bench", "--query", "Nope"])
    failures = [record for record in caplog.records if record.name == "cli.app"]
    assert [record.levelno for record in failures] == [logging.DEBUG]
    assert failures[0].exc_info is not None


def test_unknown_command_is_parse_error() -> None:
    """Ensure unknown commands exit with the parse error code."""
    assert run(["frobnicate"]) == ExitCode.PARSE_ERROR


def test_version_command(capsys: pytest.CaptureFixture[str]) -> None:
    """Ensure version reports package and dependency versions as JSON."""
    assert run(["version"]) == ExitCode.SUCCESS
    payload = json.loads(capsys.readouterr().out)
    assert "result-table" in payload
    assert "pyarrow" in payload["dependencies"]


def test_exit_code_classification() -> None:
    """Ensure table and identifier errors map to the validation code."""
    mismatch = ColumnLengthMismatchError(column="b", expected=2, actual=3)
    assert ExitCode.from_exception(mismatch) == ExitCode.VALIDATION_ERROR
    assert ExitCode.from_exception(IdentifierParseError("1a", "bad")) == ExitCode.VALIDATION_ERROR
    assert ExitCode.from_exception(RuntimeError("boom")) == ExitCode.GENERAL_ERROR
    assert ExitCode.from_exception(ArenaReleasedError("gone")) == ExitCode.GENERAL_ERROR
    assert ExitCode.from_exception(TypeError("bad")) == ExitCode.VALIDATION_ERROR
