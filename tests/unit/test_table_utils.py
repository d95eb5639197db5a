"""Tests for the test-support table helpers."""

from __future__ import annotations

import pytest

from result_table.arena import ColumnArena
from result_table.column import BigIntColumn, ScalarColumn, VarCharColumn
from result_table.errors import IdentifierParseError
from test_support.scalars import TestScalar
from test_support.table_utils import (
    borrowed_bigint,
    borrowed_scalar,
    borrowed_varchar,
    column_by_name,
    table,
)


def test_column_by_name_finds_column(arena: ColumnArena) -> None:
    """Ensure string lookup parses the name and returns the column."""
    t = table([borrowed_bigint("a", [1, 2], arena), borrowed_varchar("b", ["x", "y"], arena)])
    assert column_by_name(t, "b") == VarCharColumn(["x", "y"])
    assert column_by_name(t, "A") == BigIntColumn([1, 2])


def test_column_by_name_missing_column(arena: ColumnArena) -> None:
    """Ensure looking up an absent column raises KeyError."""
    t = table([borrowed_bigint("a", [1], arena)])
    with pytest.raises(KeyError, match="zz"):
        column_by_name(t, "zz")


def test_column_by_name_malformed_name(arena: ColumnArena) -> None:
    """Ensure malformed names fail while parsing, before the lookup."""
    t = table([borrowed_bigint("a", [1], arena)])
    with pytest.raises(IdentifierParseError):
        column_by_name(t, "not a name")


def test_borrowed_scalar_converts_integers(arena: ColumnArena) -> None:
    """Ensure scalar builders convert integers with the scalar type."""
    name, column = borrowed_scalar("s", [1, -2], arena, scalar_type=TestScalar)
    assert name.name == "s"
    assert isinstance(column, ScalarColumn)
    assert [int(value) for value in column] == [1, -2]
