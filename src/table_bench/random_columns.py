"""Random column materialization for benchmark tables."""

from __future__ import annotations

import logging
import random
import string
from collections.abc import Iterator, Sequence

from core_types import IntBounds, clamp
from result_table.arena import ColumnArena
from result_table.column import Column, column_from_values
from result_table.column_types import ColumnType
from result_table.identifier import Identifier
from result_table.scalar import Scalar
from table_bench.queries import ColumnSpec

_LOGGER = logging.getLogger(__name__)

_ALPHANUMERIC = string.ascii_letters + string.digits
_DEFAULT_VARCHAR_LENGTH = 10
_SCALAR_FALLBACK_BOUNDS: IntBounds = ColumnType.BIGINT.integer_bounds() or (0, 0)


def _int_range(type_bounds: IntBounds, bound: int | None) -> IntBounds:
    if bound is None:
        return type_bounds
    return clamp(-bound, type_bounds), clamp(bound, type_bounds)


def _values(
    spec: ColumnSpec,
    size: int,
    rng: random.Random,
    scalar_type: type[Scalar] | None,
) -> Iterator[object]:
    bound = None if spec.rand_bound is None else spec.rand_bound(size)
    column_type = spec.column_type
    if column_type is ColumnType.BOOLEAN:
        return (rng.random() < 0.5 for _ in range(size))  # noqa: PLR2004
    if column_type is ColumnType.VARCHAR:
        max_len = _DEFAULT_VARCHAR_LENGTH if bound is None else bound
        return (
            "".join(rng.choices(_ALPHANUMERIC, k=rng.randint(0, max_len))) for _ in range(size)
        )
    if column_type is ColumnType.SCALAR:
        if scalar_type is None:
            msg = f"Column {spec.name!r} is a scalar column but no scalar_type was given."
            raise ValueError(msg)
        low, high = _int_range(_SCALAR_FALLBACK_BOUNDS, bound)
        return (scalar_type.from_int(rng.randint(low, high)) for _ in range(size))
    type_bounds = column_type.integer_bounds()
    if type_bounds is None:
        msg = f"Unsupported column type {column_type!r} for column {spec.name!r}."
        raise ValueError(msg)
    low, high = _int_range(type_bounds, bound)
    return (rng.randint(low, high) for _ in range(size))


def generate_random_columns(
    arena: ColumnArena,
    specs: Sequence[ColumnSpec],
    size: int,
    *,
    rng: random.Random,
    scalar_type: type[Scalar] | None = None,
) -> list[tuple[Identifier, Column[Scalar]]]:
    """Materialize one column per spec, allocating values in ``arena``.

    Parameters
    ----------
    arena
        Arena that owns the generated values.
    specs
        Column specifications, in table order.
    size
        Number of rows per column.
    rng
        Random source; seed it for reproducible tables.
    scalar_type
        Scalar implementation used for scalar columns.

    Returns
    -------
    list[tuple[Identifier, Column]]
        Identifier/column pairs ready for ``Table.try_from_iter``.

    Raises
    ------
    ValueError
        Raised when ``size`` is negative or a scalar column has no scalar type.
    """
    if size < 0:
        msg = f"Row count must be non-negative, got {size}."
        raise ValueError(msg)
    pairs: list[tuple[Identifier, Column[Scalar]]] = []
    for spec in specs:
        values = arena.alloc(_values(spec, size, rng, scalar_type))
        pairs.append((Identifier.parse(spec.name), column_from_values(spec.column_type, values)))
    _LOGGER.debug("Generated %d random columns with %d rows", len(pairs), size)
    return pairs


__all__ = ["generate_random_columns"]
